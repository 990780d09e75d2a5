"""Member API views.

Exposes the ``MemberService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes — the view never swallows generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import EntityNotFound
from modules.members.dtos import JoinMemberDTO, UpdateMemberDTO
from modules.members.exceptions import DuplicateMember
from modules.members.filters import MemberFilter
from modules.members.models import Member
from modules.members.repositories.django_repository import MemberDjangoRepository
from modules.members.serializers import (
    JoinMemberSerializer,
    MemberSerializer,
    UpdateMemberSerializer,
)
from modules.members.services import MemberService


class MemberViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for member registration and look-ups."""

    filterset_class = MemberFilter
    ordering_fields = ["name", "created_at"]
    ordering = ["-created_at", "-id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Member.objects.all()
    serializer_class = MemberSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = MemberService(repository=MemberDjangoRepository())

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/members/{pk}/"""
        try:
            member = self._service.find_one(pk)
        except EntityNotFound:
            return Response(
                {"detail": "Member not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(MemberSerializer(member).data)

    # ------------------------------------------------------------------
    # Join / Rename
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/members/"""
        join_serializer = JoinMemberSerializer(data=request.data)
        join_serializer.is_valid(raise_exception=True)

        try:
            dto = JoinMemberDTO(**join_serializer.validated_data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            member_id = self._service.join(dto)
        except DuplicateMember as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_409_CONFLICT,
            )

        member = self._service.find_one(member_id)
        return Response(MemberSerializer(member).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/members/{pk}/

        Only the member name can be changed.
        """
        update_serializer = UpdateMemberSerializer(data=request.data)
        update_serializer.is_valid(raise_exception=True)

        try:
            dto = UpdateMemberDTO(**update_serializer.validated_data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            member = self._service.update(pk, dto)
        except EntityNotFound:
            return Response(
                {"detail": "Member not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(MemberSerializer(member).data)

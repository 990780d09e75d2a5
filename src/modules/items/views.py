"""Item API views.

Exposes the ``ItemService`` via HTTP using DRF ViewSets.
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
from modules.items.dtos import CreateItemDTO, UpdateItemDTO
from modules.items.filters import ItemFilter
from modules.items.models import Item
from modules.items.repositories.django_repository import ItemDjangoRepository
from modules.items.serializers import (
    CreateItemSerializer,
    ItemSerializer,
    UpdateItemSerializer,
)
from modules.items.services import ItemService

class ItemViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for the item catalogue.

    Listing uses the filter backends directly on the queryset; every
    write goes through ``ItemService``.
    """

    filterset_class = ItemFilter
    ordering_fields = ["name", "price", "stock_quantity"]
    ordering = ["name", "id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Item.objects.all()
    serializer_class = ItemSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ItemService(repository=ItemDjangoRepository())

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/items/{pk}/"""
        try:
            item = self._service.find_one(pk)
        except EntityNotFound:
            return Response(
                {"detail": "Item not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(ItemSerializer(item).data)

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/items/"""
        create_serializer = CreateItemSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        try:
            dto = CreateItemDTO(**create_serializer.validated_data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        item = self._service.save_item(dto)
        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/items/{pk}/"""
        update_serializer = UpdateItemSerializer(data=request.data)
        update_serializer.is_valid(raise_exception=True)

        try:
            dto = UpdateItemDTO(**update_serializer.validated_data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            item = self._service.update_item(pk, dto)
        except EntityNotFound:
            return Response(
                {"detail": "Item not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(ItemSerializer(item).data)

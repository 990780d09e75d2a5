"""Django ORM implementation of the Member repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.core.repositories.django_repository import get_or_raise
from modules.members.models import Member
from modules.members.repositories.interfaces import IMemberRepository

logger = structlog.get_logger(__name__)


class MemberDjangoRepository(IMemberRepository):
    """Concrete Member repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Member:
        """Retrieve a member by primary key.

        Raises ``EntityNotFound`` for non-existent or malformed IDs.
        """
        return get_or_raise(Member.objects.all(), Member, id)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Member]:
        """List members with optional Django ORM look-ups."""
        queryset = Member.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Member) -> Member:
        """Persist (create or update) a member."""
        is_new = entity._state.adding
        entity.save()
        logger.info("member.saved", member_id=str(entity.id), is_new=is_new)
        return entity

    def find_by_name(self, name: str) -> List[Member]:
        """Exact (case-sensitive) name match."""
        return list(Member.objects.filter(name=name))

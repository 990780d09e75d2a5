"""Django ORM implementation of the Item repository.

Satisfies ``IItemRepository`` using Django's QuerySet API.
Missing or malformed IDs raise ``EntityNotFound`` — the Service Layer
propagates it and the API layer turns it into a 404.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.core.repositories.django_repository import get_or_raise
from modules.items.models import Item
from modules.items.repositories.interfaces import IItemRepository

logger = structlog.get_logger(__name__)


class ItemDjangoRepository(IItemRepository):
    """Concrete Item repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Item:
        """Retrieve an item by primary key."""
        return get_or_raise(Item.objects.all(), Item, id)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Item]:
        """List items with optional Django ORM look-ups.

        Examples of valid filters::

            {"kind": "BOOK"}
            {"name__icontains": "jpa"}
        """
        queryset = Item.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Item) -> Item:
        """Validate and persist (create or update) an item.

        Raises:
            ValidationError: the item breaks a field or ``clean`` rule.
        """
        entity.full_clean()
        entity.save()
        logger.info(
            "item.saved",
            item_id=str(entity.id),
            stock_quantity=entity.stock_quantity,
        )
        return entity

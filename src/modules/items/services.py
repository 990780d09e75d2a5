"""Item service layer (Use Cases).

Catalogue management for the Item aggregate, delegating persistence
to the injected ``IItemRepository``.  Stock changes caused by orders
do not go through here — they are applied by the Item entity itself
inside the order workflow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.items.models import Item

if TYPE_CHECKING:
    from modules.items.dtos import CreateItemDTO, UpdateItemDTO
    from modules.items.repositories.interfaces import IItemRepository

logger = structlog.get_logger(__name__)


class ItemService:
    """Application service for Item use-cases.

    Receives an ``IItemRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IItemRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save_item(self, dto: CreateItemDTO) -> Item:
        """Register a new catalogue item."""
        item = Item(**dto.model_dump())
        item = self._repo.save(item)
        logger.info("item.created", item_id=str(item.id), kind=item.kind)
        return item

    @transaction.atomic
    def update_item(self, item_id: Any, dto: UpdateItemDTO) -> Item:
        """Update name, price and/or stock of an existing item.

        Raises:
            EntityNotFound: if the item does not exist.
        """
        item = self._repo.get_by_id(item_id)

        for field in ("name", "price", "stock_quantity"):
            value = getattr(dto, field)
            if value is not None:
                setattr(item, field, value)

        item = self._repo.save(item)
        logger.info("item.updated", item_id=str(item_id))
        return item

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_items(self, filters: Optional[Dict[str, Any]] = None) -> List[Item]:
        """Return all items, optionally filtered."""
        return self._repo.list(filters)

    def find_one(self, item_id: Any) -> Item:
        """Retrieve a single item by ID.

        Raises:
            EntityNotFound: if the item does not exist.
        """
        return self._repo.get_by_id(item_id)

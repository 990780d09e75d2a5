"""Item repository interface.

Extends ``IRepository[Item]``; the order workflow loads items through
``get_by_id`` and submits stock changes through ``save``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.items.models import Item


class IItemRepository(IRepository["Item"]):
    """Repository contract for the Item aggregate."""

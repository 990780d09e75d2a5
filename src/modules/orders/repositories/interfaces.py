"""Order repository interface.

Extends ``IRepository[Order]`` with the criteria query used by the
order list.  Saving an order persists its lines as well.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderItem children; ``save`` must
    persist both atomically.
    """

    @abstractmethod
    def find_orders(
        self,
        member_name: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Order]:
        """Return orders matching the optional criteria, newest first."""

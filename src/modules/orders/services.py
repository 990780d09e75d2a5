"""Order service layer (Use Cases).

Orchestrates order placement, cancellation and search.  All write
operations are atomic — the service defines the unit-of-work boundary.

Every entity changed during a call is loaded once, mutated in memory and
then explicitly submitted back to its repository; nothing relies on
implicit change tracking.

Business rules enforced (through the domain entities):
- Stock is debited only by ``OrderItem.create_order_item`` and can never
  go negative (``InsufficientStock``).
- Cancelling restores every line's stock; cancelling twice raises
  ``OrderAlreadyCancelled``.
- Look-up failures (``EntityNotFound``) propagate untranslated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List
from uuid import UUID

import structlog
from django.db import transaction

from modules.orders.exceptions import OrderAlreadyCancelled
from modules.orders.models import Order, OrderItem

if TYPE_CHECKING:
    from modules.items.repositories.interfaces import IItemRepository
    from modules.members.repositories.interfaces import IMemberRepository
    from modules.orders.dtos import OrderSearchDTO
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        member_repository: IMemberRepository,
        item_repository: IItemRepository,
    ) -> None:
        self._order_repo = order_repository
        self._member_repo = member_repository
        self._item_repo = item_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def place_order(self, member_id: Any, item_id: Any, count: int) -> UUID:
        """Place a single-item order and return its ID.

        Steps:
        1. Load the member and the item.
        2. Create the order line at the item's current price, debiting
           stock.
        3. Create the order owning that line.
        4. Submit the changed item and the new order.

        Raises:
            EntityNotFound: member or item does not exist.
            InsufficientStock: *count* exceeds the item's stock.
        """
        log = logger.bind(member_id=str(member_id), item_id=str(item_id), count=count)
        log.info("order.placement_started")

        member = self._member_repo.get_by_id(member_id)
        item = self._item_repo.get_by_id(item_id)

        order_item = OrderItem.create_order_item(item, item.price, count)
        log.info("order.stock_debited", remaining=item.stock_quantity)

        order = Order.create_order(member, order_item)

        self._item_repo.save(item)
        self._order_repo.save(order)

        log.info(
            "order.placed",
            order_id=str(order.id),
            total_price=order.get_total_price(),
        )
        return order.id

    @transaction.atomic
    def cancel_order(self, order_id: Any) -> Order:
        """Cancel an order and restore the stock of each of its lines.

        Raises:
            EntityNotFound: order does not exist.
            OrderAlreadyCancelled: order is already cancelled.
        """
        order = self._order_repo.get_by_id(order_id)
        log = logger.bind(order_id=str(order_id), current_status=order.status)

        try:
            order.cancel()
        except OrderAlreadyCancelled:
            log.warning("order.cancel_not_allowed")
            raise

        self._order_repo.save(order)
        for order_item in order.lines:
            self._item_repo.save(order_item.item)
            log.info(
                "order.stock_restored",
                item_id=str(order_item.item.id),
                quantity=order_item.count,
                restored_stock=order_item.item.stock_quantity,
            )

        log.info("order.cancelled")
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_orders(self, search: OrderSearchDTO) -> List[Order]:
        """Return the orders matching *search*, newest first."""
        return self._order_repo.find_orders(
            member_name=search.member_name,
            status=search.order_status,
        )

    def get_order(self, order_id: Any) -> Order:
        """Retrieve a single order by ID.

        Raises:
            EntityNotFound: if the order does not exist.
        """
        return self._order_repo.get_by_id(order_id)

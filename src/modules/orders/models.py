"""Order and OrderItem models.

Business rules implemented:
- An order line is created only through ``OrderItem.create_order_item``,
  which debits the item's stock by the ordered count.
- OrderItem snapshots the unit price at order time (``order_price``);
  later catalogue price changes do not affect it.
- Order total is always the sum of its lines' subtotals; it is computed,
  never stored.
- Status moves ``ORDER -> CANCEL`` only.  Cancelling restores the stock of
  every line exactly once.
- Line membership is fixed when the order is created.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus
from modules.orders.exceptions import OrderAlreadyCancelled

if TYPE_CHECKING:
    from modules.items.models import Item
    from modules.members.models import Member


class Order(BaseModel):
    """Order aggregate root.

    Lines attached by ``create_order`` are held on the instance until the
    repository persists them.  For loaded orders, ``lines`` is read once
    and cached, so the item handles mutated by ``cancel`` are the same
    objects the service submits back to the item repository.
    """

    member: models.ForeignKey = models.ForeignKey(
        "members.Member",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    status: models.CharField = models.CharField(
        max_length=10,
        choices=OrderStatus.choices,
        default=OrderStatus.ORDER,
    )
    order_date: models.DateTimeField = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "orders"
        ordering = ["-order_date"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["-order_date"], name="orders_order_date_idx"),
        ]

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def create_order(cls, member: Member, *order_items: OrderItem) -> Order:
        """Build a new, unsaved order owning *order_items*.

        Stock is not touched here: each line already debited its item
        when it was created.
        """
        order = cls(member=member, status=OrderStatus.ORDER, order_date=timezone.now())
        for order_item in order_items:
            order_item.order = order
        order._lines = list(order_items)
        return order

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    @property
    def lines(self) -> List[OrderItem]:
        lines = getattr(self, "_lines", None)
        if lines is None:
            lines = [] if self._state.adding else list(self.order_items.all())
            self._lines = lines
        return lines

    def get_total_price(self) -> int:
        return sum(order_item.get_total_price() for order_item in self.lines)

    # ------------------------------------------------------------------
    # State transition
    # ------------------------------------------------------------------

    def cancel(self) -> None:
        """Cancel the order and return every line's quantity to stock.

        Raises:
            OrderAlreadyCancelled: the order is already ``CANCEL``.  Nothing
                is mutated in that case.
        """
        if self.status == OrderStatus.CANCEL:
            raise OrderAlreadyCancelled(f"Order {self.id} is already cancelled.")

        self.status = OrderStatus.CANCEL
        for order_item in self.lines:
            order_item.cancel()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"


class OrderItem(BaseModel):
    """Line binding one Item to an Order.

    ``order_price`` is a **snapshot** of the item price at the time of
    purchase.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="order_items",
    )
    item: models.ForeignKey = models.ForeignKey(
        "items.Item",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    order_price: models.PositiveIntegerField = models.PositiveIntegerField()
    count: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )

    class Meta:
        db_table = "order_items"
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(count__gte=1),
                name="order_items_count_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def create_order_item(cls, item: Item, order_price: int, count: int) -> OrderItem:
        """Debit *count* units from *item* and return a new unsaved line.

        Raises:
            ValueError: *count* is lower than 1.
            InsufficientStock: *item* does not have *count* units.
        """
        if count < 1:
            raise ValueError("Count must be at least 1.")
        item.decrease_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def cancel(self) -> None:
        """Return this line's quantity to the item's stock.

        Not idempotent: ``Order.cancel`` guarantees a single call.
        """
        self.item.increase_stock(self.count)

    def get_total_price(self) -> int:
        return self.order_price * self.count

    def __str__(self) -> str:
        return f"{self.item} x{self.count} ({self.get_total_price()})"

"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
``save`` is wrapped in ``transaction.atomic()`` so an Order and its
OrderItems are persisted together.

No row locks are taken: concurrent orders against the same item rely on
the database isolation level and the ``items_stock_non_negative``
constraint.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import models, transaction

from modules.core.repositories.django_repository import get_or_raise
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


def _orders() -> "models.QuerySet[Order]":
    """Base queryset with member and lines (plus their items) eager-loaded."""
    return Order.objects.select_related("member").prefetch_related(
        "order_items__item"
    )


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: Any) -> Order:
        """Retrieve an order with eager-loaded member, lines and items.

        Raises ``EntityNotFound`` for non-existent or invalid IDs.
        """
        return get_or_raise(_orders(), Order, id)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders with optional Django ORM look-ups."""
        queryset = _orders()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def find_orders(
        self,
        member_name: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Order]:
        """Filter by member name (case-insensitive substring) and/or status."""
        queryset = _orders()
        if member_name:
            queryset = queryset.filter(member__name__icontains=member_name)
        if status:
            queryset = queryset.filter(status=status)
        return list(queryset.order_by("-order_date", "-id"))

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist an order and any of its lines not yet stored."""
        entity.save()

        new_lines = 0
        for order_item in entity.lines:
            if order_item._state.adding:
                order_item.order = entity
                order_item.save()
                new_lines += 1

        logger.info(
            "order.saved",
            order_id=str(entity.id),
            status=entity.status,
            new_lines=new_lines,
        )
        return entity

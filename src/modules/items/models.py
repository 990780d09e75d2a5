"""Item model with stock control.

Business rules implemented:
- Stock quantity can never become negative: ``decrease_stock`` rejects
  any decrement that would cross zero and leaves stock untouched.
- Price cannot be negative.
- Books, albums and movies are one ``Item`` table distinguished by
  ``kind``; the kind-specific columns are descriptive only.
"""

from __future__ import annotations

import structlog
from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel
from modules.items.exceptions import InsufficientStock

logger = structlog.get_logger(__name__)


class ItemKind(models.TextChoices):
    BOOK = "BOOK", "Book"
    ALBUM = "ALBUM", "Album"
    MOVIE = "MOVIE", "Movie"


class Item(BaseModel):
    """Purchasable catalogue entry.

    ``price`` is an integer amount in the shop currency unit.  Stock is
    only ever changed through ``increase_stock`` / ``decrease_stock``
    by the order workflow, or overwritten by the catalogue service.
    """

    kind = models.CharField(
        max_length=10,
        choices=ItemKind.choices,
        default=ItemKind.BOOK,
    )
    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField(default=0)
    stock_quantity = models.PositiveIntegerField(default=0)

    # BOOK
    author = models.CharField(max_length=255, blank=True, default="")
    isbn = models.CharField(max_length=32, blank=True, default="")
    # ALBUM
    artist = models.CharField(max_length=255, blank=True, default="")
    etc = models.CharField(max_length=255, blank=True, default="")
    # MOVIE
    director = models.CharField(max_length=255, blank=True, default="")
    actor = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "items"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["kind"], name="items_kind_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(stock_quantity__gte=0),
                name="items_stock_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Stock
    # ------------------------------------------------------------------

    def increase_stock(self, quantity: int) -> None:
        """Add *quantity* units back to stock (no upper bound)."""
        self.stock_quantity += quantity

    def decrease_stock(self, quantity: int) -> None:
        """Remove *quantity* units from stock.

        Raises:
            InsufficientStock: the result would be negative.  Stock is
                left unchanged.
        """
        rest_stock = self.stock_quantity - quantity
        if rest_stock < 0:
            logger.warning(
                "item.insufficient_stock",
                item_id=str(self.id),
                requested=quantity,
                available=self.stock_quantity,
            )
            raise InsufficientStock(
                f"Item {self.name}: requested {quantity}, "
                f"available {self.stock_quantity}."
            )
        self.stock_quantity = rest_stock

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})
        if self.stock_quantity is not None and self.stock_quantity < 0:
            raise ValidationError(
                {"stock_quantity": "Stock quantity cannot be negative."}
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.kind})"

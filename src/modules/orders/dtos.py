"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``PlaceOrderDTO``: input for placing a single-item order.
- ``OrderSearchDTO``: criteria for listing orders.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class OrderStatusEnum(StrEnum):
    """Order status (framework-agnostic — NOT Django TextChoices)."""

    ORDER = "ORDER"
    CANCEL = "CANCEL"


class PlaceOrderDTO(BaseModel):
    """Immutable DTO for order placement requests.

    The client sends ``member_id``, ``item_id`` and ``count``.
    The unit price is resolved by the Service Layer from the item.
    """

    model_config = ConfigDict(frozen=True)

    member_id: UUID
    item_id: UUID
    count: int

    @field_validator("count")
    @classmethod
    def count_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Count must be at least 1.")
        return v


class OrderSearchDTO(BaseModel):
    """Immutable search criteria for the order list.

    Both filters are optional; blank strings are treated as absent.
    ``member_name`` is matched case-insensitively as a substring.
    """

    model_config = ConfigDict(frozen=True)

    member_name: Optional[str] = None
    order_status: Optional[OrderStatusEnum] = None

    @field_validator("member_name", "order_status", mode="before")
    @classmethod
    def blank_as_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

"""Item DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateItemDTO``: input for catalogue registration.
- ``UpdateItemDTO``: input for partial catalogue updates.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


def _strip_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name must not be empty.")
    return v.strip()


class ItemKindEnum(StrEnum):
    """Item kind (framework-agnostic mirror of ``ItemKind``)."""

    BOOK = "BOOK"
    ALBUM = "ALBUM"
    MOVIE = "MOVIE"


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateItemDTO(BaseModel):
    """Immutable DTO for item registration.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` and ``stock_quantity`` are non-negative integers.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: int
    stock_quantity: int = 0
    kind: ItemKindEnum = ItemKindEnum.BOOK
    author: str = ""
    isbn: str = ""
    artist: str = ""
    etc: str = ""
    director: str = ""
    actor: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _strip_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v


class UpdateItemDTO(BaseModel):
    """Immutable DTO for item updates.

    All fields are optional — only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    price: int | None = None
    stock_quantity: int | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str | None) -> str | None:
        return None if v is None else _strip_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v

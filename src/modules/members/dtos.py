"""Member DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``JoinMemberDTO``: input for member registration.
- ``UpdateMemberDTO``: input for renaming a member.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


def _strip_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name must not be empty.")
    return v.strip()


class JoinMemberDTO(BaseModel):
    """Immutable DTO for member registration requests.

    Validates:
    - ``name`` is a non-empty string (surrounding whitespace stripped).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    city: str = ""
    street: str = ""
    zipcode: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _strip_name(v)


class UpdateMemberDTO(BaseModel):
    """Immutable DTO for renaming a member."""

    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _strip_name(v)

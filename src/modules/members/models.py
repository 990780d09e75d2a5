"""Member model (the buyer of an order).

Business rules implemented:
- Member names must be unique.  This is checked by ``MemberService.join``
  before insert; there is deliberately **no** database unique constraint,
  so two concurrent registrations with the same name can both succeed.
- The address is an embedded value (city / street / zipcode columns).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Member(BaseModel):
    """Registered shop member."""

    name = models.CharField(max_length=255, db_index=True)
    city = models.CharField(max_length=255, blank=True, default="")
    street = models.CharField(max_length=255, blank=True, default="")
    zipcode = models.CharField(max_length=20, blank=True, default="")

    class Meta:
        db_table = "members"
        ordering = ["-created_at"]

    @property
    def address(self) -> str:
        """Single-line address, empty parts skipped."""
        return " ".join(part for part in (self.city, self.street, self.zipcode) if part)

    def __str__(self) -> str:
        return self.name

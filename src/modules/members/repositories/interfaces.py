"""Member repository interface.

Extends ``IRepository[Member]`` with the name look-up used by the
duplicate-registration check.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.members.models import Member


class IMemberRepository(IRepository["Member"]):
    """Repository contract for the Member aggregate."""

    @abstractmethod
    def find_by_name(self, name: str) -> List[Member]:
        """Return every member whose name matches *name* exactly."""

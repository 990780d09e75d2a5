"""Member service layer (Use Cases).

Orchestrates registration and look-ups for the Member aggregate,
delegating persistence to the injected ``IMemberRepository``.

Business rules enforced here:
- Member names must be unique (checked before insert).

Known limitation: the duplicate check and the insert are two separate
statements, so concurrent registrations with the same name race.  The
``members`` table carries no unique constraint on ``name``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional
from uuid import UUID

import structlog
from django.db import transaction

from modules.members.exceptions import DuplicateMember
from modules.members.models import Member

if TYPE_CHECKING:
    from modules.members.dtos import JoinMemberDTO, UpdateMemberDTO
    from modules.members.repositories.interfaces import IMemberRepository

logger = structlog.get_logger(__name__)


class MemberService:
    """Application service for Member use-cases.

    Receives an ``IMemberRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IMemberRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def join(self, dto: JoinMemberDTO) -> UUID:
        """Register a new member and return its ID.

        Raises:
            DuplicateMember: a member with the same name already exists.
        """
        self._validate_duplicate_member(dto.name)

        member = Member(
            name=dto.name,
            city=dto.city,
            street=dto.street,
            zipcode=dto.zipcode,
        )
        member = self._repo.save(member)
        logger.info("member.joined", member_id=str(member.id))
        return member.id

    @transaction.atomic
    def update(self, member_id: Any, dto: UpdateMemberDTO) -> Member:
        """Rename a member.

        The duplicate-name rule is only applied at registration.

        Raises:
            EntityNotFound: if the member does not exist.
        """
        member = self._repo.get_by_id(member_id)
        member.name = dto.name
        member = self._repo.save(member)
        logger.info("member.renamed", member_id=str(member_id))
        return member

    def _validate_duplicate_member(self, name: str) -> None:
        if self._repo.find_by_name(name):
            logger.warning("member.duplicate_name", name=name)
            raise DuplicateMember(f"Member '{name}' already exists.")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_members(self, filters: Optional[Dict[str, Any]] = None) -> List[Member]:
        """Return all members, optionally filtered."""
        return self._repo.list(filters)

    def find_one(self, member_id: Any) -> Member:
        """Retrieve a single member by ID.

        Raises:
            EntityNotFound: if the member does not exist.
        """
        return self._repo.get_by_id(member_id)

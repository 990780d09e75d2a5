"""Member domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import IllegalState


class DuplicateMember(IllegalState):
    """A member with the same name is already registered."""

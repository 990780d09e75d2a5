"""Order domain exceptions.

Raised by the Order aggregate when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.

Stock failures are raised by the Item entity as
``modules.items.exceptions.InsufficientStock`` and propagate through
the order workflow untouched.
"""

from __future__ import annotations

from modules.core.exceptions import IllegalState


class OrderAlreadyCancelled(IllegalState):
    """Cancellation was attempted on an order that is already cancelled."""

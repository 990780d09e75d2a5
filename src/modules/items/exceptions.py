"""Item domain exceptions.

Raised by the Item entity when stock rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class InsufficientStock(Exception):
    """Not enough stock to fulfil the requested quantity."""

"""Error kinds shared by every module.

Domain modules subclass these so the API layer can translate a whole
family of failures into one HTTP status.
"""

from __future__ import annotations


class IllegalState(Exception):
    """An operation is not allowed in the entity's current state.

    Raised for duplicate member registration and for cancelling an
    order that is already cancelled.
    """


class EntityNotFound(LookupError):
    """A repository could not resolve the requested identifier.

    Services propagate this untranslated; the API layer maps it to 404.
    """

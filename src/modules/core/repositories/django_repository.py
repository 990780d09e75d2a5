"""Shared Django ORM helpers for concrete repositories."""

from __future__ import annotations

from typing import Any, Type, TypeVar

from django.core.exceptions import ValidationError
from django.db import models

from modules.core.exceptions import EntityNotFound

M = TypeVar("M", bound=models.Model)


def get_or_raise(queryset: "models.QuerySet[M]", model: Type[M], id: Any) -> M:
    """Fetch ``id`` from *queryset* or raise ``EntityNotFound``.

    Malformed identifiers (e.g. a non-UUID string) resolve to nothing
    and raise the same error.
    """
    try:
        entity = queryset.filter(id=id).first()
    except (ValueError, ValidationError):
        entity = None
    if entity is None:
        raise EntityNotFound(f"{model.__name__} {id} not found.")
    return entity

"""Order domain constants.

An order is created in ``ORDER`` and can only move to ``CANCEL``;
there is no way back.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    ORDER = "ORDER", "Ordered"
    CANCEL = "CANCEL", "Cancelled"

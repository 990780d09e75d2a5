"""Item DRF serializers for API input/output.

Input serializers only check the payload shape; business rules live in
the Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.items.models import Item, ItemKind


class ItemSerializer(serializers.ModelSerializer):
    """Read serializer for the Item resource."""

    class Meta:
        model = Item
        fields = [
            "id",
            "kind",
            "name",
            "price",
            "stock_quantity",
            "author",
            "isbn",
            "artist",
            "etc",
            "director",
            "actor",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


def _optional_text(max_length: int = 255) -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_blank=True, max_length=max_length
    )


class CreateItemSerializer(serializers.Serializer):
    """Shape check for the item registration payload.

    Business rules (non-negative price/stock, non-blank name) are
    enforced by ``CreateItemDTO``.
    """

    name = serializers.CharField(max_length=255, trim_whitespace=False)
    price = serializers.IntegerField()
    stock_quantity = serializers.IntegerField(required=False)
    kind = serializers.ChoiceField(choices=ItemKind.choices, required=False)
    author = _optional_text()
    isbn = _optional_text(max_length=32)
    artist = _optional_text()
    etc = _optional_text()
    director = _optional_text()
    actor = _optional_text()


class UpdateItemSerializer(serializers.Serializer):
    """Shape check for a partial item update."""

    name = serializers.CharField(
        required=False, max_length=255, trim_whitespace=False
    )
    price = serializers.IntegerField(required=False)
    stock_quantity = serializers.IntegerField(required=False)

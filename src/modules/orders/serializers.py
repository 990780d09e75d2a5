"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order, OrderItem

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class PlaceOrderSerializer(serializers.Serializer):
    """Validates the order placement request payload."""

    member_id = serializers.UUIDField()
    item_id = serializers.UUIDField()
    count = serializers.IntegerField(min_value=1)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for order lines with the item name."""

    item_name = serializers.CharField(source="item.name", read_only=True)
    total_price = serializers.IntegerField(source="get_total_price", read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "item_id",
            "item_name",
            "order_price",
            "count",
            "total_price",
        ]
        read_only_fields = fields


class OrderListSerializer(serializers.ModelSerializer):
    """Order row for the list endpoint (no nested lines)."""

    member_name = serializers.CharField(source="member.name", read_only=True)
    total_price = serializers.IntegerField(source="get_total_price", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "member_id",
            "member_name",
            "status",
            "order_date",
            "total_price",
        ]
        read_only_fields = fields


class OrderSerializer(OrderListSerializer):
    """Read serializer for a single order with its lines."""

    items = OrderItemSerializer(source="lines", many=True, read_only=True)

    class Meta(OrderListSerializer.Meta):
        fields = OrderListSerializer.Meta.fields + ["items"]
        read_only_fields = fields

"""Unit tests for order DTOs."""

from __future__ import annotations

import uuid

import pytest
from pydantic import ValidationError

from modules.orders.dtos import OrderSearchDTO, OrderStatusEnum, PlaceOrderDTO

pytestmark = pytest.mark.unit


class TestPlaceOrderDTO:
    def test_valid(self):
        member_id, item_id = uuid.uuid4(), uuid.uuid4()
        dto = PlaceOrderDTO(member_id=str(member_id), item_id=item_id, count=2)
        assert dto.member_id == member_id
        assert dto.count == 2

    def test_zero_count_rejected(self):
        with pytest.raises(ValidationError, match="Count must be at least 1"):
            PlaceOrderDTO(member_id=uuid.uuid4(), item_id=uuid.uuid4(), count=0)

    def test_invalid_uuid_rejected(self):
        with pytest.raises(ValidationError):
            PlaceOrderDTO(member_id="kim", item_id=uuid.uuid4(), count=1)


class TestOrderSearchDTO:
    def test_empty_search(self):
        search = OrderSearchDTO()
        assert search.member_name is None
        assert search.order_status is None

    def test_blank_values_become_none(self):
        search = OrderSearchDTO(member_name="  ", order_status="")
        assert search.member_name is None
        assert search.order_status is None

    def test_status_parsed(self):
        search = OrderSearchDTO(order_status="CANCEL")
        assert search.order_status == OrderStatusEnum.CANCEL

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            OrderSearchDTO(order_status="SHIPPED")

"""Unit tests for OrderService with mocked repositories.

Verifies which entities the service loads and submits back, without
touching the database.
"""

from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import EntityNotFound
from modules.items.exceptions import InsufficientStock
from modules.items.models import Item
from modules.members.models import Member
from modules.orders.constants import OrderStatus
from modules.orders.dtos import OrderSearchDTO
from modules.orders.exceptions import OrderAlreadyCancelled
from modules.orders.models import Order, OrderItem
from modules.orders.services import OrderService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def order_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda order: order
    return repo


@pytest.fixture()
def member_repo():
    return MagicMock()


@pytest.fixture()
def item_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda item: item
    return repo


@pytest.fixture()
def service(order_repo, member_repo, item_repo):
    return OrderService(
        order_repository=order_repo,
        member_repository=member_repo,
        item_repository=item_repo,
    )


@pytest.fixture()
def member():
    return Member(name="kim")


@pytest.fixture()
def book():
    return Item(name="JPA Book", price=10000, stock_quantity=10)


# ===========================================================================
# place_order
# ===========================================================================


class TestPlaceOrder:
    def test_submits_item_and_order(
        self, service, order_repo, member_repo, item_repo, member, book
    ):
        member_repo.get_by_id.return_value = member
        item_repo.get_by_id.return_value = book

        order_id = service.place_order(member.id, book.id, 2)

        item_repo.save.assert_called_once_with(book)
        assert book.stock_quantity == 8

        order = order_repo.save.call_args.args[0]
        assert isinstance(order, Order)
        assert order.id == order_id
        assert order.member is member
        assert order.status == OrderStatus.ORDER
        assert [line.count for line in order.lines] == [2]
        assert order.lines[0].order_price == 10000

    def test_insufficient_stock_saves_nothing(
        self, service, order_repo, member_repo, item_repo, member, book
    ):
        member_repo.get_by_id.return_value = member
        item_repo.get_by_id.return_value = book

        with pytest.raises(InsufficientStock):
            service.place_order(member.id, book.id, 11)

        item_repo.save.assert_not_called()
        order_repo.save.assert_not_called()
        assert book.stock_quantity == 10

    def test_missing_member_propagates(
        self, service, order_repo, member_repo, item_repo
    ):
        member_repo.get_by_id.side_effect = EntityNotFound("Member missing")

        with pytest.raises(EntityNotFound):
            service.place_order(uuid.uuid4(), uuid.uuid4(), 1)

        item_repo.get_by_id.assert_not_called()
        order_repo.save.assert_not_called()


# ===========================================================================
# cancel_order
# ===========================================================================


def _placed_order(member: Member, item: Item, count: int) -> Order:
    return Order.create_order(
        member, OrderItem.create_order_item(item, item.price, count)
    )


class TestCancelOrder:
    def test_submits_order_and_each_item(
        self, service, order_repo, item_repo, member, book
    ):
        order = _placed_order(member, book, 3)
        order_repo.get_by_id.return_value = order

        result = service.cancel_order(order.id)

        assert result is order
        assert order.status == OrderStatus.CANCEL
        assert book.stock_quantity == 10
        order_repo.save.assert_called_once_with(order)
        item_repo.save.assert_called_once_with(book)

    def test_already_cancelled_saves_nothing(
        self, service, order_repo, item_repo, member, book
    ):
        order = _placed_order(member, book, 3)
        order.cancel()
        order_repo.get_by_id.return_value = order

        with pytest.raises(OrderAlreadyCancelled):
            service.cancel_order(order.id)

        order_repo.save.assert_not_called()
        item_repo.save.assert_not_called()
        assert book.stock_quantity == 10


# ===========================================================================
# queries
# ===========================================================================


class TestQueries:
    def test_find_orders_delegates_criteria(self, service, order_repo):
        order_repo.find_orders.return_value = []

        service.find_orders(OrderSearchDTO(member_name="kim", order_status="ORDER"))

        order_repo.find_orders.assert_called_once_with(
            member_name="kim", status="ORDER"
        )

    def test_get_order(self, service, order_repo):
        order = MagicMock()
        order_repo.get_by_id.return_value = order
        assert service.get_order("some-id") is order

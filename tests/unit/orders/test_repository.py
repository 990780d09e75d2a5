"""Tests for OrderDjangoRepository against the test database."""

from __future__ import annotations

import uuid

import pytest

from modules.core.exceptions import EntityNotFound
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import OrderDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


def _new_order(member, item, count=1):
    return Order.create_order(
        member, OrderItem.create_order_item(item, item.price, count)
    )


class TestOrderDjangoRepository:
    def test_save_persists_order_and_lines(self, repo, make_member, make_item):
        order = repo.save(_new_order(make_member(), make_item(), 2))

        assert Order.objects.filter(id=order.id).exists()
        line = OrderItem.objects.get(order_id=order.id)
        assert line.count == 2

    def test_resave_does_not_duplicate_lines(self, repo, make_member, make_item):
        order = repo.save(_new_order(make_member(), make_item()))
        order.status = OrderStatus.CANCEL
        repo.save(order)

        assert OrderItem.objects.filter(order_id=order.id).count() == 1
        assert Order.objects.get(id=order.id).status == OrderStatus.CANCEL

    def test_get_by_id_loads_lines_and_items(
        self, repo, make_member, make_item, django_assert_num_queries
    ):
        order_id = repo.save(_new_order(make_member(), make_item(), 3)).id

        # order + member (join), lines, items
        with django_assert_num_queries(3):
            order = repo.get_by_id(order_id)
            assert order.member.name == "kim"
            assert order.lines[0].item.name == "JPA Book"
            assert order.get_total_price() == 30000

    def test_get_missing_raises(self, repo):
        with pytest.raises(EntityNotFound):
            repo.get_by_id(uuid.uuid4())

    def test_get_malformed_id_raises(self, repo):
        with pytest.raises(EntityNotFound):
            repo.get_by_id("42")

    def test_find_orders_without_criteria(self, repo, make_member, make_item):
        repo.save(_new_order(make_member(), make_item()))
        assert len(repo.find_orders()) == 1

    def test_list_with_filters(self, repo, make_member, make_item):
        order = repo.save(_new_order(make_member(), make_item()))
        assert repo.list({"status": OrderStatus.ORDER}) == [order]
        assert repo.list({"status": OrderStatus.CANCEL}) == []

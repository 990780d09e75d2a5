"""Integration tests for Order API endpoints.

Covers:
- Placement via POST /api/v1/orders/ (201, 400, 404, 409).
- Search via GET /api/v1/orders/?member_name=&order_status=.
- Retrieve via GET /api/v1/orders/{id}/.
- Cancellation via POST /api/v1/orders/{id}/cancel/ (200, 404, 409).
- Authentication enforcement (401 without token).
"""

from __future__ import annotations

import uuid

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.models import Order

pytestmark = pytest.mark.integration

URL = "/api/v1/orders/"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def member(make_member):
    return make_member("kim")


@pytest.fixture()
def book(make_item):
    return make_item(name="JPA Book", price=10000, stock_quantity=10)


@pytest.fixture()
def placed_order(auth_client, member, book):
    response = auth_client.post(
        URL,
        {"member_id": str(member.id), "item_id": str(book.id), "count": 2},
        format="json",
    )
    assert response.status_code == 201
    return response.json()


# ===========================================================================
# Authentication
# ===========================================================================


class TestOrderAPIAuth:
    def test_unauthenticated_list_returns_401(self, api_client):
        assert api_client.get(URL).status_code == 401

    def test_unauthenticated_place_returns_401(self, api_client, member, book):
        response = api_client.post(
            URL,
            {"member_id": str(member.id), "item_id": str(book.id), "count": 1},
            format="json",
        )
        assert response.status_code == 401
        assert Order.objects.count() == 0


# ===========================================================================
# Place
# ===========================================================================


class TestPlaceOrder:
    def test_returns_order_representation(self, placed_order, member, book):
        assert placed_order["status"] == OrderStatus.ORDER
        assert placed_order["member_id"] == str(member.id)
        assert placed_order["member_name"] == "kim"
        assert placed_order["total_price"] == 20000
        assert placed_order["order_date"]
        assert len(placed_order["items"]) == 1
        line = placed_order["items"][0]
        assert line["item_id"] == str(book.id)
        assert line["item_name"] == "JPA Book"
        assert line["order_price"] == 10000
        assert line["count"] == 2
        assert line["total_price"] == 20000

        book.refresh_from_db()
        assert book.stock_quantity == 8

    def test_insufficient_stock_returns_409(self, auth_client, member, book):
        response = auth_client.post(
            URL,
            {"member_id": str(member.id), "item_id": str(book.id), "count": 11},
            format="json",
        )
        assert response.status_code == 409
        assert "available 10" in response.json()["detail"]
        book.refresh_from_db()
        assert book.stock_quantity == 10
        assert Order.objects.count() == 0

    def test_unknown_member_returns_404(self, auth_client, book):
        response = auth_client.post(
            URL,
            {"member_id": str(uuid.uuid4()), "item_id": str(book.id), "count": 1},
            format="json",
        )
        assert response.status_code == 404

    def test_unknown_item_returns_404(self, auth_client, member):
        response = auth_client.post(
            URL,
            {"member_id": str(member.id), "item_id": str(uuid.uuid4()), "count": 1},
            format="json",
        )
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "payload",
        [
            {"count": 1},
            {"member_id": "kim", "item_id": "book", "count": 1},
        ],
    )
    def test_invalid_payload_returns_400(self, auth_client, payload):
        response = auth_client.post(URL, payload, format="json")
        assert response.status_code == 400

    def test_zero_count_returns_400(self, auth_client, member, book):
        response = auth_client.post(
            URL,
            {"member_id": str(member.id), "item_id": str(book.id), "count": 0},
            format="json",
        )
        assert response.status_code == 400
        book.refresh_from_db()
        assert book.stock_quantity == 10


# ===========================================================================
# List / Retrieve
# ===========================================================================


class TestReadOrders:
    def test_retrieve(self, auth_client, placed_order):
        response = auth_client.get(f"{URL}{placed_order['id']}/")
        assert response.status_code == 200
        assert response.json() == placed_order

    def test_retrieve_missing_returns_404(self, auth_client):
        response = auth_client.get(f"{URL}{uuid.uuid4()}/")
        assert response.status_code == 404

    def test_list_filters_by_member_name(
        self, auth_client, placed_order, make_member, book
    ):
        other = make_member("lee")
        auth_client.post(
            URL,
            {"member_id": str(other.id), "item_id": str(book.id), "count": 1},
            format="json",
        )

        response = auth_client.get(URL, {"member_name": "kim"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["results"][0]["id"] == placed_order["id"]
        assert data["results"][0]["total_price"] == 20000

    def test_list_filters_by_status(self, auth_client, placed_order):
        ordered = auth_client.get(URL, {"order_status": "ORDER"}).json()
        cancelled = auth_client.get(URL, {"order_status": "CANCEL"}).json()
        assert ordered["count"] == 1
        assert cancelled["count"] == 0

    def test_unknown_status_returns_400(self, auth_client):
        response = auth_client.get(URL, {"order_status": "SHIPPED"})
        assert response.status_code == 400


# ===========================================================================
# Cancel
# ===========================================================================


class TestCancelOrder:
    def test_cancel_restores_stock(self, auth_client, placed_order, book):
        response = auth_client.post(f"{URL}{placed_order['id']}/cancel/")

        assert response.status_code == 200
        assert response.json()["status"] == OrderStatus.CANCEL
        book.refresh_from_db()
        assert book.stock_quantity == 10

    def test_second_cancel_returns_409(self, auth_client, placed_order, book):
        auth_client.post(f"{URL}{placed_order['id']}/cancel/")

        response = auth_client.post(f"{URL}{placed_order['id']}/cancel/")

        assert response.status_code == 409
        book.refresh_from_db()
        assert book.stock_quantity == 10

    def test_cancel_missing_returns_404(self, auth_client):
        response = auth_client.post(f"{URL}{uuid.uuid4()}/cancel/")
        assert response.status_code == 404

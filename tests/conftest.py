import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from modules.items.models import Item, ItemKind
from modules.members.models import Member


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="testuser", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_member():
    """Factory for persisted members."""

    def _make(name: str = "kim", **overrides) -> Member:
        defaults = {"city": "Seoul", "street": "Gangnam-daero 1", "zipcode": "06000"}
        defaults.update(overrides)
        return Member.objects.create(name=name, **defaults)

    return _make


@pytest.fixture()
def make_item():
    """Factory for persisted items (a book by default)."""

    def _make(
        name: str = "JPA Book",
        price: int = 10000,
        stock_quantity: int = 10,
        **overrides,
    ) -> Item:
        overrides.setdefault("kind", ItemKind.BOOK)
        return Item.objects.create(
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            **overrides,
        )

    return _make

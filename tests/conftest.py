from decimal import Decimal

import pytest

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.accounts.models import UserRole
from modules.products.models import Product

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _assets_root(settings, tmp_path):
    """Every test gets its own empty image library."""
    root = tmp_path / "assets"
    root.mkdir()
    settings.ASSETS_ROOT = root
    return root


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_user():
    counter = {"n": 0}

    def _make(role=UserRole.USER, **overrides):
        counter["n"] += 1
        username = overrides.pop("username", f"user{counter['n']}")
        defaults = {
            "email": f"{username}@example.com",
            "name": username.title(),
            "role": role,
        }
        defaults.update(overrides)
        return User.objects.create_user(username=username, password="testpass123", **defaults)

    return _make


@pytest.fixture()
def customer(make_user):
    return make_user(username="priya", name="Priya Sharma", phone="9876543210")


@pytest.fixture()
def other_customer(make_user):
    return make_user(username="meera", name="Meera Iyer")


@pytest.fixture()
def admin_user(make_user):
    return make_user(role=UserRole.ADMIN, username="admin", name="Store Admin")


@pytest.fixture()
def customer_client(customer):
    """APIClient force-authenticated as a regular customer."""
    client = APIClient()
    client.force_authenticate(user=customer)
    return client


@pytest.fixture()
def admin_client(admin_user):
    """APIClient force-authenticated as an admin."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


# ---------------------------------------------------------------------------
# Catalog products
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_product():
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        defaults = {
            "sku": f"SKU-{counter['n']:03d}",
            "name": f"Silk Saree {counter['n']}",
            "price": Decimal("1000.00"),
            "stock": 10,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make

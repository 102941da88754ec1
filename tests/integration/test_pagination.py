"""Integration tests for standardized pagination."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


@pytest.fixture()
def product_batch():
    """Create a batch of products for pagination tests.

    Saved one by one so ``final_price`` is computed.
    """
    return [
        Product.objects.create(
            sku=f"SKU-{idx:03d}",
            name=f"Cotton Kurta {idx:03d}",
            price=Decimal("499.00"),
            stock=10,
        )
        for idx in range(1, 121)
    ]


class TestPagination:
    def test_default_page_size(self, api_client, product_batch):
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 200
        assert response.data["count"] == 120
        assert len(response.data["results"]) == 20
        assert response.data["next"] is not None
        assert response.data["previous"] is None

    def test_custom_page_size(self, api_client, product_batch):
        response = api_client.get("/api/v1/products/?page_size=50")
        assert response.status_code == 200
        assert len(response.data["results"]) == 50
        assert response.data["next"] is not None

    def test_max_page_size(self, api_client, product_batch):
        response = api_client.get("/api/v1/products/?page_size=1000")
        assert response.status_code == 200
        assert len(response.data["results"]) == 100
        assert response.data["next"] is not None

    def test_last_page(self, api_client, product_batch):
        response = api_client.get("/api/v1/products/?page=6")
        assert response.status_code == 200
        assert len(response.data["results"]) == 20
        assert response.data["next"] is None

    def test_admin_users_paginated(self, admin_client, make_user):
        for _ in range(25):
            make_user()
        response = admin_client.get("/api/v1/admin/users/")
        assert response.data["count"] == 25
        assert len(response.data["results"]) == 20

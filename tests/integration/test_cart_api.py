"""Integration tests for the cart endpoints."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.cart.models import CartItem

pytestmark = pytest.mark.integration

URL = "/api/v1/cart/"
MISSING_ID = "0190b3c4-0000-7000-8000-000000000000"


class TestCartApi:
    def test_add_and_list(self, customer_client, make_product):
        product = make_product(price=Decimal("500.00"), discount=Decimal("10"))

        response = customer_client.post(
            URL, {"product_id": str(product.id), "quantity": 2, "size": "M"}, format="json"
        )
        assert response.status_code == 201
        assert response.data["line_total"] == "900.00"
        assert response.data["product"]["id"] == str(product.id)

        listing = customer_client.get(URL)
        assert listing.status_code == 200
        assert len(listing.data) == 1

    def test_cart_is_private(self, customer_client, other_customer, make_product):
        CartItem.objects.create(user=other_customer, product=make_product())
        assert customer_client.get(URL).data == []

    def test_unknown_product(self, customer_client):
        response = customer_client.post(URL, {"product_id": MISSING_ID}, format="json")
        assert response.status_code == 404

    def test_not_enough_stock(self, customer_client, make_product):
        product = make_product(stock=1)
        response = customer_client.post(
            URL, {"product_id": str(product.id), "quantity": 2}, format="json"
        )
        assert response.status_code == 409

    def test_invalid_quantity(self, customer_client, make_product):
        response = customer_client.post(
            URL, {"product_id": str(make_product().id), "quantity": 0}, format="json"
        )
        assert response.status_code == 400

    def test_remove(self, customer_client, customer, make_product):
        item = CartItem.objects.create(user=customer, product=make_product())
        assert customer_client.delete(f"{URL}{item.id}/").status_code == 204
        assert not CartItem.objects.exists()

    def test_remove_other_users_line(self, customer_client, other_customer, make_product):
        item = CartItem.objects.create(user=other_customer, product=make_product())
        assert customer_client.delete(f"{URL}{item.id}/").status_code == 404
        assert CartItem.objects.filter(id=item.id).exists()

    def test_clear_empties_only_own_cart(
        self, customer_client, customer, other_customer, make_product
    ):
        CartItem.objects.create(user=customer, product=make_product())
        CartItem.objects.create(user=customer, product=make_product())
        kept = CartItem.objects.create(user=other_customer, product=make_product())

        response = customer_client.delete(f"{URL}clear/")

        assert response.status_code == 204
        assert list(CartItem.objects.all()) == [kept]

    def test_clear_requires_authentication(self, api_client):
        assert api_client.delete(f"{URL}clear/").status_code == 401

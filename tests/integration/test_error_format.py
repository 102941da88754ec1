"""Integration tests for the shared API error shape.

Framework-raised errors are rendered by drf-standardized-errors as
``{"type": ..., "errors": [{"code", "detail", "attr"}]}``; unexpected
exceptions become a logged 500 that hides the original message.
"""

from __future__ import annotations

import pytest

from modules.products.services import ProductService

pytestmark = pytest.mark.integration

MISSING_ID = "0190b3c4-0000-7000-8000-000000000000"


class TestErrorFormat:
    def test_authentication_error(self, api_client):
        response = api_client.get("/api/v1/cart/")

        assert response.status_code == 401
        body = response.json()
        assert body["type"] == "client_error"
        assert body["errors"][0]["attr"] is None
        assert body["errors"][0]["detail"]

    def test_validation_error_has_attr(self, customer_client):
        response = customer_client.post("/api/v1/orders/", {"items": []}, format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "validation_error"
        assert any(err["attr"].startswith("items") for err in body["errors"])

    def test_nested_validation_error_attr(self, customer_client):
        response = customer_client.post(
            "/api/v1/orders/",
            {"items": [{"product_id": "not-a-uuid", "quantity": 0}]},
            format="json",
        )

        assert response.status_code == 400
        attrs = {err["attr"] for err in response.json()["errors"]}
        assert "items.0.product_id" in attrs
        assert "items.0.quantity" in attrs

    def test_invalid_json_body(self, customer_client):
        response = customer_client.post(
            "/api/v1/cart/", data="{broken", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "parse_error"

    def test_method_not_allowed(self, customer_client):
        response = customer_client.delete("/api/v1/orders/")
        assert response.status_code == 405
        assert response.json()["errors"][0]["code"] == "method_not_allowed"

    def test_unexpected_exception_is_generic_500(self, admin_client, monkeypatch):
        def explode(self, *args, **kwargs):
            raise RuntimeError("database password is hunter2")

        monkeypatch.setattr(ProductService, "get_product", explode)
        response = admin_client.get(f"/api/v1/admin/products/{MISSING_ID}/")

        assert response.status_code == 500
        body = response.json()
        assert body["type"] == "server_error"
        assert body["errors"][0]["detail"] == "Internal server error."
        assert "hunter2" not in response.content.decode()

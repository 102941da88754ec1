"""Integration tests for reading and changing orders.

Covers:
- GET /api/v1/orders/ and /{id}/ scoped to the owner.
- PATCH /api/v1/orders/{id}/ (customer cancel, stock released).
- Admin list filters and PATCH /api/v1/admin/orders/{id}/status/.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
from modules.orders.models import OrderStatusHistory
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.integration

MISSING_ID = "0190b3c4-0000-7000-8000-000000000000"


@pytest.fixture()
def place_order(make_product):
    service = OrderService(
        order_repository=OrderDjangoRepository(),
        product_repository=ProductDjangoRepository(),
        user_repository=UserDjangoRepository(),
        cart_repository=CartDjangoRepository(),
    )

    def _place(user, quantity=2, **product_overrides):
        product = make_product(**product_overrides)
        return service.create_order(
            CreateOrderDTO(
                user_id=user.id,
                items=[CreateOrderItemDTO(product_id=product.id, quantity=quantity)],
            )
        )

    return _place


class TestCustomerReads:
    def test_list_only_own_orders(self, customer_client, customer, other_customer, place_order):
        mine = place_order(customer)
        place_order(other_customer)

        response = customer_client.get("/api/v1/orders/")

        assert response.status_code == 200
        assert [o["id"] for o in response.data["results"]] == [str(mine.id)]
        assert response.data["results"][0]["item_count"] == 1

    def test_retrieve_own(self, customer_client, customer, place_order):
        order = place_order(customer)
        response = customer_client.get(f"/api/v1/orders/{order.id}/")
        assert response.status_code == 200
        assert response.data["order_number"] == order.order_number

    def test_retrieve_other_users_order_is_404(self, customer_client, other_customer, place_order):
        order = place_order(other_customer)
        response = customer_client.get(f"/api/v1/orders/{order.id}/")
        assert response.status_code == 404
        assert response.data["detail"] == "Order not found."


class TestCustomerCancel:
    def test_cancel_pending_releases_stock(self, customer_client, customer, place_order):
        order = place_order(customer, quantity=3, stock=10)

        response = customer_client.patch(
            f"/api/v1/orders/{order.id}/", {"status": "cancelled"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["status"] == "CANCELLED"
        product = order.items.get().product
        product.refresh_from_db()
        assert product.stock == 10

    def test_customer_cannot_ship(self, customer_client, customer, place_order):
        order = place_order(customer)
        response = customer_client.patch(
            f"/api/v1/orders/{order.id}/", {"status": "SHIPPED"}, format="json"
        )
        assert response.status_code == 400
        assert response.data["detail"] == "Cannot change order status from PENDING to SHIPPED."

    def test_status_required(self, customer_client, customer, place_order):
        order = place_order(customer)
        response = customer_client.patch(f"/api/v1/orders/{order.id}/", {}, format="json")
        assert response.status_code == 400
        assert response.data["detail"] == "Field 'status' is required."

    def test_cannot_cancel_someone_elses(self, customer_client, other_customer, place_order):
        order = place_order(other_customer)
        response = customer_client.patch(
            f"/api/v1/orders/{order.id}/", {"status": "CANCELLED"}, format="json"
        )
        assert response.status_code == 404


class TestAdminOrders:
    def test_list_all_with_status_filter(self, admin_client, customer, other_customer, place_order):
        place_order(customer)
        cancelled = place_order(other_customer)
        cancelled.status = "CANCELLED"
        cancelled.save()

        response = admin_client.get("/api/v1/admin/orders/", {"status": "pending"})

        assert response.status_code == 200
        assert response.data["count"] == 1

    def test_filter_by_user(self, admin_client, customer, other_customer, place_order):
        place_order(customer)
        place_order(other_customer)
        response = admin_client.get("/api/v1/admin/orders/", {"user": str(customer.id)})
        assert response.data["count"] == 1

    def test_search_by_customer_name(self, admin_client, customer, other_customer, place_order):
        place_order(customer)
        place_order(other_customer)
        response = admin_client.get("/api/v1/admin/orders/", {"search": "meera"})
        assert response.data["count"] == 1

    def test_fulfilment_path_with_history(self, admin_client, customer, place_order):
        order = place_order(customer)
        url = f"/api/v1/admin/orders/{order.id}/status/"

        for new_status in ("CONFIRMED", "SHIPPED", "DELIVERED"):
            response = admin_client.patch(url, {"status": new_status, "notes": "ok"}, format="json")
            assert response.status_code == 200
            assert response.data["status"] == new_status

        history = OrderStatusHistory.objects.filter(order=order)
        assert history.count() == 4
        assert {h.new_status for h in history} == {"PENDING", "CONFIRMED", "SHIPPED", "DELIVERED"}
        assert history.filter(notes="ok").count() == 3

    def test_admin_cannot_skip_to_delivered(self, admin_client, customer, place_order):
        order = place_order(customer)
        response = admin_client.patch(
            f"/api/v1/admin/orders/{order.id}/status/", {"status": "DELIVERED"}, format="json"
        )
        assert response.status_code == 400

    def test_admin_retrieve_any(self, admin_client, customer, place_order):
        order = place_order(customer, price=Decimal("100.00"))
        response = admin_client.get(f"/api/v1/admin/orders/{order.id}/")
        assert response.status_code == 200
        assert response.data["items"][0]["unit_price"] == "100.00"

    def test_unknown_order(self, admin_client):
        response = admin_client.patch(
            f"/api/v1/admin/orders/{MISSING_ID}/status/", {"status": "CONFIRMED"}, format="json"
        )
        assert response.status_code == 404

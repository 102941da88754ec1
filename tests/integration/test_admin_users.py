"""Integration tests for GET /api/v1/admin/users/."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.models import Order
from modules.tailoring.models import BlouseMeasurement, CustomOrder, SalwarMeasurement

pytestmark = pytest.mark.integration

URL = "/api/v1/admin/users/"


def _by_email(response):
    return {row["email"]: row for row in response.data["results"]}


class TestAdminUsers:
    def test_lists_customers_only(self, admin_client, customer, other_customer, admin_user):
        response = admin_client.get(URL)

        assert response.status_code == 200
        assert set(_by_email(response)) == {customer.email, other_customer.email}

    def test_activity_counts(self, admin_client, customer, other_customer):
        Order.objects.create(user=customer, order_number="ORD-TEST-1", total=Decimal("100.00"))
        custom_order = CustomOrder.objects.create(user=customer, price=Decimal("900.00"))
        CustomOrder.objects.create(user=customer, price=Decimal("900.00"))
        BlouseMeasurement.objects.create(user=customer, custom_order=custom_order)
        SalwarMeasurement.objects.create(user=customer)

        rows = _by_email(admin_client.get(URL))

        assert rows[customer.email]["order_count"] == 1
        assert rows[customer.email]["custom_order_count"] == 2
        assert rows[customer.email]["measurement_count"] == 1
        assert rows[other_customer.email]["order_count"] == 0

    @pytest.mark.parametrize("term", ["meera", "MEERA@", "98450"])
    def test_search(self, admin_client, customer, other_customer, term):
        other_customer.phone = "+91 98450 12345"
        other_customer.save()

        response = admin_client.get(URL, {"search": term})

        assert set(_by_email(response)) == {other_customer.email}

    def test_requires_admin(self, customer_client):
        assert customer_client.get(URL).status_code == 403

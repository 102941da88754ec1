"""Integration tests for the admin measurement sheets.

Covers:
- Blouse sheet CRUD on /api/v1/admin/measurements/.
- Custom-order ownership checked on create and update.
- Validation: required user, positive values, blanks ignored.
- Filters, and the salwar / lehenga endpoints.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.tailoring.models import (
    BlouseMeasurement,
    CustomOrder,
    LehengaMeasurement,
    SalwarMeasurement,
)

pytestmark = pytest.mark.integration

URL = "/api/v1/admin/measurements/"
MISSING_ID = "0190b3c4-0000-7000-8000-000000000000"


@pytest.fixture()
def custom_order(customer):
    return CustomOrder.objects.create(
        user=customer, model_name="Princess Cut", fabric="Raw silk", price=Decimal("1430.00")
    )


# ===========================================================================
# Create
# ===========================================================================


class TestCreateMeasurement:
    def test_create_linked_to_own_custom_order(self, admin_client, customer, custom_order):
        response = admin_client.post(
            URL,
            {
                "user_id": str(customer.id),
                "custom_order_id": str(custom_order.id),
                "chest": "34.5",
                "waist": "28",
                "sleeve_length": "",
                "notes": "Loose fit",
            },
            format="json",
        )

        assert response.status_code == 201
        data = response.data
        assert data["chest"] == "34.50"
        assert data["waist"] == "28.00"
        assert data["sleeve_length"] is None
        assert data["measured_by"] == "Store Admin"
        assert data["user"]["name"] == "Priya Sharma"
        assert data["custom_order"]["id"] == str(custom_order.id)
        assert data["custom_order"]["fabric"] == "Raw silk"

    def test_explicit_measured_by_kept(self, admin_client, customer):
        response = admin_client.post(
            URL, {"user_id": str(customer.id), "measured_by": "Lakshmi"}, format="json"
        )
        assert response.data["measured_by"] == "Lakshmi"

    def test_custom_order_of_another_user(self, admin_client, other_customer, custom_order):
        response = admin_client.post(
            URL,
            {"user_id": str(other_customer.id), "custom_order_id": str(custom_order.id)},
            format="json",
        )

        assert response.status_code == 404
        assert "does not belong" in response.data["detail"]
        assert not BlouseMeasurement.objects.exists()

    def test_user_required(self, admin_client):
        response = admin_client.post(URL, {"chest": "34"}, format="json")
        assert response.status_code == 400

    def test_unknown_user(self, admin_client):
        response = admin_client.post(URL, {"user_id": MISSING_ID}, format="json")
        assert response.status_code == 404

    @pytest.mark.parametrize("value", ["0", "-2.5"])
    def test_non_positive_rejected(self, admin_client, customer, value):
        response = admin_client.post(
            URL, {"user_id": str(customer.id), "chest": value}, format="json"
        )
        assert response.status_code == 400
        assert not BlouseMeasurement.objects.exists()

    def test_value_too_large_for_column(self, admin_client, customer):
        response = admin_client.post(
            URL, {"user_id": str(customer.id), "chest": "12345678.999"}, format="json"
        )

        assert response.status_code == 400
        assert not BlouseMeasurement.objects.exists()
        assert admin_client.get(URL).status_code == 200

    def test_not_a_number(self, admin_client, customer):
        response = admin_client.post(
            URL, {"user_id": str(customer.id), "chest": "wide"}, format="json"
        )
        assert response.status_code == 400

    def test_customer_forbidden(self, customer_client, customer):
        response = customer_client.post(URL, {"user_id": str(customer.id)}, format="json")
        assert response.status_code == 403


# ===========================================================================
# Read / update / delete
# ===========================================================================


@pytest.fixture()
def sheet(customer):
    return BlouseMeasurement.objects.create(
        user=customer, chest=Decimal("34.00"), waist=Decimal("28.00"), measured_by="Lakshmi"
    )


class TestChangeMeasurement:
    def test_retrieve(self, admin_client, sheet):
        response = admin_client.get(f"{URL}{sheet.id}/")
        assert response.status_code == 200
        assert response.data["chest"] == "34.00"

    def test_retrieve_unknown(self, admin_client):
        assert admin_client.get(f"{URL}{MISSING_ID}/").status_code == 404

    def test_partial_update_keeps_other_fields(self, admin_client, sheet):
        response = admin_client.patch(f"{URL}{sheet.id}/", {"chest": "35"}, format="json")

        assert response.status_code == 200
        assert response.data["chest"] == "35.00"
        assert response.data["waist"] == "28.00"
        assert response.data["measured_by"] == "Lakshmi"

    def test_link_custom_order_on_update(self, admin_client, sheet, custom_order):
        response = admin_client.put(
            f"{URL}{sheet.id}/", {"custom_order_id": str(custom_order.id)}, format="json"
        )
        assert response.status_code == 200
        sheet.refresh_from_db()
        assert sheet.custom_order_id == custom_order.id

    def test_moving_to_another_user_rechecks_ownership(
        self, admin_client, customer, other_customer, custom_order
    ):
        sheet = BlouseMeasurement.objects.create(user=customer, custom_order=custom_order)

        response = admin_client.patch(
            f"{URL}{sheet.id}/", {"user_id": str(other_customer.id)}, format="json"
        )

        assert response.status_code == 404
        sheet.refresh_from_db()
        assert sheet.user_id == customer.id

    def test_update_unknown(self, admin_client):
        response = admin_client.patch(f"{URL}{MISSING_ID}/", {"chest": "30"}, format="json")
        assert response.status_code == 404

    def test_update_rejects_zero(self, admin_client, sheet):
        response = admin_client.patch(f"{URL}{sheet.id}/", {"waist": "0"}, format="json")
        assert response.status_code == 400
        sheet.refresh_from_db()
        assert sheet.waist == Decimal("28.00")

    def test_update_rejects_oversized_value(self, admin_client, sheet):
        response = admin_client.patch(f"{URL}{sheet.id}/", {"waist": "100000"}, format="json")
        assert response.status_code == 400
        sheet.refresh_from_db()
        assert sheet.waist == Decimal("28.00")

    def test_delete(self, admin_client, sheet):
        assert admin_client.delete(f"{URL}{sheet.id}/").status_code == 204
        assert not BlouseMeasurement.objects.exists()

    def test_delete_unknown(self, admin_client):
        assert admin_client.delete(f"{URL}{MISSING_ID}/").status_code == 404


# ===========================================================================
# Listing
# ===========================================================================


class TestListMeasurements:
    def test_filters(self, admin_client, customer, other_customer, custom_order):
        BlouseMeasurement.objects.create(user=customer, custom_order=custom_order)
        BlouseMeasurement.objects.create(user=customer)
        BlouseMeasurement.objects.create(user=other_customer)

        assert admin_client.get(URL).data["count"] == 3
        assert admin_client.get(URL, {"user_id": str(customer.id)}).data["count"] == 2
        assert admin_client.get(URL, {"custom_order_id": str(custom_order.id)}).data["count"] == 1
        assert admin_client.get(URL, {"search": "meera"}).data["count"] == 1

    def test_user_id_wins_over_search(self, admin_client, customer, other_customer):
        BlouseMeasurement.objects.create(user=customer)
        BlouseMeasurement.objects.create(user=other_customer)

        response = admin_client.get(URL, {"user_id": str(customer.id), "search": "meera"})

        assert response.data["count"] == 1
        assert response.data["results"][0]["user"]["id"] == str(customer.id)


# ===========================================================================
# Salwar and lehenga sheets
# ===========================================================================


class TestOtherSheets:
    def test_salwar_sheet(self, admin_client, customer):
        response = admin_client.post(
            "/api/v1/admin/salwar-measurements/",
            {"user_id": str(customer.id), "bust": "36", "salwar_length": "40"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["bust"] == "36.00"
        assert "chest" not in response.data
        assert SalwarMeasurement.objects.count() == 1

    def test_lehenga_sheet_has_blouse_and_skirt_fields(self, admin_client, customer):
        response = admin_client.post(
            "/api/v1/admin/lehenga-measurements/",
            {"user_id": str(customer.id), "chest": "34", "lehenga_length": "42"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["chest"] == "34.00"
        assert response.data["lehenga_length"] == "42.00"
        assert LehengaMeasurement.objects.count() == 1

    def test_lehenga_ownership_guard(self, admin_client, other_customer, custom_order):
        response = admin_client.post(
            "/api/v1/admin/lehenga-measurements/",
            {"user_id": str(other_customer.id), "custom_order_id": str(custom_order.id)},
            format="json",
        )
        assert response.status_code == 404

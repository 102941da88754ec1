"""Unit tests for Order DTOs."""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.orders.constants import PaymentMethod
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO, UpdateOrderStatusDTO

pytestmark = pytest.mark.unit


class TestCreateOrderItemDTO:
    @pytest.mark.parametrize("quantity", [0, -3])
    def test_quantity_must_be_positive(self, quantity):
        with pytest.raises(ValidationError, match="Quantity"):
            CreateOrderItemDTO(product_id=uuid4(), quantity=quantity)

    def test_invalid_product_id(self):
        with pytest.raises(ValidationError):
            CreateOrderItemDTO(product_id="not-a-uuid", quantity=1)


class TestCreateOrderDTO:
    def test_defaults(self):
        dto = CreateOrderDTO(
            user_id=uuid4(), items=[CreateOrderItemDTO(product_id=uuid4(), quantity=1)]
        )
        assert dto.payment_method == PaymentMethod.COD
        assert dto.shipping_address == {}

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            CreateOrderDTO(user_id=uuid4(), items=[])

    def test_duplicate_products_rejected(self):
        pid = uuid4()
        with pytest.raises(ValidationError, match="Duplicate"):
            CreateOrderDTO(
                user_id=uuid4(),
                items=[
                    CreateOrderItemDTO(product_id=pid, quantity=1),
                    CreateOrderItemDTO(product_id=pid, quantity=2),
                ],
            )

    def test_unknown_payment_method_rejected(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO(
                user_id=uuid4(),
                items=[CreateOrderItemDTO(product_id=uuid4(), quantity=1)],
                payment_method="BITCOIN",
            )


class TestUpdateOrderStatusDTO:
    def test_status_normalised(self):
        assert UpdateOrderStatusDTO(status=" cancelled ").status == "CANCELLED"

    def test_blank_status_rejected(self):
        with pytest.raises(ValidationError, match="required"):
            UpdateOrderStatusDTO(status="  ")

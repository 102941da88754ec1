"""Unit tests for OrderService.

Covers:
- Order creation with stock reservation and price snapshot.
- Buyer and product validation.
- Tax, shipping and total computation.
- Atomicity: partial failure rolls back all stock.
- Status transitions per role, with history.
- Cancellation with stock release.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.accounts.exceptions import InactiveUser, UserNotFound
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.cart.models import CartItem
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
from modules.orders.exceptions import (
    InactiveProduct,
    InsufficientStock,
    InvalidOrderStatus,
    OrderNotFound,
)
from modules.orders.models import Order, OrderStatusHistory
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService, compute_charges
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def service():
    return OrderService(
        order_repository=OrderDjangoRepository(),
        product_repository=ProductDjangoRepository(),
        user_repository=UserDjangoRepository(),
        cart_repository=CartDjangoRepository(),
    )


def _dto(user, *lines):
    return CreateOrderDTO(
        user_id=user.id,
        items=[CreateOrderItemDTO(product_id=p.id, quantity=q) for p, q in lines],
        shipping_address={"line1": "12 MG Road", "city": "Bengaluru", "pincode": "560001"},
    )


@pytest.fixture()
def pending_order(service, customer, make_product):
    product = make_product(stock=10)
    return service.create_order(_dto(customer, (product, 2)))


# ===========================================================================
# compute_charges
# ===========================================================================


class TestComputeCharges:
    def test_small_order_pays_shipping(self):
        charges = compute_charges(Decimal("500.00"))
        assert charges == {
            "tax": Decimal("90.00"),
            "shipping": Decimal("99.00"),
            "total": Decimal("689.00"),
        }

    def test_threshold_itself_still_pays_shipping(self):
        assert compute_charges(Decimal("999.00"))["shipping"] == Decimal("99.00")

    def test_free_shipping_above_threshold(self):
        charges = compute_charges(Decimal("1800.00"))
        assert charges["shipping"] == Decimal("0.00")
        assert charges["total"] == Decimal("2124.00")


# ===========================================================================
# create_order
# ===========================================================================


class TestCreateOrder:
    def test_success_reserves_stock_and_prices(self, service, customer, make_product):
        product = make_product(price=Decimal("1000.00"), discount=Decimal("10"), stock=5)

        order = service.create_order(_dto(customer, (product, 2)))

        product.refresh_from_db()
        assert product.stock == 3
        assert order.status == OrderStatus.PENDING
        assert order.subtotal == Decimal("1800.00")
        assert order.discount == Decimal("200.00")
        assert order.tax == Decimal("324.00")
        assert order.shipping == Decimal("0.00")
        assert order.total == Decimal("2124.00")
        assert order.order_number.startswith("ORD-")

    def test_items_snapshot_final_price(self, service, customer, make_product):
        product = make_product(price=Decimal("400.00"), discount=Decimal("25"))
        order = service.create_order(_dto(customer, (product, 3)))

        item = order.items.get()
        assert item.unit_price == Decimal("300.00")
        assert item.subtotal == Decimal("900.00")

        product.price = Decimal("9999.00")
        product.save()
        item.refresh_from_db()
        assert item.unit_price == Decimal("300.00")

    def test_initial_history_recorded(self, service, customer, make_product):
        order = service.create_order(_dto(customer, (make_product(), 1)))
        history = OrderStatusHistory.objects.get(order=order)
        assert history.old_status is None
        assert history.new_status == OrderStatus.PENDING
        assert history.notes == "Order created"

    def test_cart_is_cleared(self, service, customer, make_product):
        product = make_product()
        CartItem.objects.create(user=customer, product=product, quantity=1)
        service.create_order(_dto(customer, (product, 1)))
        assert not CartItem.objects.filter(user=customer).exists()

    def test_unknown_user(self, service, make_product):
        dto = CreateOrderDTO(
            user_id=uuid4(),
            items=[CreateOrderItemDTO(product_id=make_product().id, quantity=1)],
        )
        with pytest.raises(UserNotFound):
            service.create_order(dto)

    def test_inactive_user(self, service, make_user, make_product):
        user = make_user(is_active=False)
        with pytest.raises(InactiveUser):
            service.create_order(_dto(user, (make_product(), 1)))

    def test_unknown_product(self, service, customer):
        dto = CreateOrderDTO(
            user_id=customer.id,
            items=[CreateOrderItemDTO(product_id=uuid4(), quantity=1)],
        )
        with pytest.raises(ProductNotFound):
            service.create_order(dto)

    def test_inactive_product(self, service, customer, make_product):
        product = make_product(is_active=False)
        with pytest.raises(InactiveProduct):
            service.create_order(_dto(customer, (product, 1)))

    def test_insufficient_stock_names_product(self, service, customer, make_product):
        product = make_product(sku="SAR-777", name="Paithani", stock=3)
        with pytest.raises(InsufficientStock, match="Paithani") as exc_info:
            service.create_order(_dto(customer, (product, 5)))
        assert exc_info.value.product_id == str(product.id)
        assert "SAR-777" in str(exc_info.value)

    def test_partial_failure_rolls_back_everything(self, service, customer, make_product):
        plenty = make_product(stock=10)
        scarce = make_product(stock=1)

        with pytest.raises(InsufficientStock):
            service.create_order(_dto(customer, (plenty, 4), (scarce, 2)))

        plenty.refresh_from_db()
        scarce.refresh_from_db()
        assert plenty.stock == 10
        assert scarce.stock == 1
        assert Order.objects.count() == 0

    def test_exact_stock_allowed(self, service, customer, make_product):
        product = make_product(stock=2)
        service.create_order(_dto(customer, (product, 2)))
        product.refresh_from_db()
        assert product.stock == 0


# ===========================================================================
# update_status
# ===========================================================================


class TestUpdateStatus:
    def test_admin_confirms(self, service, pending_order, admin_user):
        order = service.update_status(str(pending_order.id), OrderStatus.CONFIRMED, admin_user)
        assert order.status == OrderStatus.CONFIRMED

        latest = OrderStatusHistory.objects.get(order=order, new_status=OrderStatus.CONFIRMED)
        assert latest.old_status == OrderStatus.PENDING
        assert latest.new_status == OrderStatus.CONFIRMED
        assert latest.user == admin_user

    def test_customer_cancels_and_stock_returns(self, service, pending_order, customer):
        product = pending_order.items.get().product
        product.refresh_from_db()
        assert product.stock == 8

        service.update_status(str(pending_order.id), OrderStatus.CANCELLED, customer)

        product.refresh_from_db()
        assert product.stock == 10

    def test_customer_cannot_confirm(self, service, pending_order, customer):
        with pytest.raises(InvalidOrderStatus, match="from PENDING to CONFIRMED"):
            service.update_status(str(pending_order.id), OrderStatus.CONFIRMED, customer)

    def test_customer_cannot_touch_other_users_order(self, service, pending_order, other_customer):
        with pytest.raises(OrderNotFound):
            service.update_status(str(pending_order.id), OrderStatus.CANCELLED, other_customer)

    def test_shipped_cannot_be_cancelled(self, service, pending_order, admin_user, customer):
        service.update_status(str(pending_order.id), OrderStatus.CONFIRMED, admin_user)
        service.update_status(str(pending_order.id), OrderStatus.SHIPPED, admin_user)
        with pytest.raises(InvalidOrderStatus):
            service.update_status(str(pending_order.id), OrderStatus.CANCELLED, customer)

    def test_cancelled_is_terminal(self, service, pending_order, admin_user):
        service.update_status(str(pending_order.id), OrderStatus.CANCELLED, admin_user)
        with pytest.raises(InvalidOrderStatus, match="already CANCELLED"):
            service.update_status(str(pending_order.id), OrderStatus.CONFIRMED, admin_user)

    def test_unknown_order(self, service, admin_user):
        with pytest.raises(OrderNotFound):
            service.update_status(str(uuid4()), OrderStatus.CONFIRMED, admin_user)


# ===========================================================================
# Queries
# ===========================================================================


class TestGetOrder:
    def test_owner_can_read(self, service, pending_order, customer):
        assert service.get_order(str(pending_order.id), user_id=str(customer.id)) == pending_order

    def test_other_user_gets_not_found(self, service, pending_order, other_customer):
        with pytest.raises(OrderNotFound):
            service.get_order(str(pending_order.id), user_id=str(other_customer.id))

    def test_unrestricted_lookup(self, service, pending_order):
        assert service.get_order(str(pending_order.id)) == pending_order

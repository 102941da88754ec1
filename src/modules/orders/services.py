"""Order service layer (Use Cases).

Orchestrates the core business logic for checkout and status management.
All write operations are atomic; the service defines the unit-of-work
boundary.

Business rules enforced:
- The buyer must exist and be active.
- Every product must exist, be active and have enough stock.
- Stock is reserved with SELECT FOR UPDATE, products locked in id order.
- Status changes follow ``ORDER_TRANSITIONS`` for the actor's role.
- Cancelling releases the reserved stock.
- Every status change is recorded in the order history.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.conf import settings
from django.db import transaction

from modules.accounts.exceptions import InactiveUser, UserNotFound
from modules.core.pricing import to_money
from modules.orders.constants import ORDER_TRANSITIONS, OrderStatus
from modules.orders.exceptions import (
    InactiveProduct,
    InsufficientStock,
    InvalidOrderStatus,
    OrderNotFound,
)
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.accounts.models import User
    from modules.accounts.repositories.interfaces import IUserRepository
    from modules.cart.repositories.interfaces import ICartRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def compute_charges(subtotal: Decimal) -> Dict[str, Decimal]:
    """Tax and shipping for an order *subtotal*.

    Shipping is waived once the subtotal exceeds
    ``ORDER_FREE_SHIPPING_THRESHOLD``.
    """
    tax_rate = Decimal(str(settings.ORDER_TAX_RATE))
    threshold = Decimal(str(settings.ORDER_FREE_SHIPPING_THRESHOLD))
    tax = to_money(subtotal * tax_rate)
    shipping = Decimal("0.00") if subtotal > threshold else to_money(settings.ORDER_SHIPPING_FEE)
    return {"tax": tax, "shipping": shipping, "total": to_money(subtotal + tax + shipping)}


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        user_repository: IUserRepository,
        cart_repository: ICartRepository,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._user_repo = user_repository
        self._cart_repo = cart_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new order with atomic stock reservation.

        Steps:
        1. Validate the buyer exists and is active.
        2. For each item (sorted by product id to avoid deadlocks):
           lock the product row, check it is active and in stock,
           snapshot ``final_price`` and deduct stock.
        3. Persist order + items with subtotal, tax, shipping and total.
        4. Record the initial status history.
        5. Empty the buyer's cart.

        Any exception rolls the whole transaction back.

        Raises:
            UserNotFound: the buyer does not exist.
            InactiveUser: the buyer is inactive.
            ProductNotFound: a product does not exist.
            InactiveProduct: a product is inactive.
            InsufficientStock: a product cannot cover the requested quantity.
        """
        log = logger.bind(user_id=str(dto.user_id))
        log.info("order.creation_started", item_count=len(dto.items))

        user = self._user_repo.get_by_id(str(dto.user_id))
        if not user:
            raise UserNotFound(f"User {dto.user_id} not found.")
        if not user.is_active:
            raise InactiveUser(f"User {dto.user_id} is inactive.")

        subtotal = Decimal("0.00")
        savings = Decimal("0.00")
        repo_items = []

        for item_dto in sorted(dto.items, key=lambda i: str(i.product_id)):
            product = self._product_repo.get_for_update(str(item_dto.product_id))
            if not product:
                raise ProductNotFound(f"Product {item_dto.product_id} not found.")
            if not product.is_active:
                raise InactiveProduct(f"Product '{product.name}' is inactive.")
            if product.stock < item_dto.quantity:
                log.warning(
                    "order.insufficient_stock",
                    product_id=str(product.id),
                    requested=item_dto.quantity,
                    available=product.stock,
                )
                raise InsufficientStock(
                    f"Insufficient stock for '{product.name}' ({product.sku}): "
                    f"requested {item_dto.quantity}, available {product.stock}.",
                    product_id=str(product.id),
                )

            product.stock -= item_dto.quantity
            product.save(update_fields=["stock"])
            log.info(
                "order.stock_reserved",
                product_id=str(product.id),
                quantity=item_dto.quantity,
                remaining=product.stock,
            )

            subtotal += product.final_price * item_dto.quantity
            savings += (product.price - product.final_price) * item_dto.quantity
            repo_items.append(
                {
                    "product_id": product.id,
                    "quantity": item_dto.quantity,
                    "unit_price": product.final_price,
                    "size": item_dto.size,
                    "color": item_dto.color,
                }
            )

        subtotal = to_money(subtotal)
        charges = compute_charges(subtotal)
        order = self._order_repo.create(
            {
                "user_id": user.id,
                "items": repo_items,
                "subtotal": subtotal,
                "discount": to_money(savings),
                "tax": charges["tax"],
                "shipping": charges["shipping"],
                "total": charges["total"],
                "payment_method": dto.payment_method,
                "shipping_address": dto.shipping_address,
                "notes": dto.notes or "",
            }
        )

        self._order_repo.add_history(
            order_id=order.id,
            status=OrderStatus.PENDING,
            notes="Order created",
            user_id=user.id,
        )
        self._cart_repo.clear_for_user(user.id)

        log.info("order.created", order_id=str(order.id), total=str(charges["total"]))
        return self._order_repo.get_by_id(str(order.id)) or order

    @transaction.atomic
    def update_status(
        self,
        order_id: str,
        new_status: str,
        actor: User,
        notes: str = "",
    ) -> Order:
        """Move an order to *new_status* on behalf of *actor*.

        Locks the order row before validating the transition.  Customers
        only see their own orders; anyone else's order is reported as
        missing.  A move to ``CANCELLED`` returns the stock.

        Raises:
            OrderNotFound: order does not exist (or is not the actor's).
            InvalidOrderStatus: transition not allowed for the actor's role.
        """
        order = self._order_repo.get_for_update(str(order_id))
        if not order or (not actor.is_admin and str(order.user_id) != str(actor.id)):
            raise OrderNotFound(f"Order {order_id} not found.")

        log = logger.bind(
            order_id=str(order_id),
            current_status=order.status,
            new_status=new_status,
            role=actor.role,
        )

        if not ORDER_TRANSITIONS.can_transition(order.status, new_status, actor.role):
            log.warning("order.invalid_transition")
            if ORDER_TRANSITIONS.is_terminal(order.status):
                raise InvalidOrderStatus(
                    f"Order is already {order.status} and its status can no longer change."
                )
            raise InvalidOrderStatus(
                f"Cannot change order status from {order.status} to {new_status}."
            )

        if new_status == OrderStatus.CANCELLED:
            self._release_stock(order, log)

        old_status = order.status
        order.status = new_status
        self._order_repo.save(order)
        self._order_repo.add_history(
            order_id=order.id,
            status=new_status,
            notes=notes,
            old_status=old_status,
            user_id=actor.id,
        )

        log.info("order.status_updated")
        return self._order_repo.get_by_id(str(order_id))

    def _release_stock(self, order: Order, log: Any) -> None:
        for item in sorted(order.items.all(), key=lambda i: str(i.product_id)):
            product = self._product_repo.get_for_update(str(item.product_id))
            if not product:
                continue
            product.stock += item.quantity
            product.save(update_fields=["stock"])
            log.info(
                "order.stock_released",
                product_id=str(product.id),
                quantity=item.quantity,
                restored_stock=product.stock,
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str, user_id: Optional[str] = None) -> Order:
        """Retrieve one order, optionally restricted to its owner.

        Raises:
            OrderNotFound: missing, or owned by someone other than *user_id*.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order or (user_id is not None and str(order.user_id) != str(user_id)):
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        return self._order_repo.list(filters)

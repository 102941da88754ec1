"""Cart service layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.cart.exceptions import CartItemNotFound, ProductUnavailable
from modules.cart.models import CartItem
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.cart.dtos import AddCartItemDTO
    from modules.cart.repositories.interfaces import ICartRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class CartService:
    def __init__(
        self,
        repository: ICartRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._products = product_repository

    def list_items(self, user_id: str) -> List[CartItem]:
        return self._repo.list_for_user(user_id)

    @transaction.atomic
    def add_item(self, user_id: str, dto: AddCartItemDTO) -> CartItem:
        """Add a line, merging with an existing line for the same variant.

        Stock is only checked here, never reserved; the checkout re-checks
        under a row lock.

        Raises:
            ProductNotFound: the product does not exist.
            ProductUnavailable: product inactive or short on stock.
        """
        product = self._products.get_by_id(str(dto.product_id))
        if not product:
            raise ProductNotFound(f"Product {dto.product_id} not found.")
        if not product.is_active:
            raise ProductUnavailable(f"Product '{product.name}' is not available.")

        item = self._repo.find_line(user_id, str(product.id), dto.size, dto.color)
        if item:
            item.quantity += dto.quantity
        else:
            item = CartItem(
                user_id=user_id,
                product=product,
                quantity=dto.quantity,
                size=dto.size,
                color=dto.color,
            )

        if item.quantity > product.stock:
            raise ProductUnavailable(
                f"Only {product.stock} unit(s) of '{product.name}' in stock."
            )

        item = self._repo.save(item)
        logger.info(
            "cart.item_added",
            user_id=str(user_id),
            product_id=str(product.id),
            quantity=item.quantity,
        )
        return item

    @transaction.atomic
    def remove_item(self, user_id: str, item_id: str) -> None:
        item = self._repo.get_by_id(item_id)
        if not item or str(item.user_id) != str(user_id):
            raise CartItemNotFound(f"Cart item {item_id} not found.")
        self._repo.delete(item_id)
        logger.info("cart.item_removed", user_id=str(user_id), item_id=str(item_id))

    def clear(self, user_id: str) -> int:
        removed = self._repo.clear_for_user(user_id)
        logger.info("cart.cleared", user_id=str(user_id), removed=removed)
        return removed

"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- SKU must be unique.
- Price > 0, discount within [0, 100], stock >= 0 (validated by DTO).
- Products referenced by orders cannot be deleted (deactivate instead).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction
from django.db.models import ProtectedError

from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductInUse,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("name", "price", "discount", "description", "stock", "images", "is_active")


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing SKU uniqueness.

        Raises:
            ProductAlreadyExists: if the SKU is already taken.
        """
        log = logger.bind(sku=dto.sku)

        if self._repo.get_by_sku(dto.sku):
            log.warning("product.duplicate_sku")
            raise ProductAlreadyExists(f"SKU '{dto.sku}' already registered.")

        product = Product(
            sku=dto.sku,
            name=dto.name,
            price=dto.price,
            discount=dto.discount,
            description=dto.description,
            stock=dto.stock,
            images=list(dto.images),
            is_active=dto.is_active,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Overwrite the supplied fields, keeping the rest.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        for field in UPDATABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id))
        return product

    @transaction.atomic
    def set_active(self, id: str, is_active: bool) -> Product:
        """Flip only ``is_active``.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        product.is_active = is_active
        product.save(update_fields=["is_active"])
        logger.info("product.toggled", product_id=str(id), is_active=is_active)
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductInUse: if order items still reference it.
        """
        if not self._repo.get_by_id(id):
            raise ProductNotFound(f"Product {id} not found.")
        try:
            self._repo.delete(id)
        except ProtectedError as exc:
            raise ProductInUse(
                f"Product {id} is referenced by existing orders; deactivate it instead."
            ) from exc
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return a list of products, optionally filtered."""
        return self._repo.list(filters)

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

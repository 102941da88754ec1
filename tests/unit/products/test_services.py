"""Unit tests for ProductService.

Covers:
- create_product: happy path, duplicate SKU.
- update_product: partial update, not found.
- set_active: only ``is_active`` changes.
- delete_product: happy path, not found, referenced by orders.
- get_product / list_products: delegation to repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from django.db.models import ProtectedError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductAlreadyExists, ProductInUse, ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_sku.return_value = None
        mock_repo.save.side_effect = lambda p: p

        dto = CreateProductDTO(sku="sar-001", name="Kanjivaram Saree", price=Decimal("4999.00"))
        product = service.create_product(dto)

        assert product.sku == "SAR-001"
        assert product.name == "Kanjivaram Saree"
        assert product.price == Decimal("4999.00")
        mock_repo.save.assert_called_once()

    def test_duplicate_sku_raises(self, service, mock_repo, make_product):
        mock_repo.get_by_sku.return_value = make_product(sku="SAR-001")

        dto = CreateProductDTO(sku="SAR-001", name="Duplicate", price=Decimal("10.00"))
        with pytest.raises(ProductAlreadyExists, match="SKU"):
            service.create_product(dto)

        mock_repo.save.assert_not_called()

    def test_sets_optional_fields(self, service, mock_repo):
        mock_repo.get_by_sku.return_value = None
        mock_repo.save.side_effect = lambda p: p

        dto = CreateProductDTO(
            sku="DUP-002",
            name="Chiffon Dupatta",
            price=Decimal("799.00"),
            discount=Decimal("15"),
            description="Hand-dyed",
            stock=40,
            images=["dupattas/chiffon.jpg"],
        )
        product = service.create_product(dto)

        assert product.discount == Decimal("15")
        assert product.description == "Hand-dyed"
        assert product.stock == 40
        assert product.images == ["dupattas/chiffon.jpg"]


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_partial_update_keeps_other_fields(self, service, mock_repo, make_product):
        existing = make_product(name="Old Name", stock=7)
        mock_repo.get_by_id.return_value = existing
        mock_repo.save.side_effect = lambda p: p

        product = service.update_product(str(existing.id), UpdateProductDTO(name="New Name"))

        assert product.name == "New Name"
        assert product.stock == 7

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.update_product("missing", UpdateProductDTO(name="X"))
        mock_repo.save.assert_not_called()


# ===========================================================================
# set_active
# ===========================================================================


class TestSetActive:
    def test_only_is_active_changes(self, service, mock_repo, make_product):
        existing = make_product(name="Banarasi", stock=5)
        mock_repo.get_by_id.return_value = existing

        product = service.set_active(str(existing.id), False)

        product.refresh_from_db()
        assert product.is_active is False
        assert product.name == "Banarasi"
        assert product.stock == 5

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.set_active("missing", True)


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo, make_product):
        existing = make_product()
        mock_repo.get_by_id.return_value = existing

        service.delete_product(str(existing.id))

        mock_repo.delete.assert_called_once_with(str(existing.id))

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.delete_product("missing")
        mock_repo.delete.assert_not_called()

    def test_referenced_product_raises_in_use(self, service, mock_repo, make_product):
        existing = make_product()
        mock_repo.get_by_id.return_value = existing
        mock_repo.delete.side_effect = ProtectedError("protected", set())

        with pytest.raises(ProductInUse):
            service.delete_product(str(existing.id))


# ===========================================================================
# Queries
# ===========================================================================


class TestQueries:
    def test_get_product(self, service, mock_repo, make_product):
        existing = make_product()
        mock_repo.get_by_id.return_value = existing
        assert service.get_product(str(existing.id)) is existing

    def test_get_product_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.get_product("missing")

    def test_list_products_delegates_filters(self, service, mock_repo):
        mock_repo.list.return_value = []
        assert service.list_products({"is_active": True}) == []
        mock_repo.list.assert_called_once_with({"is_active": True})

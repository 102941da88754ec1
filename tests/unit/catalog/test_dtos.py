"""Unit tests for catalog DTOs."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.catalog.dtos import (
    CreateBlouseDesignDTO,
    CreateBlouseDesignVariantDTO,
    CreateBlouseModelDTO,
    CreateFabricDTO,
    CreateGarmentModelDTO,
    UpdateBlouseDesignDTO,
    UpdateBlouseDesignVariantDTO,
    UpdateBlouseModelDTO,
    UpdateFabricDTO,
    UpdateGarmentModelDTO,
)

pytestmark = pytest.mark.unit


class TestGarmentModelDTOs:
    def test_name_and_design_required(self):
        with pytest.raises(ValidationError, match="required"):
            CreateGarmentModelDTO(name=" ", design_name="X", price=Decimal("1"))

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-10")])
    def test_price_positive(self, price):
        with pytest.raises(ValidationError, match="Price"):
            CreateGarmentModelDTO(name="A", design_name="B", price=price)

    def test_discount_range(self):
        with pytest.raises(ValidationError, match="Discount"):
            UpdateGarmentModelDTO(discount=Decimal("101"))

    def test_update_leaves_everything_optional(self):
        assert UpdateGarmentModelDTO().model_dump(exclude_none=True) == {}

    @pytest.mark.parametrize("field", ["name", "design_name"])
    def test_update_rejects_blank_text(self, field):
        with pytest.raises(ValidationError, match="required"):
            UpdateGarmentModelDTO(**{field: "   "})

    def test_update_strips_text(self):
        assert UpdateGarmentModelDTO(name="  Anarkali ").name == "Anarkali"

    @pytest.mark.parametrize("price", ["123456789012.5", "10.555"])
    def test_price_must_fit_column(self, price):
        with pytest.raises(ValidationError):
            CreateGarmentModelDTO(name="A", design_name="B", price=price)

    def test_discount_must_fit_column(self):
        with pytest.raises(ValidationError):
            UpdateGarmentModelDTO(discount="12.345")


class TestBlouseModelDTOs:
    def test_images_from_newline_string(self):
        dto = CreateBlouseModelDTO(
            name="A", design_name="B", price=Decimal("1"), images=" a.jpg \n\nb.jpg"
        )
        assert dto.images == ["a.jpg", "b.jpg"]

    def test_images_list_kept(self):
        dto = UpdateBlouseModelDTO(images=["x.jpg"])
        assert dto.images == ["x.jpg"]

    def test_images_absent_on_update(self):
        assert UpdateBlouseModelDTO().images is None

    def test_negative_stitch_cost(self):
        with pytest.raises(ValidationError, match="Stitch cost"):
            CreateBlouseModelDTO(
                name="A", design_name="B", price=Decimal("1"), stitch_cost=Decimal("-1")
            )


class TestDesignDTOs:
    def test_design_type_default(self):
        assert CreateBlouseDesignDTO(name="Deep U").type == "FRONT"

    def test_unknown_design_type(self):
        with pytest.raises(ValidationError):
            CreateBlouseDesignDTO(name="Deep U", type="SIDE")

    def test_variant_price_required(self):
        with pytest.raises(ValidationError):
            CreateBlouseDesignVariantDTO(design_id=uuid4(), name="Plain")

    def test_update_design_rejects_blank_name(self):
        with pytest.raises(ValidationError, match="required"):
            UpdateBlouseDesignDTO(name="")

    def test_update_variant_rejects_blank_name(self):
        with pytest.raises(ValidationError, match="required"):
            UpdateBlouseDesignVariantDTO(name="  ")

    def test_stitch_cost_must_fit_column(self):
        with pytest.raises(ValidationError):
            CreateBlouseDesignDTO(name="Deep U", stitch_cost="99999999999")


class TestFabricDTOs:
    def test_defaults(self):
        dto = CreateFabricDTO(name="Raw Silk")
        assert dto.price_per_meter is None
        assert dto.is_active is True
        assert dto.color == ""

    def test_name_required(self):
        with pytest.raises(ValidationError, match="required"):
            CreateFabricDTO(name=" ")

    def test_negative_price_per_meter(self):
        with pytest.raises(ValidationError, match="Price per meter"):
            CreateFabricDTO(name="Raw Silk", price_per_meter=Decimal("-1"))

    def test_price_per_meter_must_fit_column(self):
        with pytest.raises(ValidationError):
            CreateFabricDTO(name="Raw Silk", price_per_meter="123456789012")

    def test_update_is_partial(self):
        assert UpdateFabricDTO(color="Teal").model_dump(exclude_none=True) == {"color": "Teal"}

    def test_update_rejects_blank_name(self):
        with pytest.raises(ValidationError, match="required"):
            UpdateFabricDTO(name="")

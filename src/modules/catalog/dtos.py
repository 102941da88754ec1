"""Catalog DTOs for the Service Layer.

Pydantic v2, immutable.  ``Create*`` DTOs carry required fields;
``Update*`` DTOs make every field optional so only supplied fields are
written.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.catalog.models import DesignType
from modules.core.pricing import MoneyInput, PercentInput


def _required_text(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Field is required.")
    return v.strip()


def _optional_text(v: Optional[str]) -> Optional[str]:
    """Omitted is fine; supplied text must not be blank."""
    if v is None:
        return None
    return _required_text(v)


def _positive_price(v: Optional[Decimal]) -> Optional[Decimal]:
    if v is not None and v <= 0:
        raise ValueError("Price must be greater than zero.")
    return v


def _discount_range(v: Optional[Decimal]) -> Optional[Decimal]:
    if v is not None and not (0 <= v <= 100):
        raise ValueError("Discount must be between 0 and 100.")
    return v


def _non_negative(v: Optional[Decimal]) -> Optional[Decimal]:
    if v is not None and v < 0:
        raise ValueError("Stitch cost cannot be negative.")
    return v


def _split_images(v: Union[str, List[str], None]) -> Optional[List[str]]:
    """Accept a list or a newline-separated string of image paths."""
    if v is None:
        return None
    if isinstance(v, str):
        v = v.split("\n")
    return [item.strip() for item in v if item and item.strip()]


class _PricedInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    @field_validator("price", check_fields=False)
    @classmethod
    def price_must_be_positive(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _positive_price(v)

    @field_validator("discount", check_fields=False)
    @classmethod
    def discount_in_range(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _discount_range(v)


# ---------------------------------------------------------------------------
# Garment models (blouse / lehenga / salwar-kameez)
# ---------------------------------------------------------------------------


class CreateGarmentModelDTO(_PricedInput):
    name: str
    design_name: str
    price: MoneyInput
    discount: Optional[PercentInput] = None
    description: str = ""
    image: str = ""
    is_active: bool = True

    @field_validator("name", "design_name")
    @classmethod
    def text_required(cls, v: str) -> str:
        return _required_text(v)


class UpdateGarmentModelDTO(_PricedInput):
    """All fields optional: only supplied fields will be updated."""

    name: Optional[str] = None
    design_name: Optional[str] = None
    price: Optional[MoneyInput] = None
    discount: Optional[PercentInput] = None
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "design_name")
    @classmethod
    def text_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _optional_text(v)


class CreateBlouseModelDTO(CreateGarmentModelDTO):
    stitch_cost: MoneyInput = Decimal("0.00")
    images: List[str] = []

    @field_validator("stitch_cost")
    @classmethod
    def stitch_cost_non_negative(cls, v: Decimal) -> Decimal:
        return _non_negative(v)

    @field_validator("images", mode="before")
    @classmethod
    def split_images(cls, v):
        return _split_images(v) or []


class UpdateBlouseModelDTO(UpdateGarmentModelDTO):
    stitch_cost: Optional[MoneyInput] = None
    images: Optional[List[str]] = None

    @field_validator("stitch_cost")
    @classmethod
    def stitch_cost_non_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _non_negative(v)

    @field_validator("images", mode="before")
    @classmethod
    def split_images(cls, v):
        return _split_images(v)


# ---------------------------------------------------------------------------
# Blouse designs and variants
# ---------------------------------------------------------------------------


class CreateBlouseDesignDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: DesignType = DesignType.FRONT
    image: str = ""
    description: str = ""
    stitch_cost: MoneyInput = Decimal("0.00")
    is_active: bool = True
    category_id: Optional[UUID] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text(v)

    @field_validator("stitch_cost")
    @classmethod
    def stitch_cost_non_negative(cls, v: Decimal) -> Decimal:
        return _non_negative(v)


class UpdateBlouseDesignDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    type: Optional[DesignType] = None
    image: Optional[str] = None
    description: Optional[str] = None
    stitch_cost: Optional[MoneyInput] = None
    is_active: Optional[bool] = None
    category_id: Optional[UUID] = None

    @field_validator("stitch_cost")
    @classmethod
    def stitch_cost_non_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _non_negative(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _optional_text(v)


class CreateBlouseDesignVariantDTO(_PricedInput):
    design_id: UUID
    name: str
    price: MoneyInput
    discount: Optional[PercentInput] = None
    description: str = ""
    image: str = ""
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text(v)


class UpdateBlouseDesignVariantDTO(_PricedInput):
    name: Optional[str] = None
    price: Optional[MoneyInput] = None
    discount: Optional[PercentInput] = None
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _optional_text(v)


# ---------------------------------------------------------------------------
# Fabrics
# ---------------------------------------------------------------------------


class CreateFabricDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""
    color: str = ""
    price_per_meter: Optional[MoneyInput] = None
    image: str = ""
    description: str = ""
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text(v)

    @field_validator("price_per_meter")
    @classmethod
    def price_non_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is not None and v < 0:
            raise ValueError("Price per meter cannot be negative.")
        return v


class UpdateFabricDTO(CreateFabricDTO):
    """All fields optional: only supplied fields will be updated."""

    name: Optional[str] = None
    type: Optional[str] = None
    color: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: Optional[str]) -> Optional[str]:
        return _optional_text(v)

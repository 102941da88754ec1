"""Tailoring catalog: garment models, blouse designs and fabrics.

Business rules implemented:
- ``final_price`` derived from ``price`` / ``discount`` on every save.
- Salwar-kameez model names are unique.
- Blouse designs default to the ``FRONT`` type.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel, PricedModel


class GarmentModel(PricedModel):
    """Abstract ready-to-stitch model shown in the custom-design flow."""

    name = models.CharField(max_length=255)
    design_name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    image = models.CharField(max_length=500, blank=True, default="")
    is_active = models.BooleanField(default=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} ({self.design_name})"


class BlouseModel(GarmentModel):
    stitch_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(0)],
    )
    images = models.JSONField(default=list, blank=True)

    class Meta(GarmentModel.Meta):
        db_table = "blouse_models"


class LehengaModel(GarmentModel):
    class Meta(GarmentModel.Meta):
        db_table = "lehenga_models"


class SalwarKameezModel(GarmentModel):
    name = models.CharField(max_length=255, unique=True)

    class Meta(GarmentModel.Meta):
        db_table = "salwar_kameez_models"


# ---------------------------------------------------------------------------
# Blouse designs
# ---------------------------------------------------------------------------


class DesignType(models.TextChoices):
    FRONT = "FRONT", "Front"
    BACK = "BACK", "Back"


class BlouseDesignCategory(BaseModel):
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default="")
    image = models.CharField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "blouse_design_categories"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class BlouseDesign(BaseModel):
    name = models.CharField(max_length=255)
    type = models.CharField(
        max_length=10,
        choices=DesignType.choices,
        default=DesignType.FRONT,
    )
    image = models.CharField(max_length=500, blank=True, default="")
    description = models.TextField(blank=True, default="")
    stitch_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(0)],
    )
    is_active = models.BooleanField(default=True)
    category = models.ForeignKey(
        BlouseDesignCategory,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="designs",
    )

    class Meta:
        db_table = "blouse_designs"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} [{self.type}]"


class BlouseDesignVariant(PricedModel):
    """Embellishment variant of a design (simple, embroidered, mirror work...)."""

    design = models.ForeignKey(
        BlouseDesign,
        on_delete=models.CASCADE,
        related_name="variants",
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    image = models.CharField(max_length=500, blank=True, default="")
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "blouse_design_variants"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.design.name} / {self.name}"


# ---------------------------------------------------------------------------
# Fabrics
# ---------------------------------------------------------------------------


class Fabric(BaseModel):
    name = models.CharField(max_length=255)
    type = models.CharField(max_length=100, blank=True, default="")
    color = models.CharField(max_length=100, blank=True, default="")
    price_per_meter = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    image = models.CharField(max_length=500, blank=True, default="")
    description = models.TextField(blank=True, default="")
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "fabrics"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.color})" if self.color else self.name

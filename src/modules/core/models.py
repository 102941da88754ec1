"""Base abstract models shared by every module.

Provides:
- ``BaseModel``: UUIDv7 primary key + created_at / updated_at timestamps.
- ``PricedModel``: adds ``price`` / ``discount`` and keeps the derived
  ``final_price`` in sync on every save.

Deletes are physical: none of the tailoring records are soft-deleted.
"""

from __future__ import annotations

from decimal import Decimal

import uuid6
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.pricing import compute_final_price

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------


class PricedModel(BaseModel):
    """Abstract catalog entry with a discount-derived ``final_price``.

    ``final_price`` is never written by callers: it is recomputed from
    ``price`` and ``discount`` whenever the row is saved, so the three
    columns cannot disagree.
    """

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    discount = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    final_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        editable=False,
    )

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        self.final_price = compute_final_price(self.price, self.discount)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "final_price" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["final_price"]
        super().save(*args, **kwargs)

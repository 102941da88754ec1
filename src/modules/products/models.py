"""Ready-made catalog product with stock control.

Business rules implemented:
- SKU is unique and normalised to uppercase.
- ``final_price`` is derived from ``price`` and ``discount`` on save.
- Stock cannot go negative (DB check constraint + service validation).
- Inactive products are hidden from the storefront and cannot be ordered.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import PricedModel

logger = structlog.get_logger(__name__)


class Product(PricedModel):
    """Product aggregate root.

    ``images`` holds an ordered list of asset paths relative to
    ``ASSETS_ROOT``; the first entry is the cover image.
    """

    sku = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    stock = models.PositiveIntegerField(default=0)
    images = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="products_active_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                check=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        if self.sku:
            self.sku = self.sku.strip().upper()
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=str(self.id),
                sku=self.sku,
                name=self.name,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.sku} - {self.name}"

"""Product DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "sku",
            "name",
            "description",
            "price",
            "discount",
            "final_price",
            "stock",
            "images",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

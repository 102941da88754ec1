"""Catalog DRF serializers (output only; input goes through the DTOs)."""

from __future__ import annotations

from rest_framework import serializers

from modules.catalog.models import (
    BlouseDesign,
    BlouseDesignCategory,
    BlouseDesignVariant,
    BlouseModel,
    Fabric,
    LehengaModel,
    SalwarKameezModel,
)

GARMENT_OUTPUT_FIELDS = [
    "id",
    "name",
    "design_name",
    "description",
    "price",
    "discount",
    "final_price",
    "image",
    "is_active",
    "created_at",
    "updated_at",
]


class BlouseModelSerializer(serializers.ModelSerializer):
    class Meta:
        model = BlouseModel
        fields = GARMENT_OUTPUT_FIELDS + ["stitch_cost", "images"]
        read_only_fields = fields


class LehengaModelSerializer(serializers.ModelSerializer):
    class Meta:
        model = LehengaModel
        fields = GARMENT_OUTPUT_FIELDS
        read_only_fields = fields


class SalwarKameezModelSerializer(serializers.ModelSerializer):
    class Meta:
        model = SalwarKameezModel
        fields = GARMENT_OUTPUT_FIELDS
        read_only_fields = fields


class BlouseDesignCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = BlouseDesignCategory
        fields = ["id", "name", "description", "image"]
        read_only_fields = fields


class BlouseDesignVariantSerializer(serializers.ModelSerializer):
    design_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = BlouseDesignVariant
        fields = [
            "id",
            "design_id",
            "name",
            "description",
            "image",
            "price",
            "discount",
            "final_price",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BlouseDesignSerializer(serializers.ModelSerializer):
    """Design with its category and the active variants nested."""

    category = BlouseDesignCategorySerializer(read_only=True)
    variants = serializers.SerializerMethodField()

    class Meta:
        model = BlouseDesign
        fields = [
            "id",
            "name",
            "type",
            "image",
            "description",
            "stitch_cost",
            "is_active",
            "category",
            "variants",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_variants(self, obj: BlouseDesign) -> list:
        variants = [v for v in obj.variants.all() if v.is_active]
        return BlouseDesignVariantSerializer(variants, many=True).data


class FabricSerializer(serializers.ModelSerializer):
    class Meta:
        model = Fabric
        fields = [
            "id",
            "name",
            "type",
            "color",
            "price_per_meter",
            "image",
            "description",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

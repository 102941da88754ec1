"""Tailoring serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.serializers import UserSummarySerializer
from modules.tailoring.constants import BLOUSE_FIELDS, LEHENGA_FIELDS, SALWAR_FIELDS
from modules.tailoring.models import (
    BlouseMeasurement,
    CustomOrder,
    CustomOrderStatusHistory,
    LehengaMeasurement,
    SalwarMeasurement,
)

SHEET_FIELDS = ["id", "user", "custom_order", "notes", "measured_by", "measurement_date"]
TIMESTAMPS = ["created_at", "updated_at"]


class CustomOrderSummarySerializer(serializers.ModelSerializer):
    """Custom-order block embedded in a measurement."""

    class Meta:
        model = CustomOrder
        fields = ["id", "status", "garment_type", "fabric", "fabric_color", "front_design", "back_design"]
        read_only_fields = fields


class BlouseMeasurementSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    custom_order = CustomOrderSummarySerializer(read_only=True)

    class Meta:
        model = BlouseMeasurement
        fields = SHEET_FIELDS + list(BLOUSE_FIELDS) + TIMESTAMPS
        read_only_fields = fields


class SalwarMeasurementSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    custom_order = CustomOrderSummarySerializer(read_only=True)

    class Meta:
        model = SalwarMeasurement
        fields = SHEET_FIELDS + list(SALWAR_FIELDS) + TIMESTAMPS
        read_only_fields = fields


class LehengaMeasurementSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    custom_order = CustomOrderSummarySerializer(read_only=True)

    class Meta:
        model = LehengaMeasurement
        fields = SHEET_FIELDS + list(LEHENGA_FIELDS) + TIMESTAMPS
        read_only_fields = fields


class CustomOrderSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomOrder
        fields = [
            "id",
            "garment_type",
            "model_name",
            "fabric",
            "fabric_color",
            "front_design",
            "back_design",
            "price",
            "notes",
            "appointment_date",
            "appointment_type",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdminCustomOrderSerializer(CustomOrderSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta(CustomOrderSerializer.Meta):
        fields = CustomOrderSerializer.Meta.fields + ["user"]
        read_only_fields = fields


LINKED_FIELDS = ["id", "notes", "measured_by", "measurement_date"]


class LinkedBlouseSerializer(serializers.ModelSerializer):
    class Meta:
        model = BlouseMeasurement
        fields = LINKED_FIELDS + list(BLOUSE_FIELDS)
        read_only_fields = fields


class LinkedSalwarSerializer(serializers.ModelSerializer):
    class Meta:
        model = SalwarMeasurement
        fields = LINKED_FIELDS + list(SALWAR_FIELDS)
        read_only_fields = fields


class LinkedLehengaSerializer(serializers.ModelSerializer):
    class Meta:
        model = LehengaMeasurement
        fields = LINKED_FIELDS + list(LEHENGA_FIELDS)
        read_only_fields = fields


class CustomOrderStatusHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomOrderStatusHistory
        fields = ["id", "old_status", "new_status", "user_id", "notes", "created_at"]
        read_only_fields = fields


class AdminCustomOrderDetailSerializer(AdminCustomOrderSerializer):
    """Admin detail view: the order, its status history and every linked sheet."""

    blouse_measurements = LinkedBlouseSerializer(many=True, read_only=True)
    salwar_measurements = LinkedSalwarSerializer(many=True, read_only=True)
    lehenga_measurements = LinkedLehengaSerializer(many=True, read_only=True)
    status_history = CustomOrderStatusHistorySerializer(many=True, read_only=True)

    class Meta(AdminCustomOrderSerializer.Meta):
        fields = AdminCustomOrderSerializer.Meta.fields + [
            "blouse_measurements",
            "salwar_measurements",
            "lehenga_measurements",
            "status_history",
        ]
        read_only_fields = fields

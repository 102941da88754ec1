"""User DRF serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.models import User


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "name",
            "phone",
            "city",
            "state",
            "role",
            "is_active",
            "created_at",
        ]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user block embedded in orders and measurements."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "phone"]
        read_only_fields = fields


class AdminUserListSerializer(serializers.ModelSerializer):
    order_count = serializers.IntegerField(read_only=True)
    custom_order_count = serializers.IntegerField(read_only=True)
    measurement_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "city",
            "state",
            "is_active",
            "created_at",
            "order_count",
            "custom_order_count",
            "measurement_count",
        ]
        read_only_fields = fields

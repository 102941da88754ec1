"""Cart serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.cart.models import CartItem
from modules.products.serializers import ProductSerializer


class CartItemSerializer(serializers.ModelSerializer):
    product = ProductSerializer(read_only=True)
    line_total = serializers.SerializerMethodField()

    class Meta:
        model = CartItem
        fields = ["id", "product", "quantity", "size", "color", "line_total", "created_at"]
        read_only_fields = fields

    def get_line_total(self, obj: CartItem) -> str:
        return str(obj.product.final_price * obj.quantity)

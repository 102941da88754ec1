"""Django ORM implementation of the cart repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.core.exceptions import ValidationError

from modules.cart.models import CartItem
from modules.cart.repositories.interfaces import ICartRepository


class CartDjangoRepository(ICartRepository):
    def get_by_id(self, id: str) -> Optional[CartItem]:
        try:
            return CartItem.objects.select_related("product").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[CartItem]:
        queryset = CartItem.objects.select_related("product")
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def list_for_user(self, user_id: str) -> List[CartItem]:
        return self.list({"user_id": user_id})

    def find_line(
        self, user_id: str, product_id: str, size: str, color: str
    ) -> Optional[CartItem]:
        return CartItem.objects.filter(
            user_id=user_id, product_id=product_id, size=size, color=color
        ).first()

    def save(self, entity: CartItem) -> CartItem:
        entity.save()
        return entity

    def delete(self, id: str) -> bool:
        item = self.get_by_id(id)
        if not item:
            return False
        item.delete()
        return True

    def clear_for_user(self, user_id: str) -> int:
        deleted, _ = CartItem.objects.filter(user_id=user_id).delete()
        return deleted

"""Django ORM implementation of the User repository."""

from __future__ import annotations

from typing import List, Optional

from django.core.exceptions import ValidationError
from django.db.models import Count, Q

from modules.accounts.models import User, UserRole
from modules.accounts.repositories.interfaces import IUserRepository


class UserDjangoRepository(IUserRepository):
    def get_by_id(self, id: str) -> Optional[User]:
        """Returns ``None`` for non-existent or malformed IDs."""
        try:
            return User.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list_customers(self, search: str = "") -> List[User]:
        queryset = User.objects.filter(role=UserRole.USER)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search)
                | Q(email__icontains=search)
                | Q(phone__icontains=search)
            )
        queryset = queryset.annotate(
            order_count=Count("orders", distinct=True),
            custom_order_count=Count("custom_orders", distinct=True),
            measurement_count=Count("blouse_measurements", distinct=True),
        )
        return list(queryset.order_by("-created_at"))

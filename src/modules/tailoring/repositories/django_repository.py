"""Django ORM implementations of the tailoring repositories.

Look-ups return ``None`` for missing or malformed IDs (Null Object).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.tailoring.models import CustomOrder, CustomOrderStatusHistory
from modules.tailoring.repositories.interfaces import (
    ICustomOrderRepository,
    IMeasurementRepository,
)

logger = structlog.get_logger(__name__)


class CustomOrderDjangoRepository(ICustomOrderRepository):
    def _queryset(self):
        return CustomOrder.objects.select_related("user")

    def get_by_id(self, id: str) -> Optional[CustomOrder]:
        try:
            return self._queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_owned(self, id: str, user_id: str) -> Optional[CustomOrder]:
        try:
            return self._queryset().filter(id=id, user_id=user_id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[CustomOrder]:
        try:
            return CustomOrder.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[CustomOrder]:
        queryset = self._queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def list_for_user(self, user_id: str) -> List[CustomOrder]:
        return self.list({"user_id": user_id})

    def add_history(
        self,
        custom_order_id: Any,
        old_status: str,
        new_status: str,
        user_id: Any = None,
        notes: str = "",
    ) -> CustomOrderStatusHistory:
        history = CustomOrderStatusHistory.objects.create(
            custom_order_id=custom_order_id,
            old_status=old_status,
            new_status=new_status,
            user_id=user_id,
            notes=notes,
        )
        logger.info(
            "custom_order.history_added",
            custom_order_id=str(custom_order_id),
            old_status=old_status,
            new_status=new_status,
        )
        return history

    @transaction.atomic
    def save(self, entity: CustomOrder) -> CustomOrder:
        entity.save()
        logger.info("custom_order.saved", custom_order_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        order = self.get_by_id(id)
        if not order:
            return False
        order.delete()
        return True


class MeasurementDjangoRepository(IMeasurementRepository):
    """Repository bound to one measurement model class."""

    def __init__(self, model: Type[models.Model]) -> None:
        self.model = model

    def _queryset(self):
        return self.model.objects.select_related("user", "custom_order")

    def get_by_id(self, id: str) -> Optional[Any]:
        try:
            return self._queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        queryset = self._queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Any) -> Any:
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        measurement = self.get_by_id(id)
        if not measurement:
            return False
        measurement.delete()
        return True

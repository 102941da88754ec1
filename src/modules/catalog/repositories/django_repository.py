"""Django ORM implementation of the catalog repository.

Look-ups follow the Null Object pattern: ``None`` for missing or malformed
IDs, the Service Layer decides what a miss means.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.catalog.repositories.interfaces import ICatalogRepository

logger = structlog.get_logger(__name__)


class CatalogDjangoRepository(ICatalogRepository):
    """Repository bound to a single catalog model class."""

    def __init__(self, model: Type[models.Model]) -> None:
        self.model = model
        self._label = model._meta.model_name

    def get_by_id(self, id: str) -> Optional[Any]:
        try:
            return self.model.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_name(self, name: str) -> Optional[Any]:
        return self.model.objects.filter(name__iexact=name.strip()).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        queryset = self.model.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Any) -> Any:
        entity.save()
        logger.info("catalog.saved", model=self._label, entry_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        entity = self.get_by_id(id)
        if not entity:
            return False
        entity.delete()
        logger.info("catalog.deleted", model=self._label, entry_id=str(id))
        return True

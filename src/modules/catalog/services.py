"""Catalog service layer.

``CatalogService`` implements create / update / toggle / delete for every
catalog table; the concrete table, its writable fields and whether the name
must be unique are constructor arguments.  Blouse designs and their variants
add reference checks on top.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Type

import structlog
from django.db import models, transaction

from modules.catalog.exceptions import CatalogEntryAlreadyExists, CatalogEntryNotFound
from modules.catalog.models import (
    BlouseDesign,
    BlouseDesignCategory,
    BlouseDesignVariant,
    BlouseModel,
    Fabric,
    LehengaModel,
    SalwarKameezModel,
)
from modules.catalog.repositories.django_repository import CatalogDjangoRepository

if TYPE_CHECKING:
    from pydantic import BaseModel as DTO

    from modules.catalog.repositories.interfaces import ICatalogRepository

logger = structlog.get_logger(__name__)

GARMENT_FIELDS = (
    "name",
    "design_name",
    "price",
    "discount",
    "description",
    "image",
    "is_active",
)
BLOUSE_MODEL_FIELDS = GARMENT_FIELDS + ("stitch_cost", "images")
DESIGN_FIELDS = ("name", "type", "image", "description", "stitch_cost", "is_active")
VARIANT_FIELDS = ("name", "price", "discount", "description", "image", "is_active")
FABRIC_FIELDS = (
    "name",
    "type",
    "color",
    "price_per_meter",
    "image",
    "description",
    "is_active",
)


class CatalogService:
    def __init__(
        self,
        repository: ICatalogRepository,
        model: Type[models.Model],
        fields: Iterable[str],
        unique_name: bool = False,
    ) -> None:
        self._repo = repository
        self._model = model
        self._fields = tuple(fields)
        self._unique_name = unique_name
        self._label = model._meta.verbose_name.capitalize()

    def _not_found(self, id: str) -> CatalogEntryNotFound:
        return CatalogEntryNotFound(f"{self._label} {id} not found.")

    def _ensure_name_available(self, name: str, exclude_id: Any = None) -> None:
        if not self._unique_name:
            return
        existing = self._repo.get_by_name(name)
        if existing and existing.id != exclude_id:
            logger.warning("catalog.duplicate_name", model=self._label, name=name)
            raise CatalogEntryAlreadyExists(f"{self._label} '{name}' already exists.")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: DTO) -> Any:
        self._ensure_name_available(dto.name)
        entity = self._model(**{field: getattr(dto, field) for field in self._fields})
        entity = self._repo.save(entity)
        logger.info("catalog.created", model=self._label, entry_id=str(entity.id))
        return entity

    @transaction.atomic
    def update(self, id: str, dto: DTO) -> Any:
        """Overwrite the supplied fields, keeping the rest.

        Raises:
            CatalogEntryNotFound: if the entry does not exist.
            CatalogEntryAlreadyExists: if a unique name is taken by another row.
        """
        entity = self.get(id)
        if dto.name is not None:
            self._ensure_name_available(dto.name, exclude_id=entity.id)

        for field in self._fields:
            value = getattr(dto, field, None)
            if value is not None:
                setattr(entity, field, value)
        self._apply_references(entity, dto)

        entity = self._repo.save(entity)
        logger.info("catalog.updated", model=self._label, entry_id=str(id))
        return entity

    @transaction.atomic
    def set_active(self, id: str, is_active: bool) -> Any:
        entity = self.get(id)
        entity.is_active = is_active
        entity.save(update_fields=["is_active"])
        logger.info("catalog.toggled", model=self._label, entry_id=str(id), is_active=is_active)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> None:
        if not self._repo.delete(id):
            raise self._not_found(id)
        logger.info("catalog.removed", model=self._label, entry_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, id: str) -> Any:
        entity = self._repo.get_by_id(id)
        if not entity:
            raise self._not_found(id)
        return entity

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        return self._repo.list(filters)

    def _apply_references(self, entity: Any, dto: DTO) -> None:
        """Hook for subclasses that resolve foreign keys from the DTO."""


class BlouseDesignService(CatalogService):
    """Designs may point at an existing category."""

    def __init__(
        self,
        repository: ICatalogRepository,
        category_repository: ICatalogRepository,
    ) -> None:
        super().__init__(repository, BlouseDesign, DESIGN_FIELDS)
        self._categories = category_repository

    def _resolve_category(self, category_id: Any) -> Optional[BlouseDesignCategory]:
        if category_id is None:
            return None
        category = self._categories.get_by_id(str(category_id))
        if not category:
            raise CatalogEntryNotFound(f"Blouse design category {category_id} not found.")
        return category

    @transaction.atomic
    def create(self, dto: DTO) -> BlouseDesign:
        category = self._resolve_category(dto.category_id)
        design = BlouseDesign(
            category=category,
            **{field: getattr(dto, field) for field in self._fields},
        )
        design = self._repo.save(design)
        logger.info("catalog.created", model=self._label, entry_id=str(design.id))
        return design

    def _apply_references(self, entity: Any, dto: DTO) -> None:
        if dto.category_id is not None:
            entity.category = self._resolve_category(dto.category_id)


class BlouseDesignVariantService(CatalogService):
    """Variants are always addressed through their parent design."""

    def __init__(
        self,
        repository: ICatalogRepository,
        design_repository: ICatalogRepository,
    ) -> None:
        super().__init__(repository, BlouseDesignVariant, VARIANT_FIELDS)
        self._designs = design_repository

    def _get_design(self, design_id: Any) -> BlouseDesign:
        design = self._designs.get_by_id(str(design_id))
        if not design:
            raise CatalogEntryNotFound(f"Blouse design {design_id} not found.")
        return design

    @transaction.atomic
    def create(self, dto: DTO) -> BlouseDesignVariant:
        design = self._get_design(dto.design_id)
        variant = BlouseDesignVariant(
            design=design,
            **{field: getattr(dto, field) for field in self._fields},
        )
        variant = self._repo.save(variant)
        logger.info(
            "catalog.variant_created",
            design_id=str(design.id),
            variant_id=str(variant.id),
        )
        return variant

    def list_for_design(self, design_id: str) -> List[BlouseDesignVariant]:
        design = self._get_design(design_id)
        return self._repo.list({"design_id": design.id})

    def get_for_design(self, design_id: str, id: str) -> BlouseDesignVariant:
        variant = self.get(id)
        if str(variant.design_id) != str(design_id):
            raise self._not_found(id)
        return variant


# ---------------------------------------------------------------------------
# Factories used by the views
# ---------------------------------------------------------------------------


def blouse_model_service() -> CatalogService:
    return CatalogService(CatalogDjangoRepository(BlouseModel), BlouseModel, BLOUSE_MODEL_FIELDS)


def lehenga_model_service() -> CatalogService:
    return CatalogService(CatalogDjangoRepository(LehengaModel), LehengaModel, GARMENT_FIELDS)


def salwar_kameez_model_service() -> CatalogService:
    return CatalogService(
        CatalogDjangoRepository(SalwarKameezModel),
        SalwarKameezModel,
        GARMENT_FIELDS,
        unique_name=True,
    )


def blouse_design_service() -> BlouseDesignService:
    return BlouseDesignService(
        CatalogDjangoRepository(BlouseDesign),
        CatalogDjangoRepository(BlouseDesignCategory),
    )


def blouse_design_variant_service() -> BlouseDesignVariantService:
    return BlouseDesignVariantService(
        CatalogDjangoRepository(BlouseDesignVariant),
        CatalogDjangoRepository(BlouseDesign),
    )


def fabric_service() -> CatalogService:
    return CatalogService(CatalogDjangoRepository(Fabric), Fabric, FABRIC_FIELDS)

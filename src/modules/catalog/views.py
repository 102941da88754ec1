"""Catalog API views.

Admin viewsets share one CRUD implementation (``AdminCatalogViewSet``);
subclasses only name their model, DTOs, serializer and service factory.
Public viewsets expose the active entries, filtered and paginated.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Type

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import BaseModel as DTO
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.mixins import ListModelMixin, RetrieveModelMixin
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.catalog import services
from modules.catalog.dtos import (
    CreateBlouseDesignDTO,
    CreateBlouseDesignVariantDTO,
    CreateBlouseModelDTO,
    CreateFabricDTO,
    CreateGarmentModelDTO,
    UpdateBlouseDesignDTO,
    UpdateBlouseDesignVariantDTO,
    UpdateBlouseModelDTO,
    UpdateFabricDTO,
    UpdateGarmentModelDTO,
)
from modules.catalog.exceptions import CatalogEntryAlreadyExists, CatalogEntryNotFound
from modules.catalog.filters import (
    BlouseDesignFilter,
    BlouseModelFilter,
    FabricFilter,
    LehengaModelFilter,
    SalwarKameezModelFilter,
)
from modules.catalog.models import (
    BlouseDesign,
    BlouseDesignVariant,
    BlouseModel,
    Fabric,
    LehengaModel,
    SalwarKameezModel,
)
from modules.catalog.serializers import (
    BlouseDesignSerializer,
    BlouseDesignVariantSerializer,
    BlouseModelSerializer,
    FabricSerializer,
    LehengaModelSerializer,
    SalwarKameezModelSerializer,
)
from modules.core.mixins import ToggleActiveMixin
from modules.core.pagination import StandardResultsSetPagination
from modules.core.permissions import IsAdmin

# Optional numeric inputs where an empty form value means "not supplied".
_BLANK_AS_MISSING = {"discount", "price", "stitch_cost", "price_per_meter", "category_id"}


def _payload(data: Any, dto_class: Type[DTO]) -> Dict[str, Any]:
    """Pick the DTO's fields out of the request body."""
    payload = {}
    for field in dto_class.model_fields:
        if field not in data:
            continue
        value = data.get(field)
        if field in _BLANK_AS_MISSING and value in ("", None):
            continue
        payload[field] = value
    return payload


class AdminCatalogViewSet(ToggleActiveMixin, ListModelMixin, GenericViewSet):
    """Back-office CRUD shared by every catalog table."""

    permission_classes = [IsAdmin]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    pagination_class = StandardResultsSetPagination
    search_fields = ["name", "design_name", "description"]
    ordering_fields = ["name", "final_price", "created_at"]
    ordering = ["-created_at"]
    not_found_exceptions = (CatalogEntryNotFound,)
    not_found_message = "Catalog entry not found."

    create_dto: Type[DTO]
    update_dto: Type[DTO]
    service_factory: Callable[[], services.CatalogService]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = type(self).service_factory()

    def _not_found(self) -> Response:
        return Response({"detail": self.not_found_message}, status=status.HTTP_404_NOT_FOUND)

    def _build_dto(self, dto_class: Type[DTO], request: Request) -> DTO:
        return dto_class(**_payload(request.data, dto_class))

    def retrieve(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        try:
            entry = self._service.get(pk)
        except CatalogEntryNotFound:
            return self._not_found()
        return Response(self.get_serializer_class()(entry).data)

    def create(self, request: Request, **kwargs) -> Response:
        try:
            dto = self._build_dto(self.create_dto, request)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            entry = self._service.create(dto)
        except CatalogEntryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except CatalogEntryAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(
            self.get_serializer_class()(entry).data,
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        try:
            dto = self._build_dto(self.update_dto, request)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            entry = self._service.update(pk, dto)
        except CatalogEntryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except CatalogEntryAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(self.get_serializer_class()(entry).data)

    def partial_update(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        return self.update(request, pk, **kwargs)

    def destroy(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        try:
            self._service.delete(pk)
        except CatalogEntryNotFound:
            return self._not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminBlouseModelViewSet(AdminCatalogViewSet):
    """/api/v1/admin/blouse-models/"""

    queryset = BlouseModel.objects.all()
    serializer_class = BlouseModelSerializer
    filterset_class = BlouseModelFilter
    create_dto = CreateBlouseModelDTO
    update_dto = UpdateBlouseModelDTO
    service_factory = staticmethod(services.blouse_model_service)
    not_found_message = "Blouse model not found."


class AdminLehengaModelViewSet(AdminCatalogViewSet):
    """/api/v1/admin/lehenga-models/"""

    queryset = LehengaModel.objects.all()
    serializer_class = LehengaModelSerializer
    filterset_class = LehengaModelFilter
    create_dto = CreateGarmentModelDTO
    update_dto = UpdateGarmentModelDTO
    service_factory = staticmethod(services.lehenga_model_service)
    not_found_message = "Lehenga model not found."


class AdminSalwarKameezModelViewSet(AdminCatalogViewSet):
    """/api/v1/admin/salwar-kameez-models/"""

    queryset = SalwarKameezModel.objects.all()
    serializer_class = SalwarKameezModelSerializer
    filterset_class = SalwarKameezModelFilter
    create_dto = CreateGarmentModelDTO
    update_dto = UpdateGarmentModelDTO
    service_factory = staticmethod(services.salwar_kameez_model_service)
    not_found_message = "Salwar kameez model not found."


class AdminBlouseDesignViewSet(AdminCatalogViewSet):
    """/api/v1/admin/blouse-designs/"""

    queryset = BlouseDesign.objects.select_related("category").prefetch_related("variants")
    serializer_class = BlouseDesignSerializer
    filterset_class = BlouseDesignFilter
    search_fields = ["name", "description"]
    ordering_fields = ["name", "stitch_cost", "created_at"]
    create_dto = CreateBlouseDesignDTO
    update_dto = UpdateBlouseDesignDTO
    service_factory = staticmethod(services.blouse_design_service)
    not_found_message = "Blouse design not found."


class AdminFabricViewSet(AdminCatalogViewSet):
    """/api/v1/admin/fabrics/"""

    queryset = Fabric.objects.all()
    serializer_class = FabricSerializer
    filterset_class = FabricFilter
    search_fields = ["name", "type", "color", "description"]
    ordering_fields = ["name", "price_per_meter", "created_at"]
    create_dto = CreateFabricDTO
    update_dto = UpdateFabricDTO
    service_factory = staticmethod(services.fabric_service)
    not_found_message = "Fabric not found."


class AdminBlouseDesignVariantViewSet(AdminCatalogViewSet):
    """/api/v1/admin/blouse-designs/{design_pk}/variants/

    Every look-up is scoped to the design in the URL.
    """

    queryset = BlouseDesignVariant.objects.none()
    serializer_class = BlouseDesignVariantSerializer
    filter_backends: list = []
    pagination_class = None
    create_dto = CreateBlouseDesignVariantDTO
    update_dto = UpdateBlouseDesignVariantDTO
    service_factory = staticmethod(services.blouse_design_variant_service)
    not_found_message = "Blouse design variant not found."

    def _build_dto(self, dto_class: Type[DTO], request: Request) -> DTO:
        payload = _payload(request.data, dto_class)
        if "design_id" in dto_class.model_fields:
            payload["design_id"] = self.kwargs["design_pk"]
        return dto_class(**payload)

    def _check_scope(self, pk: str) -> None:
        self._service.get_for_design(self.kwargs["design_pk"], pk)

    def perform_toggle(self, pk: str, is_active: bool) -> Any:
        self._check_scope(pk)
        return self._service.set_active(pk, is_active)

    def list(self, request: Request, **kwargs) -> Response:
        try:
            variants = self._service.list_for_design(self.kwargs["design_pk"])
        except CatalogEntryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(BlouseDesignVariantSerializer(variants, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        try:
            variant = self._service.get_for_design(self.kwargs["design_pk"], pk)
        except CatalogEntryNotFound:
            return self._not_found()
        return Response(BlouseDesignVariantSerializer(variant).data)

    def update(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        try:
            self._check_scope(pk)
        except CatalogEntryNotFound:
            return self._not_found()
        return super().update(request, pk, **kwargs)

    def destroy(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        try:
            self._check_scope(pk)
        except CatalogEntryNotFound:
            return self._not_found()
        return super().destroy(request, pk, **kwargs)


# ---------------------------------------------------------------------------
# Public storefront
# ---------------------------------------------------------------------------


class PublicCatalogViewSet(ListModelMixin, RetrieveModelMixin, GenericViewSet):
    """Active entries only; inactive ones answer 404 on retrieve."""

    permission_classes = [AllowAny]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    pagination_class = StandardResultsSetPagination
    search_fields = ["name", "design_name", "description"]
    ordering_fields = ["name", "final_price", "created_at"]
    ordering = ["-created_at"]


class BlouseModelViewSet(PublicCatalogViewSet):
    queryset = BlouseModel.objects.filter(is_active=True)
    serializer_class = BlouseModelSerializer
    filterset_class = BlouseModelFilter


class LehengaModelViewSet(PublicCatalogViewSet):
    queryset = LehengaModel.objects.filter(is_active=True)
    serializer_class = LehengaModelSerializer
    filterset_class = LehengaModelFilter


class SalwarKameezModelViewSet(PublicCatalogViewSet):
    queryset = SalwarKameezModel.objects.filter(is_active=True)
    serializer_class = SalwarKameezModelSerializer
    filterset_class = SalwarKameezModelFilter


class BlouseDesignViewSet(PublicCatalogViewSet):
    queryset = (
        BlouseDesign.objects.filter(is_active=True)
        .select_related("category")
        .prefetch_related("variants")
    )
    serializer_class = BlouseDesignSerializer
    filterset_class = BlouseDesignFilter
    search_fields = ["name", "description"]
    ordering_fields = ["name", "stitch_cost", "created_at"]


class FabricViewSet(PublicCatalogViewSet):
    """The whole active fabric list, alphabetical."""

    queryset = Fabric.objects.filter(is_active=True)
    serializer_class = FabricSerializer
    filterset_class = FabricFilter
    pagination_class = None
    search_fields = ["name", "type", "color", "description"]
    ordering_fields = ["name", "price_per_meter"]
    ordering = ["name"]

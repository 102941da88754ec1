"""Tailoring API views.

Customers place and cancel their own custom orders; admins manage every
custom order and record measurement sheets.  Domain exceptions are
translated to HTTP status codes here.
"""

from __future__ import annotations

from typing import Any, Dict, Type

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.accounts.exceptions import InactiveUser, UserNotFound
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.catalog.models import BlouseModel, LehengaModel, SalwarKameezModel
from modules.catalog.repositories.django_repository import CatalogDjangoRepository
from modules.core.pagination import StandardResultsSetPagination
from modules.core.permissions import IsAdmin
from modules.orders.dtos import UpdateOrderStatusDTO
from modules.tailoring.constants import (
    BLOUSE_FIELDS,
    LEHENGA_FIELDS,
    SALWAR_FIELDS,
    GarmentType,
)
from modules.tailoring.dtos import (
    BlouseMeasurementDTO,
    CreateCustomOrderDTO,
    LehengaMeasurementDTO,
    MeasurementDTO,
    SalwarMeasurementDTO,
)
from modules.tailoring.exceptions import (
    CustomOrderNotFound,
    CustomOrderNotOwned,
    GarmentModelNotFound,
    InvalidCustomOrderStatus,
    MeasurementNotFound,
)
from modules.tailoring.filters import (
    BlouseMeasurementFilter,
    CustomOrderFilter,
    LehengaMeasurementFilter,
    SalwarMeasurementFilter,
)
from modules.tailoring.models import (
    BlouseMeasurement,
    CustomOrder,
    LehengaMeasurement,
    SalwarMeasurement,
)
from modules.tailoring.repositories.django_repository import (
    CustomOrderDjangoRepository,
    MeasurementDjangoRepository,
)
from modules.tailoring.serializers import (
    AdminCustomOrderDetailSerializer,
    AdminCustomOrderSerializer,
    BlouseMeasurementSerializer,
    CustomOrderSerializer,
    LehengaMeasurementSerializer,
    SalwarMeasurementSerializer,
)
from modules.tailoring.services import CustomOrderService, MeasurementService


def _custom_order_service() -> CustomOrderService:
    return CustomOrderService(
        repository=CustomOrderDjangoRepository(),
        user_repository=UserDjangoRepository(),
        model_repositories={
            GarmentType.BLOUSE: CatalogDjangoRepository(BlouseModel),
            GarmentType.SALWAR_KAMEEZ: CatalogDjangoRepository(SalwarKameezModel),
            GarmentType.LEHENGA: CatalogDjangoRepository(LehengaModel),
        },
    )


def _custom_order_not_found() -> Response:
    return Response({"detail": "Custom order not found."}, status=status.HTTP_404_NOT_FOUND)


class _CustomOrderStatusMixin:
    def _change_status(self, request: Request, pk: str | None) -> Response:
        try:
            dto = UpdateOrderStatusDTO(
                status=request.data.get("status") or "",
                notes=request.data.get("notes") or "",
            )
        except (PydanticValidationError, ValueError):
            return Response(
                {"detail": "Field 'status' is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            custom_order = self._service.update_status(
                pk, dto.status, actor=request.user, notes=dto.notes
            )
        except CustomOrderNotFound:
            return _custom_order_not_found()
        except InvalidCustomOrderStatus as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self.get_serializer_class()(custom_order).data)


# ---------------------------------------------------------------------------
# Customer custom orders
# ---------------------------------------------------------------------------


class CustomOrderViewSet(_CustomOrderStatusMixin, GenericViewSet):
    """/api/v1/custom-orders/: the authenticated customer's own orders."""

    permission_classes = [IsAuthenticated]
    queryset = CustomOrder.objects.none()
    serializer_class = CustomOrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _custom_order_service()

    def list(self, request: Request) -> Response:
        custom_orders = self._service.list_for_user(request.user.id)
        return Response(CustomOrderSerializer(custom_orders, many=True).data)

    def create(self, request: Request) -> Response:
        data = request.data
        try:
            dto = CreateCustomOrderDTO(
                user_id=request.user.id,
                garment_type=data.get("garment_type") or GarmentType.BLOUSE,
                model_id=data.get("model_id"),
                fabric=data.get("fabric") or "",
                fabric_color=data.get("fabric_color") or "",
                front_design=data.get("front_design") or "",
                back_design=data.get("back_design") or "",
                notes=data.get("notes") or "",
                appointment_date=data.get("appointment_date"),
                appointment_type=data.get("appointment_type"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            custom_order = self._service.create(dto)
        except (UserNotFound, GarmentModelNotFound) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InactiveUser as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            CustomOrderSerializer(custom_order).data,
            status=status.HTTP_201_CREATED,
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            custom_order = self._service.get(pk, user_id=request.user.id)
        except CustomOrderNotFound:
            return _custom_order_not_found()
        return Response(CustomOrderSerializer(custom_order).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/custom-orders/{pk}/: cancel a pending/confirmed order."""
        return self._change_status(request, pk)


# ---------------------------------------------------------------------------
# Admin custom orders
# ---------------------------------------------------------------------------


class AdminCustomOrderViewSet(_CustomOrderStatusMixin, ListModelMixin, GenericViewSet):
    permission_classes = [IsAdmin]
    queryset = CustomOrder.objects.select_related("user")
    serializer_class = AdminCustomOrderSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = CustomOrderFilter
    ordering_fields = ["created_at", "price", "status", "appointment_date"]
    ordering = ["-created_at"]
    pagination_class = StandardResultsSetPagination

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _custom_order_service()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            custom_order = self._service.get(pk)
        except CustomOrderNotFound:
            return _custom_order_not_found()
        return Response(AdminCustomOrderDetailSerializer(custom_order).data)

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/admin/custom-orders/{pk}/status/"""
        return self._change_status(request, pk)


# ---------------------------------------------------------------------------
# Admin measurement sheets
# ---------------------------------------------------------------------------


class AdminMeasurementViewSet(ListModelMixin, GenericViewSet):
    """CRUD shared by the three measurement sheets."""

    permission_classes = [IsAdmin]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ["measurement_date", "created_at"]
    ordering = ["-measurement_date"]
    pagination_class = StandardResultsSetPagination

    dto_class: Type[MeasurementDTO]
    value_fields: tuple

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        model = self.queryset.model
        self._service = MeasurementService(
            repository=MeasurementDjangoRepository(model),
            model=model,
            fields=self.value_fields,
            custom_order_repository=CustomOrderDjangoRepository(),
            user_repository=UserDjangoRepository(),
        )

    def _payload(self, data: Any) -> Dict[str, Any]:
        return {f: data.get(f) for f in self.dto_class.model_fields if f in data}

    def _error(self, exc: Exception) -> Response:
        if isinstance(exc, (UserNotFound, CustomOrderNotOwned, MeasurementNotFound)):
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            measurement = self._service.get(pk)
        except MeasurementNotFound as exc:
            return self._error(exc)
        return Response(self.get_serializer_class()(measurement).data)

    def create(self, request: Request) -> Response:
        try:
            dto = self.dto_class(**self._payload(request.data))
            measurement = self._service.create(
                dto, measured_by=request.user.name or "Admin"
            )
        except (PydanticValidationError, ValueError) as exc:
            return self._error(exc)
        except (UserNotFound, CustomOrderNotOwned) as exc:
            return self._error(exc)
        return Response(
            self.get_serializer_class()(measurement).data,
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        try:
            dto = self.dto_class(**self._payload(request.data))
            measurement = self._service.update(pk, dto)
        except (PydanticValidationError, ValueError) as exc:
            return self._error(exc)
        except (MeasurementNotFound, UserNotFound, CustomOrderNotOwned) as exc:
            return self._error(exc)
        return Response(self.get_serializer_class()(measurement).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        try:
            self._service.delete(pk)
        except MeasurementNotFound as exc:
            return self._error(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminBlouseMeasurementViewSet(AdminMeasurementViewSet):
    """/api/v1/admin/measurements/"""

    queryset = BlouseMeasurement.objects.select_related("user", "custom_order")
    serializer_class = BlouseMeasurementSerializer
    filterset_class = BlouseMeasurementFilter
    dto_class = BlouseMeasurementDTO
    value_fields = BLOUSE_FIELDS


class AdminSalwarMeasurementViewSet(AdminMeasurementViewSet):
    """/api/v1/admin/salwar-measurements/"""

    queryset = SalwarMeasurement.objects.select_related("user", "custom_order")
    serializer_class = SalwarMeasurementSerializer
    filterset_class = SalwarMeasurementFilter
    dto_class = SalwarMeasurementDTO
    value_fields = SALWAR_FIELDS


class AdminLehengaMeasurementViewSet(AdminMeasurementViewSet):
    """/api/v1/admin/lehenga-measurements/"""

    queryset = LehengaMeasurement.objects.select_related("user", "custom_order")
    serializer_class = LehengaMeasurementSerializer
    filterset_class = LehengaMeasurementFilter
    dto_class = LehengaMeasurementDTO
    value_fields = LEHENGA_FIELDS

"""Order API views.

Exposes ``OrderService`` via HTTP using DRF ViewSets.  Domain exceptions
are caught and translated into HTTP status codes; the view never swallows
generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.accounts.exceptions import InactiveUser, UserNotFound
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.core.pagination import StandardResultsSetPagination
from modules.core.permissions import IsAdmin
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO, UpdateOrderStatusDTO
from modules.orders.exceptions import (
    InactiveProduct,
    InsufficientStock,
    InvalidOrderStatus,
    OrderNotFound,
)
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderListSerializer,
    OrderSerializer,
)
from modules.orders.services import OrderService
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository


def _order_service() -> OrderService:
    return OrderService(
        order_repository=OrderDjangoRepository(),
        product_repository=ProductDjangoRepository(),
        user_repository=UserDjangoRepository(),
        cart_repository=CartDjangoRepository(),
    )


def _not_found() -> Response:
    return Response({"detail": "Order not found."}, status=status.HTTP_404_NOT_FOUND)


class _StatusChangeMixin:
    """Shared PATCH handling: ``{"status": ..., "notes": ...}``."""

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
            order = self._service.update_status(
                order_id=pk,
                new_status=dto.status,
                actor=request.user,
                notes=dto.notes,
            )
        except OrderNotFound:
            return _not_found()
        except InvalidOrderStatus as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderSerializer(order).data)


class OrderViewSet(_StatusChangeMixin, ListModelMixin, GenericViewSet):
    """The authenticated customer's own orders.

    Does **not** extend ``ModelViewSet``: writes go through the
    service/repository layer.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = OrderListSerializer
    pagination_class = StandardResultsSetPagination
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = OrderFilter
    ordering_fields = ["created_at", "total", "status"]
    ordering = ["-created_at"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _order_service()

    def get_queryset(self):
        return (
            Order.objects.filter(user_id=self.request.user.id)
            .select_related("user")
            .prefetch_related("items")
        )

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)
        data = create_serializer.validated_data

        try:
            dto = CreateOrderDTO(
                user_id=request.user.id,
                items=[
                    CreateOrderItemDTO(
                        product_id=item["product_id"],
                        quantity=item["quantity"],
                        size=item.get("size", ""),
                        color=item.get("color", ""),
                    )
                    for item in data["items"]
                ],
                shipping_address=data.get("shipping_address") or {},
                payment_method=data.get("payment_method"),
                notes=data.get("notes", ""),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            order = self._service.create_order(dto)
        except (UserNotFound, ProductNotFound) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except (InactiveUser, InactiveProduct) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientStock as exc:
            return Response(
                {"detail": str(exc), "product_id": exc.product_id},
                status=status.HTTP_409_CONFLICT,
            )

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk, user_id=request.user.id)
        except OrderNotFound:
            return _not_found()
        return Response(OrderSerializer(order).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/: customers may only cancel."""
        return self._change_status(request, pk)


class AdminOrderViewSet(_StatusChangeMixin, ListModelMixin, GenericViewSet):
    """Back-office order listing and fulfilment."""

    permission_classes = [IsAdmin]
    serializer_class = OrderListSerializer
    pagination_class = StandardResultsSetPagination
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = OrderFilter
    search_fields = ["order_number", "user__name", "user__email", "user__phone"]
    ordering_fields = ["created_at", "total", "status"]
    ordering = ["-created_at"]
    queryset = Order.objects.select_related("user").prefetch_related("items")

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _order_service()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/admin/orders/{pk}/"""
        try:
            order = self._service.get_order(pk)
        except OrderNotFound:
            return _not_found()
        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/admin/orders/{pk}/status/"""
        return self._change_status(request, pk)

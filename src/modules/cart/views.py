"""Cart API views: the authenticated user's own cart only."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.cart.dtos import AddCartItemDTO
from modules.cart.exceptions import CartItemNotFound, ProductUnavailable
from modules.cart.models import CartItem
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.cart.serializers import CartItemSerializer
from modules.cart.services import CartService
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository


class CartViewSet(GenericViewSet):
    permission_classes = [IsAuthenticated]
    queryset = CartItem.objects.none()
    serializer_class = CartItemSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CartService(
            repository=CartDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def list(self, request: Request) -> Response:
        """GET /api/v1/cart/"""
        items = self._service.list_items(request.user.id)
        return Response(CartItemSerializer(items, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/cart/"""
        data = request.data
        try:
            dto = AddCartItemDTO(
                product_id=data.get("product_id"),
                quantity=data.get("quantity", 1),
                size=data.get("size") or "",
                color=data.get("color") or "",
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            item = self._service.add_item(request.user.id, dto)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ProductUnavailable as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(CartItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/cart/{pk}/"""
        try:
            self._service.remove_item(request.user.id, pk)
        except CartItemNotFound:
            return Response(
                {"detail": "Cart item not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["delete"], url_path="clear")
    def clear(self, request: Request) -> Response:
        """DELETE /api/v1/cart/clear/"""
        self._service.clear(request.user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

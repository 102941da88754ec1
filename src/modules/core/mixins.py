"""Reusable ViewSet behaviour shared by the admin catalog endpoints."""

from __future__ import annotations

from typing import Any, Tuple, Type

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response


class ToggleActiveMixin:
    """Adds ``PATCH {pk}/toggle/`` accepting ``{"is_active": <bool>}``.

    The view must expose ``self._service.set_active(pk, is_active)`` (or
    override ``perform_toggle``) and list the service's not-found
    exception(s) in ``not_found_exceptions``.  Only ``is_active`` is
    written; every other field is left untouched.
    """

    not_found_exceptions: Tuple[Type[Exception], ...] = ()
    not_found_message = "Not found."

    def perform_toggle(self, pk: str, is_active: bool) -> Any:
        return self._service.set_active(pk, is_active)

    @action(detail=True, methods=["patch"], url_path="toggle")
    def toggle(self, request: Request, pk: str | None = None, **kwargs) -> Response:
        is_active = request.data.get("is_active")
        if not isinstance(is_active, bool):
            return Response(
                {"detail": "Field 'is_active' must be a boolean."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            instance = self.perform_toggle(pk, is_active)
        except self.not_found_exceptions:
            return Response(
                {"detail": self.not_found_message},
                status=status.HTTP_404_NOT_FOUND,
            )
        serializer = self.get_serializer_class()(instance)
        return Response(serializer.data)

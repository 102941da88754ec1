"""Shared authorisation guards.

Every admin route uses ``IsAdmin``; user-facing routes rely on the default
``IsAuthenticated`` and scope their querysets to ``request.user``.
"""

from __future__ import annotations

from rest_framework.permissions import BasePermission


class IsAdmin(BasePermission):
    """Allow only active users whose role is ``ADMIN``.

    Unauthenticated requests fall through to DRF's 401 handling;
    authenticated non-admins get 403.
    """

    message = "Admin access required."

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(user and user.is_authenticated and user.is_active and user.is_admin)

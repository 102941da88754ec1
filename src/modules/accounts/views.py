"""Account API views.

Login and refresh delegate token issuance to SimpleJWT and additionally
store the access token in the ``auth-token`` cookie so browser clients do
not need to manage the Authorization header.
"""

from __future__ import annotations

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from modules.accounts.models import User
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.accounts.serializers import AdminUserListSerializer
from modules.core.pagination import StandardResultsSetPagination
from modules.core.permissions import IsAdmin

logger = structlog.get_logger(__name__)


def _set_auth_cookie(response: Response) -> Response:
    access = response.data.get("access") if response.status_code == 200 else None
    if access:
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            access,
            max_age=int(settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"].total_seconds()),
            httponly=True,
            secure=not settings.DEBUG,
            samesite="Lax",
        )
    return response


class LoginView(TokenObtainPairView):
    """POST /api/v1/auth/login/"""

    def post(self, request: Request, *args, **kwargs) -> Response:
        response = super().post(request, *args, **kwargs)
        logger.info("auth.login", username=request.data.get("username"))
        return _set_auth_cookie(response)


class RefreshView(TokenRefreshView):
    """POST /api/v1/auth/refresh/"""

    def post(self, request: Request, *args, **kwargs) -> Response:
        return _set_auth_cookie(super().post(request, *args, **kwargs))


class LogoutView(APIView):
    """POST /api/v1/auth/logout/: clears the auth cookie."""

    permission_classes = [AllowAny]
    authentication_classes: list = []

    def post(self, request: Request) -> Response:
        response = Response(status=status.HTTP_204_NO_CONTENT)
        response.delete_cookie(settings.AUTH_COOKIE_NAME, samesite="Lax")
        return response


class AdminUserViewSet(GenericViewSet):
    """GET /api/v1/admin/users/: customers with activity counts."""

    permission_classes = [IsAdmin]
    queryset = User.objects.none()
    serializer_class = AdminUserListSerializer

    def list(self, request: Request) -> Response:
        users = UserDjangoRepository().list_customers(
            search=request.query_params.get("search", "").strip()
        )
        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(users, request, view=self)
        serializer = AdminUserListSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

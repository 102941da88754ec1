"""Signed-token authentication backend for Django REST Framework.

Tokens are HS256 JWTs issued by SimpleJWT (``/api/v1/auth/login/``) and
verified here with PyJWT.  The token is read from the ``Authorization:
Bearer`` header first, then from the ``auth-token`` cookie set at login.

Security decisions
------------------
* **Fail Closed**: any decode / validation error returns 401.
* ``algorithms`` is hard-coded to the configured value, never derived from
  the incoming token.
* Only ``access`` tokens are accepted; refresh tokens are rejected.
* The referenced user must still exist and be active.
"""

from __future__ import annotations

from typing import Optional, Tuple

import jwt as pyjwt
import structlog
from django.conf import settings
from django.contrib.auth import get_user_model
from jwt.exceptions import PyJWTError
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

logger = structlog.get_logger(__name__)


class CookieOrHeaderTokenAuthentication(BaseAuthentication):
    """DRF authentication class accepting a Bearer header or auth cookie."""

    keyword = "Bearer"

    # ------------------------------------------------------------------
    # Public API (DRF contract)
    # ------------------------------------------------------------------

    def authenticate(self, request: Request) -> Optional[Tuple[object, str]]:
        """Return ``(user, token)`` or ``None`` when no credentials are sent."""
        token = self._get_raw_token(request)
        if token is None:
            return None

        payload = self._decode_token(token)
        user = self._get_user(payload)
        logger.info("token_authenticated", user_id=str(user.pk), role=user.role)
        return (user, token)

    def authenticate_header(self, request: Request) -> str:
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'{self.keyword} realm="api"'

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_raw_token(self, request: Request) -> Optional[str]:
        header = request.META.get("HTTP_AUTHORIZATION", "")
        if header:
            return self._extract_token(header)
        cookie = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        return cookie or None

    def _extract_token(self, header: str) -> str:
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != self.keyword.lower():
            raise AuthenticationFailed("Invalid Authorization header format.")
        return parts[1]

    @staticmethod
    def _decode_token(token: str) -> dict:
        jwt_settings = settings.SIMPLE_JWT
        try:
            payload = pyjwt.decode(
                token,
                jwt_settings["SIGNING_KEY"],
                algorithms=[jwt_settings["ALGORITHM"]],
            )
        except PyJWTError as exc:
            logger.warning("token_validation_failed", error=str(exc))
            raise AuthenticationFailed("Invalid or expired token.") from exc

        if payload.get("token_type") != "access":
            raise AuthenticationFailed("Token is not an access token.")
        return payload

    @staticmethod
    def _get_user(payload: dict):
        user_id = payload.get(settings.SIMPLE_JWT["USER_ID_CLAIM"])
        if not user_id:
            raise AuthenticationFailed("Token has no user identifier.")

        User = get_user_model()
        user = User.objects.filter(pk=user_id).first()
        if user is None or not user.is_active:
            logger.warning("token_user_rejected", user_id=str(user_id))
            raise AuthenticationFailed("User not found or inactive.")
        return user

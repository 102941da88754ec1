"""Integration tests for login, cookie/header auth and logout.

Covers:
- POST /api/v1/auth/login/ returns tokens and sets the ``auth-token`` cookie.
- GET /api/v1/me/ via cookie, via Bearer header, and without credentials.
- POST /api/v1/auth/refresh/ rotates the cookie.
- POST /api/v1/auth/logout/ clears the cookie.
- Admin-only routes return 403 for customers.
"""

from __future__ import annotations

import pytest
from rest_framework.test import APIClient

pytestmark = pytest.mark.integration

LOGIN_URL = "/api/v1/auth/login/"
ME_URL = "/api/v1/me/"


def _login(client, username="priya", password="testpass123"):
    return client.post(LOGIN_URL, {"username": username, "password": password}, format="json")


class TestLogin:
    def test_returns_tokens_and_cookie(self, api_client, customer):
        response = _login(api_client)

        assert response.status_code == 200
        assert "access" in response.data
        assert "refresh" in response.data
        cookie = response.cookies["auth-token"]
        assert cookie.value == response.data["access"]
        assert cookie["httponly"]

    def test_cookie_authenticates_follow_up_requests(self, api_client, customer):
        _login(api_client)
        response = api_client.get(ME_URL)

        assert response.status_code == 200
        assert response.data["username"] == "priya"
        assert response.data["role"] == "USER"

    def test_bad_password(self, api_client, customer):
        response = _login(api_client, password="wrong")

        assert response.status_code == 401
        assert response.data["type"] == "client_error"
        assert "auth-token" not in response.cookies

    def test_inactive_user_cannot_login(self, api_client, make_user):
        make_user(username="dormant", is_active=False)
        response = _login(api_client, username="dormant")
        assert response.status_code == 401


class TestMe:
    def test_bearer_header(self, customer):
        client = APIClient()
        access = _login(client).data["access"]

        fresh = APIClient()
        fresh.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        response = fresh.get(ME_URL)

        assert response.status_code == 200
        assert response.data["email"] == "priya@example.com"

    def test_no_credentials(self, api_client):
        response = api_client.get(ME_URL)
        assert response.status_code == 401
        assert response.data["errors"][0]["code"] == "not_authenticated"

    def test_refresh_token_is_not_an_access_token(self, customer):
        client = APIClient()
        refresh = _login(client).data["refresh"]

        fresh = APIClient()
        fresh.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh}")
        assert fresh.get(ME_URL).status_code == 401


class TestRefreshAndLogout:
    def test_refresh_sets_new_cookie(self, api_client, customer):
        refresh = _login(api_client).data["refresh"]
        response = api_client.post("/api/v1/auth/refresh/", {"refresh": refresh}, format="json")

        assert response.status_code == 200
        assert response.cookies["auth-token"].value == response.data["access"]

    def test_logout_clears_cookie(self, api_client, customer):
        _login(api_client)
        response = api_client.post("/api/v1/auth/logout/")

        assert response.status_code == 204
        assert response.cookies["auth-token"].value == ""
        assert api_client.get(ME_URL).status_code == 401


class TestAdminGuard:
    @pytest.mark.parametrize(
        "url",
        [
            "/api/v1/admin/users/",
            "/api/v1/admin/products/",
            "/api/v1/admin/orders/",
            "/api/v1/admin/custom-orders/",
            "/api/v1/admin/measurements/",
            "/api/v1/admin/blouse-models/",
            "/api/v1/admin/images/",
        ],
    )
    def test_customer_forbidden(self, customer_client, url):
        response = customer_client.get(url)
        assert response.status_code == 403
        assert response.data["errors"][0]["code"] == "permission_denied"

    def test_anonymous_unauthorised(self, api_client):
        assert api_client.get("/api/v1/admin/orders/").status_code == 401

    def test_deactivated_admin_forbidden(self, admin_user):
        admin_user.is_active = False
        client = APIClient()
        client.force_authenticate(user=admin_user)
        assert client.get("/api/v1/admin/orders/").status_code == 403

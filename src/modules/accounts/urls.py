"""Account URL configuration."""

from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from modules.accounts.views import AdminUserViewSet, LoginView, LogoutView, RefreshView

router = DefaultRouter(trailing_slash=True)
router.register("admin/users", AdminUserViewSet, basename="admin-user")

urlpatterns = [
    path("auth/login/", LoginView.as_view(), name="auth_login"),
    path("auth/refresh/", RefreshView.as_view(), name="auth_refresh"),
    path("auth/logout/", LogoutView.as_view(), name="auth_logout"),
    *router.urls,
]

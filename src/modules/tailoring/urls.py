"""Tailoring URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.tailoring import views

router = DefaultRouter(trailing_slash=True)
router.register("custom-orders", views.CustomOrderViewSet, basename="custom-order")
router.register(
    "admin/custom-orders", views.AdminCustomOrderViewSet, basename="admin-custom-order"
)
router.register(
    "admin/measurements", views.AdminBlouseMeasurementViewSet, basename="admin-measurement"
)
router.register(
    "admin/salwar-measurements",
    views.AdminSalwarMeasurementViewSet,
    basename="admin-salwar-measurement",
)
router.register(
    "admin/lehenga-measurements",
    views.AdminLehengaMeasurementViewSet,
    basename="admin-lehenga-measurement",
)

urlpatterns = router.urls

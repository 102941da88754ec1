"""Catalog URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.catalog import views

router = DefaultRouter(trailing_slash=True)
router.register("blouse-models", views.BlouseModelViewSet, basename="blouse-model")
router.register("lehenga-models", views.LehengaModelViewSet, basename="lehenga-model")
router.register(
    "salwar-kameez-models", views.SalwarKameezModelViewSet, basename="salwar-kameez-model"
)
router.register("blouse-designs", views.BlouseDesignViewSet, basename="blouse-design")
router.register("fabrics", views.FabricViewSet, basename="fabric")

router.register(
    "admin/blouse-models", views.AdminBlouseModelViewSet, basename="admin-blouse-model"
)
router.register(
    "admin/lehenga-models", views.AdminLehengaModelViewSet, basename="admin-lehenga-model"
)
router.register(
    "admin/salwar-kameez-models",
    views.AdminSalwarKameezModelViewSet,
    basename="admin-salwar-kameez-model",
)
router.register("admin/fabrics", views.AdminFabricViewSet, basename="admin-fabric")
router.register(
    r"admin/blouse-designs/(?P<design_pk>[^/.]+)/variants",
    views.AdminBlouseDesignVariantViewSet,
    basename="admin-blouse-design-variant",
)
router.register(
    "admin/blouse-designs", views.AdminBlouseDesignViewSet, basename="admin-blouse-design"
)

urlpatterns = router.urls

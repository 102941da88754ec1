"""Image browser URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.media.views import ImageFolderView, ImageLibraryView

urlpatterns = [
    path("admin/images/", ImageLibraryView.as_view(), name="admin-images"),
    path("admin/images/folders/", ImageFolderView.as_view(), name="admin-image-folders"),
]

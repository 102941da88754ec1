"""Admin image browser over ``ASSETS_ROOT``."""

from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.permissions import IsAdmin
from modules.media.exceptions import AssetAlreadyExists, AssetNotFound, InvalidAssetPath
from modules.media.services import ImageLibrary


def _library() -> ImageLibrary:
    return ImageLibrary(settings.ASSETS_ROOT, settings.MAX_IMAGE_UPLOAD_BYTES)


def _error(exc: Exception) -> Response:
    if isinstance(exc, AssetNotFound):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, AssetAlreadyExists):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return Response({"detail": str(exc)}, status=code)


class ImageLibraryView(APIView):
    """/api/v1/admin/images/"""

    permission_classes = [IsAdmin]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request: Request) -> Response:
        """List one folder: ``?folder=blouses/silk``."""
        try:
            listing = _library().list_folder(request.query_params.get("folder", ""))
        except (InvalidAssetPath, AssetNotFound) as exc:
            return _error(exc)
        return Response(listing)

    def post(self, request: Request) -> Response:
        """Multipart upload: ``files`` (repeatable) and ``folder``."""
        files = request.FILES.getlist("files")
        if not files:
            return Response(
                {"detail": "At least one file is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            results = _library().upload(request.data.get("folder", ""), files)
        except InvalidAssetPath as exc:
            return _error(exc)
        return Response({"results": results}, status=status.HTTP_201_CREATED)

    def put(self, request: Request) -> Response:
        """Rename: ``{"image_path": ..., "new_name": ...}``."""
        image_path = request.data.get("image_path") or ""
        new_name = request.data.get("new_name") or ""
        if not image_path or not new_name:
            return Response(
                {"detail": "Fields 'image_path' and 'new_name' are required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            path = _library().rename_image(image_path, new_name)
        except (InvalidAssetPath, AssetNotFound, AssetAlreadyExists) as exc:
            return _error(exc)
        return Response({"path": path})

    def delete(self, request: Request) -> Response:
        """Delete one image: ``?path=blouses/silk/a.jpg``."""
        try:
            _library().delete_image(request.query_params.get("path", ""))
        except (InvalidAssetPath, AssetNotFound) as exc:
            return _error(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ImageFolderView(APIView):
    """/api/v1/admin/images/folders/"""

    permission_classes = [IsAdmin]

    def post(self, request: Request) -> Response:
        """Create ``{"folder_path": <parent>, "name": <new folder>}``."""
        try:
            path = _library().create_folder(
                request.data.get("folder_path") or "",
                request.data.get("name") or "",
            )
        except (InvalidAssetPath, AssetAlreadyExists) as exc:
            return _error(exc)
        return Response({"path": path}, status=status.HTTP_201_CREATED)

    def delete(self, request: Request) -> Response:
        """Delete a folder and its contents: ``?path=blouses/old``."""
        try:
            _library().delete_folder(request.query_params.get("path", ""))
        except (InvalidAssetPath, AssetNotFound) as exc:
            return _error(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

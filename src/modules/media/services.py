"""Image library over ``ASSETS_ROOT``.

Every caller-supplied path is resolved and must stay inside the root;
anything else raises ``InvalidAssetPath``.  The root itself can be listed
but never deleted or renamed.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import structlog
from django.core.exceptions import SuspiciousFileOperation
from django.utils.text import get_valid_filename

from modules.media.exceptions import AssetAlreadyExists, AssetNotFound, InvalidAssetPath

logger = structlog.get_logger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})


def is_image_name(name: str) -> bool:
    return Path(name).suffix.lower() in IMAGE_EXTENSIONS


class ImageLibrary:
    def __init__(self, root: Union[str, Path], max_upload_bytes: int) -> None:
        self.root = Path(root).resolve()
        self.max_upload_bytes = max_upload_bytes

    # ------------------------------------------------------------------
    # Path handling
    # ------------------------------------------------------------------

    def _resolve(self, relative: str, allow_root: bool = True) -> Path:
        relative = (relative or "").strip().lstrip("/\\")
        target = (self.root / relative).resolve()
        if not target.is_relative_to(self.root):
            logger.warning("media.path_rejected", path=relative)
            raise InvalidAssetPath("Invalid path.")
        if target == self.root and not allow_root:
            raise InvalidAssetPath("The assets root cannot be modified.")
        return target

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    @staticmethod
    def _clean_name(name: str) -> str:
        try:
            return get_valid_filename(Path(name or "").name)
        except SuspiciousFileOperation as exc:
            raise InvalidAssetPath("A valid name is required.") from exc

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_folder(self, folder: str = "") -> Dict[str, List[Dict[str, str]]]:
        """Sub-folders and images directly inside *folder*."""
        target = self._resolve(folder)
        if not target.is_dir():
            raise AssetNotFound(f"Folder '{folder}' not found.")

        folders, images = [], []
        for entry in sorted(target.iterdir(), key=lambda p: p.name.lower()):
            if entry.is_dir():
                folders.append({"name": entry.name, "type": "folder", "path": self._relative(entry)})
            elif entry.is_file() and is_image_name(entry.name):
                images.append({"name": entry.name, "type": "image", "path": self._relative(entry)})
        return {"folders": folders, "images": images}

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def upload(self, folder: str, files: Iterable[Any]) -> List[Dict[str, Any]]:
        """Store uploaded images in *folder*, one result per file.

        Rejected files (wrong extension, too large) do not stop the batch.
        *files* are Django ``UploadedFile`` objects.
        """
        target = self._resolve(folder)
        target.mkdir(parents=True, exist_ok=True)

        results = []
        for upload in files:
            try:
                name = self._clean_name(upload.name)
            except InvalidAssetPath:
                name = ""
            if not is_image_name(name):
                results.append({"name": upload.name, "success": False, "error": "Invalid file type"})
                continue
            if upload.size > self.max_upload_bytes:
                results.append({"name": upload.name, "success": False, "error": "File too large"})
                continue

            destination = target / name
            with destination.open("wb") as fh:
                for chunk in upload.chunks():
                    fh.write(chunk)
            results.append({"name": name, "success": True, "path": self._relative(destination)})
            logger.info("media.uploaded", path=self._relative(destination), size=upload.size)
        return results

    def rename_image(self, image_path: str, new_name: str) -> str:
        source = self._resolve(image_path, allow_root=False)
        if not source.is_file():
            raise AssetNotFound(f"Image '{image_path}' not found.")
        new_name = self._clean_name(new_name)
        if not is_image_name(new_name):
            raise InvalidAssetPath("Invalid file type.")
        destination = self._resolve(self._relative(source.parent / new_name), allow_root=False)
        if destination.exists():
            raise AssetAlreadyExists(f"'{new_name}' already exists.")
        source.rename(destination)
        logger.info("media.renamed", source=image_path, destination=self._relative(destination))
        return self._relative(destination)

    def delete_image(self, image_path: str) -> None:
        if not image_path:
            raise InvalidAssetPath("Path required.")
        target = self._resolve(image_path, allow_root=False)
        if not target.is_file():
            raise AssetNotFound(f"Image '{image_path}' not found.")
        target.unlink()
        logger.info("media.deleted", path=image_path)

    def create_folder(self, parent: str, name: str) -> str:
        target = self._resolve(f"{(parent or '').rstrip('/')}/{self._clean_name(name)}")
        if target.exists():
            raise AssetAlreadyExists(f"Folder '{name}' already exists.")
        target.mkdir(parents=True)
        logger.info("media.folder_created", path=self._relative(target))
        return self._relative(target)

    def delete_folder(self, folder: str) -> None:
        target = self._resolve(folder, allow_root=False)
        if not target.is_dir():
            raise AssetNotFound(f"Folder '{folder}' not found.")
        shutil.rmtree(target)
        logger.info("media.folder_deleted", path=folder)

"""Image library exceptions."""

from __future__ import annotations


class InvalidAssetPath(Exception):
    """The path escapes the assets root, targets the root itself, or is malformed."""


class AssetNotFound(Exception):
    """The image or folder does not exist."""


class AssetAlreadyExists(Exception):
    """A file or folder with the target name already exists."""

"""Catalog domain exceptions."""

from __future__ import annotations


class CatalogEntryNotFound(Exception):
    """The requested garment model, design, variant or category does not exist."""


class CatalogEntryAlreadyExists(Exception):
    """A catalog entry with the same unique name already exists."""

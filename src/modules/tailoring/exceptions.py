"""Tailoring domain exceptions."""

from __future__ import annotations


class CustomOrderNotFound(Exception):
    """The custom order does not exist or belongs to another user."""


class CustomOrderNotOwned(Exception):
    """A measurement references a custom order the measured user does not own."""


class InvalidCustomOrderStatus(Exception):
    """The requested status change is not allowed for this actor."""


class MeasurementNotFound(Exception):
    """The requested measurement does not exist."""


class GarmentModelNotFound(Exception):
    """The catalog model picked for a custom order does not exist or is inactive."""

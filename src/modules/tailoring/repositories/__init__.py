"""Tailoring repositories package."""

from modules.tailoring.repositories.django_repository import (
    CustomOrderDjangoRepository,
    MeasurementDjangoRepository,
)
from modules.tailoring.repositories.interfaces import (
    ICustomOrderRepository,
    IMeasurementRepository,
)

__all__ = [
    "CustomOrderDjangoRepository",
    "ICustomOrderRepository",
    "IMeasurementRepository",
    "MeasurementDjangoRepository",
]

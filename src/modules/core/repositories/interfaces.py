"""Generic repository interface.

``IRepository[T]`` is the contract every module repository extends.
Services depend on these abstractions and never on the ORM directly, which
lets their unit tests run against ``MagicMock`` repositories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    ``T`` is the entity managed by the repository (e.g. ``Order``,
    ``BlouseMeasurement``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by primary key, ``None`` if absent or malformed."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities with optional ORM look-ups."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity; ``False`` when nothing matched."""

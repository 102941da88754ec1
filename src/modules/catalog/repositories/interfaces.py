"""Catalog repository interface.

One contract serves every catalog table (garment models, designs,
variants, categories); the concrete repository is bound to a model class.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional

from modules.core.repositories.interfaces import IRepository


class ICatalogRepository(IRepository[Any]):
    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Any]:
        """Retrieve an entry by exact (case-insensitive) name."""

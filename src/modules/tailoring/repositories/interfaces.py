"""Tailoring repository interfaces."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.tailoring.models import CustomOrder, CustomOrderStatusHistory


class ICustomOrderRepository(IRepository["CustomOrder"]):
    @abstractmethod
    def get_owned(self, id: str, user_id: str) -> Optional[CustomOrder]:
        """Retrieve a custom order only if it belongs to *user_id*."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[CustomOrder]:
        """Retrieve a custom order with a row-level lock."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[CustomOrder]:
        """Custom orders of *user_id*, newest first."""

    @abstractmethod
    def add_history(
        self,
        custom_order_id: Any,
        old_status: str,
        new_status: str,
        user_id: Any = None,
        notes: str = "",
    ) -> CustomOrderStatusHistory:
        """Append a status-change row for *custom_order_id*."""


class IMeasurementRepository(IRepository[Any]):
    """One contract for blouse, salwar and lehenga measurement sheets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from modules.accounts.models import User


class IUserRepository(ABC):
    """Read-side contract for users (accounts are managed through Django auth)."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[User]:
        """Retrieve a user by primary key."""

    @abstractmethod
    def list_customers(self, search: str = "") -> List[User]:
        """List non-admin users, annotated with order/measurement counts."""

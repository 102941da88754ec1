"""Cart repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.cart.models import CartItem


class ICartRepository(IRepository["CartItem"]):
    @abstractmethod
    def list_for_user(self, user_id: str) -> List[CartItem]:
        """Cart lines of *user_id*, products pre-loaded."""

    @abstractmethod
    def find_line(
        self, user_id: str, product_id: str, size: str, color: str
    ) -> Optional[CartItem]:
        """The existing line for this product/size/color combination."""

    @abstractmethod
    def clear_for_user(self, user_id: str) -> int:
        """Delete every line of *user_id*; returns the number removed."""

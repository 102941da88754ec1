"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The order does not exist or belongs to another user."""


class InvalidOrderStatus(Exception):
    """The requested status change is not allowed for this actor."""


class InsufficientStock(Exception):
    """Not enough stock to fulfil an order line."""

    def __init__(self, message: str, product_id: str = "") -> None:
        super().__init__(message)
        self.product_id = product_id


class InactiveProduct(Exception):
    """A product referenced by an order line is inactive."""

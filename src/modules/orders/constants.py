"""Order domain constants.

Status choices and the role-keyed transition table for the order state
machine.
"""

from django.db import models

from modules.accounts.models import UserRole
from modules.core.transitions import TransitionTable


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    CONFIRMED = "CONFIRMED", "Confirmed"
    SHIPPED = "SHIPPED", "Shipped"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELLED = "CANCELLED", "Cancelled"


class PaymentMethod(models.TextChoices):
    COD = "COD", "Cash on delivery"
    CARD = "CARD", "Card"
    UPI = "UPI", "UPI"


class PaymentStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    COMPLETED = "COMPLETED", "Completed"
    FAILED = "FAILED", "Failed"
    REFUNDED = "REFUNDED", "Refunded"


ORDER_TRANSITIONS = TransitionTable(
    {
        UserRole.USER: {
            OrderStatus.PENDING: {OrderStatus.CANCELLED},
            OrderStatus.CONFIRMED: {OrderStatus.CANCELLED},
        },
        UserRole.ADMIN: {
            OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
            OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
            OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
        },
    }
)

ORDER_NUMBER_MAX_RETRIES = 5

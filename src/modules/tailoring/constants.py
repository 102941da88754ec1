"""Custom-order choices, transition table and measurement field lists."""

from django.db import models

from modules.accounts.models import UserRole
from modules.core.transitions import TransitionTable


class GarmentType(models.TextChoices):
    BLOUSE = "BLOUSE", "Blouse"
    SALWAR_KAMEEZ = "SALWAR_KAMEEZ", "Salwar kameez"
    LEHENGA = "LEHENGA", "Lehenga"


class AppointmentType(models.TextChoices):
    HOME_VISIT = "HOME_VISIT", "Home visit"
    STORE_VISIT = "STORE_VISIT", "Store visit"
    VIDEO_CALL = "VIDEO_CALL", "Video call"


class CustomOrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    CONFIRMED = "CONFIRMED", "Confirmed"
    IN_PRODUCTION = "IN_PRODUCTION", "In production"
    READY = "READY", "Ready"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELLED = "CANCELLED", "Cancelled"


CUSTOM_ORDER_TRANSITIONS = TransitionTable(
    {
        UserRole.USER: {
            CustomOrderStatus.PENDING: {CustomOrderStatus.CANCELLED},
            CustomOrderStatus.CONFIRMED: {CustomOrderStatus.CANCELLED},
        },
        UserRole.ADMIN: {
            CustomOrderStatus.PENDING: {
                CustomOrderStatus.CONFIRMED,
                CustomOrderStatus.CANCELLED,
            },
            CustomOrderStatus.CONFIRMED: {
                CustomOrderStatus.IN_PRODUCTION,
                CustomOrderStatus.CANCELLED,
            },
            CustomOrderStatus.IN_PRODUCTION: {
                CustomOrderStatus.READY,
                CustomOrderStatus.CANCELLED,
            },
            CustomOrderStatus.READY: {CustomOrderStatus.DELIVERED},
        },
    }
)

BLOUSE_FIELDS = (
    "blouse_back_length",
    "full_shoulder",
    "shoulder_strap",
    "back_neck_depth",
    "front_neck_depth",
    "shoulder_to_apex",
    "front_length",
    "chest",
    "waist",
    "sleeve_length",
    "arm_round",
    "sleeve_round",
    "arm_hole",
)

SALWAR_FIELDS = (
    "bust",
    "waist",
    "hip",
    "kameez_length",
    "shoulder",
    "sleeve_length",
    "armhole_round",
    "wrist_round",
    "waist_tie",
    "salwar_length",
    "thigh_round",
    "knee_round",
    "ankle_round",
)

LEHENGA_FIELDS = BLOUSE_FIELDS + (
    "lehenga_waist",
    "lehenga_hip",
    "lehenga_length",
    "lehenga_width",
)

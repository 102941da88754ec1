"""Custom orders and body measurements.

Business rules implemented:
- A measurement's ``custom_order`` (when set) belongs to the measurement's
  user; enforced by ``MeasurementService`` before every write.
- Every measurement value is optional and stored as ``Decimal`` centimeters.
- Custom-order status changes follow ``CUSTOM_ORDER_TRANSITIONS``.
- Every custom-order status change appends a ``CustomOrderStatusHistory`` row.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.tailoring.constants import AppointmentType, CustomOrderStatus, GarmentType


class CustomOrder(BaseModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="custom_orders",
    )
    garment_type = models.CharField(
        max_length=20,
        choices=GarmentType.choices,
        default=GarmentType.BLOUSE,
    )
    model_name = models.CharField(max_length=255, blank=True, default="")
    fabric = models.CharField(max_length=255, blank=True, default="")
    fabric_color = models.CharField(max_length=50, blank=True, default="")
    front_design = models.CharField(max_length=255, blank=True, default="")
    back_design = models.CharField(max_length=255, blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    notes = models.TextField(blank=True, default="")
    appointment_date = models.DateTimeField(null=True, blank=True)
    appointment_type = models.CharField(
        max_length=20,
        choices=AppointmentType.choices,
        blank=True,
        default="",
    )
    status = models.CharField(
        max_length=20,
        choices=CustomOrderStatus.choices,
        default=CustomOrderStatus.PENDING,
    )

    class Meta:
        db_table = "custom_orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="custom_orders_status_idx"),
            models.Index(fields=["garment_type"], name="custom_orders_garment_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.get_garment_type_display()} for {self.user_id} ({self.status})"


class CustomOrderStatusHistory(BaseModel):
    """Append-only audit trail for custom-order status changes."""

    custom_order = models.ForeignKey(
        CustomOrder,
        on_delete=models.CASCADE,
        related_name="status_history",
    )
    old_status = models.CharField(max_length=20, choices=CustomOrderStatus.choices)
    new_status = models.CharField(max_length=20, choices=CustomOrderStatus.choices)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    notes = models.TextField(blank=True, default="")

    class Meta:
        db_table = "custom_order_status_history"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.custom_order_id} : {self.old_status} -> {self.new_status}"


def _centimeters() -> models.DecimalField:
    return models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.01"))],
    )


class Measurement(BaseModel):
    """Fields shared by every measurement sheet."""

    notes = models.TextField(blank=True, default="")
    measured_by = models.CharField(max_length=255, blank=True, default="")
    measurement_date = models.DateTimeField(default=timezone.now)

    class Meta:
        abstract = True
        ordering = ["-measurement_date"]


class BlouseFields(models.Model):
    blouse_back_length = _centimeters()
    full_shoulder = _centimeters()
    shoulder_strap = _centimeters()
    back_neck_depth = _centimeters()
    front_neck_depth = _centimeters()
    shoulder_to_apex = _centimeters()
    front_length = _centimeters()
    chest = _centimeters()
    waist = _centimeters()
    sleeve_length = _centimeters()
    arm_round = _centimeters()
    sleeve_round = _centimeters()
    arm_hole = _centimeters()

    class Meta:
        abstract = True


class BlouseMeasurement(Measurement, BlouseFields):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blouse_measurements",
    )
    custom_order = models.ForeignKey(
        CustomOrder,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="blouse_measurements",
    )

    class Meta(Measurement.Meta):
        db_table = "blouse_measurements"


class SalwarMeasurement(Measurement):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="salwar_measurements",
    )
    custom_order = models.ForeignKey(
        CustomOrder,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="salwar_measurements",
    )
    bust = _centimeters()
    waist = _centimeters()
    hip = _centimeters()
    kameez_length = _centimeters()
    shoulder = _centimeters()
    sleeve_length = _centimeters()
    armhole_round = _centimeters()
    wrist_round = _centimeters()
    waist_tie = _centimeters()
    salwar_length = _centimeters()
    thigh_round = _centimeters()
    knee_round = _centimeters()
    ankle_round = _centimeters()

    class Meta(Measurement.Meta):
        db_table = "salwar_measurements"


class LehengaMeasurement(Measurement, BlouseFields):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="lehenga_measurements",
    )
    custom_order = models.ForeignKey(
        CustomOrder,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="lehenga_measurements",
    )
    lehenga_waist = _centimeters()
    lehenga_hip = _centimeters()
    lehenga_length = _centimeters()
    lehenga_width = _centimeters()

    class Meta(Measurement.Meta):
        db_table = "lehenga_measurements"

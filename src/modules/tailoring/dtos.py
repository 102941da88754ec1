"""Tailoring DTOs.

Measurement sheets share one base: every numeric field is optional, an
empty string counts as "not supplied" and supplied values must be
positive and fit the measurement columns.  The same DTO serves create
and partial update.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.tailoring.constants import AppointmentType, GarmentType

Centimeters = Annotated[Decimal, Field(max_digits=6, decimal_places=2)]


class MeasurementDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: Optional[UUID] = None
    custom_order_id: Optional[UUID] = None
    notes: Optional[str] = None
    measured_by: Optional[str] = None
    measurement_date: Optional[datetime] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("*")
    @classmethod
    def measurements_positive(cls, v: Any) -> Any:
        if isinstance(v, Decimal) and v <= 0:
            raise ValueError("Measurements must be greater than zero.")
        return v

    def measurement_values(self, fields: tuple) -> dict:
        """Supplied measurement values only."""
        return {f: getattr(self, f) for f in fields if getattr(self, f) is not None}


class BlouseMeasurementDTO(MeasurementDTO):
    blouse_back_length: Optional[Centimeters] = None
    full_shoulder: Optional[Centimeters] = None
    shoulder_strap: Optional[Centimeters] = None
    back_neck_depth: Optional[Centimeters] = None
    front_neck_depth: Optional[Centimeters] = None
    shoulder_to_apex: Optional[Centimeters] = None
    front_length: Optional[Centimeters] = None
    chest: Optional[Centimeters] = None
    waist: Optional[Centimeters] = None
    sleeve_length: Optional[Centimeters] = None
    arm_round: Optional[Centimeters] = None
    sleeve_round: Optional[Centimeters] = None
    arm_hole: Optional[Centimeters] = None


class SalwarMeasurementDTO(MeasurementDTO):
    bust: Optional[Centimeters] = None
    waist: Optional[Centimeters] = None
    hip: Optional[Centimeters] = None
    kameez_length: Optional[Centimeters] = None
    shoulder: Optional[Centimeters] = None
    sleeve_length: Optional[Centimeters] = None
    armhole_round: Optional[Centimeters] = None
    wrist_round: Optional[Centimeters] = None
    waist_tie: Optional[Centimeters] = None
    salwar_length: Optional[Centimeters] = None
    thigh_round: Optional[Centimeters] = None
    knee_round: Optional[Centimeters] = None
    ankle_round: Optional[Centimeters] = None


class LehengaMeasurementDTO(BlouseMeasurementDTO):
    lehenga_waist: Optional[Centimeters] = None
    lehenga_hip: Optional[Centimeters] = None
    lehenga_length: Optional[Centimeters] = None
    lehenga_width: Optional[Centimeters] = None


class CreateCustomOrderDTO(BaseModel):
    """A customer's custom-design request.

    ``price`` is never taken from the client: it comes from the chosen
    catalog model.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    garment_type: GarmentType
    model_id: UUID
    fabric: str = ""
    fabric_color: str = ""
    front_design: str = ""
    back_design: str = ""
    notes: str = ""
    appointment_date: Optional[datetime] = None
    appointment_type: Optional[AppointmentType] = None

    @field_validator("appointment_type", "appointment_date", mode="before")
    @classmethod
    def blank_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

"""Unit tests for tailoring DTOs."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.tailoring.constants import BLOUSE_FIELDS, LEHENGA_FIELDS, GarmentType
from modules.tailoring.dtos import (
    BlouseMeasurementDTO,
    CreateCustomOrderDTO,
    LehengaMeasurementDTO,
)

pytestmark = pytest.mark.unit


class TestMeasurementDTO:
    def test_blank_string_means_not_supplied(self):
        dto = BlouseMeasurementDTO(chest="", waist="  ", notes="")
        assert dto.chest is None
        assert dto.waist is None
        assert dto.notes is None

    @pytest.mark.parametrize("value", ["0", "-2.5"])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="greater than zero"):
            BlouseMeasurementDTO(chest=value)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            BlouseMeasurementDTO(chest="wide")

    @pytest.mark.parametrize("value", ["12345678.999", "10000", "34.125"])
    def test_value_must_fit_column(self, value):
        with pytest.raises(ValidationError):
            BlouseMeasurementDTO(chest=value)

    def test_largest_column_value_accepted(self):
        assert BlouseMeasurementDTO(chest="9999.99").chest == Decimal("9999.99")

    def test_measurement_values_only_supplied(self):
        dto = BlouseMeasurementDTO(chest="36", arm_hole="16.25")
        assert dto.measurement_values(BLOUSE_FIELDS) == {
            "chest": Decimal("36"),
            "arm_hole": Decimal("16.25"),
        }

    def test_lehenga_inherits_blouse_fields(self):
        dto = LehengaMeasurementDTO(chest="34", lehenga_length="40")
        values = dto.measurement_values(LEHENGA_FIELDS)
        assert set(values) == {"chest", "lehenga_length"}

    def test_lehenga_skirt_fields_validated(self):
        with pytest.raises(ValidationError):
            LehengaMeasurementDTO(lehenga_waist="0")


class TestCreateCustomOrderDTO:
    def test_model_id_required(self):
        with pytest.raises(ValidationError):
            CreateCustomOrderDTO(user_id=uuid4(), garment_type=GarmentType.BLOUSE)

    def test_unknown_garment_type(self):
        with pytest.raises(ValidationError):
            CreateCustomOrderDTO(user_id=uuid4(), garment_type="SHERWANI", model_id=uuid4())

    def test_blank_appointment_is_missing(self):
        dto = CreateCustomOrderDTO(
            user_id=uuid4(),
            garment_type=GarmentType.SALWAR_KAMEEZ,
            model_id=uuid4(),
            appointment_type="",
            appointment_date="",
        )
        assert dto.appointment_type is None
        assert dto.appointment_date is None

from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid6
from django.conf import settings
from django.db import migrations, models

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

LEHENGA_EXTRA_FIELDS = (
    "lehenga_waist",
    "lehenga_hip",
    "lehenga_length",
    "lehenga_width",
)


def _centimeters():
    return models.DecimalField(
        blank=True,
        decimal_places=2,
        max_digits=6,
        null=True,
        validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
    )


def _measurement_fields(related_name, value_fields):
    return [
        (
            "id",
            models.UUIDField(
                default=uuid6.uuid7, editable=False, primary_key=True, serialize=False
            ),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        ("notes", models.TextField(blank=True, default="")),
        ("measured_by", models.CharField(blank=True, default="", max_length=255)),
        (
            "measurement_date",
            models.DateTimeField(default=django.utils.timezone.now),
        ),
        *[(name, _centimeters()) for name in value_fields],
        (
            "custom_order",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name=related_name,
                to="tailoring.customorder",
            ),
        ),
        (
            "user",
            models.ForeignKey(
                on_delete=django.db.models.deletion.CASCADE,
                related_name=related_name,
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CustomOrder",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "garment_type",
                    models.CharField(
                        choices=[
                            ("BLOUSE", "Blouse"),
                            ("SALWAR_KAMEEZ", "Salwar kameez"),
                            ("LEHENGA", "Lehenga"),
                        ],
                        default="BLOUSE",
                        max_length=20,
                    ),
                ),
                ("model_name", models.CharField(blank=True, default="", max_length=255)),
                ("fabric", models.CharField(blank=True, default="", max_length=255)),
                ("fabric_color", models.CharField(blank=True, default="", max_length=50)),
                ("front_design", models.CharField(blank=True, default="", max_length=255)),
                ("back_design", models.CharField(blank=True, default="", max_length=255)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("notes", models.TextField(blank=True, default="")),
                ("appointment_date", models.DateTimeField(blank=True, null=True)),
                (
                    "appointment_type",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("HOME_VISIT", "Home visit"),
                            ("STORE_VISIT", "Store visit"),
                            ("VIDEO_CALL", "Video call"),
                        ],
                        default="",
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PENDING", "Pending"),
                            ("CONFIRMED", "Confirmed"),
                            ("IN_PRODUCTION", "In production"),
                            ("READY", "Ready"),
                            ("DELIVERED", "Delivered"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        default="PENDING",
                        max_length=20,
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="custom_orders",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "custom_orders",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status"], name="custom_orders_status_idx"),
                    models.Index(fields=["garment_type"], name="custom_orders_garment_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="BlouseMeasurement",
            fields=_measurement_fields("blouse_measurements", BLOUSE_FIELDS),
            options={
                "db_table": "blouse_measurements",
                "ordering": ["-measurement_date"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="SalwarMeasurement",
            fields=_measurement_fields("salwar_measurements", SALWAR_FIELDS),
            options={
                "db_table": "salwar_measurements",
                "ordering": ["-measurement_date"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="LehengaMeasurement",
            fields=_measurement_fields(
                "lehenga_measurements", BLOUSE_FIELDS + LEHENGA_EXTRA_FIELDS
            ),
            options={
                "db_table": "lehenga_measurements",
                "ordering": ["-measurement_date"],
                "abstract": False,
            },
        ),
    ]

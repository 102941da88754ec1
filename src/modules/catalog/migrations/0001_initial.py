from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import uuid6
from django.db import migrations, models


def _base_fields():
    return [
        (
            "id",
            models.UUIDField(
                default=uuid6.uuid7, editable=False, primary_key=True, serialize=False
            ),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


def _priced_fields():
    return _base_fields() + [
        (
            "price",
            models.DecimalField(
                decimal_places=2,
                max_digits=10,
                validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
            ),
        ),
        (
            "discount",
            models.DecimalField(
                blank=True,
                decimal_places=2,
                max_digits=5,
                null=True,
                validators=[
                    django.core.validators.MinValueValidator(0),
                    django.core.validators.MaxValueValidator(100),
                ],
            ),
        ),
        (
            "final_price",
            models.DecimalField(decimal_places=2, editable=False, max_digits=10),
        ),
    ]


def _garment_fields(unique_name=False):
    return _priced_fields() + [
        ("name", models.CharField(max_length=255, unique=unique_name)),
        ("design_name", models.CharField(max_length=255)),
        ("description", models.TextField(blank=True, default="")),
        ("image", models.CharField(blank=True, default="", max_length=500)),
        ("is_active", models.BooleanField(default=True)),
    ]


def _stitch_cost():
    return models.DecimalField(
        decimal_places=2,
        default=Decimal("0.00"),
        max_digits=10,
        validators=[django.core.validators.MinValueValidator(0)],
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="BlouseModel",
            fields=_garment_fields()
            + [
                ("stitch_cost", _stitch_cost()),
                ("images", models.JSONField(blank=True, default=list)),
            ],
            options={
                "db_table": "blouse_models",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="LehengaModel",
            fields=_garment_fields(),
            options={
                "db_table": "lehenga_models",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="SalwarKameezModel",
            fields=_garment_fields(unique_name=True),
            options={
                "db_table": "salwar_kameez_models",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="BlouseDesignCategory",
            fields=_base_fields()
            + [
                ("name", models.CharField(max_length=255, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("image", models.CharField(blank=True, default="", max_length=500)),
            ],
            options={
                "db_table": "blouse_design_categories",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="BlouseDesign",
            fields=_base_fields()
            + [
                ("name", models.CharField(max_length=255)),
                (
                    "type",
                    models.CharField(
                        choices=[("FRONT", "Front"), ("BACK", "Back")],
                        default="FRONT",
                        max_length=10,
                    ),
                ),
                ("image", models.CharField(blank=True, default="", max_length=500)),
                ("description", models.TextField(blank=True, default="")),
                ("stitch_cost", _stitch_cost()),
                ("is_active", models.BooleanField(default=True)),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="designs",
                        to="catalog.blousedesigncategory",
                    ),
                ),
            ],
            options={
                "db_table": "blouse_designs",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="BlouseDesignVariant",
            fields=_priced_fields()
            + [
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("image", models.CharField(blank=True, default="", max_length=500)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "design",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variants",
                        to="catalog.blousedesign",
                    ),
                ),
            ],
            options={
                "db_table": "blouse_design_variants",
                "ordering": ["created_at"],
            },
        ),
    ]

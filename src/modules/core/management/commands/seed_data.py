from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.accounts.models import UserRole
from modules.catalog.models import (
    BlouseDesign,
    BlouseDesignCategory,
    BlouseDesignVariant,
    BlouseModel,
    DesignType,
    Fabric,
    LehengaModel,
    SalwarKameezModel,
)
from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products = self._seed_products()
        garment_models = self._seed_garment_models()
        designs = self._seed_designs()
        fabrics = self._seed_fabrics()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={len(products)}, "
                f"garment_models={garment_models}, "
                f"designs={len(designs)}, "
                f"fabrics={fabrics}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser(
                "admin",
                email="admin@example.com",
                password="admin123",
                name="Store Admin",
                role=UserRole.ADMIN,
            )
            created += 1
        if not User.objects.filter(username="priya").exists():
            User.objects.create_user(
                "priya",
                email="priya@example.com",
                password="priya123",
                name="Priya Sharma",
                city="Hyderabad",
                state="Telangana",
            )
            created += 1
        return created

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("SAR-001", "Kanjivaram Silk Saree", Decimal("8999.00"), Decimal("10")),
            ("SAR-002", "Banarasi Georgette Saree", Decimal("5499.00"), None),
            ("SAR-003", "Chanderi Cotton Saree", Decimal("2199.00"), Decimal("5")),
            ("DUP-001", "Phulkari Dupatta", Decimal("1299.00"), None),
            ("DUP-002", "Bandhani Dupatta", Decimal("899.00"), Decimal("15")),
            ("KUR-001", "Lucknowi Chikankari Kurti", Decimal("1899.00"), None),
            ("KUR-002", "Block Print Anarkali", Decimal("2499.00"), Decimal("20")),
            ("FAB-001", "Raw Silk Blouse Piece", Decimal("649.00"), None),
        ]
        for sku, name, price, discount in catalog:
            product, _ = Product.objects.get_or_create(
                sku=sku,
                defaults={
                    "name": name,
                    "price": price,
                    "discount": discount,
                    "stock": random.randint(5, 60),
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_garment_models(self) -> int:
        self.stdout.write("Creating garment models...")
        created = 0
        blouse_models = [
            ("Classic Model", "Boat Neck", Decimal("1500"), None, Decimal("450")),
            ("Designer Model", "Sweetheart Neck", Decimal("2500"), Decimal("10"), Decimal("650")),
            ("Bridal Model", "High Neck Zardosi", Decimal("3500"), None, Decimal("900")),
        ]
        for name, design_name, price, discount, stitch_cost in blouse_models:
            _, was_created = BlouseModel.objects.get_or_create(
                name=name,
                defaults={
                    "design_name": design_name,
                    "price": price,
                    "discount": discount,
                    "stitch_cost": stitch_cost,
                },
            )
            created += was_created

        salwar_models = [
            ("Elegant Silk Salwar Kameez", "Traditional Silk Design", Decimal("3500"), Decimal("10")),
            ("Modern Cotton Salwar Set", "Contemporary Cotton Style", Decimal("2200"), None),
            ("Designer Georgette Suit", "Georgette Party Wear", Decimal("4200"), Decimal("15")),
        ]
        for name, design_name, price, discount in salwar_models:
            _, was_created = SalwarKameezModel.objects.get_or_create(
                name=name,
                defaults={"design_name": design_name, "price": price, "discount": discount},
            )
            created += was_created

        lehenga_models = [
            ("Mirror Work Lehenga", "Navratri Flare", Decimal("6500"), Decimal("5")),
            ("Velvet Bridal Lehenga", "Royal Kalidar", Decimal("14500"), None),
        ]
        for name, design_name, price, discount in lehenga_models:
            _, was_created = LehengaModel.objects.get_or_create(
                name=name,
                defaults={"design_name": design_name, "price": price, "discount": discount},
            )
            created += was_created

        self.stdout.write(self.style.SUCCESS("Creating garment models... Done!"))
        return created

    def _seed_designs(self) -> list[BlouseDesign]:
        self.stdout.write("Creating blouse designs...")
        categories = {}
        for name, description in [
            ("Traditional", "Classic and traditional blouse designs"),
            ("Modern", "Contemporary and fashionable blouse designs"),
            ("Bridal", "Elegant bridal blouse designs for special occasions"),
            ("Casual", "Comfortable casual blouse designs for daily wear"),
        ]:
            categories[name], _ = BlouseDesignCategory.objects.get_or_create(
                name=name, defaults={"description": description}
            )

        seed_designs = [
            ("Round Neck", DesignType.FRONT, "Traditional", Decimal("0")),
            ("Sweetheart Neck", DesignType.FRONT, "Modern", Decimal("150")),
            ("Potli Button Back", DesignType.BACK, "Bridal", Decimal("250")),
            ("Deep U Back", DesignType.BACK, "Casual", Decimal("100")),
        ]
        variants = [
            ("Simple", "Basic version with minimal embellishments", Decimal("0.01")),
            ("Embroidered", "Version with intricate embroidery work", Decimal("450")),
            ("Stone Work", "Elegant version with stone embellishments", Decimal("650")),
            ("Mirror Work", "Traditional version with mirror work", Decimal("550")),
        ]

        designs: list[BlouseDesign] = []
        for name, design_type, category, stitch_cost in seed_designs:
            design, created = BlouseDesign.objects.get_or_create(
                name=name,
                type=design_type,
                defaults={"category": categories[category], "stitch_cost": stitch_cost},
            )
            if created:
                for variant_name, description, price in variants:
                    BlouseDesignVariant.objects.create(
                        design=design,
                        name=variant_name,
                        description=description,
                        price=price,
                    )
            designs.append(design)

        self.stdout.write(self.style.SUCCESS("Creating blouse designs... Done!"))
        return designs

    def _seed_fabrics(self) -> int:
        self.stdout.write("Creating fabrics...")
        created = 0
        fabrics = [
            ("Kanjivaram Silk", "Silk", "Maroon", Decimal("1200")),
            ("Raw Silk", "Silk", "Mustard", Decimal("650")),
            ("Banarasi Brocade", "Brocade", "Gold", Decimal("950")),
            ("Chanderi Cotton", "Cotton", "Peach", Decimal("320")),
            ("Velvet", "Velvet", "Emerald", Decimal("780")),
        ]
        for name, fabric_type, color, price_per_meter in fabrics:
            _, was_created = Fabric.objects.get_or_create(
                name=name,
                color=color,
                defaults={"type": fabric_type, "price_per_meter": price_per_meter},
            )
            created += was_created
        self.stdout.write(self.style.SUCCESS("Creating fabrics... Done!"))
        return created

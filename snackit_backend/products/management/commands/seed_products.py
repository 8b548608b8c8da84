import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from products.models import Category, Product


class Command(BaseCommand):
    help = "Seed menu categories and products for local development"

    def add_arguments(self, parser):
        parser.add_argument(
            "--randomize-stock",
            action="store_true",
            help="Give every product a random stock level between 5 and 40.",
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding categories and products..."))

        # -------------------------------
        # CATEGORIES
        # -------------------------------
        categories = [
            ("snacks", "Snacks", "🍿"),
            ("beverages", "Beverages", "🥤"),
            ("instant-food", "Instant Food", "🍜"),
            ("chocolates", "Chocolates", "🍫"),
            ("biscuits", "Biscuits", "🍪"),
        ]

        category_objs = {}
        for slug, name, icon in categories:
            obj, _ = Category.objects.get_or_create(
                slug=slug,
                defaults={"name": name, "icon": icon},
            )
            category_objs[slug] = obj

        # -------------------------------
        # PRODUCTS
        # -------------------------------
        products_data = [
            ("Lay's Classic Salted", "snacks", "20.00", 25),
            ("Kurkure Masala Munch", "snacks", "20.00", 30),
            ("Coca-Cola 500ml", "beverages", "40.00", 20),
            ("Cold Coffee Can", "beverages", "60.00", 12),
            ("Maggi 2-Minute Noodles", "instant-food", "15.00", 50),
            ("Cup Noodles Masala", "instant-food", "50.00", 18),
            ("Dairy Milk Silk", "chocolates", "80.00", 10),
            ("KitKat 4 Finger", "chocolates", "30.00", 24),
            ("Parle-G", "biscuits", "10.00", 60),
            ("Good Day Cashew", "biscuits", "30.00", 22),
        ]

        created_count = 0
        for name, cat, price, stock in products_data:
            if options["randomize_stock"]:
                stock = random.randint(5, 40)

            _, created = Product.objects.get_or_create(
                name=name,
                category=category_objs[cat],
                defaults={
                    "price": Decimal(price),
                    "stock": stock,
                    "description": "",
                },
            )
            if created:
                created_count += 1

        self.stdout.write(
            self.style.SUCCESS(f"✅ Seeded {created_count} new products.")
        )

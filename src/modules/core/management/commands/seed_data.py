from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.customers.models import Customer, Gender
from modules.orders.dtos import PlaceOrderDTO
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderPlacementService
from modules.products.models import Category, Product, Review, Subcategory
from modules.products.repositories.django_repository import ProductDjangoRepository

CATALOG = {
    "Fruits": {
        "Fresh Fruits": [
            ("Alphonso Mango (1 kg)", Decimal("207.00")),
            ("Banana Robusta (6 pcs)", Decimal("45.00")),
            ("Royal Gala Apple (4 pcs)", Decimal("189.00")),
        ],
        "Exotic Fruits": [
            ("Kiwi (3 pcs)", Decimal("99.00")),
            ("Dragon Fruit (1 pc)", Decimal("119.00")),
        ],
    },
    "Vegetables": {
        "Leafy Greens": [
            ("Spinach Bunch", Decimal("25.00")),
            ("Coriander Bunch", Decimal("12.00")),
        ],
        "Root Vegetables": [
            ("Onion (1 kg)", Decimal("38.00")),
            ("Potato (1 kg)", Decimal("32.00")),
        ],
    },
    "Dairy": {
        "Milk": [
            ("Toned Milk (1 L)", Decimal("54.00")),
            ("Organic Cow Milk (1 L)", Decimal("92.00")),
        ],
        "Cheese": [
            ("Cheddar Slices (200 g)", Decimal("145.00")),
        ],
    },
}

CUSTOMERS = [
    ("Aarav Sharma", "aarav@example.com", 29, Gender.MALE, "Bangalore", "Karnataka"),
    ("Diya Patel", "diya@example.com", 34, Gender.FEMALE, "Ahmedabad", "Gujarat"),
    ("Kabir Singh", "kabir@example.com", 41, Gender.MALE, "Delhi", "Delhi"),
    ("Meera Iyer", "meera@example.com", 26, Gender.FEMALE, "Chennai", "Tamil Nadu"),
    ("Rohan Das", "rohan@example.com", 38, Gender.MALE, "Kolkata", "West Bengal"),
    ("Sara Khan", "sara@example.com", 31, Gender.FEMALE, "Mumbai", "Maharashtra"),
]


class Command(BaseCommand):
    help = "Seed database with a small Amazon Fresh catalog for development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=25,
            help="Number of orders to place through the placement service.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products = self._seed_catalog()
        customers = self._seed_customers()
        reviews_created = self._seed_reviews(customers, products)
        placed, rejected = self._place_orders(customers, products, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={len(products)}, "
                f"customers={len(customers)}, "
                f"reviews={reviews_created}, "
                f"orders={placed} (rejected={rejected})"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        if User.objects.filter(username="admin").exists():
            return 0
        User.objects.create_superuser("admin", password="admin123")
        return 1

    def _seed_catalog(self) -> list[Product]:
        self.stdout.write("Creating catalog...")
        products: list[Product] = []
        for category_name, subcategories in CATALOG.items():
            category, _ = Category.objects.get_or_create(name=category_name)
            for subcategory_name, items in subcategories.items():
                subcategory, _ = Subcategory.objects.get_or_create(
                    category=category, name=subcategory_name
                )
                for name, price in items:
                    product, _ = Product.objects.get_or_create(
                        name=name,
                        defaults={
                            "subcategory": subcategory,
                            "price_per_unit": price,
                            "stock_quantity": random.randint(5, 120),
                        },
                    )
                    products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating catalog... Done!"))
        return products

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        for idx, (name, email, age, gender, city, state) in enumerate(CUSTOMERS):
            customer, _ = Customer.objects.get_or_create(
                email=email,
                defaults={
                    "name": name,
                    "age": age,
                    "gender": gender,
                    "city": city,
                    "state": state,
                    "country": "India",
                    "signup_date": date(2024, 1, 1) + timedelta(days=37 * idx),
                    "prime_member": idx % 2 == 0,
                },
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_reviews(self, customers: list[Customer], products: list[Product]) -> int:
        created = 0
        for product in products:
            customer = random.choice(customers)
            _, was_created = Review.objects.get_or_create(
                product=product,
                customer=customer,
                defaults={
                    "rating": random.randint(1, 5),
                    "review_text": f"Seed review for {product.name}",
                    "review_date": date.today() - timedelta(days=random.randint(0, 90)),
                },
            )
            created += int(was_created)
        return created

    def _place_orders(
        self, customers: list[Customer], products: list[Product], count: int
    ) -> tuple[int, int]:
        self.stdout.write("Placing orders...")
        service = OrderPlacementService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )
        placed = rejected = 0
        for _ in range(count):
            result = service.place_order(
                PlaceOrderDTO(
                    customer_id=random.choice(customers).id,
                    product_id=random.choice(products).id,
                    quantity=random.randint(1, 6),
                    delivery_fee=random.choice([Decimal("0.00"), Decimal("30.00")]),
                )
            )
            if result.ok:
                placed += 1
            else:
                rejected += 1
        self.stdout.write(self.style.SUCCESS("Placing orders... Done!"))
        return placed, rejected

#!/usr/bin/env python3
"""
Seed the marketplace tables with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: dealers spread over Iraqi provinces, prices in IQD,
  most listings approved, some awaiting approval

Usage:
    python scripts/seed_marketplace.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from parts_market.domain.location import is_valid_city_for_province
from parts_market.domain.product import ProductCondition
from parts_market.infra.db.models import (
    CarBrandRow,
    CarModelRow,
    DealerRow,
    PartCategoryRow,
    ProductCompatibilityRow,
    ProductRow,
)
from parts_market.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_PRODUCTS = 80
APPROVAL_RATE = 0.85  # Share of listings already approved by an admin
SEED_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


# ==============================================================================
# Reference Data
# ==============================================================================

MODELS_BY_BRAND: dict[str, list[tuple[str, int, int]]] = {
    "Toyota": [
        ("Corolla", 2010, 2024),
        ("Camry", 2010, 2024),
        ("RAV4", 2012, 2024),
        ("Land Cruiser", 2008, 2024),
        ("Hilux", 2010, 2024),
    ],
    "Nissan": [
        ("Altima", 2010, 2024),
        ("Sentra", 2010, 2024),
        ("Patrol", 2008, 2024),
    ],
    "Hyundai": [
        ("Elantra", 2010, 2024),
        ("Sonata", 2010, 2024),
        ("Tucson", 2012, 2024),
    ],
    "Kia": [
        ("Optima", 2010, 2024),
        ("Sportage", 2012, 2024),
        ("Rio", 2010, 2024),
    ],
    "Mercedes-Benz": [
        ("C-Class", 2010, 2024),
        ("E-Class", 2010, 2024),
    ],
}

# (category, description, [(part name, base price IQD)])
PARTS_BY_CATEGORY: list[tuple[str, str, list[tuple[str, int]]]] = [
    ("Filters", "Air, oil, and fuel filters", [("Air Filter", 15000), ("Oil Filter", 10000)]),
    ("Brakes", "Brake system components", [("Brake Pads Set", 85000), ("Brake Disc", 120000)]),
    ("Engine Parts", "Engine components and accessories", [("Spark Plugs Set", 25000), ("Timing Belt", 60000)]),
    ("Electrical", "Electrical system parts", [("Alternator", 180000), ("Starter Motor", 150000)]),
    ("Suspension", "Suspension system parts", [("Shock Absorber", 95000), ("Control Arm", 70000)]),
    ("Lights", "Headlights, taillights, and indicators", [("Headlight Assembly", 210000)]),
]

# (name, store name, province, city)
DEALERS: list[tuple[str, str, str, str]] = [
    ("Mohammed Auto Parts", "Mohammed Auto Parts - Karrada Branch", "Baghdad", "Al-Karrada"),
    ("Mansour Spares", "Mansour Spares", "Baghdad", "Al-Mansour"),
    ("Basra Spare Parts", "Basra Spare Parts - Main Store", "Basra", "Al-Zubair"),
    ("Erbil Motors Supply", "Erbil Motors Supply", "Erbil", "Erbil"),
    ("Mosul Parts House", "Mosul Parts House", "Nineveh", "Mosul"),
    ("Najaf Auto Center", "Najaf Auto Center", "Najaf", "Al-Kufa"),
]

CONDITIONS = [ProductCondition.NEW, ProductCondition.USED, ProductCondition.REFURBISHED]


# ==============================================================================
# Seed Generation
# ==============================================================================


def build_dealers() -> list[DealerRow]:
    dealers = []
    for index, (name, store_name, province, city) in enumerate(DEALERS, 1):
        if not is_valid_city_for_province(city, province):
            raise ValueError(f"{city} is not a city of {province}")
        dealers.append(
            DealerRow(
                name=name,
                store_name=store_name,
                phone_number=f"+964-770-{index:03d}-{1000 + index:04d}",
                province=province,
                city=city,
            )
        )
    return dealers


def generate_product(
    dealers: list[DealerRow],
    categories: dict[str, PartCategoryRow],
    models: list[CarModelRow],
    index: int,
) -> ProductRow:
    """Generate a single random product compatible with one to three models."""
    category_name, _, parts = random.choice(PARTS_BY_CATEGORY)
    part_name, base_price = random.choice(parts)
    compatible = random.sample(models, k=random.randint(1, 3))
    primary = compatible[0]

    condition = random.choices(CONDITIONS, weights=[6, 3, 1], k=1)[0]
    discount = {ProductCondition.NEW: 1.0, ProductCondition.USED: 0.55, ProductCondition.REFURBISHED: 0.75}
    price = int(base_price * discount[condition] * random.uniform(0.85, 1.25))
    price = max(1000, round(price, -3))  # round to the nearest 1000 IQD

    rating = round(random.uniform(3.0, 5.0), 1) if random.random() < 0.7 else None

    product = ProductRow(
        name=f"{primary.brand.name} {primary.name} {part_name}",
        description=f"{part_name} for {primary.brand.name} {primary.name} "
        f"{primary.year_start}-{primary.year_end}.",
        part_number=f"{random.randint(10000, 99999)}-{random.randint(100, 999)}",
        oem_number=f"OEM-{random.randint(100000, 999999)}",
        price=price,
        rating=rating,
        stock_quantity=random.randint(0, 60),
        condition=condition,
        warranty=random.choice([None, "6 months", "1 year", "2 years"]),
        manufacturer=primary.brand.name,
        images=[],
        is_approved=random.random() < APPROVAL_RATE,
        dealer=random.choice(dealers),
        category=categories[category_name],
        created_at=SEED_NOW - timedelta(hours=index * 7),
    )
    product.compatibility = [ProductCompatibilityRow(car_model=model) for model in compatible]
    return product


def seed_marketplace(num_products: int = NUM_PRODUCTS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with marketplace data.

    Args:
        num_products: Number of products to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding marketplace with {num_products} products (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data, children first (idempotent)
        print("🗑️  Clearing existing data...")
        for table in (
            ProductCompatibilityRow,
            ProductRow,
            DealerRow,
            PartCategoryRow,
            CarModelRow,
            CarBrandRow,
        ):
            session.execute(delete(table))

        # Step 2: Reference data
        models: list[CarModelRow] = []
        for brand_name, brand_models in MODELS_BY_BRAND.items():
            brand = CarBrandRow(name=brand_name)
            session.add(brand)
            for model_name, year_start, year_end in brand_models:
                models.append(
                    CarModelRow(name=model_name, brand=brand, year_start=year_start, year_end=year_end)
                )
        session.add_all(models)

        categories = {
            name: PartCategoryRow(name=name, description=description)
            for name, description, _ in PARTS_BY_CATEGORY
        }
        session.add_all(categories.values())

        dealers = build_dealers()
        session.add_all(dealers)
        print(f"🚗 {len(MODELS_BY_BRAND)} brands, {len(models)} models, {len(dealers)} dealers")

        # Step 3: Products
        products = [generate_product(dealers, categories, models, i) for i in range(num_products)]
        session.add_all(products)
        session.flush()

        approved = sum(1 for product in products if product.is_approved)
        print(f"✅ Seeded {len(products)} products ({approved} approved)")

        print("\n📊 Sample products:")
        for i, product in enumerate(products[:5], 1):
            print(
                f"   {i}. {product.name} - {product.price:,} IQD "
                f"({product.dealer.city}, {product.dealer.province})"
            )


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_marketplace()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)

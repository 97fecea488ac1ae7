"""Shared fixtures: factories for domain products and dealers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest

from parts_market.domain.product import Dealer, Product, ProductCondition

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_dealer() -> Callable[..., Dealer]:
    def factory(
        province: str | None = "Baghdad",
        city: str | None = "Al-Karrada",
        dealer_id: str = "d-1",
    ) -> Dealer:
        return Dealer(id=dealer_id, name=f"Dealer {dealer_id}", province=province, city=city)

    return factory


@pytest.fixture
def make_product(make_dealer: Callable[..., Dealer]) -> Callable[..., Product]:
    """
    Product factory.

    `age_hours` sets created_at relative to a fixed base time, so a larger
    age means an older listing.
    """

    def factory(
        product_id: str,
        *,
        price: int = 50000,
        age_hours: int = 0,
        is_approved: bool = True,
        province: str | None = "Baghdad",
        city: str | None = "Al-Karrada",
        **overrides: Any,
    ) -> Product:
        fields: dict[str, Any] = {
            "id": product_id,
            "name": f"Part {product_id}",
            "price": price,
            "is_approved": is_approved,
            "stock_quantity": 5,
            "condition": ProductCondition.NEW,
            "dealer": make_dealer(province=province, city=city, dealer_id=f"d-{product_id}"),
            "created_at": BASE_TIME - timedelta(hours=age_hours),
        }
        fields.update(overrides)
        return Product(**fields)

    return factory

from __future__ import annotations

from dataclasses import dataclass

from parts_market.domain.location import LocationScore, calculate_location_score
from parts_market.domain.product import Product, SearchCriteria, SortMode


@dataclass(frozen=True, slots=True)
class RankedProduct:
    product: Product
    location: LocationScore | None = None  # set only when location ranking ran


def rank_page(products: list[Product], criteria: SearchCriteria) -> list[RankedProduct]:
    """
    Order an already-fetched page for presentation.

    Only the `location` sort mode re-orders anything; every other mode keeps
    the store order verbatim. Location ranking silently falls back to store
    order when the requester province or city is missing.
    """
    if criteria.sort_by is not SortMode.LOCATION or not criteria.has_requester_location:
        return [RankedProduct(product=product) for product in products]

    return rank_by_location(
        products,
        customer_province=criteria.customer_province or "",
        customer_city=criteria.customer_city or "",
    )


def rank_by_location(
    products: list[Product],
    customer_province: str,
    customer_city: str,
) -> list[RankedProduct]:
    """
    Stable sort by location score, highest first.

    Products whose dealer lacks a province or city cannot be scored; they
    keep their relative order and follow every scored product.
    """
    scored: list[RankedProduct] = []
    unscored: list[RankedProduct] = []

    for product in products:
        dealer = product.dealer
        if not dealer.province or not dealer.city:
            unscored.append(RankedProduct(product=product))
            continue

        score = calculate_location_score(
            customer_province,
            customer_city,
            dealer.province,
            dealer.city,
        )
        scored.append(RankedProduct(product=product, location=score))

    # sorted() is stable: equal scores keep the store order
    scored = sorted(scored, key=lambda ranked: -ranked.location.score)  # type: ignore[union-attr]

    return scored + unscored

from __future__ import annotations

from parts_market.domain.product import Paging, Product, SearchCriteria, SortMode
from parts_market.ports.product_repository import ProductRepository, SearchResult


def _same_id(left: str, right: str) -> bool:
    # UUIDs compare by value, so hex case is irrelevant
    return left.lower() == right.lower()


class InMemoryProductRepository(ProductRepository):
    """
    Canonical contract implementation for tests.

    - Stores products in insertion order
    - Never returns unapproved products
    - Applies AND-semantics filtering
    - Orders by the store-native order of the sort mode
    - Applies paging AFTER filtering and ordering
    - Returns total_count of matching products before paging
    """

    def __init__(self, products: list[Product]) -> None:
        self._products = products

    def search(self, criteria: SearchCriteria, paging: Paging) -> SearchResult:
        # Trust that UseCase has validated paging (contract programming)
        matches = [product for product in self._products if self._matches(product, criteria)]
        total_count = len(matches)  # Count BEFORE paging

        ordered = self._order(matches, criteria.sort_by)

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(products=ordered[start:end], total_count=total_count)

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._products:
            if _same_id(product.id, product_id) and product.is_approved:
                return product
        return None

    def _matches(self, product: Product, criteria: SearchCriteria) -> bool:
        if not product.is_approved:
            return False

        if criteria.search:
            term = criteria.search.lower()
            fields = (
                product.name,
                product.description,
                product.part_number,
                product.oem_number,
            )
            if not any(value and term in value.lower() for value in fields):
                return False

        if criteria.category_id and not _same_id(product.category_id, criteria.category_id):
            return False
        if criteria.condition is not None and product.condition != criteria.condition:
            return False
        if criteria.min_price is not None and product.price < criteria.min_price:
            return False
        if criteria.max_price is not None and product.price > criteria.max_price:
            return False

        if criteria.model_id:
            if not any(_same_id(c.model_id, criteria.model_id) for c in product.compatibility):
                return False
        elif criteria.brand_id:
            if not any(_same_id(c.brand_id, criteria.brand_id) for c in product.compatibility):
                return False

        return True

    def _order(self, products: list[Product], sort_by: SortMode) -> list[Product]:
        # Successive stable sorts: last key applied is the primary one
        ordered = sorted(products, key=lambda p: p.id)
        ordered = sorted(ordered, key=lambda p: p.created_at, reverse=True)

        if sort_by is SortMode.PRICE:
            ordered = sorted(ordered, key=lambda p: p.price)
        elif sort_by is SortMode.RATING:
            ordered = sorted(ordered, key=lambda p: (p.rating is None, -(p.rating or 0.0)))

        return ordered

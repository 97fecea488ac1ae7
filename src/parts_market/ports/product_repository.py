from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from parts_market.domain.product import Paging, Product, SearchCriteria


@dataclass(frozen=True)
class SearchResult:
    """One page of matching products plus the total matching count."""

    products: list[Product]
    total_count: int  # Total matching products before paging


class ProductRepository(ABC):
    """
    Port for product data access.

    Contract:
        - Only approved products are ever returned, by search or by id
        - search() filters with AND semantics across criteria fields
        - search() orders by the store-native order for criteria.sort_by:
            location/newest -> created_at DESC
            price           -> price ASC
            rating          -> rating DESC, unrated last
          ties broken by created_at DESC then id
        - total_count is computed over the full filtered set, before paging
        - Unknown or malformed identifiers match nothing, they never raise
        - Identifiers compare case-insensitively (UUID hex digits)
        - paging is pre-validated by the caller (UseCase)
    """

    @abstractmethod
    def search(self, criteria: SearchCriteria, paging: Paging) -> SearchResult:
        """
        Search approved products with filters, store-native order and paging.

        Args:
            criteria: Filter criteria and sort mode
            paging: Pagination parameters - pre-validated

        Returns:
            SearchResult with the requested page and total count
        """
        ...

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return the approved product with this id, or None."""
        ...

from __future__ import annotations

import logging
from dataclasses import dataclass

from parts_market.domain.product import Pagination, Paging, SearchCriteria
from parts_market.domain.ranking import RankedProduct, rank_page
from parts_market.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchProductsRequest:
    criteria: SearchCriteria
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchProductsResponse:
    products: list[RankedProduct]
    pagination: Pagination


class SearchProducts:
    """
    Product search with location-aware ranking.

    Pipeline: repository filters, orders (store-native) and pages; the
    ranker then re-orders the fetched page when sort mode is `location`.
    Pagination always reflects the filtered total, never the re-ranking.
    """

    def __init__(self, product_repository: ProductRepository) -> None:
        self._repository = product_repository

    def execute(self, request: SearchProductsRequest) -> SearchProductsResponse:
        """
        Execute product search.

        Args:
            request: Search criteria and paging

        Returns:
            Ranked page of products plus pagination metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        request.paging.validate()

        result = self._repository.search(
            criteria=request.criteria,
            paging=request.paging,
        )

        ranked = rank_page(result.products, request.criteria)

        logger.debug(
            "Product search executed",
            extra={
                "sort_by": request.criteria.sort_by.value,
                "location_ranked": any(item.location is not None for item in ranked),
                "page": request.paging.page,
                "returned": len(ranked),
                "total": result.total_count,
            },
        )

        return SearchProductsResponse(
            products=ranked,
            pagination=Pagination.from_total(request.paging, result.total_count),
        )

from __future__ import annotations

from parts_market.domain.product import Paging, Product, SearchCriteria, SortMode
from parts_market.domain.ranking import RankedProduct
from parts_market.entrypoints.http.dtos.product_search import (
    CategoryProductsQueryDTO,
    CompatibleModelResponseDTO,
    DealerResponseDTO,
    LocationPriorityDTO,
    PaginationDTO,
    ProductResponseDTO,
    ProductSearchQueryDTO,
    ProductSearchResponseDTO,
)
from parts_market.use_cases.search_products import (
    SearchProductsRequest,
    SearchProductsResponse,
)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or value.strip() == "":
        return None
    return value


class ProductSearchMapper:
    """Maps between REST DTOs and domain models for product search."""

    @staticmethod
    def to_domain_criteria(dto: ProductSearchQueryDTO) -> SearchCriteria:
        """
        Converts query params to domain search criteria.

        Empty strings (e.g. `?brand_id=`) are treated as absent. Values are
        otherwise passed through untouched; location strings are compared
        exactly as sent.
        """
        return SearchCriteria(
            search=_blank_to_none(dto.search),
            brand_id=_blank_to_none(dto.brand_id),
            model_id=_blank_to_none(dto.model_id),
            category_id=_blank_to_none(dto.category_id),
            condition=dto.condition,
            min_price=dto.min_price,
            max_price=dto.max_price,
            customer_province=_blank_to_none(dto.customer_province),
            customer_city=_blank_to_none(dto.customer_city),
            sort_by=dto.sort_by,
        )

    @staticmethod
    def to_domain_request(dto: ProductSearchQueryDTO) -> SearchProductsRequest:
        return SearchProductsRequest(
            criteria=ProductSearchMapper.to_domain_criteria(dto),
            paging=Paging(page=dto.page, limit=dto.limit),
        )

    @staticmethod
    def to_category_request(
        category_id: str, dto: CategoryProductsQueryDTO
    ) -> SearchProductsRequest:
        """Category listing is a newest-first search pinned to one category."""
        return SearchProductsRequest(
            criteria=SearchCriteria(
                search=_blank_to_none(dto.search),
                category_id=category_id,
                sort_by=SortMode.NEWEST,
            ),
            paging=Paging(page=dto.page, limit=dto.limit),
        )

    @staticmethod
    def to_product_response(ranked: RankedProduct | Product) -> ProductResponseDTO:
        """
        Converts a domain product (optionally ranked) to its REST DTO.

        Args:
            ranked: Ranked product from a search, or a bare product

        Returns:
            ProductResponseDTO, with location_priority when it was ranked by location
        """
        if isinstance(ranked, RankedProduct):
            product, location = ranked.product, ranked.location
        else:
            product, location = ranked, None

        dealer = product.dealer
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            rating=product.rating,
            stock_quantity=product.stock_quantity,
            condition=product.condition,
            description=product.description,
            part_number=product.part_number,
            oem_number=product.oem_number,
            warranty=product.warranty,
            manufacturer=product.manufacturer,
            images=list(product.images),
            category_id=product.category_id,
            category_name=product.category_name,
            dealer=DealerResponseDTO(
                id=dealer.id,
                name=dealer.name,
                store_name=dealer.store_name,
                phone_number=dealer.phone_number,
                province=dealer.province,
                city=dealer.city,
            ),
            compatibility=[
                CompatibleModelResponseDTO(
                    model_id=entry.model_id,
                    model_name=entry.model_name,
                    brand_id=entry.brand_id,
                    brand_name=entry.brand_name,
                )
                for entry in product.compatibility
            ],
            created_at=product.created_at,
            location_priority=(
                LocationPriorityDTO(score=location.score, reason=location.reason)
                if location is not None
                else None
            ),
        )

    @staticmethod
    def to_response(result: SearchProductsResponse) -> ProductSearchResponseDTO:
        pagination = result.pagination
        return ProductSearchResponseDTO(
            products=[ProductSearchMapper.to_product_response(item) for item in result.products],
            pagination=PaginationDTO(
                page=pagination.page,
                limit=pagination.limit,
                total=pagination.total,
                pages=pagination.pages,
            ),
        )

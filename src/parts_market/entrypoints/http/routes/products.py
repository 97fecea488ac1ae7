from fastapi import APIRouter, Depends

from parts_market.entrypoints.http.dependencies import (
    get_product_by_id_use_case,
    get_search_products_use_case,
)
from parts_market.entrypoints.http.dtos.product_search import (
    ProductResponseDTO,
    ProductSearchQueryDTO,
    ProductSearchResponseDTO,
)
from parts_market.entrypoints.http.error_responses import ErrorResponse
from parts_market.entrypoints.http.mappers.product_search_mapper import ProductSearchMapper
from parts_market.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from parts_market.use_cases.search_products import SearchProducts


router = APIRouter(tags=["Products"])


@router.get(
    "/products/search",
    response_model=ProductSearchResponseDTO,
    summary="Search spare parts",
    description="""
    Search approved spare parts with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics; unapproved products never appear
    - search: case-insensitive match on name, description, part number, OEM number
    - model_id: parts compatible with that car model
    - brand_id: parts compatible with any model of that brand (ignored when model_id is set)
    - min_price/max_price: inclusive, in IQD
    - Unknown ids simply match nothing

    ## Sorting
    - location (default): same city first, then same province, then the rest.
      Needs customer_province and customer_city, otherwise newest first.
      Products whose dealer has no province or city come last, in newest-first
      order, with location_priority: null.
    - price: cheapest first
    - rating: best rated first, unrated last
    - newest: most recently listed first

    ## Pagination
    - page starts at 1, default limit 20, max limit 100
    - pages = ceil(total / limit)

    ## Example
    ```
    GET /v1/products/search?model_id=...&customer_province=Baghdad&customer_city=Al-Karrada
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Invalid query parameters"}},
)
def search_products(
    query: ProductSearchQueryDTO = Depends(),
    use_case: SearchProducts = Depends(get_search_products_use_case),
) -> ProductSearchResponseDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    request = ProductSearchMapper.to_domain_request(query)

    result = use_case.execute(request)

    return ProductSearchMapper.to_response(result)


@router.get(
    "/products/{product_id}",
    response_model=ProductResponseDTO,
    summary="Get product details",
    responses={
        404: {"model": ErrorResponse, "description": "Product not found or not approved"},
        422: {"model": ErrorResponse, "description": "product_id is not a UUID"},
    },
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_product_by_id_use_case),
) -> ProductResponseDTO:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id))

    return ProductSearchMapper.to_product_response(result.product)

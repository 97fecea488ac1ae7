from fastapi import APIRouter, Depends

from parts_market.entrypoints.http.dependencies import (
    get_category_use_case,
    get_list_categories_use_case,
    get_search_products_use_case,
)
from parts_market.entrypoints.http.dtos.catalog import PartCategoryResponseDTO
from parts_market.entrypoints.http.dtos.product_search import (
    CategoryProductsQueryDTO,
    ProductSearchResponseDTO,
)
from parts_market.entrypoints.http.error_responses import ErrorResponse
from parts_market.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from parts_market.entrypoints.http.mappers.product_search_mapper import ProductSearchMapper
from parts_market.use_cases.browse_categories import GetPartCategory, ListPartCategories
from parts_market.use_cases.search_products import SearchProducts


router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[PartCategoryResponseDTO],
    summary="List part categories",
)
def list_categories(
    use_case: ListPartCategories = Depends(get_list_categories_use_case),
) -> list[PartCategoryResponseDTO]:
    return [CatalogMapper.to_category_response(category) for category in use_case.execute()]


@router.get(
    "/{category_id}",
    response_model=PartCategoryResponseDTO,
    summary="Get a part category",
    responses={404: {"model": ErrorResponse, "description": "Category not found"}},
)
def get_category(
    category_id: str,
    use_case: GetPartCategory = Depends(get_category_use_case),
) -> PartCategoryResponseDTO:
    return CatalogMapper.to_category_response(use_case.execute(category_id))


@router.get(
    "/{category_id}/products",
    response_model=ProductSearchResponseDTO,
    summary="List approved products of a category",
    description="Newest first. An unknown category yields an empty page.",
)
def list_category_products(
    category_id: str,
    query: CategoryProductsQueryDTO = Depends(),
    use_case: SearchProducts = Depends(get_search_products_use_case),
) -> ProductSearchResponseDTO:
    request = ProductSearchMapper.to_category_request(category_id, query)

    result = use_case.execute(request)

    return ProductSearchMapper.to_response(result)

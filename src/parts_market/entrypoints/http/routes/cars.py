from fastapi import APIRouter, Depends

from parts_market.entrypoints.http.dependencies import (
    get_list_car_brands_use_case,
    get_list_car_models_use_case,
)
from parts_market.entrypoints.http.dtos.catalog import CarBrandResponseDTO, CarModelResponseDTO
from parts_market.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from parts_market.use_cases.browse_car_catalog import ListCarBrands, ListCarModels


router = APIRouter(prefix="/cars", tags=["Cars"])


@router.get(
    "/brands",
    response_model=list[CarBrandResponseDTO],
    summary="List car brands",
)
def list_brands(
    use_case: ListCarBrands = Depends(get_list_car_brands_use_case),
) -> list[CarBrandResponseDTO]:
    return [CatalogMapper.to_brand_response(brand) for brand in use_case.execute()]


@router.get(
    "/models",
    response_model=list[CarModelResponseDTO],
    summary="List car models of every brand",
)
def list_models(
    use_case: ListCarModels = Depends(get_list_car_models_use_case),
) -> list[CarModelResponseDTO]:
    return [CatalogMapper.to_model_response(model) for model in use_case.execute()]


@router.get(
    "/brands/{brand_id}/models",
    response_model=list[CarModelResponseDTO],
    summary="List car models of a brand",
    description="An unknown brand yields an empty list.",
)
def list_models_by_brand(
    brand_id: str,
    use_case: ListCarModels = Depends(get_list_car_models_use_case),
) -> list[CarModelResponseDTO]:
    return [CatalogMapper.to_model_response(model) for model in use_case.execute(brand_id)]

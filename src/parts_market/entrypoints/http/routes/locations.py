from fastapi import APIRouter

from parts_market.domain.location import get_all_provinces, get_cities_by_province
from parts_market.entrypoints.http.dtos.catalog import CitiesResponseDTO, ProvincesResponseDTO


router = APIRouter(prefix="/locations", tags=["Locations"])


@router.get(
    "/provinces",
    response_model=ProvincesResponseDTO,
    summary="List Iraqi provinces",
)
def list_provinces() -> ProvincesResponseDTO:
    return ProvincesResponseDTO(provinces=get_all_provinces())


@router.get(
    "/provinces/{province}/cities",
    response_model=CitiesResponseDTO,
    summary="List the cities of a province",
    description="Province names are matched exactly. An unknown province yields no cities.",
)
def list_cities(province: str) -> CitiesResponseDTO:
    return CitiesResponseDTO(province=province, cities=get_cities_by_province(province))

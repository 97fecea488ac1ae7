from __future__ import annotations

from parts_market.domain.catalog import CarBrand, CarModel
from parts_market.ports.catalog_repository import CarCatalogRepository


class ListCarBrands:
    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self) -> list[CarBrand]:
        return self._repository.list_brands()


class ListCarModels:
    """All models, or only those of one brand when brand_id is given."""

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self, brand_id: str | None = None) -> list[CarModel]:
        if brand_id is None:
            return self._repository.list_models()
        return self._repository.list_models_by_brand(brand_id)

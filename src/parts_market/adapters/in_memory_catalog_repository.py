from __future__ import annotations

from parts_market.domain.catalog import CarBrand, CarModel, PartCategory
from parts_market.ports.catalog_repository import CarCatalogRepository, CategoryRepository


class InMemoryCarCatalogRepository(CarCatalogRepository):
    """Canonical contract implementation for tests."""

    def __init__(self, brands: list[CarBrand], models: list[CarModel]) -> None:
        self._brands = brands
        self._models = models

    def list_brands(self) -> list[CarBrand]:
        return sorted(self._brands, key=lambda brand: brand.name)

    def list_models(self) -> list[CarModel]:
        return sorted(self._models, key=lambda model: (model.brand_name, model.name))

    def list_models_by_brand(self, brand_id: str) -> list[CarModel]:
        models = [model for model in self._models if model.brand_id == brand_id]
        return sorted(models, key=lambda model: model.name)


class InMemoryCategoryRepository(CategoryRepository):
    """Canonical contract implementation for tests. Counts are taken as given."""

    def __init__(self, categories: list[PartCategory]) -> None:
        self._categories = categories

    def list_categories(self) -> list[PartCategory]:
        return sorted(self._categories, key=lambda category: category.name)

    def get_by_id(self, category_id: str) -> PartCategory | None:
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

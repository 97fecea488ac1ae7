from __future__ import annotations

from abc import ABC, abstractmethod

from parts_market.domain.catalog import CarBrand, CarModel, PartCategory


class CarCatalogRepository(ABC):
    """Port for car brand/model reference data used by compatibility filters."""

    @abstractmethod
    def list_brands(self) -> list[CarBrand]:
        """All brands ordered by name."""
        ...

    @abstractmethod
    def list_models(self) -> list[CarModel]:
        """All models ordered by brand name, then model name."""
        ...

    @abstractmethod
    def list_models_by_brand(self, brand_id: str) -> list[CarModel]:
        """Models of one brand ordered by name. Unknown brand -> empty list."""
        ...


class CategoryRepository(ABC):
    """Port for part categories."""

    @abstractmethod
    def list_categories(self) -> list[PartCategory]:
        """All categories ordered by name, with approved product counts."""
        ...

    @abstractmethod
    def get_by_id(self, category_id: str) -> PartCategory | None: ...

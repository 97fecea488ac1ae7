from __future__ import annotations

from parts_market.domain.catalog import CarBrand, CarModel, PartCategory
from parts_market.entrypoints.http.dtos.catalog import (
    CarBrandResponseDTO,
    CarModelResponseDTO,
    PartCategoryResponseDTO,
)


class CatalogMapper:
    """Maps car catalog and category domain entities to REST DTOs."""

    @staticmethod
    def to_brand_response(brand: CarBrand) -> CarBrandResponseDTO:
        return CarBrandResponseDTO(id=brand.id, name=brand.name)

    @staticmethod
    def to_model_response(model: CarModel) -> CarModelResponseDTO:
        return CarModelResponseDTO(
            id=model.id,
            name=model.name,
            brand_id=model.brand_id,
            brand_name=model.brand_name,
            year_start=model.year_start,
            year_end=model.year_end,
        )

    @staticmethod
    def to_category_response(category: PartCategory) -> PartCategoryResponseDTO:
        return PartCategoryResponseDTO(
            id=category.id,
            name=category.name,
            description=category.description,
            product_count=category.product_count,
        )

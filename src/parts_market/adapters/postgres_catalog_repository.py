"""PostgreSQL implementations of the car catalog and category ports."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.orm import Session, contains_eager

from parts_market.domain.catalog import CarBrand, CarModel, PartCategory
from parts_market.infra.db.models.catalog import CarBrandRow, CarModelRow, PartCategoryRow
from parts_market.infra.db.models.product import ProductRow
from parts_market.ports.catalog_repository import CarCatalogRepository, CategoryRepository

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import Label


class PostgresCarCatalogRepository(CarCatalogRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_brands(self) -> list[CarBrand]:
        rows = self._session.execute(select(CarBrandRow).order_by(CarBrandRow.name)).scalars().all()
        return [CarBrand(id=str(row.id), name=row.name) for row in rows]

    def list_models(self) -> list[CarModel]:
        query = (
            select(CarModelRow)
            .join(CarModelRow.brand)
            .options(contains_eager(CarModelRow.brand))
            .order_by(CarBrandRow.name, CarModelRow.name)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._model_to_domain(row) for row in rows]

    def list_models_by_brand(self, brand_id: str) -> list[CarModel]:
        try:
            parsed = uuid.UUID(brand_id)
        except ValueError:  # Invalid UUID format
            return []

        query = (
            select(CarModelRow)
            .join(CarModelRow.brand)
            .options(contains_eager(CarModelRow.brand))
            .where(CarModelRow.brand_id == parsed)
            .order_by(CarModelRow.name)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._model_to_domain(row) for row in rows]

    def _model_to_domain(self, row: CarModelRow) -> CarModel:
        return CarModel(
            id=str(row.id),
            name=row.name,
            brand_id=str(row.brand_id),
            brand_name=row.brand.name,
            year_start=row.year_start,
            year_end=row.year_end,
        )


class PostgresCategoryRepository(CategoryRepository):
    """Part categories with the number of approved products in each."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_categories(self) -> list[PartCategory]:
        query = select(PartCategoryRow, self._approved_count()).order_by(PartCategoryRow.name)
        rows = self._session.execute(query).all()
        return [self._to_domain(row, count) for row, count in rows]

    def get_by_id(self, category_id: str) -> PartCategory | None:
        try:
            parsed = uuid.UUID(category_id)
        except ValueError:  # Invalid UUID format
            return None

        query = select(PartCategoryRow, self._approved_count()).where(
            PartCategoryRow.id == parsed
        )
        result = self._session.execute(query).one_or_none()
        if result is None:
            return None

        row, count = result
        return self._to_domain(row, count)

    def _approved_count(self) -> Label[int]:
        return (
            select(func.count(ProductRow.id))
            .where(
                ProductRow.category_id == PartCategoryRow.id,
                ProductRow.is_approved.is_(True),
            )
            .correlate(PartCategoryRow)
            .scalar_subquery()
            .label("product_count")
        )

    def _to_domain(self, row: PartCategoryRow, count: int | None) -> PartCategory:
        return PartCategory(
            id=str(row.id),
            name=row.name,
            description=row.description,
            product_count=count or 0,
        )

"""
Unit test suite for the PostgreSQL car catalog and category repositories.

Uses a mocked session. Tests verify:
- Rows (UUID ids) are converted to domain entities
- Malformed UUIDs short-circuit without touching the database
- Category counts come from the correlated approved-product subquery
"""

from __future__ import annotations

import uuid
from unittest.mock import Mock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session

from parts_market.adapters.postgres_catalog_repository import (
    PostgresCarCatalogRepository,
    PostgresCategoryRepository,
)
from parts_market.domain.catalog import CarBrand, CarModel, PartCategory
from parts_market.infra.db.models import CarBrandRow, CarModelRow, PartCategoryRow

TOYOTA_ID = uuid.UUID("10000000-0000-0000-0000-000000000001")
COROLLA_ID = uuid.UUID("20000000-0000-0000-0000-000000000001")
FILTERS_ID = uuid.UUID("40000000-0000-0000-0000-000000000001")


@pytest.fixture()
def mock_session() -> Mock:
    """Mock SQLAlchemy session."""
    return Mock(spec=Session)


@pytest.fixture()
def toyota_row() -> CarBrandRow:
    return CarBrandRow(id=TOYOTA_ID, name="Toyota")


@pytest.fixture()
def corolla_row(toyota_row: CarBrandRow) -> CarModelRow:
    return CarModelRow(
        id=COROLLA_ID,
        name="Corolla",
        brand_id=TOYOTA_ID,
        brand=toyota_row,
        year_start=2010,
        year_end=2024,
    )


# ==============================================================================
# Car Catalog
# ==============================================================================


def test_list_brands(mock_session: Mock, toyota_row: CarBrandRow) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = [toyota_row]

    brands = PostgresCarCatalogRepository(mock_session).list_brands()

    assert brands == [CarBrand(id=str(TOYOTA_ID), name="Toyota")]


def test_list_models_converts_rows(mock_session: Mock, corolla_row: CarModelRow) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = [corolla_row]

    models = PostgresCarCatalogRepository(mock_session).list_models()

    assert models == [
        CarModel(
            id=str(COROLLA_ID),
            name="Corolla",
            brand_id=str(TOYOTA_ID),
            brand_name="Toyota",
            year_start=2010,
            year_end=2024,
        )
    ]


def test_list_models_orders_by_brand_then_model(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    PostgresCarCatalogRepository(mock_session).list_models()

    query = mock_session.execute.call_args.args[0]
    sql = str(query.compile(dialect=postgresql.dialect()))
    assert sql.endswith("ORDER BY car_brands.name, car_models.name")


def test_list_models_by_brand_filters_on_brand(
    mock_session: Mock, corolla_row: CarModelRow
) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = [corolla_row]

    models = PostgresCarCatalogRepository(mock_session).list_models_by_brand(str(TOYOTA_ID))

    assert [model.name for model in models] == ["Corolla"]
    query = mock_session.execute.call_args.args[0]
    assert "car_models.brand_id =" in str(query.compile(dialect=postgresql.dialect()))


def test_list_models_by_malformed_brand_is_empty(mock_session: Mock) -> None:
    models = PostgresCarCatalogRepository(mock_session).list_models_by_brand("toyota")

    assert models == []
    mock_session.execute.assert_not_called()


# ==============================================================================
# Categories
# ==============================================================================


def test_list_categories_with_counts(mock_session: Mock) -> None:
    rows = [
        (PartCategoryRow(id=FILTERS_ID, name="Filters", description="Air filters"), 3),
        (PartCategoryRow(id=uuid.uuid4(), name="Lights"), None),
    ]
    mock_session.execute.return_value.all.return_value = rows

    categories = PostgresCategoryRepository(mock_session).list_categories()

    assert categories[0] == PartCategory(
        id=str(FILTERS_ID), name="Filters", description="Air filters", product_count=3
    )
    assert categories[1].product_count == 0


def test_category_count_subquery_counts_approved_products(mock_session: Mock) -> None:
    mock_session.execute.return_value.all.return_value = []

    PostgresCategoryRepository(mock_session).list_categories()

    query = mock_session.execute.call_args.args[0]
    sql = str(query.compile(dialect=postgresql.dialect()))
    assert "count(products.id)" in sql
    assert "products.is_approved IS true" in sql
    assert "products.category_id = part_categories.id" in sql
    assert "AS product_count" in sql


def test_get_category_by_id(mock_session: Mock) -> None:
    row = PartCategoryRow(id=FILTERS_ID, name="Filters")
    mock_session.execute.return_value.one_or_none.return_value = (row, 5)

    category = PostgresCategoryRepository(mock_session).get_by_id(str(FILTERS_ID))

    assert category == PartCategory(id=str(FILTERS_ID), name="Filters", product_count=5)


def test_get_category_by_id_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.one_or_none.return_value = None

    assert PostgresCategoryRepository(mock_session).get_by_id(str(FILTERS_ID)) is None


def test_get_category_by_malformed_id(mock_session: Mock) -> None:
    assert PostgresCategoryRepository(mock_session).get_by_id("filters") is None
    mock_session.execute.assert_not_called()

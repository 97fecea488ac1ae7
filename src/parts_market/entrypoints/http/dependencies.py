"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Every use case is built fresh for the request that needs it.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from parts_market.adapters.postgres_catalog_repository import (
    PostgresCarCatalogRepository,
    PostgresCategoryRepository,
)
from parts_market.adapters.postgres_product_repository import PostgresProductRepository
from parts_market.infra.db.session import get_session
from parts_market.use_cases.browse_car_catalog import ListCarBrands, ListCarModels
from parts_market.use_cases.browse_categories import GetPartCategory, ListPartCategories
from parts_market.use_cases.get_product_by_id import GetProductById
from parts_market.use_cases.search_products import SearchProducts


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() context manager commits on success,
    rolls back on exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_search_products_use_case(db: Session = Depends(get_db)) -> SearchProducts:
    """
    Factory function that returns a configured SearchProducts use case.

    Called per-request, so each request gets a fresh repository bound to
    its own session.
    """
    return SearchProducts(product_repository=PostgresProductRepository(session=db))


def get_product_by_id_use_case(db: Session = Depends(get_db)) -> GetProductById:
    return GetProductById(product_repository=PostgresProductRepository(session=db))


def get_list_car_brands_use_case(db: Session = Depends(get_db)) -> ListCarBrands:
    return ListCarBrands(car_catalog_repository=PostgresCarCatalogRepository(session=db))


def get_list_car_models_use_case(db: Session = Depends(get_db)) -> ListCarModels:
    return ListCarModels(car_catalog_repository=PostgresCarCatalogRepository(session=db))


def get_list_categories_use_case(db: Session = Depends(get_db)) -> ListPartCategories:
    return ListPartCategories(category_repository=PostgresCategoryRepository(session=db))


def get_category_use_case(db: Session = Depends(get_db)) -> GetPartCategory:
    return GetPartCategory(category_repository=PostgresCategoryRepository(session=db))

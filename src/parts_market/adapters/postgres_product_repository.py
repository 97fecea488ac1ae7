"""PostgreSQL implementation of ProductRepository."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import false, func, or_, select
from sqlalchemy.orm import Session, joinedload, selectinload

from parts_market.domain.product import (
    CompatibleModel,
    Dealer,
    Paging,
    Product,
    SearchCriteria,
    SortMode,
)
from parts_market.infra.db.models.catalog import CarModelRow
from parts_market.infra.db.models.product import ProductCompatibilityRow, ProductRow
from parts_market.ports.product_repository import ProductRepository, SearchResult

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select
    from sqlalchemy.sql.elements import UnaryExpression


def _parse_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


def build_product_filter(criteria: SearchCriteria) -> list[ColumnElement[bool]]:
    """
    Translate search criteria into WHERE clauses (AND semantics).

    Malformed identifiers become a FALSE clause so the query matches nothing
    instead of failing.
    """
    clauses: list[ColumnElement[bool]] = [ProductRow.is_approved.is_(True)]

    if criteria.search:
        term = criteria.search
        clauses.append(
            or_(
                ProductRow.name.icontains(term, autoescape=True),
                ProductRow.description.icontains(term, autoescape=True),
                ProductRow.part_number.icontains(term, autoescape=True),
                ProductRow.oem_number.icontains(term, autoescape=True),
            )
        )

    if criteria.category_id:
        category_id = _parse_uuid(criteria.category_id)
        clauses.append(ProductRow.category_id == category_id if category_id else false())

    if criteria.condition is not None:
        clauses.append(ProductRow.condition == criteria.condition)

    # Price range filters (inclusive)
    if criteria.min_price is not None:
        clauses.append(ProductRow.price >= criteria.min_price)
    if criteria.max_price is not None:
        clauses.append(ProductRow.price <= criteria.max_price)

    # Model is more specific than brand; brand applies only without a model
    if criteria.model_id:
        model_id = _parse_uuid(criteria.model_id)
        clauses.append(
            ProductRow.compatibility.any(ProductCompatibilityRow.model_id == model_id)
            if model_id
            else false()
        )
    elif criteria.brand_id:
        brand_id = _parse_uuid(criteria.brand_id)
        clauses.append(
            ProductRow.compatibility.any(
                ProductCompatibilityRow.car_model.has(CarModelRow.brand_id == brand_id)
            )
            if brand_id
            else false()
        )

    return clauses


def build_order_clause(sort_by: SortMode) -> list[UnaryExpression]:
    """
    Store-native ordering for a sort mode.

    Location priority is not computable in SQL without the requester's
    location, so `location` uses recency here and is re-ranked afterwards.
    """
    primary: list[UnaryExpression] = []
    if sort_by is SortMode.PRICE:
        primary = [ProductRow.price.asc()]
    elif sort_by is SortMode.RATING:
        primary = [ProductRow.rating.desc().nulls_last()]

    return [*primary, ProductRow.created_at.desc(), ProductRow.id.asc()]


class PostgresProductRepository(ProductRepository):
    """
    PostgreSQL implementation of ProductRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies filters using SQL WHERE clauses (EXISTS for compatibility)
    - Returns total_count via COUNT(*) query
    - Converts ProductRow (infrastructure) to Product (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, criteria: SearchCriteria, paging: Paging) -> SearchResult:
        """
        Search approved products with filters, ordering and paging.

        Executes two queries:
        1. COUNT(*) to get total matching products (before paging)
        2. SELECT with ORDER BY / OFFSET / LIMIT to get the page

        Args:
            criteria: Filter criteria and sort mode
            paging: Pagination parameters - must be pre-validated

        Returns:
            SearchResult with products and total_count
        """
        query = select(ProductRow).where(*build_product_filter(criteria))

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        page_query = (
            self._with_relations(query)
            .order_by(*build_order_clause(criteria.sort_by))
            .offset(paging.offset)
            .limit(paging.limit)
        )

        rows = self._session.execute(page_query).scalars().all()
        products = [self._to_domain(row) for row in rows]

        return SearchResult(products=products, total_count=total_count)

    def get_by_id(self, product_id: str) -> Product | None:
        """
        Get an approved product by ID.

        Args:
            product_id: Product ID (expected to be a valid UUID string)

        Returns:
            Product entity if found and approved, None otherwise
        """
        parsed = _parse_uuid(product_id)
        if parsed is None:
            return None

        query = self._with_relations(
            select(ProductRow).where(ProductRow.id == parsed, ProductRow.is_approved.is_(True))
        )
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _with_relations(self, query: Select[tuple[ProductRow]]) -> Select[tuple[ProductRow]]:
        return query.options(
            joinedload(ProductRow.dealer),
            joinedload(ProductRow.category),
            selectinload(ProductRow.compatibility)
            .joinedload(ProductCompatibilityRow.car_model)
            .joinedload(CarModelRow.brand),
        )

    def _to_domain(self, row: ProductRow) -> Product:
        """
        Convert database model (ProductRow) to domain entity (Product).

        Args:
            row: SQLAlchemy ProductRow model with relations loaded

        Returns:
            Product domain entity
        """
        dealer = row.dealer
        return Product(
            id=str(row.id),
            name=row.name,
            price=row.price,
            is_approved=row.is_approved,
            stock_quantity=row.stock_quantity,
            condition=row.condition,
            dealer=Dealer(
                id=str(dealer.id),
                name=dealer.name,
                store_name=dealer.store_name,
                phone_number=dealer.phone_number,
                province=dealer.province,
                city=dealer.city,
            ),
            created_at=row.created_at,
            category_id=str(row.category_id) if row.category_id else None,
            category_name=row.category.name if row.category else None,
            rating=row.rating,
            description=row.description,
            part_number=row.part_number,
            oem_number=row.oem_number,
            warranty=row.warranty,
            manufacturer=row.manufacturer,
            images=tuple(row.images or ()),
            compatibility=tuple(
                CompatibleModel(
                    model_id=str(entry.car_model.id),
                    model_name=entry.car_model.name,
                    brand_id=str(entry.car_model.brand.id),
                    brand_name=entry.car_model.brand.name,
                )
                for entry in row.compatibility
            ),
        )

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from parts_market.domain.errors import ValidationError


MAX_PAGE_SIZE = 100


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class ProductCondition(str, Enum):
    NEW = "NEW"
    USED = "USED"
    REFURBISHED = "REFURBISHED"


class SortMode(str, Enum):
    LOCATION = "location"
    PRICE = "price"
    RATING = "rating"
    NEWEST = "newest"


@dataclass(frozen=True, slots=True)
class Dealer:
    id: str
    name: str
    store_name: str | None = None
    phone_number: str | None = None
    province: str | None = None
    city: str | None = None


@dataclass(frozen=True, slots=True)
class CompatibleModel:
    model_id: str
    model_name: str
    brand_id: str
    brand_name: str


@dataclass(frozen=True)
class Product:
    """A product snapshot as seen by a single search request."""

    id: str
    name: str
    price: int  # smallest currency unit (IQD)
    is_approved: bool
    stock_quantity: int
    condition: ProductCondition
    dealer: Dealer
    created_at: datetime
    category_id: str | None = None
    category_name: str | None = None
    rating: float | None = None
    description: str | None = None
    part_number: str | None = None
    oem_number: str | None = None
    warranty: str | None = None
    manufacturer: str | None = None
    images: tuple[str, ...] = ()
    compatibility: tuple[CompatibleModel, ...] = ()


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """
    Product search filters plus the requester location used for ranking.

    Every filter is optional. min_price > max_price is accepted and simply
    matches nothing. Requester province/city never filter eligibility.
    """

    search: str | None = None
    brand_id: str | None = None
    model_id: str | None = None
    category_id: str | None = None
    condition: ProductCondition | None = None
    min_price: int | None = None
    max_price: int | None = None
    customer_province: str | None = None
    customer_city: str | None = None
    sort_by: SortMode = SortMode.LOCATION

    @property
    def has_requester_location(self) -> bool:
        return bool(self.customer_province) and bool(self.customer_city)


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    limit: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_SIZE:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_SIZE}")


@dataclass(frozen=True, slots=True)
class Pagination:
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def from_total(cls, paging: Paging, total: int) -> Pagination:
        return cls(
            page=paging.page,
            limit=paging.limit,
            total=total,
            pages=math.ceil(total / paging.limit),
        )

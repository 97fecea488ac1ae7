from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CarBrand:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class CarModel:
    id: str
    name: str
    brand_id: str
    brand_name: str
    year_start: int
    year_end: int


@dataclass(frozen=True, slots=True)
class PartCategory:
    id: str
    name: str
    description: str | None = None
    product_count: int = 0

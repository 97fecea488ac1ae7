from parts_market.infra.db.models.base import Base
from parts_market.infra.db.models.catalog import CarBrandRow, CarModelRow, PartCategoryRow
from parts_market.infra.db.models.product import DealerRow, ProductCompatibilityRow, ProductRow

__all__ = [
    "Base",
    "CarBrandRow",
    "CarModelRow",
    "DealerRow",
    "PartCategoryRow",
    "ProductCompatibilityRow",
    "ProductRow",
]

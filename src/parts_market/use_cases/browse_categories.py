from __future__ import annotations

from parts_market.domain.catalog import PartCategory
from parts_market.domain.errors import NotFoundError
from parts_market.ports.catalog_repository import CategoryRepository


class ListPartCategories:
    def __init__(self, category_repository: CategoryRepository) -> None:
        self._repository = category_repository

    def execute(self) -> list[PartCategory]:
        return self._repository.list_categories()


class GetPartCategory:
    def __init__(self, category_repository: CategoryRepository) -> None:
        self._repository = category_repository

    def execute(self, category_id: str) -> PartCategory:
        """
        Raises:
            NotFoundError: If the category doesn't exist
        """
        category = self._repository.get_by_id(category_id)
        if category is None:
            raise NotFoundError(resource="PartCategory", identifier=category_id)
        return category

"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from parts_market.domain.errors import NotFoundError, ValidationError
from parts_market.domain.product import Product
from parts_market.ports.product_repository import ProductRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: str


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single approved product by ID.

    Responsibilities:
    - Validate product_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the product doesn't exist or isn't approved
    """

    def __init__(self, product_repository: ProductRepository) -> None:
        self._repository = product_repository

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Execute the get product by ID use case.

        Raises:
            ValidationError: If product_id is not a valid UUID format
            NotFoundError: If no approved product has this ID
        """
        try:
            UUID(request.product_id)
        except ValueError:
            raise ValidationError(
                errors=[
                    {
                        "field": "product_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID",
                    }
                ]
            )

        product = self._repository.get_by_id(request.product_id)

        if product is None:
            raise NotFoundError(resource="Product", identifier=request.product_id)

        return GetProductByIdResponse(product=product)

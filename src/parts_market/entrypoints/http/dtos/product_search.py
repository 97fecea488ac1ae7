from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from parts_market.domain.product import MAX_PAGE_SIZE, ProductCondition, SortMode


class DealerResponseDTO(BaseModel):
    id: str
    name: str
    store_name: str | None = None
    phone_number: str | None = None
    province: str | None = None
    city: str | None = None


class CompatibleModelResponseDTO(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    model_name: str
    brand_id: str
    brand_name: str


class LocationPriorityDTO(BaseModel):
    score: int = Field(description="100 same city, 50 same province, 10 different province")
    reason: str = Field(examples=["Same city"])


class ProductResponseDTO(BaseModel):
    id: str
    name: str
    price: int = Field(description="Price in Iraqi dinar")
    rating: float | None = None
    stock_quantity: int
    condition: ProductCondition
    description: str | None = None
    part_number: str | None = None
    oem_number: str | None = None
    warranty: str | None = None
    manufacturer: str | None = None
    images: list[str] = Field(default_factory=list)
    category_id: str | None = None
    category_name: str | None = None
    dealer: DealerResponseDTO
    compatibility: list[CompatibleModelResponseDTO] = Field(default_factory=list)
    created_at: datetime
    location_priority: LocationPriorityDTO | None = Field(
        default=None,
        description="Present only when results were ranked by location",
    )


class ProductSearchQueryDTO(BaseModel):
    """Query parameters for searching the parts catalog."""

    search: str | None = Field(
        default=None,
        description="Case-insensitive text match on name, description, part number or OEM number",
        examples=["brake pads"],
    )
    brand_id: str | None = Field(
        default=None,
        description="Only parts compatible with at least one model of this car brand",
    )
    model_id: str | None = Field(
        default=None,
        description="Only parts compatible with this car model (takes precedence over brand_id)",
    )
    category_id: str | None = Field(default=None, description="Part category")
    condition: ProductCondition | None = Field(default=None, examples=["NEW"])
    min_price: int | None = Field(
        default=None,
        description="Minimum price in IQD (inclusive)",
        examples=[20000],
        ge=0,
    )
    max_price: int | None = Field(
        default=None,
        description="Maximum price in IQD (inclusive)",
        examples=[100000],
        ge=0,
    )
    customer_province: str | None = Field(
        default=None,
        description="Requester province, used only for location ranking",
        examples=["Baghdad"],
    )
    customer_city: str | None = Field(
        default=None,
        description="Requester city, used only for location ranking",
        examples=["Al-Karrada"],
    )
    page: int = Field(default=1, description="Page number (1-based)", examples=[1], ge=1)
    limit: int = Field(
        default=20,
        description="Maximum number of results per page",
        examples=[20],
        ge=1,
        le=MAX_PAGE_SIZE,
    )
    sort_by: SortMode = Field(
        default=SortMode.LOCATION,
        description="location (needs customer_province and customer_city), price, rating or newest",
    )

    model_config = ConfigDict(
        protected_namespaces=(),
        json_schema_extra={
            "example": {
                "search": "filter",
                "model_id": "550e8400-e29b-41d4-a716-446655440000",
                "min_price": 20000,
                "max_price": 100000,
                "customer_province": "Baghdad",
                "customer_city": "Al-Karrada",
                "page": 1,
                "limit": 20,
                "sort_by": "location",
            }
        }
    )


class PaginationDTO(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ProductSearchResponseDTO(BaseModel):
    products: list[ProductResponseDTO]
    pagination: PaginationDTO


class CategoryProductsQueryDTO(BaseModel):
    """Query parameters for listing the products of one category."""

    search: str | None = Field(default=None, examples=["filter"])
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)

from pydantic import BaseModel


class CarBrandResponseDTO(BaseModel):
    id: str
    name: str


class CarModelResponseDTO(BaseModel):
    id: str
    name: str
    brand_id: str
    brand_name: str
    year_start: int
    year_end: int


class PartCategoryResponseDTO(BaseModel):
    id: str
    name: str
    description: str | None = None
    product_count: int


class ProvincesResponseDTO(BaseModel):
    provinces: list[str]


class CitiesResponseDTO(BaseModel):
    province: str
    cities: list[str]

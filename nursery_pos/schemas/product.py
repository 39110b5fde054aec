# nursery_pos/schemas/product.py

from decimal import Decimal
from pydantic import BaseModel, Field, field_validator


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)

    price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        description="Price must be non-negative and below 100 million"
    )

    category: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Product name is required")
        return value


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    category: str | None

    class Config:
        from_attributes = True


class ProductIdResponse(BaseModel):
    id: int

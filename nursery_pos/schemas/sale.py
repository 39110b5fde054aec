# nursery_pos/schemas/sale.py

import json
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class SaleItem(BaseModel):
    """One line of a committed bill, snapshotted from the cart."""

    id: int
    name: str
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(..., ge=1)
    discount: Decimal = Field(Decimal("0"), ge=0)
    total: Decimal | None = None

    @model_validator(mode="after")
    def fill_total(self):
        if self.total is None:
            self.total = self.quantity * (self.price - self.discount)
        return self


class CustomerInfo(BaseModel):
    customer_name: str | None = None
    customer_phone: str | None = None
    customer_address: str | None = None

    @field_validator("customer_name", "customer_phone", "customer_address")
    @classmethod
    def blank_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None


class SaleCreate(CustomerInfo):
    total_amount: Decimal = Field(..., ge=0)
    discount: Decimal = Field(Decimal("0"), ge=0)
    final_amount: Decimal = Field(..., ge=0)
    items: List[SaleItem]
    manual_override: bool = False


class SaleItemResponse(BaseModel):
    id: int
    name: str
    price: float
    quantity: int
    discount: float = 0
    total: float


class SaleResponse(BaseModel):
    id: int
    customer_name: str | None
    customer_phone: str | None
    customer_address: str | None
    total_amount: float
    discount: float
    final_amount: float
    manual_override: bool
    items: List[SaleItemResponse]
    created_at: datetime

    @field_validator("items", mode="before")
    @classmethod
    def decode_items(cls, value):
        if isinstance(value, str):
            return json.loads(value or "[]")
        return value

    class Config:
        from_attributes = True


class SaleIdResponse(BaseModel):
    id: int


class ShareResponse(BaseModel):
    channel: str
    phone: str
    url: str
    text: str

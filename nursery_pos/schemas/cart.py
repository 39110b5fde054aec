# nursery_pos/schemas/cart.py

from decimal import Decimal
from typing import List

from pydantic import BaseModel


class CartItemAdd(BaseModel):
    product_id: int


class QuantityUpdate(BaseModel):
    quantity: int


class AmountUpdate(BaseModel):
    amount: Decimal


class ManualTotalUpdate(BaseModel):
    amount: Decimal | None = None


class CartLineResponse(BaseModel):
    product_id: int
    name: str
    price: float
    quantity: int
    discount: float
    total: float


class CartResponse(BaseModel):
    state: str
    items: List[CartLineResponse]
    subtotal: float
    item_discount_total: float
    order_discount: float
    discount_total: float
    calculated_total: float
    manual_total: float | None
    final_total: float

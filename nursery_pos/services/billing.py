# =========================================================
# BILLING ENGINE
#
# One cart per till, held in memory until the bill is generated.
#
# - Lines are unique by product id; adding again bumps quantity
# - Every mutation clears the manual total override
# - Commit snapshots lines + totals into an immutable Sale
# =========================================================

import logging
from dataclasses import dataclass
from decimal import Decimal

from nursery_pos.core.errors import ValidationError
from nursery_pos.schemas.sale import CustomerInfo, SaleCreate, SaleItem

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

CART_EMPTY = "empty"
CART_BUILDING = "building"


def _amount(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


@dataclass
class CartLine:
    product_id: int
    name: str
    price: Decimal
    quantity: int = 1
    discount: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return self.quantity * (self.price - self.discount)


class Cart:
    def __init__(self):
        self.lines: list[CartLine] = []
        self.order_discount = ZERO
        self.manual_total: Decimal | None = None

    # =====================================================
    # STATE
    # =====================================================
    @property
    def state(self) -> str:
        return CART_BUILDING if self.lines else CART_EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def _find(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def _touch(self):
        # The override only ever applies to the cart it was set on
        self.manual_total = None

    # =====================================================
    # MUTATIONS
    # =====================================================
    def add(self, product) -> CartLine:
        line = self._find(product.id)

        if line is not None:
            line.quantity += 1
        else:
            line = CartLine(
                product_id=product.id,
                name=product.name,
                price=_amount(product.price),
            )
            self.lines.append(line)

        self._touch()
        return line

    def remove(self, product_id: int):
        self.lines = [line for line in self.lines if line.product_id != product_id]
        self._touch()

    def set_quantity(self, product_id: int, quantity: int):
        if quantity < 1:
            return

        line = self._find(product_id)
        if line is None:
            return

        line.quantity = quantity
        self._touch()

    def set_item_discount(self, product_id: int, amount):
        line = self._find(product_id)
        if line is None:
            return

        line.discount = max(_amount(amount), ZERO)
        self._touch()

    def set_order_discount(self, amount):
        self.order_discount = max(_amount(amount), ZERO)
        self._touch()

    def set_manual_total(self, amount):
        if amount is None:
            self.manual_total = None
            return

        amount = _amount(amount)
        if amount < 0:
            raise ValidationError("Total cannot be negative")

        self.manual_total = amount

    def clear(self):
        self.lines = []
        self.order_discount = ZERO
        self.manual_total = None

    # =====================================================
    # TOTALS
    # =====================================================
    @property
    def subtotal(self) -> Decimal:
        return sum((line.price * line.quantity for line in self.lines), ZERO)

    @property
    def item_discount_total(self) -> Decimal:
        return sum((line.discount * line.quantity for line in self.lines), ZERO)

    @property
    def discount_total(self) -> Decimal:
        return self.order_discount + self.item_discount_total

    @property
    def calculated_total(self) -> Decimal:
        return self.subtotal - self.order_discount - self.item_discount_total

    @property
    def is_overridden(self) -> bool:
        return self.manual_total is not None

    @property
    def final_total(self) -> Decimal:
        if self.manual_total is not None:
            return self.manual_total
        return self.calculated_total

    # =====================================================
    # COMMIT
    # =====================================================
    def to_sale(self, customer: CustomerInfo | None = None) -> SaleCreate:
        if self.is_empty:
            raise ValidationError("Cart is empty")
        if self.final_total < 0:
            raise ValidationError("Total cannot be negative")

        customer = customer or CustomerInfo()

        return SaleCreate(
            customer_name=customer.customer_name,
            customer_phone=customer.customer_phone,
            customer_address=customer.customer_address,
            total_amount=self.subtotal,
            discount=self.discount_total,
            final_amount=self.final_total,
            manual_override=self.is_overridden,
            items=[
                SaleItem(
                    id=line.product_id,
                    name=line.name,
                    price=line.price,
                    quantity=line.quantity,
                    discount=line.discount,
                    total=line.total,
                )
                for line in self.lines
            ],
        )

    def commit(self, ledger, customer: CustomerInfo | None = None):
        """
        Persist the cart as a Sale through the ledger and reset.

        The cart is only reset once the ledger has stored the sale.
        """
        sale = ledger.record_sale(self.to_sale(customer))
        self.clear()

        logger.info("Committed cart as sale %s", sale.id)
        return sale

# =========================================================
# CART ROUTER
#
# The till's working bill. Lives in memory until checkout,
# where it is snapshotted into the sales ledger and reset.
#
# Operations on a product that is not in the cart are no-ops.
# =========================================================

from fastapi import APIRouter, Depends, Request, status

from nursery_pos.core.deps import get_cart, get_catalog, get_ledger
from nursery_pos.core.rate_limiter import limiter
from nursery_pos.schemas.cart import (
    AmountUpdate,
    CartItemAdd,
    CartResponse,
    ManualTotalUpdate,
    QuantityUpdate,
)
from nursery_pos.schemas.sale import CustomerInfo, SaleResponse
from nursery_pos.services.billing import Cart
from nursery_pos.services.catalog import CatalogService
from nursery_pos.services.ledger import SalesLedger

router = APIRouter(prefix="/cart", tags=["Cart"])


def _cart_view(cart: Cart) -> dict:
    return {
        "state": cart.state,
        "items": [
            {
                "product_id": line.product_id,
                "name": line.name,
                "price": line.price,
                "quantity": line.quantity,
                "discount": line.discount,
                "total": line.total,
            }
            for line in cart.lines
        ],
        "subtotal": cart.subtotal,
        "item_discount_total": cart.item_discount_total,
        "order_discount": cart.order_discount,
        "discount_total": cart.discount_total,
        "calculated_total": cart.calculated_total,
        "manual_total": cart.manual_total,
        "final_total": cart.final_total,
    }


@router.get("", response_model=CartResponse)
def view_cart(cart: Cart = Depends(get_cart)):
    return _cart_view(cart)


@router.post("/items", response_model=CartResponse)
def add_to_cart(
    item: CartItemAdd,
    cart: Cart = Depends(get_cart),
    catalog: CatalogService = Depends(get_catalog),
):
    product = catalog.get_product(item.product_id)
    cart.add(product)

    return _cart_view(cart)


@router.delete("/items/{product_id}", response_model=CartResponse)
def remove_from_cart(product_id: int, cart: Cart = Depends(get_cart)):
    cart.remove(product_id)

    return _cart_view(cart)


@router.put("/items/{product_id}/quantity", response_model=CartResponse)
def set_quantity(
    product_id: int,
    update: QuantityUpdate,
    cart: Cart = Depends(get_cart),
):
    cart.set_quantity(product_id, update.quantity)

    return _cart_view(cart)


@router.put("/items/{product_id}/discount", response_model=CartResponse)
def set_item_discount(
    product_id: int,
    update: AmountUpdate,
    cart: Cart = Depends(get_cart),
):
    cart.set_item_discount(product_id, update.amount)

    return _cart_view(cart)


@router.put("/discount", response_model=CartResponse)
def set_order_discount(update: AmountUpdate, cart: Cart = Depends(get_cart)):
    cart.set_order_discount(update.amount)

    return _cart_view(cart)


@router.put("/manual-total", response_model=CartResponse)
def set_manual_total(update: ManualTotalUpdate, cart: Cart = Depends(get_cart)):
    cart.set_manual_total(update.amount)

    return _cart_view(cart)


@router.delete("", response_model=CartResponse)
def clear_cart(cart: Cart = Depends(get_cart)):
    cart.clear()

    return _cart_view(cart)


# =========================================================
# CHECKOUT (GENERATE BILL)
# =========================================================
@router.post(
    "/checkout",
    response_model=SaleResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit("30/minute")
def checkout(
    request: Request,
    customer: CustomerInfo,
    cart: Cart = Depends(get_cart),
    ledger: SalesLedger = Depends(get_ledger),
):
    return cart.commit(ledger, customer)

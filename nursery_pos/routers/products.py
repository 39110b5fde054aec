# nursery_pos/routers/products.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from nursery_pos.core.deps import get_catalog
from nursery_pos.core.rate_limiter import limiter
from nursery_pos.schemas.product import (
    ProductCreate,
    ProductIdResponse,
    ProductResponse,
)
from nursery_pos.schemas.settings import SuccessResponse
from nursery_pos.services.catalog import CatalogService

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


@router.get("", response_model=list[ProductResponse])
def list_products(
    search: Optional[str] = Query(None),
    catalog: CatalogService = Depends(get_catalog),
):
    return catalog.list_products(search)


@router.post(
    "",
    response_model=ProductIdResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit("60/minute")
def create_product(
    request: Request,
    product_data: ProductCreate,
    catalog: CatalogService = Depends(get_catalog),
):
    product = catalog.add_product(
        name=product_data.name,
        price=product_data.price,
        category=product_data.category,
    )

    return {"id": product.id}


@router.delete("/{product_id}", response_model=SuccessResponse)
def delete_product(
    product_id: int,
    catalog: CatalogService = Depends(get_catalog),
):
    catalog.delete_product(product_id)

    return {"success": True}

# =========================================================
# SALES ROUTER
#
# Committed bills are append-only: they can be created,
# listed, filtered and rendered as receipts, never edited.
# =========================================================

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse, Response

from nursery_pos.core.deps import get_configuration, get_ledger
from nursery_pos.core.rate_limiter import limiter
from nursery_pos.schemas.sale import (
    SaleCreate,
    SaleIdResponse,
    SaleResponse,
    ShareResponse,
)
from nursery_pos.services.configuration import ConfigurationService
from nursery_pos.services.ledger import SalesLedger
from nursery_pos.services.receipts import (
    render_receipt_pdf,
    render_receipt_text,
    share_link,
)

router = APIRouter(prefix="/sales", tags=["Sales"])


# =========================================================
# CREATE SALE
# =========================================================
@router.post("", response_model=SaleIdResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("30/minute")
def create_sale(
    request: Request,
    sale_data: SaleCreate,
    ledger: SalesLedger = Depends(get_ledger),
):
    sale = ledger.record_sale(sale_data)

    return {"id": sale.id}


# =========================================================
# LIST / FILTER SALES
# =========================================================
@router.get("", response_model=list[SaleResponse])
def list_sales(
    q: Optional[str] = Query(None, description="Customer name or phone"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    ledger: SalesLedger = Depends(get_ledger),
):
    if q or start_date or end_date:
        return ledger.filter_sales(q, start_date, end_date)

    return ledger.list_sales()


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: int,
    ledger: SalesLedger = Depends(get_ledger),
):
    return ledger.get_sale(sale_id)


# =========================================================
# RECEIPTS
# =========================================================
@router.get("/{sale_id}/receipt", response_class=PlainTextResponse)
def sale_receipt(
    sale_id: int,
    ledger: SalesLedger = Depends(get_ledger),
    configuration: ConfigurationService = Depends(get_configuration),
):
    sale = ledger.get_sale(sale_id)

    return render_receipt_text(sale, configuration.get_settings())


@router.get("/{sale_id}/receipt.pdf")
def sale_receipt_pdf(
    sale_id: int,
    ledger: SalesLedger = Depends(get_ledger),
    configuration: ConfigurationService = Depends(get_configuration),
):
    sale = ledger.get_sale(sale_id)
    pdf = render_receipt_pdf(sale, configuration.get_settings())

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="bill_{sale.id}.pdf"'},
    )


@router.get("/{sale_id}/share", response_model=ShareResponse)
def share_sale(
    sale_id: int,
    channel: str = Query(..., pattern="^(whatsapp|sms|email)$"),
    ledger: SalesLedger = Depends(get_ledger),
    configuration: ConfigurationService = Depends(get_configuration),
):
    sale = ledger.get_sale(sale_id)

    return share_link(channel, sale, configuration.get_settings())

# =========================================================
# EXPORTS ROUTER
#
# Ranges: 1day | 1month | 6months | all
# An empty range produces no file (404).
# =========================================================

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response, StreamingResponse

from nursery_pos.core.deps import get_configuration, get_ledger
from nursery_pos.core.rate_limiter import limiter
from nursery_pos.services.configuration import ConfigurationService
from nursery_pos.services.exports import (
    build_sales_csv,
    build_sales_workbook,
    export_filename,
    sales_in_range,
)
from nursery_pos.services.ledger import SalesLedger

router = APIRouter(prefix="/exports", tags=["Exports"])

RANGE_PATTERN = "^(1day|1month|6months|all)$"


@router.get("/csv")
@limiter.limit("10/minute")
def export_sales_csv(
    request: Request,
    range_name: str = Query("all", alias="range", pattern=RANGE_PATTERN),
    ledger: SalesLedger = Depends(get_ledger),
    configuration: ConfigurationService = Depends(get_configuration),
):
    now = datetime.now()
    sales = sales_in_range(ledger.list_sales(), range_name, now)
    shop = configuration.get_settings()

    filename = export_filename(shop.shop_name, range_name, now.date(), "csv")

    return Response(
        content=build_sales_csv(sales),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/xlsx")
@limiter.limit("10/minute")
def export_sales_workbook(
    request: Request,
    range_name: str = Query("all", alias="range", pattern=RANGE_PATTERN),
    ledger: SalesLedger = Depends(get_ledger),
    configuration: ConfigurationService = Depends(get_configuration),
):
    now = datetime.now()
    sales = sales_in_range(ledger.list_sales(), range_name, now)
    shop = configuration.get_settings()

    filename = export_filename(shop.shop_name, range_name, now.date(), "xlsx")

    return StreamingResponse(
        build_sales_workbook(sales),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

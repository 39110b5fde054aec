# =========================================================
# REPORTS ROUTER
#
# Chart series and income summary tiles, computed over the
# whole ledger.
# =========================================================

from fastapi import APIRouter, Depends, Query

from nursery_pos.core.deps import get_ledger
from nursery_pos.schemas.report import ChartResponse, IncomeTotalsResponse
from nursery_pos.services.ledger import SalesLedger
from nursery_pos.services.reporting import aggregate_by_period, income_totals

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/chart", response_model=ChartResponse)
def sales_chart(
    period: str = Query("weekly", pattern="^(today|weekly|monthly|yearly|all)$"),
    ledger: SalesLedger = Depends(get_ledger),
):
    buckets = aggregate_by_period(ledger.list_sales(), period)

    return {"period": period, "buckets": buckets}


@router.get("/income", response_model=IncomeTotalsResponse)
def income_summary(ledger: SalesLedger = Depends(get_ledger)):
    return income_totals(ledger.list_sales())

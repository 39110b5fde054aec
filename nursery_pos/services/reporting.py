# =========================================================
# REPORTING
#
# Chart series and income tiles derived from the ledger.
# Everything here is a pure function of (sales, now) so the
# routers decide which sales to load and what "now" is.
# =========================================================

from calendar import monthrange
from datetime import datetime, timedelta
from decimal import Decimal

from nursery_pos.core.errors import ValidationError

PERIODS = ("today", "weekly", "monthly", "yearly", "all")

WINDOW_DAYS = 5
WINDOW_COUNT = 6


def shift_months(moment: datetime, months: int) -> datetime:
    """Move by whole calendar months, clamping the day to the month end."""
    month_index = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _sum(sales, predicate) -> Decimal:
    return sum(
        (Decimal(str(sale.final_amount)) for sale in sales if predicate(sale.created_at)),
        Decimal("0"),
    )


# =========================================================
# CHART BUCKETS
# =========================================================
def _hourly(sales, now):
    buckets = []
    for offset in range(23, -1, -1):
        slot = now - timedelta(hours=offset)
        total = _sum(
            sales,
            lambda t, slot=slot: t.date() == slot.date() and t.hour == slot.hour,
        )
        buckets.append({"label": slot.strftime("%H:00"), "total": total})
    return buckets


def _daily(sales, now):
    today = now.date()
    buckets = []
    for offset in range(6, -1, -1):
        day = today - timedelta(days=offset)
        total = _sum(sales, lambda t, day=day: t.date() == day)
        buckets.append({"label": day.strftime("%a"), "total": total})
    return buckets


def _rolling_windows(sales, now):
    buckets = []
    for offset in range(WINDOW_COUNT - 1, -1, -1):
        end = now - timedelta(days=WINDOW_DAYS * offset)
        start = end - timedelta(days=WINDOW_DAYS)
        total = _sum(sales, lambda t, start=start, end=end: start < t <= end)
        buckets.append({"label": end.strftime("%d %b"), "total": total})
    return buckets


def _monthly(sales, now):
    first_of_month = now.replace(day=1)
    buckets = []
    for offset in range(11, -1, -1):
        month = shift_months(first_of_month, -offset)
        total = _sum(
            sales,
            lambda t, month=month: t.month == month.month and t.year == month.year,
        )
        buckets.append({"label": month.strftime("%b %Y"), "total": total})
    return buckets


def _yearly(sales, now):
    years = sorted({sale.created_at.year for sale in sales}) or [now.year]
    return [
        {
            "label": str(year),
            "total": _sum(sales, lambda t, year=year: t.year == year),
        }
        for year in years
    ]


_BUCKETERS = {
    "today": _hourly,
    "weekly": _daily,
    "monthly": _rolling_windows,
    "yearly": _monthly,
    "all": _yearly,
}


def aggregate_by_period(sales, period: str, now: datetime | None = None) -> list[dict]:
    """
    Bucket final_amount by period, oldest bucket first.

    today   -> 24 hourly buckets
    weekly  -> 7 calendar days
    monthly -> 6 rolling 5-day windows (start, end]
    yearly  -> 12 calendar months
    all     -> one bucket per year present
    """
    if period not in _BUCKETERS:
        raise ValidationError(f"Unknown period: {period}")

    return _BUCKETERS[period](list(sales), now or datetime.now())


# =========================================================
# INCOME TILES
# =========================================================
def income_totals(sales, now: datetime | None = None) -> dict:
    # Cutoffs overlap: a sale from today also counts toward weekly and the rest
    now = now or datetime.now()
    sales = list(sales)

    start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    week_ago = now - timedelta(days=7)
    month_ago = shift_months(now, -1)
    year_ago = shift_months(now, -12)

    return {
        "today": _sum(sales, lambda t: t >= start_of_today),
        "weekly": _sum(sales, lambda t: t >= week_ago),
        "monthly": _sum(sales, lambda t: t >= month_ago),
        "yearly": _sum(sales, lambda t: t >= year_ago),
        "all": _sum(sales, lambda t: True),
    }

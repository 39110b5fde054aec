import json
from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest

from nursery_pos.core.errors import ValidationError
from nursery_pos.models.sales import Sale
from nursery_pos.services.reporting import aggregate_by_period, income_totals, shift_months

NOW = datetime(2026, 10, 19, 15, 30)


def sale(created_at, amount):
    return SimpleNamespace(created_at=created_at, final_amount=Decimal(amount))


def totals(buckets):
    return [bucket["total"] for bucket in buckets]


def test_weekly_excludes_sales_older_than_seven_days():
    sales = [sale(NOW, 100), sale(NOW - timedelta(days=10), 50)]

    buckets = aggregate_by_period(sales, "weekly", NOW)

    assert len(buckets) == 7
    assert sum(totals(buckets)) == 100
    assert buckets[-1]["total"] == 100
    assert buckets[-1]["label"] == NOW.strftime("%a")


def test_today_has_hourly_buckets_oldest_first():
    sales = [
        sale(NOW.replace(hour=14, minute=10), 40),
        sale(NOW.replace(hour=15, minute=5), 10),
        sale(NOW - timedelta(hours=25), 99),
    ]

    buckets = aggregate_by_period(sales, "today", NOW)

    assert len(buckets) == 24
    assert buckets[-1]["label"] == "15:00"
    assert buckets[0]["label"] == "16:00"
    assert buckets[22]["total"] == 40
    assert buckets[23]["total"] == 10
    assert sum(totals(buckets)) == 50


def test_monthly_windows_are_open_at_start_closed_at_end():
    sales = [
        sale(NOW, 1),
        sale(NOW - timedelta(days=5), 2),
        sale(NOW - timedelta(days=30), 4),
        sale(NOW - timedelta(days=29, hours=23), 8),
        sale(NOW - timedelta(days=31), 16),
    ]

    buckets = aggregate_by_period(sales, "monthly", NOW)

    assert len(buckets) == 6
    assert totals(buckets) == [8, 0, 0, 0, 2, 1]


def test_yearly_covers_last_twelve_calendar_months():
    sales = [
        sale(datetime(2025, 10, 31, 12, 0), 500),
        sale(datetime(2025, 11, 1, 8, 0), 30),
        sale(datetime(2026, 10, 1, 8, 0), 20),
    ]

    buckets = aggregate_by_period(sales, "yearly", NOW)

    assert len(buckets) == 12
    assert buckets[0]["label"] == "Nov 2025"
    assert buckets[-1]["label"] == "Oct 2026"
    assert buckets[0]["total"] == 30
    assert buckets[-1]["total"] == 20
    assert sum(totals(buckets)) == 50


def test_all_has_one_bucket_per_year():
    sales = [
        sale(datetime(2026, 1, 5), 10),
        sale(datetime(2024, 6, 1), 5),
        sale(datetime(2026, 7, 9), 15),
    ]

    buckets = aggregate_by_period(sales, "all", NOW)

    assert [b["label"] for b in buckets] == ["2024", "2026"]
    assert totals(buckets) == [5, 25]


def test_all_defaults_to_current_year_without_data():
    buckets = aggregate_by_period([], "all", NOW)

    assert buckets == [{"label": "2026", "total": 0}]


def test_unknown_period_is_rejected():
    with pytest.raises(ValidationError):
        aggregate_by_period([], "decade", NOW)


def test_income_totals_overlap():
    sales = [
        sale(NOW.replace(hour=10), 100),
        sale(NOW - timedelta(days=3), 50),
        sale(NOW - timedelta(days=20), 25),
        sale(NOW - timedelta(days=200), 10),
        sale(NOW - timedelta(days=730), 5),
    ]

    result = income_totals(sales, NOW)

    assert result == {
        "today": 100,
        "weekly": 150,
        "monthly": 175,
        "yearly": 185,
        "all": 190,
    }


def test_shift_months_clamps_day():
    assert shift_months(datetime(2026, 3, 31), -1) == datetime(2026, 2, 28)
    assert shift_months(datetime(2026, 1, 15), -12) == datetime(2025, 1, 15)
    assert shift_months(datetime(2024, 2, 29), -12) == datetime(2023, 2, 28)


def test_chart_and_income_endpoints(client, db):
    db.add(Sale(
        total_amount=Decimal("120"),
        discount=Decimal("0"),
        final_amount=Decimal("120"),
        items=json.dumps([]),
        created_at=datetime.now(),
    ))
    db.commit()

    chart = client.get("/reports/chart", params={"period": "weekly"}).json()
    assert chart["period"] == "weekly"
    assert len(chart["buckets"]) == 7
    assert chart["buckets"][-1]["total"] == 120

    income = client.get("/reports/income").json()
    assert income["today"] == 120
    assert income["all"] == 120

    assert client.get("/reports/chart", params={"period": "decade"}).status_code == 422

import json
from datetime import date, datetime, timedelta
from decimal import Decimal
from io import BytesIO

import pytest
from openpyxl import load_workbook

from nursery_pos.core.errors import ExportEmptyError
from nursery_pos.models.sales import Sale
from nursery_pos.services.exports import (
    EXPORT_COLUMNS,
    build_sales_csv,
    build_sales_workbook,
    export_filename,
    sales_in_range,
)

NOW = datetime(2026, 10, 19, 15, 30)


def make_sale(sale_id=1, created_at=NOW, **fields):
    items = fields.pop("items", [
        {"id": 1, "name": "Aloe Vera", "price": 150, "quantity": 2, "total": 300},
        {"id": 2, "name": "Rose", "price": 80, "quantity": 1, "total": 80},
    ])
    values = {
        "customer_name": None,
        "customer_phone": "9876543210",
        "customer_address": None,
        "total_amount": Decimal("380"),
        "discount": Decimal("20"),
        "final_amount": Decimal("360"),
    }
    values.update(fields)
    return Sale(id=sale_id, created_at=created_at, items=json.dumps(items), **values)


def test_csv_layout():
    csv_text = build_sales_csv([make_sale()])
    header, row = csv_text.splitlines()

    assert header == ",".join(EXPORT_COLUMNS)
    assert row == (
        "1,2026-10-19 15:30:00,Walk-in,'9876543210,N/A,"
        "380.00,20.00,360.00,Aloe Vera(2); Rose(1)"
    )


def test_csv_uses_customer_details_when_present():
    csv_text = build_sales_csv([
        make_sale(customer_name="Rani", customer_address="4 Lake View", customer_phone=None)
    ])
    row = csv_text.splitlines()[1].split(",")

    assert row[2] == "Rani"
    assert row[3] == ""
    assert row[4] == "4 Lake View"


@pytest.mark.parametrize("range_name, expected_ids", [
    ("1day", [1]),
    ("1month", [1, 2]),
    ("6months", [1, 2, 3]),
    ("all", [1, 2, 3, 4]),
])
def test_sales_in_range(range_name, expected_ids):
    sales = [
        make_sale(1, NOW - timedelta(hours=2)),
        make_sale(2, NOW - timedelta(days=20)),
        make_sale(3, NOW - timedelta(days=150)),
        make_sale(4, NOW - timedelta(days=400)),
    ]

    selected = sales_in_range(sales, range_name, NOW)

    assert [s.id for s in selected] == expected_ids


def test_empty_range_raises():
    with pytest.raises(ExportEmptyError):
        sales_in_range([make_sale(1, NOW - timedelta(days=3))], "1day", NOW)


def test_export_filename():
    name = export_filename("Agam Nursery", "1month", date(2026, 10, 19))

    assert name == "Agam_Nursery_Sales_1month_2026-10-19.csv"


def test_workbook_has_same_rows():
    workbook = load_workbook(build_sales_workbook([make_sale()]))
    rows = list(workbook.active.iter_rows(values_only=True))

    assert list(rows[0]) == EXPORT_COLUMNS
    assert rows[1][2] == "Walk-in"
    assert rows[1][8] == "Aloe Vera(2); Rose(1)"


def test_csv_endpoint_with_empty_range(client):
    response = client.get("/exports/csv", params={"range": "1day"})

    assert response.status_code == 404
    assert response.json()["detail"] == "No sales found for the selected range"


def test_csv_endpoint_downloads_file(client, aloe_vera):
    client.post("/cart/items", json={"product_id": aloe_vera})
    client.post("/cart/checkout", json={"customer_name": "Rani"})

    response = client.get("/exports/csv", params={"range": "1day"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    today = date.today().isoformat()
    assert f'Agam_Nursery_Sales_1day_{today}.csv' in response.headers["content-disposition"]
    lines = response.text.splitlines()
    assert lines[0].startswith("Bill No,Date,Customer Name")
    assert "Rani" in lines[1]
    assert lines[1].endswith("Aloe Vera(1)")


def test_xlsx_endpoint(client, aloe_vera):
    client.post("/cart/items", json={"product_id": aloe_vera})
    client.post("/cart/checkout", json={})

    response = client.get("/exports/xlsx", params={"range": "all"})

    assert response.status_code == 200
    workbook = load_workbook(BytesIO(response.content))
    assert workbook.active.max_row == 2


def test_invalid_range_is_rejected(client):
    assert client.get("/exports/csv", params={"range": "2weeks"}).status_code == 422

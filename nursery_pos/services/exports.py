# nursery_pos/services/exports.py

from datetime import date, datetime, timedelta
from io import BytesIO

import pandas as pd
from openpyxl import Workbook

from nursery_pos.core.errors import ExportEmptyError, ValidationError
from nursery_pos.services.reporting import shift_months

EXPORT_RANGES = ("1day", "1month", "6months", "all")

EXPORT_COLUMNS = [
    "Bill No",
    "Date",
    "Customer Name",
    "Phone",
    "Address",
    "Total",
    "Discount",
    "Final",
    "Items",
]


def export_cutoff(range_name: str, now: datetime) -> datetime | None:
    if range_name == "1day":
        return now - timedelta(days=1)
    if range_name == "1month":
        return shift_months(now, -1)
    if range_name == "6months":
        return shift_months(now, -6)
    if range_name == "all":
        return None

    raise ValidationError(f"Unknown export range: {range_name}")


def sales_in_range(sales, range_name: str, now: datetime | None = None) -> list:
    cutoff = export_cutoff(range_name, now or datetime.now())

    selected = [
        sale for sale in sales
        if cutoff is None or sale.created_at >= cutoff
    ]

    if not selected:
        raise ExportEmptyError("No sales found for the selected range")

    return selected


def _money(value) -> str:
    return f"{float(value or 0):.2f}"


def export_rows(sales) -> list[list[str]]:
    rows = []

    for sale in sales:
        items = "; ".join(
            f"{item['name']}({item['quantity']})" for item in sale.line_items
        )

        # Leading quote keeps spreadsheets from turning phones into numbers
        phone = f"'{sale.customer_phone}" if sale.customer_phone else ""

        rows.append([
            str(sale.id),
            sale.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            sale.customer_name or "Walk-in",
            phone,
            sale.customer_address or "N/A",
            _money(sale.total_amount),
            _money(sale.discount),
            _money(sale.final_amount),
            items,
        ])

    return rows


def build_sales_csv(sales) -> str:
    frame = pd.DataFrame(export_rows(sales), columns=EXPORT_COLUMNS)
    return frame.to_csv(index=False)


def build_sales_workbook(sales) -> BytesIO:
    workbook = Workbook()

    sheet = workbook.active
    sheet.title = "Sales"
    sheet.append(EXPORT_COLUMNS)

    for row in export_rows(sales):
        sheet.append(row)

    output = BytesIO()
    workbook.save(output)
    output.seek(0)

    return output


def export_filename(shop_name: str, range_name: str, today: date, extension: str = "csv") -> str:
    shop = "_".join((shop_name or "Shop").split())
    return f"{shop}_Sales_{range_name}_{today.isoformat()}.{extension}"

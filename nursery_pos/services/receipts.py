# nursery_pos/services/receipts.py

import re
from io import BytesIO
from urllib.parse import quote
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A5
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from nursery_pos.core.config import settings
from nursery_pos.core.errors import ValidationError

SHARE_CHANNELS = ("whatsapp", "sms", "email")

RULE = "-" * 26


def _fmt(value) -> str:
    value = float(value or 0)
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}"


def normalize_phone(phone: str | None, country_code: str | None = None) -> str:
    """
    Digits only, one leading zero dropped, and bare 10-digit numbers
    prefixed with the default country code.
    """
    country_code = country_code or settings.DEFAULT_COUNTRY_CODE

    digits = re.sub(r"\D", "", phone or "")
    if digits.startswith("0"):
        digits = digits[1:]

    if len(digits) == 10:
        digits = f"{country_code}{digits}"

    return digits


def _para(text: str, style) -> Paragraph:
    return Paragraph(escape(text), style)


def render_receipt_text(sale, shop, currency: str | None = None) -> str:
    currency = currency or settings.CURRENCY_SYMBOL

    lines = [
        f"*{shop.shop_name}*",
        f"Bill No: {sale.id}",
        f"Date: {sale.created_at.strftime('%d/%m/%Y %I:%M %p')}",
        f"Customer: {sale.customer_name or 'N/A'}",
    ]

    if sale.customer_phone:
        lines.append(f"Phone: {sale.customer_phone}")
    if sale.customer_address:
        lines.append(f"Address: {sale.customer_address}")

    lines.append(RULE)
    for item in sale.line_items:
        lines.append(
            f"{item['name']} x {item['quantity']} = {currency}{_fmt(item['total'])}"
        )
    lines.append(RULE)

    lines.extend([
        f"Subtotal: {currency}{_fmt(sale.total_amount)}",
        f"Discount: {currency}{_fmt(sale.discount)}",
        f"*Total: {currency}{_fmt(sale.final_amount)}*",
        RULE,
        "Thank you for shopping with us!",
    ])

    for extra in (shop.address, shop.phone):
        if extra:
            lines.append(extra)
    if shop.gst_number:
        lines.append(f"GSTIN: {shop.gst_number}")

    return "\n".join(lines)


def render_receipt_pdf(sale, shop, currency: str | None = None) -> bytes:
    """Render the bill as a small PDF page with ReportLab."""
    currency = currency or settings.PDF_CURRENCY_LABEL

    output = BytesIO()
    doc = SimpleDocTemplate(
        output,
        pagesize=A5,
        title=f"{shop.shop_name} - Bill {sale.id}",
    )
    elements = []

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name="Centered",
        parent=styles["Normal"],
        alignment=1,
    ))

    elements.append(_para(shop.shop_name, styles["Heading1"]))
    for extra in (shop.address, shop.phone, shop.email):
        if extra:
            elements.append(_para(extra, styles["Normal"]))
    if shop.gst_number:
        elements.append(_para(f"GSTIN: {shop.gst_number}", styles["Normal"]))
    elements.append(Spacer(1, 0.2 * inch))

    elements.append(_para(f"Bill No: {sale.id}", styles["Normal"]))
    elements.append(_para(
        f"Date: {sale.created_at.strftime('%d/%m/%Y %I:%M %p')}",
        styles["Normal"],
    ))
    elements.append(_para(f"Customer: {sale.customer_name or 'Walk-in'}", styles["Normal"]))
    if sale.customer_phone:
        elements.append(_para(f"Phone: {sale.customer_phone}", styles["Normal"]))
    if sale.customer_address:
        elements.append(_para(f"Address: {sale.customer_address}", styles["Normal"]))
    elements.append(Spacer(1, 0.2 * inch))

    data = [["Item", "Qty", "Price", "Total"]]
    for item in sale.line_items:
        data.append([
            item["name"],
            str(item["quantity"]),
            f"{currency} {_fmt(item['price'])}",
            f"{currency} {_fmt(item['total'])}",
        ])

    data.append(["", "", "", ""])
    data.append(["Subtotal:", "", "", f"{currency} {_fmt(sale.total_amount)}"])
    data.append(["Discount:", "", "", f"{currency} {_fmt(sale.discount)}"])
    data.append(["Total:", "", "", f"{currency} {_fmt(sale.final_amount)}"])

    table = Table(data, colWidths=[2 * inch, 0.6 * inch, 0.9 * inch, 1 * inch])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (3, 0), colors.darkgreen),
        ("TEXTCOLOR", (0, 0), (3, 0), colors.whitesmoke),
        ("FONTNAME", (0, 0), (3, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -5), 0.5, colors.grey),
        ("ALIGN", (1, 1), (3, -1), "RIGHT"),
        ("FONTNAME", (0, -1), (3, -1), "Helvetica-Bold"),
    ]))

    elements.append(table)
    elements.append(Spacer(1, 0.3 * inch))
    elements.append(_para("Thank you for shopping with us!", styles["Centered"]))

    doc.build(elements)
    return output.getvalue()


def share_link(channel: str, sale, shop, country_code: str | None = None) -> dict:
    if channel not in SHARE_CHANNELS:
        raise ValidationError(f"Unknown share channel: {channel}")

    text = render_receipt_text(sale, shop)
    encoded = quote(text, safe="")
    phone = normalize_phone(sale.customer_phone, country_code)

    if channel == "whatsapp":
        url = f"https://wa.me/{phone}?text={encoded}"
    elif channel == "sms":
        url = f"sms:{phone}?body={encoded}"
    else:
        subject = quote(f"Bill from {shop.shop_name}", safe="")
        url = f"mailto:?subject={subject}&body={encoded}"

    return {"channel": channel, "phone": phone, "url": url, "text": text}

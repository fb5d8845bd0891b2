"""Receipt generation for a single order.

A receipt is built from the order's current state at print time, rendered to
a self-contained HTML page and handed to a print surface. The surface may be
unavailable (``open_printable`` returns None); printing is then skipped
without raising.
"""
from __future__ import annotations

import html
from datetime import datetime
from typing import List, Optional, Protocol

from dashboard.config import get_config
from dashboard.data.models import Order, Receipt, ReceiptLine
from dashboard.logging import get_logger
from dashboard.orders.presenter import discount_applies, format_amount

SEPARATOR = "-" * 32


class PrintableDocument(Protocol):
    def write(self, markup: str) -> None:
        ...

    def print(self) -> None:
        ...


class PrintSurface(Protocol):
    def open_printable(self) -> Optional[PrintableDocument]:
        """Open a new document to print into, or None when no surface is available."""
        ...


def receipt_lines(order: Order) -> List[ReceiptLine]:
    if not order.items:
        return [ReceiptLine(quantity=1, name=f"Order #{order.id}", amount=order.total_amount)]
    return [
        ReceiptLine(quantity=item.units, name=item.name, amount=item.line_total)
        for item in order.items
    ]


def build_receipt(order: Order, printed_at: Optional[datetime] = None) -> Receipt:
    """Assemble the receipt for ``order``; ``printed_at`` defaults to now."""
    config = get_config()
    printed_at = printed_at or datetime.now()
    lines = receipt_lines(order)
    return Receipt(
        brand=config.receipt_brand,
        title=config.receipt_title,
        currency_symbol=config.currency_symbol,
        lines=lines,
        subtotal=sum((line.amount for line in lines), 0.0),
        discount=order.discount_amount if discount_applies(order) else None,
        total=order.total_amount,
        order_id=order.id,
        printed_date=printed_at.strftime(config.receipt_date_format),
        printed_time=printed_at.strftime(config.receipt_time_format),
        served_by=order.modified_by or config.receipt_default_actor,
        thank_you=config.receipt_thank_you,
        footer=config.receipt_footer,
    )


def format_line(line: ReceiptLine, symbol: str) -> str:
    return f"{line.quantity}x  {line.name}  {format_amount(line.amount, symbol)}"


def receipt_text_lines(receipt: Receipt) -> List[str]:
    """Plain-text rendering, one string per printed row."""
    symbol = receipt.currency_symbol
    rows = [receipt.brand, receipt.title, SEPARATOR]
    rows.extend(format_line(line, symbol) for line in receipt.lines)
    rows.append(SEPARATOR)
    rows.append(f"Subtotal  {format_amount(receipt.subtotal, symbol)}")
    if receipt.discount is not None:
        rows.append(f"Discount  {format_amount(-receipt.discount, symbol)}")
    rows.append(f"Total  {format_amount(receipt.total, symbol)}")
    rows.append(SEPARATOR)
    rows.extend([
        f"Order ID: {receipt.order_id}",
        f"Date: {receipt.printed_date}",
        f"Time: {receipt.printed_time}",
        f"Served by: {receipt.served_by}",
        receipt.thank_you,
        receipt.footer,
    ])
    return rows


def _row(label: str, amount: str, style: str = "") -> str:
    return (
        f"<div style='display:flex;justify-content:space-between;{style}'>"
        f"<div>{html.escape(label)}</div><div>{html.escape(amount)}</div></div>"
    )


def render_receipt_html(receipt: Receipt) -> str:
    symbol = receipt.currency_symbol
    parts: List[str] = ["<div style='font-family:monospace;max-width:320px;margin:0 auto;'>"]

    # ---------------- HEADER ----------------
    parts.append(f"<h2 style='margin:0;text-align:center;'>{html.escape(receipt.brand)}</h2>")
    parts.append(f"<div style='text-align:center;font-weight:900;'>{html.escape(receipt.title)}</div>")
    parts.append("<hr style='border-top:1px dashed #000;'/>")

    # ---------------- ITEMS ----------------
    for line in receipt.lines:
        parts.append(_row(f"{line.quantity}x  {line.name}", format_amount(line.amount, symbol)))
    parts.append("<hr style='border-top:1px dashed #000;'/>")

    # ---------------- TOTALS ----------------
    parts.append(_row("Subtotal", format_amount(receipt.subtotal, symbol)))
    if receipt.discount is not None:
        parts.append(_row("Discount", format_amount(-receipt.discount, symbol)))
    parts.append(_row("Total", format_amount(receipt.total, symbol), "font-weight:bold;"))
    parts.append("<hr style='border-top:1px dashed #000;'/>")

    # ---------------- FOOTER ----------------
    parts.append("<div style='font-size:12px;'>")
    parts.append(f"<div>Order ID: {html.escape(receipt.order_id)}</div>")
    parts.append(f"<div>Date: {html.escape(receipt.printed_date)}</div>")
    parts.append(f"<div>Time: {html.escape(receipt.printed_time)}</div>")
    parts.append(f"<div>Served by: {html.escape(receipt.served_by)}</div>")
    parts.append("</div>")
    parts.append(f"<div style='margin-top:10px;text-align:center;'>{html.escape(receipt.thank_you)}</div>")
    parts.append(f"<div style='text-align:center;font-size:11px;'>{html.escape(receipt.footer)}</div>")
    parts.append("</div>")

    body = "\n".join(parts)
    return f"""<html>
<head>
  <meta charset="utf-8" />
  <title>{html.escape(receipt.title)} {html.escape(receipt.order_id)}</title>
  <style>
    @media print {{ @page {{ size: 80mm auto; margin: 4mm; }} }}
    body {{ font-family: monospace; }}
  </style>
</head>
<body>
{body}
</body>
</html>"""


def print_receipt(order: Order, surface: PrintSurface, printed_at: Optional[datetime] = None) -> bool:
    """Build the receipt for ``order`` and send it to ``surface``.

    Returns False (and prints nothing) when the surface cannot be opened.
    """
    logger = get_logger(__name__)
    document = surface.open_printable()
    if document is None:
        logger.debug(f"No print surface available for order {order.id}")
        return False
    receipt = build_receipt(order, printed_at)
    document.write(render_receipt_html(receipt))
    document.print()
    logger.debug(f"Sent receipt for order {order.id} to print surface")
    return True

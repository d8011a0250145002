"""Receipt renderer: turns an order into printable HTML ("Struk Pembelian")."""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path

from pos.application.sinks import ReceiptSink
from pos.domain.model.order import Order
from pos.infrastructure.output.formatting import format_datetime

logger = logging.getLogger(__name__)

_STYLE = """\
    body { font-family: 'Courier New', monospace; padding: 20px; max-width: 300px; margin: 0 auto; }
    .header { text-align: center; margin-bottom: 20px; padding-bottom: 10px; border-bottom: 1px dashed #000; }
    .item { margin: 10px 0; display: flex; justify-content: space-between; }
    .item-details { margin-left: 20px; }
    .total { margin-top: 20px; padding-top: 10px; border-top: 1px dashed #000; font-weight: bold; }
    .footer { margin-top: 20px; text-align: center; font-size: 12px; }
    @media print { body { margin: 0; padding: 10px; } }"""


def render_receipt(order: Order) -> str:
    items = "\n".join(
        f"""  <div class="item">
    <div>
      <div>{escape(item.name)}</div>
      <div class="item-details">{item.quantity} x {item.price}</div>
    </div>
    <div>{item.line_total}</div>
  </div>"""
        for item in order.items
    )
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Struk Pembelian</title>
  <style>
{_STYLE}
  </style>
</head>
<body>
  <div class="header">
    <h2 style="margin: 0;">Struk Pembelian</h2>
    <p style="margin: 5px 0;">Tanggal: {format_datetime(order.date)}</p>
    <p style="margin: 5px 0;">Pelanggan: {escape(order.customer_name)}</p>
  </div>
{items}
  <div class="total">
    <div class="item">
      <div>Total</div>
      <div>{order.total}</div>
    </div>
  </div>
  <div class="footer">
    <p>Terima kasih atas kunjungan Anda!</p>
  </div>
</body>
</html>
"""


class FileReceiptSink(ReceiptSink):
    """Writes each receipt to ``struk-<order id>.html`` in a directory."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self.written: list[Path] = []

    def emit(self, order: Order) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / f"struk-{order.id}.html"
        path.write_text(render_receipt(order), encoding="utf-8")
        self.written.append(path)
        logger.info("Receipt for order %s written to %s", order.id, path)

"""
Spreadsheet rendering of invoices and proposals with openpyxl.

One row per line item, then a summary block after the last data row.
Amount cells hold numbers tagged with a currency number format; the
header row repeats on every printed page.
"""

import io

from openpyxl import Workbook
from openpyxl.styles import Alignment

from hqledger.config import get_logger
from hqledger.config.settings import ReportSettings, get_settings
from hqledger.core.entities.view import DocumentView
from hqledger.core.interfaces import IDocumentRenderer
from hqledger.core.services.money import format_date
from hqledger.infrastructure.excel.styles import (
    BOLD,
    CELL_BORDER,
    QUANTITY_FORMAT,
    SUBTITLE_FONT,
    currency_format,
    merged_title,
    money_value,
    set_widths,
    write_header_row,
)

logger = get_logger(__name__)

HEADERS = ["#", "Description", "Qty", "Unit Price", "Amount"]
ALIGNS = ["center", "left", "right", "right", "right"]
WIDTHS = [6, 48, 10, 18, 20]


class OpenpyxlDocumentRenderer(IDocumentRenderer):
    """Renders a DocumentView as an .xlsx workbook."""

    format_name = "xlsx"
    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    extension = "xlsx"

    def __init__(self, report_settings: ReportSettings | None = None) -> None:
        if report_settings is None:
            report_settings = get_settings().report
        self._settings = report_settings

    def render(self, view: DocumentView) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = view.title[:31]
        money_fmt = currency_format(view.currency, self._settings.currency_number_format)
        last_col = len(HEADERS)

        merged_title(ws, 1, view.company_name, last_col)
        merged_title(ws, 2, f"{view.title} {view.meta.number}", last_col, BOLD)

        details = []
        if view.meta.issue_date:
            details.append(f"Date: {format_date(view.meta.issue_date)}")
        if view.meta.is_invoice and view.meta.due_date:
            details.append(f"Due Date: {format_date(view.meta.due_date)}")
        if not view.meta.is_invoice and view.meta.valid_until:
            details.append(f"Valid Until: {format_date(view.meta.valid_until)}")
        merged_title(ws, 3, " | ".join(details), last_col, SUBTITLE_FONT)
        party_label = "Bill To" if view.meta.is_invoice else "Prepared For"
        ws.cell(row=4, column=1, value=f"{party_label}: {view.counterparty.name}").font = BOLD
        ws.merge_cells(start_row=4, start_column=1, end_row=4, end_column=last_col)

        header_row = 6
        write_header_row(ws, header_row, HEADERS, ALIGNS)

        row = header_row
        for idx, item in enumerate(view.line_items, 1):
            row += 1
            values = [idx, item.description, float(item.quantity), money_value(item.unit_price), money_value(item.line_total)]
            for col, value in enumerate(values, 1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = CELL_BORDER
            ws.cell(row=row, column=2).alignment = Alignment(wrap_text=True, vertical="top")
            ws.cell(row=row, column=3).number_format = QUANTITY_FORMAT
            ws.cell(row=row, column=4).number_format = money_fmt
            ws.cell(row=row, column=5).number_format = money_fmt

        row = self._write_summary(ws, view, row + 2, money_fmt)
        self._write_words(ws, view, row + 1, last_col)

        set_widths(ws, WIDTHS)
        ws.freeze_panes = ws.cell(row=header_row + 1, column=1)
        ws.print_title_rows = f"{header_row}:{header_row}"

        buffer = io.BytesIO()
        wb.save(buffer)
        content = buffer.getvalue()
        logger.debug("document_xlsx_rendered", document=view.meta.number, rows=len(view.line_items))
        return content

    @staticmethod
    def _summary_rows(view: DocumentView) -> list[tuple[str, object]]:
        amounts = view.amounts
        rows: list[tuple[str, object]] = [("Subtotal", amounts["subtotal"])]
        if view.has_discount:
            rows.append((view.discount_label, amounts["discount_amount"]))
        rows.append((view.tax_label, amounts["tax_amount"]))
        rows.append(("Grand Total", amounts["total_amount"]))
        if view.meta.is_invoice and view.has_payments:
            rows.append(("Amount Paid", view.meta.amount_paid))
            rows.append(("Balance Due", view.balance_due))
        return rows

    def _write_summary(self, ws, view: DocumentView, start_row: int, money_fmt: str) -> int:
        """Label/value pairs in the last two columns; returns the last row used."""
        row = start_row - 1
        for label, value in self._summary_rows(view):
            row += 1
            label_cell = ws.cell(row=row, column=4, value=label)
            label_cell.font = BOLD
            label_cell.alignment = Alignment(horizontal="right")
            value_cell = ws.cell(row=row, column=5, value=money_value(value))
            value_cell.number_format = money_fmt
            value_cell.border = CELL_BORDER
            if label in {"Grand Total", "Balance Due"}:
                value_cell.font = BOLD
        return row

    @staticmethod
    def _write_words(ws, view: DocumentView, row: int, last_col: int) -> None:
        lines = [("Amount in words", view.amount_in_words)]
        if view.balance_due_words:
            lines.append(("Balance due in words", view.balance_due_words))
        for label, words in lines:
            ws.cell(row=row, column=1, value=label).font = BOLD
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=2)
            ws.cell(row=row, column=3, value=words).font = SUBTITLE_FONT
            ws.merge_cells(start_row=row, start_column=3, end_row=row, end_column=last_col)
            row += 1

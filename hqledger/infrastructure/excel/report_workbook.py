"""
Report export to .xlsx with openpyxl.

Company, title and period rows above a styled header row, numeric
cells formatted by column kind, the summary block in the last two
columns and a generated-on footer line.
"""

import io
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font

from hqledger.config import get_logger
from hqledger.config.settings import ReportSettings, get_settings
from hqledger.core.entities.report import ReportTable
from hqledger.core.interfaces import IReportExporter
from hqledger.infrastructure.excel.styles import (
    BOLD,
    CELL_BORDER,
    COUNT_FORMAT,
    DATE_FORMAT,
    PERCENT_FORMAT,
    SUBTITLE_FONT,
    merged_title,
    money_value,
    set_widths,
    write_header_row,
)

logger = get_logger(__name__)


def cell_value(value: Any, kind: str) -> Any:
    """Spreadsheet value for a report cell; money stays numeric."""
    if value is None:
        return None
    if kind in {"money", "number", "percent"}:
        return money_value(value)
    if kind == "flag":
        return "Yes" if value else "No"
    if kind == "count":
        return int(value)
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (date, datetime)) or isinstance(value, (int, float, str)):
        return value
    return str(value)


class OpenpyxlReportExporter(IReportExporter):
    """Exports aggregated report tables as .xlsx workbooks."""

    format_name = "xlsx"
    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    extension = "xlsx"

    def __init__(self, report_settings: ReportSettings | None = None) -> None:
        if report_settings is None:
            report_settings = get_settings().report
        self._settings = report_settings

    def _formats(self) -> dict[str, str]:
        return {
            "money": self._settings.currency_number_format,
            "number": "#,##0.00",
            "percent": PERCENT_FORMAT,
            "count": COUNT_FORMAT,
            "date": DATE_FORMAT,
        }

    def export(self, table: ReportTable) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = table.sheet_name[:31]
        columns = table.columns
        last_col = len(columns)
        formats = self._formats()

        row = 1
        if self._settings.company_name:
            merged_title(ws, row, self._settings.company_name, last_col, Font(bold=True, size=16))
            row += 1
        merged_title(ws, row, table.title, last_col)
        row += 1
        if table.subtitle:
            merged_title(ws, row, table.subtitle, last_col, SUBTITLE_FONT)
            row += 1

        header_row = row + 1
        write_header_row(ws, header_row, [c.header for c in columns], [c.align for c in columns])

        row = header_row
        for record in table.rows:
            row += 1
            for idx, column in enumerate(columns, 1):
                cell = ws.cell(row=row, column=idx, value=cell_value(table.cell(record, column), column.kind))
                cell.border = CELL_BORDER
                cell.alignment = Alignment(horizontal=column.align)
                if column.kind in formats:
                    cell.number_format = formats[column.kind]

        if table.summary:
            row += 1
            label_col = max(1, last_col - 1)
            for item in table.summary:
                row += 1
                label_cell = ws.cell(row=row, column=label_col, value=item.label)
                label_cell.font = BOLD
                label_cell.alignment = Alignment(horizontal="right")
                value_cell = ws.cell(row=row, column=last_col, value=cell_value(item.value, item.kind))
                value_cell.font = BOLD
                value_cell.border = CELL_BORDER
                if item.kind in formats:
                    value_cell.number_format = formats[item.kind]

        row += 2
        generated = datetime.now().strftime("%d %b %Y %H:%M")
        merged_title(ws, row, f"Generated on {generated} by {self._settings.generator_name}", last_col, SUBTITLE_FONT)

        set_widths(ws, [c.width for c in columns])
        ws.freeze_panes = ws.cell(row=header_row + 1, column=1)
        ws.print_title_rows = f"{header_row}:{header_row}"

        buffer = io.BytesIO()
        wb.save(buffer)
        logger.info("report_xlsx_exported", report=table.report.value, rows=len(table.rows))
        return buffer.getvalue()

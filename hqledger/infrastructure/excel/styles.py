"""Shared openpyxl styles and cell helpers."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF")
TITLE_FONT = Font(bold=True, size=14)
SUBTITLE_FONT = Font(italic=True, size=10, color="666666")
BOLD = Font(bold=True)
THIN = Side(style="thin", color="CCCCCC")
CELL_BORDER = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)

PERCENT_FORMAT = '0.00"%"'
COUNT_FORMAT = "0"
DATE_FORMAT = "dd-mm-yyyy"
QUANTITY_FORMAT = "#,##0.##"


def currency_format(currency_code: str, inr_format: str) -> str:
    """Excel number format for money cells of the given currency."""
    code = (currency_code or "INR").upper()
    if code == "INR":
        return inr_format
    return f'"{code} "#,##0.00'


def money_value(value: Any) -> float:
    """Two-place numeric value for a cell (numbers, never text)."""
    if value is None:
        return 0.0
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def write_header_row(ws: Worksheet, row: int, headers: list[str], aligns: list[str] | None = None) -> None:
    for idx, header in enumerate(headers, 1):
        cell = ws.cell(row=row, column=idx, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = CELL_BORDER
        horizontal = aligns[idx - 1] if aligns else "left"
        cell.alignment = Alignment(horizontal=horizontal, vertical="center")


def merged_title(ws: Worksheet, row: int, text: str, last_column: int, font: Font = TITLE_FONT) -> None:
    ws.cell(row=row, column=1, value=text).font = font
    ws.cell(row=row, column=1).alignment = Alignment(horizontal="center")
    if last_column > 1:
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=last_column)


def set_widths(ws: Worksheet, widths: list[float]) -> None:
    for idx, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(idx)].width = width

"""
Fpdf2 report exporter.

Company name, title and period centred at the top, a table scaled to the
page width with the header row repeated after every page break, then the
summary block and a generated-on line.
"""

from datetime import date
from decimal import Decimal
from typing import Any

from fpdf.enums import XPos, YPos

from hqledger.config import get_logger
from hqledger.config.settings import PdfSettings, ReportSettings, get_settings
from hqledger.core.entities.report import ReportColumn, ReportTable, SummaryItem
from hqledger.core.interfaces import IReportExporter
from hqledger.core.services.money import format_currency, format_date, format_number
from hqledger.infrastructure.pdf.base import (
    MUTED_TEXT,
    LedgerPdf,
    PaginatedTable,
    TableColumn,
    latin1,
    scale_widths,
)

logger = get_logger(__name__)

# Wide registers read better on landscape pages
LANDSCAPE_MIN_COLUMNS = 7


def format_cell(value: Any, kind: str, ascii_symbols: bool = True) -> str:
    """Text for one report cell according to its column kind."""
    if value is None:
        return ""
    if kind == "money":
        return format_currency(value, ascii_symbols=ascii_symbols)
    if kind == "percent":
        return f"{format_number(value)}%"
    if kind == "number":
        return format_number(value)
    if kind == "date":
        return format_date(value, "%d-%m-%Y") if isinstance(value, date) else str(value)
    if kind == "flag":
        return "Yes" if value else "No"
    if isinstance(value, Decimal):
        return format_number(value)
    return str(value)


class Fpdf2ReportExporter(IReportExporter):
    """Exports aggregated report tables as PDF."""

    format_name = "pdf"
    media_type = "application/pdf"
    extension = "pdf"

    def __init__(
        self,
        pdf_settings: PdfSettings | None = None,
        report_settings: ReportSettings | None = None,
    ) -> None:
        settings = get_settings()
        self._pdf_settings = pdf_settings or settings.pdf
        self._report_settings = report_settings or settings.report

    def export(self, table: ReportTable) -> bytes:
        orientation = "L" if len(table.columns) >= LANDSCAPE_MIN_COLUMNS else "P"
        pdf = LedgerPdf(self._pdf_settings, orientation=orientation, footer_text="")
        pdf.set_title(latin1(table.title))
        pdf.add_page()

        self._render_heading(pdf, table)
        pdf_table = self._render_rows(pdf, table)
        self._render_summary(pdf, table.summary)
        self._render_generated_line(pdf)

        logger.info(
            "report_pdf_exported",
            report=table.report.value,
            rows=len(table.rows),
            pages=pdf.page_no(),
            header_rows=pdf_table.header_rows_drawn,
        )
        return bytes(pdf.output())

    def _render_heading(self, pdf: LedgerPdf, table: ReportTable) -> None:
        if self._report_settings.company_name:
            pdf.set_font("Helvetica", "B", 16)
            pdf.cell(0, 9, latin1(self._report_settings.company_name), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "B", 13)
        pdf.cell(0, 8, latin1(table.title), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        if table.subtitle:
            pdf.set_font("Helvetica", "I", 9)
            pdf.set_text_color(*MUTED_TEXT)
            pdf.cell(0, 6, latin1(table.subtitle), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_text_color(0, 0, 0)
        pdf.ln(4)

    def _render_rows(self, pdf: LedgerPdf, table: ReportTable) -> PaginatedTable:
        widths = scale_widths([c.width for c in table.columns], pdf.epw)
        columns = [
            TableColumn(c.header, w, c.align, wrap=c.kind == "text")
            for c, w in zip(table.columns, widths)
        ]
        pdf_table = PaginatedTable(
            pdf,
            columns,
            line_height=self._pdf_settings.row_line_height,
            font_size=self._pdf_settings.body_font_size - 1,
        )
        pdf_table.start()
        for row in table.rows:
            pdf_table.add_row([self._cell(table, row, col) for col in table.columns])
        return pdf_table

    def _cell(self, table: ReportTable, row: Any, column: ReportColumn) -> str:
        return format_cell(table.cell(row, column), column.kind, self._pdf_settings.ascii_currency)

    def _render_summary(self, pdf: LedgerPdf, summary: list[SummaryItem]) -> None:
        if not summary:
            return
        pdf.ln(5)
        label_w = pdf.epw * 0.5
        value_w = pdf.epw * 0.3
        for item in summary:
            pdf.ensure_space(7)
            pdf.set_x(pdf.l_margin + pdf.epw - label_w - value_w)
            pdf.set_font("Helvetica", "B", 9)
            pdf.cell(label_w, 6, latin1(item.label), align="R")
            pdf.cell(
                value_w, 6,
                latin1(format_cell(item.value, item.kind, self._pdf_settings.ascii_currency)),
                align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )

    def _render_generated_line(self, pdf: LedgerPdf) -> None:
        pdf.ensure_space(10)
        pdf.ln(4)
        pdf.set_font("Helvetica", "I", 7)
        pdf.set_text_color(*MUTED_TEXT)
        pdf.cell(
            0, 5,
            latin1(f"Generated on {pdf.generated_at} by {self._report_settings.generator_name}"),
            align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_text_color(0, 0, 0)

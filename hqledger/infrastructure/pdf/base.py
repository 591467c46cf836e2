"""
Shared fpdf2 building blocks.

A page-numbered FPDF subclass and a table writer whose row-to-page
assignment follows the measured height of each row, reprinting the
header row at the top of every new page.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from fpdf import FPDF
from fpdf.enums import MethodReturnValue, XPos, YPos

from hqledger.config.settings import PdfSettings

HEADER_FILL = (68, 114, 196)
STRIPE_FILL = (242, 242, 242)
BORDER_GRAY = (204, 204, 204)
MUTED_TEXT = (102, 102, 102)

_ALIGN = {"left": "L", "center": "C", "right": "R"}


def latin1(text: object) -> str:
    """Make text encodable by the core PDF fonts."""
    value = "" if text is None else str(text)
    value = (
        value.replace("–", "-")
        .replace("—", "-")
        .replace("‘", "'")
        .replace("’", "'")
        .replace("“", '"')
        .replace("”", '"')
        .replace("₹", "Rs.")
    )
    return value.encode("latin-1", "replace").decode("latin-1")


class LedgerPdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(
        self,
        pdf_settings: PdfSettings,
        orientation: str = "P",
        footer_text: str | None = None,
    ) -> None:
        super().__init__(orientation=orientation, unit="mm", format="A4")
        self._pdf_settings = pdf_settings
        self._footer_text = pdf_settings.footer_text if footer_text is None else footer_text
        self._generated = datetime.now().strftime("%d %b %Y %H:%M")
        self.set_margins(pdf_settings.margin, pdf_settings.margin, pdf_settings.margin)
        self.set_auto_page_break(auto=True, margin=pdf_settings.bottom_margin)
        self.alias_nb_pages()

    def footer(self) -> None:
        """Footer text on the left, page x of y on the right."""
        self.set_y(-12)
        self.set_font("Helvetica", "I", 7)
        self.set_text_color(*MUTED_TEXT)
        self.cell(self.epw / 2, 5, latin1(self._footer_text), align="L")
        self.cell(self.epw / 2, 5, f"Page {self.page_no()} of {{nb}}", align="R")
        self.set_text_color(0, 0, 0)

    @property
    def generated_at(self) -> str:
        return self._generated

    def remaining_height(self) -> float:
        return self.page_break_trigger - self.get_y()

    def ensure_space(self, height: float) -> bool:
        """Start a new page unless ``height`` still fits; True if a page was added."""
        if self.get_y() + height > self.page_break_trigger:
            self.add_page()
            return True
        return False

    def section_title(self, text: str, size: int = 10) -> None:
        self.set_font("Helvetica", "B", size)
        self.cell(0, 6, latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


@dataclass
class TableColumn:
    """Column of a paginated PDF table (width in mm)."""

    header: str
    width: float
    align: str = "left"
    wrap: bool = False


class PaginatedTable:
    """
    Draws rows with content-driven pagination.

    Each row's height is measured from its wrapped cells before drawing;
    a row that would cross the page break trigger moves to a new page,
    which first gets the header row again. Stripe shading restarts on
    each page.
    """

    def __init__(
        self,
        pdf: LedgerPdf,
        columns: Sequence[TableColumn],
        line_height: float = 5.0,
        font_size: int = 8,
        header_height: float = 7.0,
        padding: float = 1.0,
    ) -> None:
        self._pdf = pdf
        self._columns = list(columns)
        self._line_height = line_height
        self._font_size = font_size
        self._header_height = header_height
        self._padding = padding
        self._stripe = False
        self.pages_started = 0
        self.header_rows_drawn = 0

    def draw_header(self) -> None:
        pdf = self._pdf
        pdf.set_font("Helvetica", "B", self._font_size + 1)
        pdf.set_fill_color(*HEADER_FILL)
        pdf.set_text_color(255, 255, 255)
        pdf.set_draw_color(*HEADER_FILL)
        for col in self._columns:
            pdf.cell(col.width, self._header_height, latin1(col.header), border=1, fill=True, align=_ALIGN[col.align])
        pdf.ln(self._header_height)
        pdf.set_text_color(0, 0, 0)
        self._stripe = False
        self.header_rows_drawn += 1

    def start(self) -> None:
        """Draw the header, moving to a new page if it and one row do not fit."""
        self._pdf.ensure_space(self._header_height + self._line_height + 2 * self._padding)
        self.draw_header()

    def row_height(self, values: Sequence[str]) -> float:
        pdf = self._pdf
        pdf.set_font("Helvetica", "", self._font_size)
        lines = 1
        for col, value in zip(self._columns, values):
            if not col.wrap:
                continue
            wrapped = pdf.multi_cell(
                col.width - 2 * self._padding,
                self._line_height,
                value,
                dry_run=True,
                output=MethodReturnValue.LINES,
            )
            lines = max(lines, len(wrapped))
        return lines * self._line_height + 2 * self._padding

    def add_row(self, values: Sequence[object], bold: bool = False) -> None:
        pdf = self._pdf
        texts = [latin1(v) for v in values]
        height = self.row_height(texts)

        if pdf.get_y() + height > pdf.page_break_trigger:
            pdf.add_page()
            self.pages_started += 1
            self.draw_header()

        x0, y0 = pdf.l_margin, pdf.get_y()
        pdf.set_draw_color(*BORDER_GRAY)
        if self._stripe:
            pdf.set_fill_color(*STRIPE_FILL)
        style = "DF" if self._stripe else "D"

        x = x0
        pdf.set_font("Helvetica", "B" if bold else "", self._font_size)
        for col, text in zip(self._columns, texts):
            pdf.rect(x, y0, col.width, height, style=style)
            pdf.set_xy(x + self._padding, y0 + self._padding)
            if col.wrap:
                pdf.multi_cell(
                    col.width - 2 * self._padding,
                    self._line_height,
                    text,
                    align=_ALIGN[col.align],
                )
            else:
                pdf.cell(col.width - 2 * self._padding, self._line_height, text, align=_ALIGN[col.align])
            x += col.width

        pdf.set_xy(x0, y0 + height)
        pdf.set_draw_color(0, 0, 0)
        self._stripe = not self._stripe


def scale_widths(weights: Sequence[float], total: float) -> list[float]:
    """Scale relative column weights to fill ``total`` millimetres."""
    weight_sum = sum(weights) or 1
    return [w * total / weight_sum for w in weights]

"""
Fpdf2 implementation of invoice/proposal rendering.

Lays out a DocumentView: branded header, bill-to and payment blocks,
a paginated items table, the totals block with the derived tax label,
amounts in words, notes, numbered terms, the Scan to Pay QR block and
a signature line. Every number comes from the view.
"""

import io

from fpdf.enums import XPos, YPos

from hqledger.config import get_logger
from hqledger.config.settings import PdfSettings, get_settings
from hqledger.core.entities.view import DocumentView
from hqledger.core.interfaces import IDocumentRenderer
from hqledger.core.services.money import format_currency, format_date, format_number
from hqledger.infrastructure.pdf.base import (
    MUTED_TEXT,
    LedgerPdf,
    PaginatedTable,
    TableColumn,
    latin1,
)

logger = get_logger(__name__)

BRAND_FILL = (13, 148, 136)
QR_SIZE = 32.0
LOGO_HEIGHT = 16.0


class Fpdf2DocumentRenderer(IDocumentRenderer):
    """Renders invoices and proposals as PDF using fpdf2."""

    format_name = "pdf"
    media_type = "application/pdf"
    extension = "pdf"

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        self._settings = pdf_settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, view: DocumentView) -> bytes:
        """Render a document view into PDF bytes."""
        pdf = LedgerPdf(self._settings)
        pdf.set_title(latin1(f"{view.title} {view.meta.number}"))
        pdf.set_author(latin1(view.company_name or self._settings.default_company_name))
        pdf.add_page()

        self._render_header(pdf, view)
        self._render_parties(pdf, view)
        table = self._render_items_table(pdf, view)
        self._render_totals(pdf, view)
        self._render_words(pdf, view)
        self._render_notes(pdf, view)
        self._render_terms(pdf, view)
        self._render_payment_and_signature(pdf, view)

        logger.debug(
            "document_pdf_laid_out",
            document=view.meta.number,
            pages=pdf.page_no(),
            header_rows=table.header_rows_drawn,
        )
        return bytes(pdf.output())

    def _money(self, view: DocumentView, amount) -> str:
        return format_currency(amount, view.currency, ascii_symbols=self._settings.ascii_currency)

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _render_header(self, pdf: LedgerPdf, view: DocumentView) -> None:
        """Logo (or initial), company block and document identity."""
        x, y = pdf.l_margin, pdf.t_margin
        logo_drawn = False
        if view.logo_image:
            try:
                pdf.image(io.BytesIO(view.logo_image), x=x, y=y, h=LOGO_HEIGHT)
                logo_drawn = True
            except Exception as e:
                logger.warning("logo_draw_failed", document=view.meta.number, error=str(e))
        if not logo_drawn:
            self._draw_initial(pdf, view.company_initial, x, y)

        text_x = x + LOGO_HEIGHT + 4
        pdf.set_xy(text_x, y)
        pdf.set_font("Helvetica", "B", 14)
        company_name = view.company_name or self._settings.default_company_name
        pdf.cell(90, 7, latin1(company_name), new_x=XPos.LEFT, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 8)
        pdf.set_text_color(*MUTED_TEXT)
        for line in self._company_lines(view):
            pdf.set_x(text_x)
            pdf.cell(90, 4, latin1(line), new_x=XPos.LEFT, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)
        left_bottom = pdf.get_y()

        # Title block on the right
        right_w = 70
        right_x = pdf.w - pdf.r_margin - right_w
        pdf.set_xy(right_x, y)
        pdf.set_font("Helvetica", "B", 18)
        pdf.set_text_color(*BRAND_FILL)
        pdf.cell(right_w, 9, latin1(view.title.upper()), align="R", new_x=XPos.LEFT, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)
        pdf.set_font("Helvetica", "B", 10)
        pdf.set_x(right_x)
        pdf.cell(right_w, 6, latin1(f"# {view.meta.number}"), align="R", new_x=XPos.LEFT, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 9)
        for label, value in self._date_lines(view):
            pdf.set_x(right_x)
            pdf.cell(right_w, 5, latin1(f"{label}: {value}"), align="R", new_x=XPos.LEFT, new_y=YPos.NEXT)

        pdf.set_y(max(left_bottom, pdf.get_y(), y + LOGO_HEIGHT) + 4)
        line_y = pdf.get_y()
        pdf.set_draw_color(*BRAND_FILL)
        pdf.set_line_width(0.6)
        pdf.line(pdf.l_margin, line_y, pdf.w - pdf.r_margin, line_y)
        pdf.set_line_width(0.2)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(4)

    @staticmethod
    def _draw_initial(pdf: LedgerPdf, initial: str, x: float, y: float) -> None:
        """Filled square with the company initial when no logo is usable."""
        pdf.set_fill_color(*BRAND_FILL)
        pdf.rect(x, y, LOGO_HEIGHT, LOGO_HEIGHT, style="F")
        pdf.set_text_color(255, 255, 255)
        pdf.set_font("Helvetica", "B", 16)
        pdf.set_xy(x, y + 3)
        pdf.cell(LOGO_HEIGHT, 10, latin1(initial), align="C")
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _company_lines(view: DocumentView) -> list[str]:
        company = view.company
        lines = []
        if company.tagline:
            lines.append(company.tagline)
        if company.address:
            lines.extend(part.strip() for part in company.address.splitlines() if part.strip())
        contact = " | ".join(p for p in (company.phone, company.email, company.website) if p)
        if contact:
            lines.append(contact)
        if company.gstin:
            lines.append(f"GSTIN: {company.gstin}")
        return lines

    @staticmethod
    def _date_lines(view: DocumentView) -> list[tuple[str, str]]:
        meta = view.meta
        lines = []
        if meta.issue_date:
            lines.append(("Date", format_date(meta.issue_date)))
        if meta.is_invoice and meta.due_date:
            lines.append(("Due Date", format_date(meta.due_date)))
        if not meta.is_invoice and meta.valid_until:
            lines.append(("Valid Until", format_date(meta.valid_until)))
        return lines

    def _render_parties(self, pdf: LedgerPdf, view: DocumentView) -> None:
        """Bill To on the left, Payment Info on the right (invoices)."""
        start_y = pdf.get_y()
        half = pdf.epw / 2 - 3

        pdf.set_font("Helvetica", "B", 9)
        pdf.set_text_color(*BRAND_FILL)
        pdf.cell(half, 5, "BILL TO" if view.meta.is_invoice else "PREPARED FOR", new_x=XPos.LEFT, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)
        party = view.counterparty
        pdf.set_font("Helvetica", "B", 10)
        pdf.multi_cell(half, 5, latin1(party.name), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 8)
        for line in (party.contact_name, party.email, party.phone, party.address):
            if line:
                pdf.multi_cell(half, 4, latin1(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        if party.gstin:
            pdf.cell(half, 4, latin1(f"GSTIN: {party.gstin}"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        left_bottom = pdf.get_y()

        right_bottom = start_y
        company = view.company
        if view.meta.is_invoice and (company.bank_account_number or company.upi_id):
            right_x = pdf.l_margin + half + 6
            pdf.set_xy(right_x, start_y)
            pdf.set_font("Helvetica", "B", 9)
            pdf.set_text_color(*BRAND_FILL)
            pdf.cell(half, 5, "PAYMENT INFO", new_x=XPos.LEFT, new_y=YPos.NEXT)
            pdf.set_text_color(0, 0, 0)
            pdf.set_font("Helvetica", "", 8)
            rows = [("Method", "Bank Transfer")]
            if company.bank_account_number:
                rows += [
                    ("Beneficiary", company.company_name),
                    ("Account No", company.bank_account_number),
                    ("IFSC", company.bank_ifsc_code),
                    ("Bank", company.bank_name),
                ]
            if company.upi_id:
                rows.append(("UPI", company.upi_id))
            for label, value in rows:
                if not value:
                    continue
                pdf.set_x(right_x)
                pdf.cell(24, 4, latin1(f"{label}:"))
                pdf.cell(half - 24, 4, latin1(value), new_x=XPos.LEFT, new_y=YPos.NEXT)
                pdf.set_x(right_x)
            right_bottom = pdf.get_y()

        pdf.set_y(max(left_bottom, right_bottom) + 5)

    def _render_items_table(self, pdf: LedgerPdf, view: DocumentView) -> PaginatedTable:
        """Items with wrapped descriptions; header reprinted per page."""
        fixed = 8 + 18 + 32 + 32
        columns = [
            TableColumn("#", 8, "center"),
            TableColumn("Description", pdf.epw - fixed, "left", wrap=True),
            TableColumn("Qty", 18, "right"),
            TableColumn("Unit Price", 32, "right"),
            TableColumn("Amount", 32, "right"),
        ]
        table = PaginatedTable(
            pdf,
            columns,
            line_height=self._settings.row_line_height,
            font_size=self._settings.body_font_size - 1,
        )
        table.start()
        for idx, item in enumerate(view.line_items, 1):
            table.add_row(
                [
                    idx,
                    item.description,
                    format_number(item.quantity, places=_qty_places(item.quantity)),
                    self._money(view, item.unit_price),
                    self._money(view, item.line_total),
                ]
            )
        pdf.ln(3)
        return table

    def _render_totals(self, pdf: LedgerPdf, view: DocumentView) -> None:
        """Right-aligned totals; the tax label is derived from the amounts."""
        amounts = view.amounts
        rows: list[tuple[str, str, bool]] = [("Subtotal", self._money(view, amounts["subtotal"]), False)]
        if view.has_discount:
            rows.append((view.discount_label, "- " + self._money(view, amounts["discount_amount"]), False))
        rows.append((view.tax_label, self._money(view, amounts["tax_amount"]), False))
        rows.append(("Grand Total", self._money(view, amounts["total_amount"]), True))
        if view.meta.is_invoice and view.has_payments:
            rows.append(("Amount Paid", "- " + self._money(view, view.meta.amount_paid), False))
            rows.append(("Balance Due", self._money(view, view.balance_due), True))

        pdf.ensure_space(len(rows) * 7 + 4)
        label_w, value_w = 45, 40
        x = pdf.w - pdf.r_margin - label_w - value_w
        for label, value, strong in rows:
            pdf.set_x(x)
            if strong:
                pdf.set_fill_color(*BRAND_FILL)
                pdf.set_text_color(255, 255, 255)
                pdf.set_font("Helvetica", "B", 10)
            else:
                pdf.set_font("Helvetica", "", 9)
            pdf.cell(label_w, 7, latin1(label), align="R", fill=strong)
            pdf.cell(value_w, 7, latin1(value), align="R", fill=strong, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_text_color(0, 0, 0)
        pdf.ln(3)

    def _render_words(self, pdf: LedgerPdf, view: DocumentView) -> None:
        pdf.ensure_space(14)
        pdf.set_font("Helvetica", "B", 8)
        pdf.cell(30, 5, "Amount in words:")
        pdf.set_font("Helvetica", "I", 8)
        pdf.multi_cell(0, 5, latin1(view.amount_in_words), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        if view.balance_due_words:
            pdf.set_font("Helvetica", "B", 8)
            pdf.cell(36, 5, "Balance due in words:")
            pdf.set_font("Helvetica", "I", 8)
            pdf.multi_cell(0, 5, latin1(view.balance_due_words), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(3)

    def _render_notes(self, pdf: LedgerPdf, view: DocumentView) -> None:
        if not view.meta.notes:
            return
        pdf.ensure_space(14)
        pdf.section_title("Notes", 9)
        pdf.set_font("Helvetica", "", 8)
        pdf.multi_cell(0, 4, latin1(view.meta.notes), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(3)

    def _render_terms(self, pdf: LedgerPdf, view: DocumentView) -> None:
        if not view.terms_lines:
            return
        pdf.ensure_space(14)
        pdf.section_title("Terms & Conditions", 9)
        pdf.set_font("Helvetica", "", 8)
        for line in view.terms_lines:
            pdf.multi_cell(0, 4, latin1(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(3)

    def _render_payment_and_signature(self, pdf: LedgerPdf, view: DocumentView) -> None:
        """Scan to Pay block (only with a QR image) and the signatory."""
        pdf.ensure_space(QR_SIZE + 18)
        top = pdf.get_y()
        company = view.company

        if view.qr_png:
            x = pdf.l_margin
            pdf.set_font("Helvetica", "B", 9)
            pdf.set_xy(x, top)
            pdf.cell(QR_SIZE, 5, "Scan to Pay", align="C")
            pdf.image(io.BytesIO(view.qr_png), x=x, y=top + 5, w=QR_SIZE, h=QR_SIZE)
            pdf.set_xy(x, top + QR_SIZE + 5)
            pdf.set_font("Helvetica", "", 7)
            pdf.cell(QR_SIZE + 20, 4, latin1(f"UPI: {company.upi_id}"))

        sign_w = 70
        sign_x = pdf.w - pdf.r_margin - sign_w
        pdf.set_xy(sign_x, top + 4)
        pdf.set_font("Helvetica", "", 8)
        name = company.company_name or self._settings.default_company_name
        pdf.cell(sign_w, 5, latin1(f"For {name}"), align="C", new_x=XPos.LEFT, new_y=YPos.NEXT)
        line_y = top + 24
        pdf.line(sign_x + 8, line_y, sign_x + sign_w - 8, line_y)
        pdf.set_xy(sign_x, line_y + 1)
        pdf.set_font("Helvetica", "B", 8)
        pdf.cell(
            sign_w, 5,
            latin1(company.authorized_signatory_name or "Authorized Signatory"),
            align="C", new_x=XPos.LEFT, new_y=YPos.NEXT,
        )
        if company.authorized_signatory_title:
            pdf.set_x(sign_x)
            pdf.set_font("Helvetica", "", 7)
            pdf.cell(sign_w, 4, latin1(company.authorized_signatory_title), align="C")

        bottom = top + (QR_SIZE + 10 if view.qr_png else 34)
        pdf.set_xy(pdf.l_margin, bottom)


def _qty_places(quantity) -> int:
    return 0 if quantity == quantity.to_integral_value() else 2

"""
Document service.

Builds the single DocumentView every renderer consumes (totals, words,
tax label, payment QR, logo) and dispatches rendering by output format.
Optional visual elements degrade to absent on RenderError; computation
errors propagate.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from hqledger.config import get_logger
from hqledger.core.entities.document import (
    CompanyProfile,
    Counterparty,
    DiscountSpec,
    DiscountType,
    DocumentMeta,
    LineItem,
    to_decimal,
)
from hqledger.core.entities.view import DocumentView
from hqledger.core.exceptions import ConsistencyWarning, RenderError, UnsupportedFormatError
from hqledger.core.interfaces import IDocumentRenderer, ILogoLoader, IQrEncoder
from hqledger.core.services.money import number_to_words
from hqledger.core.services.totals import (
    DEFAULT_RATE_TOLERANCE,
    balance_due,
    check_tax_rate_consistency,
    compute_totals,
    displayed_tax_rate,
    reconcile_stored_totals,
)
from hqledger.core.services.upi import build_upi_url, invoice_payment_note

logger = get_logger(__name__)

# Split before "1." / "2)" / "3:" markers and on line breaks
_TERMS_SPLIT_RE = re.compile(r"(?=\d+[.):])|[\n\r]+")


def parse_terms_lines(terms: str | None) -> list[str]:
    """Break free-form terms text into one clause per line."""
    if not terms:
        return []
    return [line.strip() for line in _TERMS_SPLIT_RE.split(terms) if line and line.strip()]


@dataclass
class RenderedDocument:
    """Result of rendering a document view."""

    content: bytes
    media_type: str
    filename: str
    file_size: int


class DocumentService:
    """
    Orchestrates totals, words and payment assets for a document.

    Renderers are injected per output format; the QR encoder and logo
    loader are optional and their failures only drop the element.
    """

    def __init__(
        self,
        renderers: Iterable[IDocumentRenderer],
        qr_encoder: IQrEncoder | None = None,
        logo_loader: ILogoLoader | None = None,
        tax_rate_tolerance: Any = DEFAULT_RATE_TOLERANCE,
    ):
        self._renderers = {r.format_name: r for r in renderers}
        self._qr_encoder = qr_encoder
        self._logo_loader = logo_loader
        self._tolerance = to_decimal(tax_rate_tolerance)

    @property
    def formats(self) -> list[str]:
        return sorted(self._renderers)

    def build_view(
        self,
        line_items: list[LineItem],
        discount: DiscountSpec | None,
        tax_rate: Any,
        company: CompanyProfile,
        counterparty: Counterparty,
        meta: DocumentMeta,
        stored_totals: Mapping[str, Any] | None = None,
    ) -> DocumentView:
        """
        Compute everything a renderer may print.

        Raises:
            ValidationError: Malformed line items, discount or tax rate.
            ComputationError: Totals could not be computed.
        """
        discount = discount or DiscountSpec.none()
        totals = compute_totals(line_items, discount, tax_rate)
        amounts = totals.rounded()

        rate = displayed_tax_rate(totals)
        due = balance_due(totals, meta.amount_paid)

        warnings: list[ConsistencyWarning] = []
        drift = check_tax_rate_consistency(totals, totals.tax_rate, self._tolerance)
        if drift is not None:
            warnings.append(drift)
        if stored_totals:
            warnings.extend(reconcile_stored_totals(stored_totals, totals))
        for warning in warnings:
            logger.warning(
                "document_totals_drift",
                document=meta.number,
                field=warning.field,
                **{k: v for k, v in warning.details.items() if k != "field"},
            )

        view = DocumentView(
            meta=meta,
            company=company,
            counterparty=counterparty,
            line_items=list(line_items),
            discount=discount,
            totals=totals,
            amounts=amounts,
            displayed_tax_rate=rate,
            tax_label=f"Tax ({rate}%)",
            discount_label=self._discount_label(discount),
            amount_in_words=number_to_words(totals.total_amount),
            balance_due=due,
            balance_due_words=number_to_words(due) if meta.amount_paid > 0 else None,
            terms_lines=parse_terms_lines(
                company.invoice_terms if meta.is_invoice else company.proposal_terms
            ),
            warnings=warnings,
        )

        if meta.is_invoice and company.upi_id:
            view.upi_url = build_upi_url(
                company.upi_id,
                company.company_name,
                amount=due,
                note=invoice_payment_note(meta.number),
            )
            view.qr_png = self._encode_qr(view.upi_url, meta.number)

        if company.logo_url:
            view.logo_image = self._load_logo(company.logo_url, meta.number)

        logger.info(
            "document_view_built",
            document=meta.number,
            kind=meta.kind.value,
            items=len(view.line_items),
            total=str(amounts["total_amount"]),
            has_qr=view.qr_png is not None,
            warnings=len(warnings),
        )
        return view

    def render(self, view: DocumentView, output_format: str) -> RenderedDocument:
        """
        Render a view with the renderer registered for the format.

        Raises:
            UnsupportedFormatError: No renderer for the requested format.
            RenderError: The document as a whole could not be produced.
        """
        key = (output_format or "").strip().lower()
        renderer = self._renderers.get(key)
        if renderer is None:
            raise UnsupportedFormatError(output_format, self.formats)

        logger.info("rendering_document", document=view.meta.number, format=key)
        content = renderer.render(view)
        filename = f"{view.file_stem}.{renderer.extension}"

        logger.info(
            "document_rendered",
            document=view.meta.number,
            format=key,
            size_bytes=len(content),
        )
        return RenderedDocument(
            content=content,
            media_type=renderer.media_type,
            filename=filename,
            file_size=len(content),
        )

    # ------------------------------------------------------------------
    # Optional elements
    # ------------------------------------------------------------------

    @staticmethod
    def _discount_label(discount: DiscountSpec) -> str:
        if discount.type == DiscountType.PERCENTAGE and discount.value > 0:
            return f"Discount ({discount.value.normalize():f}%)"
        return "Discount"

    def _encode_qr(self, payload: str, number: str) -> bytes | None:
        if self._qr_encoder is None:
            return None
        try:
            return self._qr_encoder.encode(payload)
        except RenderError as e:
            logger.warning("qr_render_failed", document=number, reason=e.details.get("reason"))
            return None

    def _load_logo(self, source: str, number: str) -> bytes | None:
        if self._logo_loader is None:
            return None
        try:
            return self._logo_loader.load(source)
        except RenderError as e:
            logger.warning("logo_load_failed", document=number, reason=e.details.get("reason"))
            return None


"""Presentation model shared by every document renderer."""

from dataclasses import dataclass, field
from decimal import Decimal

from hqledger.core.entities.document import (
    CompanyProfile,
    Counterparty,
    DiscountSpec,
    DocumentMeta,
    DocumentTotals,
    LineItem,
)
from hqledger.core.exceptions import ConsistencyWarning


@dataclass
class DocumentView:
    """
    Everything a renderer may print, computed once.

    Renderers read numbers and words from here and never recompute
    totals themselves.
    """

    meta: DocumentMeta
    company: CompanyProfile
    counterparty: Counterparty
    line_items: list[LineItem]
    discount: DiscountSpec
    totals: DocumentTotals
    amounts: dict[str, Decimal]
    displayed_tax_rate: int
    tax_label: str
    discount_label: str
    amount_in_words: str
    balance_due: Decimal
    balance_due_words: str | None = None
    terms_lines: list[str] = field(default_factory=list)
    upi_url: str | None = None
    qr_png: bytes | None = None
    logo_image: bytes | None = None
    warnings: list[ConsistencyWarning] = field(default_factory=list)

    @property
    def currency(self) -> str:
        return self.meta.currency

    @property
    def title(self) -> str:
        if self.meta.title:
            return self.meta.title
        return "Invoice" if self.meta.is_invoice else "Proposal"

    @property
    def company_name(self) -> str:
        return self.company.company_name

    @property
    def company_initial(self) -> str:
        return (self.company_name[:1] or "H").upper()

    @property
    def has_discount(self) -> bool:
        return self.amounts["discount_amount"] > 0

    @property
    def has_payments(self) -> bool:
        return self.meta.amount_paid > 0

    @property
    def file_stem(self) -> str:
        number = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in self.meta.number)
        return f"{self.meta.kind.value.lower()}_{number}"

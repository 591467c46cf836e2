"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases; payloads are
validated once here and passed on as typed models.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

from hqledger.core.entities.document import (
    CompanyProfile,
    Counterparty,
    DiscountSpec,
    DocumentMeta,
    LineItem,
    coerce_date,
    to_decimal,
)
from hqledger.core.entities.records import ExpenseRecord, InvoiceRecord
from hqledger.core.entities.report import ReportFilter, ReportKind


class StoredTotals(BaseModel):
    """Totals persisted with a document, checked against a recomputation."""

    subtotal: Decimal | None = None
    discount_amount: Decimal | None = None
    tax_amount: Decimal | None = None
    total_amount: Decimal | None = None


class TotalsRequest(BaseModel):
    """Request to compute document totals."""

    line_items: list[LineItem] = Field(..., min_length=1, description="Billable rows")
    discount: DiscountSpec = Field(default_factory=DiscountSpec, description="Discount spec")
    tax_rate: Decimal = Field(default=Decimal("0"), description="Tax rate in percent", examples=["18"])
    amount_paid: Decimal = Field(default=Decimal("0"), description="Payments received")

    @field_validator("tax_rate", "amount_paid", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> Decimal:
        if v is None or v == "":
            return Decimal("0")
        return to_decimal(v)


class DocumentRenderRequest(TotalsRequest):
    """Invoice or proposal to render."""

    company: CompanyProfile = Field(default_factory=CompanyProfile)
    client: Counterparty
    meta: DocumentMeta
    stored_totals: StoredTotals | None = Field(
        default=None,
        description="Totals saved with the document, compared against a recomputation",
    )


class UpiLinkRequest(BaseModel):
    """Request for a UPI payment link or QR image."""

    upi_id: str = Field(..., description="Payee UPI address", examples=["acme@okhdfcbank"])
    payee_name: str = Field(..., description="Payee display name")
    amount: Decimal | None = Field(default=None, description="Omitted from the link when <= 0")
    note: str | None = Field(default=None, max_length=80)
    invoice_number: str | None = Field(
        default=None,
        description="Builds the note 'Payment for Invoice <n>' when note is empty",
    )

    def resolved_note(self) -> str | None:
        if self.note:
            return self.note
        if self.invoice_number:
            from hqledger.core.services.upi import invoice_payment_note

            return invoice_payment_note(self.invoice_number)
        return None


# --- Reports ---


class ReportRequestBase(BaseModel):
    """Filter window shared by every report request."""

    start_date: date | None = None
    end_date: date | None = None
    client_id: str | None = None
    category_id: str | None = None
    as_of: date | None = Field(default=None, description="Reference date for aging")

    @field_validator("start_date", "end_date", "as_of", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> date | None:
        return coerce_date(v)

    @property
    def kind(self) -> ReportKind:
        return ReportKind(self.report)  # type: ignore[attr-defined]

    def to_filter(self) -> ReportFilter:
        return ReportFilter(
            start_date=self.start_date,
            end_date=self.end_date,
            client_id=self.client_id,
            category_id=self.category_id,
            as_of=self.as_of,
        )

    def invoice_records(self) -> list[InvoiceRecord]:
        return list(getattr(self, "invoices", []))

    def expense_records(self) -> list[ExpenseRecord]:
        return list(getattr(self, "expenses", []))

    def record_count(self) -> int:
        return len(self.invoice_records()) + len(self.expense_records())


class InvoiceAgingRequest(ReportRequestBase):
    report: Literal["invoice-aging"]
    invoices: list[InvoiceRecord]


class RevenueByClientRequest(ReportRequestBase):
    report: Literal["revenue-by-client"]
    invoices: list[InvoiceRecord]


class ProfitByClientRequest(ReportRequestBase):
    report: Literal["profit-by-client"]
    invoices: list[InvoiceRecord]
    expenses: list[ExpenseRecord] = Field(default_factory=list)


class ExpensesByCategoryRequest(ReportRequestBase):
    report: Literal["expenses-by-category"]
    expenses: list[ExpenseRecord]


class GstSalesRegisterRequest(ReportRequestBase):
    report: Literal["gst-sales-register"]
    invoices: list[InvoiceRecord]


class GstPurchaseRegisterRequest(ReportRequestBase):
    report: Literal["gst-purchase-register"]
    expenses: list[ExpenseRecord]


class GstRateSummaryRequest(ReportRequestBase):
    report: Literal["gst-rate-summary"]
    invoices: list[InvoiceRecord]


class Gstr3bSummaryRequest(ReportRequestBase):
    report: Literal["gstr3b-summary"]
    invoices: list[InvoiceRecord] = Field(default_factory=list)
    expenses: list[ExpenseRecord] = Field(default_factory=list)


ReportVariant = (
    InvoiceAgingRequest
    | RevenueByClientRequest
    | ProfitByClientRequest
    | ExpensesByCategoryRequest
    | GstSalesRegisterRequest
    | GstPurchaseRegisterRequest
    | GstRateSummaryRequest
    | Gstr3bSummaryRequest
)

# Tagged union on the "report" field
ReportRequest = Annotated[ReportVariant, Field(discriminator="report")]

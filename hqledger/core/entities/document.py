"""
Financial document value objects with Pydantic v2 validation.

Everything here is computed per request; nothing has an identity
beyond the request that produced it.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

TWO_PLACES = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Convert numbers and numeric strings to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        s = value.strip().replace(",", "")
        try:
            return Decimal(s)
        except InvalidOperation as e:
            raise ValueError(f"not a number: {value!r}") from e
    raise ValueError(f"expected a number, got {type(value).__name__}")


def quantize(value: Decimal) -> Decimal:
    """Round to two places for presentation (half up, like paper invoices)."""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def coerce_date(v: Any) -> date | None:
    """Accept ISO-8601 strings, datetimes and dates."""
    if v is None:
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        v = v.strip()
        if not v or v.lower() in {"none", "null"}:
            return None
        try:
            return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        except ValueError:
            pass
        for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y"):
            try:
                return datetime.strptime(v, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"unrecognised date: {v!r}")
    raise ValueError(f"unsupported date value: {v!r}")


class DocumentKind(str, Enum):
    """Kind of financial document."""

    INVOICE = "INVOICE"
    PROPOSAL = "PROPOSAL"


class DiscountType(str, Enum):
    """How a discount value is interpreted."""

    FIXED = "FIXED"
    PERCENTAGE = "PERCENTAGE"


class LineItem(BaseModel):
    """One billable row. Ranges are checked by the totals calculator."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    quantity: Decimal = Decimal("1")
    unit_price: Decimal = Decimal("0")

    @field_validator("quantity", "unit_price", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @field_validator("description", mode="before")
    @classmethod
    def coerce_string(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price


class DiscountSpec(BaseModel):
    """Discount applied once to the sum of line totals."""

    model_config = ConfigDict(frozen=True)

    type: DiscountType = DiscountType.FIXED
    value: Decimal = Decimal("0")

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Decimal:
        if v is None or v == "":
            return Decimal("0")
        return to_decimal(v)

    @classmethod
    def none(cls) -> "DiscountSpec":
        return cls()


class TaxSpec(BaseModel):
    """Tax rate in percent applied to the discounted subtotal."""

    model_config = ConfigDict(frozen=True)

    rate: Decimal = Decimal("0")

    @field_validator("rate", mode="before")
    @classmethod
    def coerce_rate(cls, v: Any) -> Decimal:
        if v is None or v == "":
            return Decimal("0")
        return to_decimal(v)

    def amount_on(self, taxable_base: Decimal) -> Decimal:
        return taxable_base * self.rate / Decimal("100")


class DocumentTotals(BaseModel):
    """
    Derived totals at full precision.

    total_amount == max(0, subtotal - discount_amount) + tax_amount.
    Use rounded() for anything shown to a reader.
    """

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    discount_amount: Decimal
    taxable_base: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal

    def rounded(self) -> dict[str, Decimal]:
        return {
            "subtotal": quantize(self.subtotal),
            "discount_amount": quantize(self.discount_amount),
            "taxable_base": quantize(self.taxable_base),
            "tax_amount": quantize(self.tax_amount),
            "total_amount": quantize(self.total_amount),
        }


class CompanyProfile(BaseModel):
    """Billing identity of the issuing company."""

    company_name: str = ""
    tagline: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    gstin: str = ""
    state: str = ""
    logo_url: str = ""
    bank_name: str = ""
    bank_account_number: str = ""
    bank_ifsc_code: str = ""
    upi_id: str = ""
    payment_link: str = ""
    invoice_terms: str = ""
    proposal_terms: str = ""
    authorized_signatory_name: str = ""
    authorized_signatory_title: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Counterparty(BaseModel):
    """Client (or vendor) the document is addressed to."""

    name: str
    contact_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    gstin: str = ""
    state: str = ""


class Attachment(BaseModel):
    """Opaque uploaded-file metadata."""

    name: str
    url: str
    size: int = 0
    type: str = ""


class DocumentMeta(BaseModel):
    """Identity and dates of a document."""

    kind: DocumentKind = DocumentKind.INVOICE
    number: str
    title: str = ""
    issue_date: date | None = None
    due_date: date | None = None
    valid_until: date | None = None
    currency: str = "INR"
    notes: str = ""
    amount_paid: Decimal = Decimal("0")
    attachments: list[Attachment] = Field(default_factory=list)

    @field_validator("issue_date", "due_date", "valid_until", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> date | None:
        return coerce_date(v)

    @field_validator("amount_paid", mode="before")
    @classmethod
    def coerce_paid(cls, v: Any) -> Decimal:
        if v is None or v == "":
            return Decimal("0")
        return to_decimal(v)

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v: Any) -> str:
        if not v:
            return "INR"
        return str(v).strip().upper()

    @property
    def is_invoice(self) -> bool:
        return self.kind == DocumentKind.INVOICE

"""Materialized financial records supplied by the storage layer."""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from hqledger.core.entities.document import coerce_date, to_decimal


class InvoiceStatus(str, Enum):
    """Invoice lifecycle status."""

    DRAFT = "DRAFT"
    SENT = "SENT"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"


class ExpenseStatus(str, Enum):
    """Expense lifecycle status."""

    PLANNED = "PLANNED"
    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


def _money(v: Any) -> Decimal:
    if v is None or v == "":
        return Decimal("0")
    return to_decimal(v)


class InvoiceRecord(BaseModel):
    """
    Invoice as stored, with totals already computed.

    inter_state is the CGST/SGST vs IGST classification decided upstream
    from the company and client states.
    """

    id: str
    invoice_number: str
    client_id: str
    client_name: str
    client_gstin: str = ""
    place_of_supply: str = ""
    inter_state: bool = False
    issue_date: date
    due_date: date
    status: InvoiceStatus = InvoiceStatus.SENT
    currency: str = "INR"
    subtotal: Decimal = Decimal("0")
    discount_amount: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    amount_paid: Decimal = Decimal("0")
    balance_due: Decimal | None = None

    @field_validator("issue_date", "due_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> date | None:
        return coerce_date(v)

    @field_validator(
        "subtotal", "discount_amount", "tax_amount", "total_amount", "amount_paid",
        mode="before",
    )
    @classmethod
    def parse_money(cls, v: Any) -> Decimal:
        return _money(v)

    @field_validator("balance_due", mode="before")
    @classmethod
    def parse_balance(cls, v: Any) -> Decimal | None:
        if v is None or v == "":
            return None
        return to_decimal(v)

    @model_validator(mode="after")
    def derive_balance(self) -> "InvoiceRecord":
        if self.balance_due is None:
            self.balance_due = max(Decimal("0"), self.total_amount - self.amount_paid)
        return self

    @property
    def taxable_value(self) -> Decimal:
        return max(Decimal("0"), self.subtotal - self.discount_amount)

    @property
    def is_open(self) -> bool:
        return (
            self.status not in {InvoiceStatus.PAID, InvoiceStatus.CANCELLED, InvoiceStatus.DRAFT}
            and (self.balance_due or Decimal("0")) > 0
        )


class ExpenseRecord(BaseModel):
    """Expense voucher; amount includes GST when gst_amount is set."""

    id: str
    description: str
    category_id: str
    category_name: str
    amount: Decimal
    expense_date: date
    gst_amount: Decimal = Decimal("0")
    inter_state: bool = False
    itc_eligible: bool = False
    vendor_name: str = ""
    vendor_gstin: str = ""
    client_id: str | None = None
    voucher_number: str = ""
    status: ExpenseStatus = ExpenseStatus.PAID

    @field_validator("expense_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> date | None:
        return coerce_date(v)

    @field_validator("amount", "gst_amount", mode="before")
    @classmethod
    def parse_money(cls, v: Any) -> Decimal:
        return _money(v)

    @property
    def taxable_value(self) -> Decimal:
        return self.amount - self.gst_amount

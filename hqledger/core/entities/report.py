"""
Report rows and tables.

Rows are request-scoped projections of invoices and expenses; a
ReportTable pairs them with the column layout every exporter uses.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from hqledger.core.entities.document import coerce_date


class ReportKind(str, Enum):
    """Reports the aggregator can produce."""

    INVOICE_AGING = "invoice-aging"
    REVENUE_BY_CLIENT = "revenue-by-client"
    PROFIT_BY_CLIENT = "profit-by-client"
    EXPENSES_BY_CATEGORY = "expenses-by-category"
    GST_SALES_REGISTER = "gst-sales-register"
    GST_PURCHASE_REGISTER = "gst-purchase-register"
    GST_RATE_SUMMARY = "gst-rate-summary"
    GSTR3B_SUMMARY = "gstr3b-summary"


ColumnKind = Literal["text", "money", "number", "percent", "date", "count", "flag"]


class ReportColumn(BaseModel):
    """Column layout shared by PDF and spreadsheet exporters."""

    key: str
    header: str
    width: int = 15
    align: Literal["left", "center", "right"] = "left"
    kind: ColumnKind = "text"


class ReportFilter(BaseModel):
    """Window and scope applied before grouping."""

    start_date: date | None = None
    end_date: date | None = None
    client_id: str | None = None
    category_id: str | None = None
    as_of: date | None = None

    @field_validator("start_date", "end_date", "as_of", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> date | None:
        return coerce_date(v)

    def contains(self, day: date) -> bool:
        if self.start_date and day < self.start_date:
            return False
        if self.end_date and day > self.end_date:
            return False
        return True

    def describe(self) -> str:
        if self.start_date and self.end_date:
            return f"{self.start_date.isoformat()} to {self.end_date.isoformat()}"
        if self.start_date:
            return f"From {self.start_date.isoformat()}"
        if self.end_date:
            return f"Up to {self.end_date.isoformat()}"
        return "All dates"


class SummaryItem(BaseModel):
    """Label/value pair printed after the last data row."""

    label: str
    value: Decimal | int | str
    kind: ColumnKind = "money"


# ---------------------------------------------------------------------------
# Row variants
# ---------------------------------------------------------------------------


class AgingRow(BaseModel):
    invoice_id: str
    invoice_number: str
    client_name: str
    amount: Decimal
    due_date: date
    days_overdue: int
    aging_bucket: str


class AgingBucketSummary(BaseModel):
    range: str
    count: int = 0
    amount: Decimal = Decimal("0")
    invoices: list[AgingRow] = Field(default_factory=list)


class RevenueByClientRow(BaseModel):
    client_id: str
    client_name: str
    total_invoiced: Decimal
    total_paid: Decimal
    total_outstanding: Decimal
    invoice_count: int


class ProfitByClientRow(BaseModel):
    client_id: str
    client_name: str
    revenue: Decimal
    expenses: Decimal
    profit: Decimal
    margin: Decimal


class ExpenseCategoryRow(BaseModel):
    category_id: str
    category_name: str
    amount: Decimal
    count: int
    percentage: Decimal


class GstSalesRow(BaseModel):
    invoice_number: str
    invoice_date: date
    client_name: str
    gstin: str
    place_of_supply: str
    invoice_type: Literal["B2B", "B2C"]
    taxable_value: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_gst: Decimal
    invoice_value: Decimal
    status: str


class GstPurchaseRow(BaseModel):
    voucher_number: str
    voucher_date: date
    vendor_name: str
    gstin: str
    description: str
    category: str
    taxable_value: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_gst: Decimal
    total_value: Decimal
    itc_eligible: bool


class GstRateRow(BaseModel):
    rate: Decimal
    invoice_count: int
    taxable_value: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_tax: Decimal
    invoice_value: Decimal


class TaxHeads(BaseModel):
    """Tax amounts split by GST head."""

    taxable_value: Decimal = Decimal("0")
    cgst: Decimal = Decimal("0")
    sgst: Decimal = Decimal("0")
    igst: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.cgst + self.sgst + self.igst


class Gstr3bRow(BaseModel):
    particulars: str
    taxable_value: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total: Decimal


ReportRow = (
    AgingRow
    | RevenueByClientRow
    | ProfitByClientRow
    | ExpenseCategoryRow
    | GstSalesRow
    | GstPurchaseRow
    | GstRateRow
    | Gstr3bRow
)


class ReportTable(BaseModel):
    """A fully aggregated report, ready for any exporter."""

    report: ReportKind
    title: str
    sheet_name: str
    subtitle: str = ""
    columns: list[ReportColumn]
    rows: list[ReportRow] = Field(default_factory=list)
    summary: list[SummaryItem] = Field(default_factory=list)
    extra: dict[str, Any] = Field(default_factory=dict)

    def cell(self, row: BaseModel, column: ReportColumn) -> Any:
        return getattr(row, column.key, None)

    def records(self) -> list[dict[str, Any]]:
        return [row.model_dump(mode="json") for row in self.rows]

"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
Money travels as two-place strings so JSON never carries float noise.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class WarningResponse(BaseModel):
    """Non-fatal drift between entered or stored values and derived ones."""

    field: str = Field(..., description="Field that drifted")
    expected: str | None = Field(default=None, description="Entered or stored value")
    actual: str | None = Field(default=None, description="Derived value")
    message: str


class TotalsResponse(BaseModel):
    """Computed totals, rounded for display."""

    subtotal: str = Field(..., description="Sum of line totals", examples=["100.00"])
    discount_amount: str = Field(..., description="Discount after clamping")
    taxable_base: str = Field(..., description="Subtotal minus discount, floored at zero")
    tax_amount: str
    total_amount: str
    displayed_tax_rate: int = Field(..., description="Whole-percent rate printed on the document")
    tax_label: str = Field(..., examples=["Tax (18%)"])
    amount_in_words: str
    amount_paid: str = "0.00"
    balance_due: str
    balance_due_words: str | None = None
    formatted_total: str = Field(..., description="Grand total with currency symbol")
    warnings: list[WarningResponse] = Field(default_factory=list)


class UpiLinkResponse(BaseModel):
    """UPI deep link for a payment."""

    upi_url: str = Field(..., examples=["upi://pay?pa=acme@okhdfcbank&pn=Acme&cu=INR"])
    amount: str | None = Field(default=None, description="Amount embedded in the link")


class AmountInWordsResponse(BaseModel):
    """Amount spelled out in the Indian numbering system."""

    amount: str
    words: str


class CurrencyFormatResponse(BaseModel):
    """Amount formatted for display."""

    amount: str
    currency: str
    formatted: str
    grouped: str = Field(..., description="Grouped number without symbol")


class ReportColumnResponse(BaseModel):
    key: str
    header: str
    kind: str
    align: str


class ReportSummaryResponse(BaseModel):
    label: str
    value: Any
    kind: str


class ReportResponse(BaseModel):
    """Aggregated report as JSON."""

    report: str
    title: str
    subtitle: str = ""
    columns: list[ReportColumnResponse] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)
    summary: list[ReportSummaryResponse] = Field(default_factory=list)
    extra: dict[str, Any] = Field(default_factory=dict)
    row_count: int = 0


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    document_formats: list[str] = Field(default_factory=list)
    report_formats: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. VALIDATION_ERROR)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)

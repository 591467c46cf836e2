"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from hqledger.application.dto.requests import (
    DocumentRenderRequest,
    ExpensesByCategoryRequest,
    GstPurchaseRegisterRequest,
    GstRateSummaryRequest,
    GstSalesRegisterRequest,
    Gstr3bSummaryRequest,
    InvoiceAgingRequest,
    ProfitByClientRequest,
    ReportRequest,
    ReportRequestBase,
    ReportVariant,
    RevenueByClientRequest,
    StoredTotals,
    TotalsRequest,
    UpiLinkRequest,
)
from hqledger.application.dto.responses import (
    AmountInWordsResponse,
    CurrencyFormatResponse,
    ErrorResponse,
    HealthResponse,
    ReportColumnResponse,
    ReportResponse,
    ReportSummaryResponse,
    TotalsResponse,
    UpiLinkResponse,
    WarningResponse,
)

__all__ = [
    # Requests
    "TotalsRequest",
    "DocumentRenderRequest",
    "StoredTotals",
    "UpiLinkRequest",
    "ReportRequest",
    "ReportRequestBase",
    "ReportVariant",
    "InvoiceAgingRequest",
    "RevenueByClientRequest",
    "ProfitByClientRequest",
    "ExpensesByCategoryRequest",
    "GstSalesRegisterRequest",
    "GstPurchaseRegisterRequest",
    "GstRateSummaryRequest",
    "Gstr3bSummaryRequest",
    # Responses
    "TotalsResponse",
    "WarningResponse",
    "UpiLinkResponse",
    "AmountInWordsResponse",
    "CurrencyFormatResponse",
    "ReportResponse",
    "ReportColumnResponse",
    "ReportSummaryResponse",
    "HealthResponse",
    "ErrorResponse",
]

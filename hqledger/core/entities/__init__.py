"""Core domain entities."""

from hqledger.core.entities.document import (
    Attachment,
    CompanyProfile,
    Counterparty,
    DiscountSpec,
    DiscountType,
    DocumentKind,
    DocumentMeta,
    DocumentTotals,
    LineItem,
    TaxSpec,
)
from hqledger.core.entities.records import (
    ExpenseRecord,
    ExpenseStatus,
    InvoiceRecord,
    InvoiceStatus,
)
from hqledger.core.entities.report import (
    AgingBucketSummary,
    AgingRow,
    ExpenseCategoryRow,
    GstPurchaseRow,
    GstRateRow,
    GstSalesRow,
    Gstr3bRow,
    ProfitByClientRow,
    ReportColumn,
    ReportFilter,
    ReportKind,
    ReportTable,
    RevenueByClientRow,
    SummaryItem,
    TaxHeads,
)
from hqledger.core.entities.session import AuthSession, SessionState
from hqledger.core.entities.view import DocumentView

__all__ = [
    # Document value objects
    "LineItem",
    "DiscountSpec",
    "TaxSpec",
    "DiscountType",
    "DocumentTotals",
    "DocumentKind",
    "DocumentMeta",
    "CompanyProfile",
    "Counterparty",
    "Attachment",
    "DocumentView",
    # Records
    "InvoiceRecord",
    "InvoiceStatus",
    "ExpenseRecord",
    "ExpenseStatus",
    # Reports
    "ReportKind",
    "ReportFilter",
    "ReportColumn",
    "ReportTable",
    "SummaryItem",
    "AgingBucketSummary",
    "AgingRow",
    "RevenueByClientRow",
    "ProfitByClientRow",
    "ExpenseCategoryRow",
    "GstSalesRow",
    "GstPurchaseRow",
    "GstRateRow",
    "Gstr3bRow",
    "TaxHeads",
    # Session
    "AuthSession",
    "SessionState",
]

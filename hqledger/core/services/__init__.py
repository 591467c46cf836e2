"""
Core business logic services.

Layer-pure services that depend only on:
- hqledger/core/entities/*
- hqledger/core/interfaces/*
- hqledger/core/exceptions.py

NO infrastructure imports. Renderers and encoders are injected.
"""

from hqledger.core.services.document_service import (
    DocumentService,
    RenderedDocument,
    parse_terms_lines,
)
from hqledger.core.services.money import (
    format_currency,
    format_date,
    format_number,
    format_percent,
    number_to_words,
)
from hqledger.core.services.report_aggregator import ReportAggregator, aging_bucket, split_tax
from hqledger.core.services.totals import (
    balance_due,
    check_tax_rate_consistency,
    compute_totals,
    displayed_tax_rate,
    reconcile_stored_totals,
)
from hqledger.core.services.upi import build_upi_url, invoice_payment_note

__all__ = [
    # Formatter
    "format_currency",
    "format_number",
    "format_percent",
    "format_date",
    "number_to_words",
    # Totals
    "compute_totals",
    "displayed_tax_rate",
    "check_tax_rate_consistency",
    "reconcile_stored_totals",
    "balance_due",
    # UPI
    "build_upi_url",
    "invoice_payment_note",
    # Documents
    "DocumentService",
    "RenderedDocument",
    "parse_terms_lines",
    # Reports
    "ReportAggregator",
    "aging_bucket",
    "split_tax",
]

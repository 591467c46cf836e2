"""
Dependency injection container for FastAPI.

Provides use cases and request context to route handlers.
"""

from fastapi import Request

from hqledger.application.context import RequestContext
from hqledger.application.use_cases import (
    BuildUpiPaymentUseCase,
    ComputeTotalsUseCase,
    ExportReportUseCase,
    RenderDocumentUseCase,
)
from hqledger.config import get_settings


def get_request_context(request: Request) -> RequestContext:
    """
    Build the explicit per-request context.

    An upstream auth gate may attach an AuthSession as
    ``request.state.session``; one that can no longer authorize calls is
    rejected with AuthenticationError (401).
    """
    context = RequestContext(
        currency=get_settings().default_currency,
        session=getattr(request.state, "session", None),
    )
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        context.request_id = request_id
    if context.session is not None:
        context.require_session()
    return context


# Use case dependencies
def get_compute_totals_use_case() -> ComputeTotalsUseCase:
    """Get totals preview use case."""
    return ComputeTotalsUseCase()


def get_render_document_use_case() -> RenderDocumentUseCase:
    """Get document rendering use case."""
    return RenderDocumentUseCase()


def get_upi_payment_use_case() -> BuildUpiPaymentUseCase:
    """Get UPI link/QR use case."""
    return BuildUpiPaymentUseCase()


def get_export_report_use_case() -> ExportReportUseCase:
    """Get report export use case."""
    return ExportReportUseCase()

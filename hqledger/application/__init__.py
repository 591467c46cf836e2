"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import (
    DocumentRenderRequest,
    ReportRequest,
    TotalsRequest,
    UpiLinkRequest,
)
from hqledger.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    ReportResponse,
    TotalsResponse,
    UpiLinkResponse,
)
from hqledger.application.services import (
    get_document_service,
    get_report_aggregator,
    get_report_exporters,
    reset_services,
)
from hqledger.application.use_cases import (
    BuildUpiPaymentUseCase,
    ComputeTotalsUseCase,
    ExportReportUseCase,
    RenderDocumentUseCase,
)

__all__ = [
    # Context
    "RequestContext",
    # Request DTOs
    "TotalsRequest",
    "DocumentRenderRequest",
    "UpiLinkRequest",
    "ReportRequest",
    # Response DTOs
    "TotalsResponse",
    "UpiLinkResponse",
    "ReportResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "ComputeTotalsUseCase",
    "RenderDocumentUseCase",
    "BuildUpiPaymentUseCase",
    "ExportReportUseCase",
    # Service factories
    "get_document_service",
    "get_report_aggregator",
    "get_report_exporters",
    "reset_services",
]

"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from hqledger.config import get_settings
from hqledger.core.services import DocumentService, ReportAggregator

if TYPE_CHECKING:
    from hqledger.core.interfaces import (
        IDocumentRenderer,
        ILogoLoader,
        IQrEncoder,
        IReportExporter,
    )


# Singleton service instances
_document_service: DocumentService | None = None
_report_aggregator: ReportAggregator | None = None
_report_exporters: "dict[str, IReportExporter] | None" = None


def get_document_service(
    renderers: "list[IDocumentRenderer] | None" = None,
    qr_encoder: "IQrEncoder | None" = None,
    logo_loader: "ILogoLoader | None" = None,
) -> DocumentService:
    """
    Get or create DocumentService instance.

    Creates the PDF, HTML and spreadsheet renderers plus the QR encoder
    and logo loader unless overrides are provided. Overridden instances
    are never cached.

    Args:
        renderers: Optional renderer list override
        qr_encoder: Optional QR encoder override
        logo_loader: Optional logo loader override

    Returns:
        Configured DocumentService
    """
    global _document_service

    overridden = renderers is not None or qr_encoder is not None or logo_loader is not None
    if _document_service is not None and not overridden:
        return _document_service

    # Lazy import infrastructure to avoid circular imports
    from hqledger.infrastructure.assets import LogoLoader
    from hqledger.infrastructure.excel import OpenpyxlDocumentRenderer
    from hqledger.infrastructure.html import JinjaHtmlRenderer
    from hqledger.infrastructure.pdf import Fpdf2DocumentRenderer
    from hqledger.infrastructure.qr import QrCodeEncoder

    settings = get_settings()
    if renderers is None:
        renderers = [
            Fpdf2DocumentRenderer(settings.pdf),
            JinjaHtmlRenderer(footer_text=settings.pdf.footer_text),
            OpenpyxlDocumentRenderer(settings.report),
        ]

    service = DocumentService(
        renderers=renderers,
        qr_encoder=qr_encoder or QrCodeEncoder(settings.qr),
        logo_loader=logo_loader or LogoLoader(settings.logo),
        tax_rate_tolerance=settings.report.tax_rate_tolerance,
    )

    if not overridden:
        _document_service = service

    return service


def get_report_aggregator() -> ReportAggregator:
    """Get or create the ReportAggregator configured with aging edges."""
    global _report_aggregator

    if _report_aggregator is None:
        _report_aggregator = ReportAggregator(aging_edges=get_settings().report.aging_edges)
    return _report_aggregator


def get_report_exporters() -> "dict[str, IReportExporter]":
    """
    Get report exporters keyed by format name.

    JSON is not an exporter; the report use case serializes it directly.
    """
    global _report_exporters

    if _report_exporters is not None:
        return _report_exporters

    from hqledger.infrastructure.excel import OpenpyxlReportExporter
    from hqledger.infrastructure.pdf import Fpdf2ReportExporter

    settings = get_settings()
    exporters = [
        Fpdf2ReportExporter(settings.pdf, settings.report),
        OpenpyxlReportExporter(settings.report),
    ]
    _report_exporters = {e.format_name: e for e in exporters}
    return _report_exporters


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _document_service
    global _report_aggregator
    global _report_exporters

    _document_service = None
    _report_aggregator = None
    _report_exporters = None


__all__ = [
    # Factory functions
    "get_document_service",
    "get_report_aggregator",
    "get_report_exporters",
    # Utilities
    "reset_services",
]

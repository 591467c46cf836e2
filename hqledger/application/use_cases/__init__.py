"""Application use cases."""

from hqledger.application.use_cases.build_upi_payment import (
    BuildUpiPaymentUseCase,
    UpiPaymentResult,
)
from hqledger.application.use_cases.compute_totals import ComputeTotalsUseCase, TotalsResult
from hqledger.application.use_cases.export_report import ExportReportUseCase, ReportExportResult
from hqledger.application.use_cases.render_document import RenderDocumentUseCase

__all__ = [
    "ComputeTotalsUseCase",
    "TotalsResult",
    "RenderDocumentUseCase",
    "BuildUpiPaymentUseCase",
    "UpiPaymentResult",
    "ExportReportUseCase",
    "ReportExportResult",
]

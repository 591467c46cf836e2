"""PDF generation infrastructure."""

from hqledger.infrastructure.pdf.document_pdf_renderer import Fpdf2DocumentRenderer
from hqledger.infrastructure.pdf.report_pdf_renderer import Fpdf2ReportExporter

__all__ = [
    "Fpdf2DocumentRenderer",
    "Fpdf2ReportExporter",
]

"""
Renderer ports.

Document renderers and report exporters only lay out values that were
already computed; they never derive totals or words themselves.
"""

from abc import ABC, abstractmethod

from hqledger.core.entities.report import ReportTable
from hqledger.core.entities.view import DocumentView


class IDocumentRenderer(ABC):
    """Interface for invoice/proposal renderers (PDF, HTML, spreadsheet)."""

    format_name: str = ""
    media_type: str = "application/octet-stream"
    extension: str = ""

    @abstractmethod
    def render(self, view: DocumentView) -> bytes:
        """Render a computed document view into bytes."""
        pass


class IReportExporter(ABC):
    """Interface for report exporters (PDF, spreadsheet)."""

    format_name: str = ""
    media_type: str = "application/octet-stream"
    extension: str = ""

    @abstractmethod
    def export(self, table: ReportTable) -> bytes:
        """Render an aggregated report table into bytes."""
        pass

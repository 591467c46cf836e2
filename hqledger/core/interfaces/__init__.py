"""Core interfaces (ports) for dependency injection."""

from hqledger.core.interfaces.assets import ILogoLoader, IQrEncoder
from hqledger.core.interfaces.renderers import IDocumentRenderer, IReportExporter

__all__ = [
    # Renderer interfaces
    "IDocumentRenderer",
    "IReportExporter",
    # Asset interfaces
    "IQrEncoder",
    "ILogoLoader",
]

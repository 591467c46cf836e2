"""Infrastructure layer implementations."""

from hqledger.infrastructure import assets, excel, html, pdf, qr

__all__ = ["pdf", "html", "excel", "qr", "assets"]

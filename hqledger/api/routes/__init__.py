"""API route modules."""

from hqledger.api.routes.documents import router as documents_router
from hqledger.api.routes.format import router as format_router
from hqledger.api.routes.health import router as health_router
from hqledger.api.routes.payments import router as payments_router
from hqledger.api.routes.reports import router as reports_router

__all__ = [
    "health_router",
    "documents_router",
    "payments_router",
    "format_router",
    "reports_router",
]

"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from hqledger import __version__
from hqledger.application.dto.responses import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status, uptime and the registered output formats.
    """
    from hqledger.application.services import get_document_service, get_report_exporters

    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        document_formats=get_document_service().formats,
        report_formats=sorted(["json", *get_report_exporters()]),
    )

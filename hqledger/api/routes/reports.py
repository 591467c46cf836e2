"""
Report endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import Response

from hqledger.api.dependencies import get_export_report_use_case, get_request_context
from hqledger.api.executor import run_blocking
from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import ReportVariant
from hqledger.application.dto.responses import ErrorResponse, ReportResponse
from hqledger.application.use_cases import ExportReportUseCase
from hqledger.application.use_cases.export_report import JSON_FORMAT

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.post(
    "",
    response_model=None,
    responses={
        200: {
            "model": ReportResponse,
            "content": {
                "application/pdf": {},
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {},
            },
        },
        400: {"model": ErrorResponse, "description": "Unsupported format or too many records"},
    },
)
async def export_report(
    http_request: Request,
    request: Annotated[ReportVariant, Body(discriminator="report")],
    format: str = Query(default=JSON_FORMAT, description="json, pdf or xlsx"),
    context: RequestContext = Depends(get_request_context),
    use_case: ExportReportUseCase = Depends(get_export_report_use_case),
) -> ReportResponse | Response:
    """
    Aggregate a report from the posted records.

    The ``report`` field selects the report; JSON returns rows and
    summary, PDF and XLSX return a downloadable file.
    """
    result = await run_blocking(http_request, use_case.execute, request, format, context)
    if result.content is None:
        return use_case.to_response(result)

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
        },
    )

"""
Document endpoints: totals preview and rendering.
"""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from hqledger.api.dependencies import (
    get_compute_totals_use_case,
    get_render_document_use_case,
    get_request_context,
)
from hqledger.api.executor import run_blocking
from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import DocumentRenderRequest, TotalsRequest
from hqledger.application.dto.responses import ErrorResponse, TotalsResponse
from hqledger.application.use_cases import ComputeTotalsUseCase, RenderDocumentUseCase

router = APIRouter(prefix="/api/documents", tags=["documents"])


@router.post(
    "/totals",
    response_model=TotalsResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid line items, discount or tax rate"},
        422: {"model": ErrorResponse, "description": "Totals could not be computed"},
    },
)
async def compute_totals(
    request: TotalsRequest,
    context: RequestContext = Depends(get_request_context),
    use_case: ComputeTotalsUseCase = Depends(get_compute_totals_use_case),
) -> TotalsResponse:
    """
    Compute totals, displayed tax rate and amount in words.

    Drift between the entered and displayed tax rate is returned as a
    warning, not an error.
    """
    result = use_case.execute(request, context)
    return use_case.to_response(result)


@router.post(
    "/render",
    responses={
        200: {"content": {"application/pdf": {}, "text/html": {}}},
        400: {"model": ErrorResponse, "description": "Invalid input or unsupported format"},
        422: {"model": ErrorResponse, "description": "Totals could not be computed"},
        500: {"model": ErrorResponse, "description": "Document could not be rendered"},
    },
)
async def render_document(
    http_request: Request,
    request: DocumentRenderRequest,
    format: str = Query(default="pdf", description="pdf, html or xlsx"),
    context: RequestContext = Depends(get_request_context),
    use_case: RenderDocumentUseCase = Depends(get_render_document_use_case),
) -> Response:
    """
    Render an invoice or proposal.

    Returns the file as a downloadable response; HTML is served inline.
    """
    result = await run_blocking(http_request, use_case.execute, request, format, context)
    disposition = "inline" if result.media_type.startswith("text/html") else "attachment"
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'{disposition}; filename="{result.filename}"',
        },
    )

"""
UPI payment endpoints.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from hqledger.api.dependencies import get_request_context, get_upi_payment_use_case
from hqledger.api.executor import run_blocking
from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import UpiLinkRequest
from hqledger.application.dto.responses import ErrorResponse, UpiLinkResponse
from hqledger.application.use_cases import BuildUpiPaymentUseCase

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.post(
    "/upi",
    response_model=UpiLinkResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing UPI id"}},
)
async def upi_link(
    request: UpiLinkRequest,
    context: RequestContext = Depends(get_request_context),
    use_case: BuildUpiPaymentUseCase = Depends(get_upi_payment_use_case),
) -> UpiLinkResponse:
    """Build a upi://pay deep link."""
    result = use_case.execute(request, with_qr=False, context=context)
    return use_case.to_response(result)


@router.post(
    "/upi/qr",
    responses={
        200: {"content": {"image/png": {}}},
        400: {"model": ErrorResponse, "description": "Missing UPI id"},
        500: {"model": ErrorResponse, "description": "QR could not be encoded"},
    },
)
async def upi_qr(
    http_request: Request,
    request: UpiLinkRequest,
    context: RequestContext = Depends(get_request_context),
    use_case: BuildUpiPaymentUseCase = Depends(get_upi_payment_use_case),
) -> Response:
    """Encode the UPI link as a PNG QR code."""
    result = await run_blocking(http_request, use_case.execute, request, True, context)
    return Response(
        content=result.qr_png,
        media_type="image/png",
        headers={"X-UPI-URL": result.upi_url},
    )

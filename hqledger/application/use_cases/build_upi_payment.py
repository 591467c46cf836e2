"""
Build UPI Payment Use Case.

Produces a UPI deep link and, on request, its QR code as PNG bytes.
"""

from dataclasses import dataclass

from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import UpiLinkRequest
from hqledger.application.dto.responses import UpiLinkResponse
from hqledger.config import get_logger
from hqledger.core.entities.document import quantize
from hqledger.core.interfaces import IQrEncoder
from hqledger.core.services import build_upi_url

logger = get_logger(__name__)


@dataclass
class UpiPaymentResult:
    upi_url: str
    amount: str | None = None
    qr_png: bytes | None = None


class BuildUpiPaymentUseCase:
    """Use case for UPI payment links and QR images."""

    def __init__(self, qr_encoder: IQrEncoder | None = None):
        self._qr_encoder = qr_encoder

    def _get_qr_encoder(self) -> IQrEncoder:
        if self._qr_encoder is None:
            from hqledger.infrastructure.qr import QrCodeEncoder

            self._qr_encoder = QrCodeEncoder()
        return self._qr_encoder

    def execute(
        self,
        request: UpiLinkRequest,
        with_qr: bool = False,
        context: RequestContext | None = None,
    ) -> UpiPaymentResult:
        """
        Build the link and optionally encode it.

        Raises:
            ValidationError: Missing UPI id or non-numeric amount.
            RenderError: QR encoding failed (only when with_qr).
        """
        context = context or RequestContext()
        url = build_upi_url(
            request.upi_id,
            request.payee_name,
            amount=request.amount,
            note=request.resolved_note(),
        )
        amount = None
        if request.amount is not None and request.amount > 0:
            amount = str(quantize(request.amount))

        result = UpiPaymentResult(upi_url=url, amount=amount)
        if with_qr:
            result.qr_png = self._get_qr_encoder().encode(url)

        logger.info(
            "upi_payment_built",
            **context.log_fields(),
            upi_id=request.upi_id,
            has_amount=amount is not None,
            with_qr=with_qr,
        )
        return result

    @staticmethod
    def to_response(result: UpiPaymentResult) -> UpiLinkResponse:
        """Convert result to API response."""
        return UpiLinkResponse(upi_url=result.upi_url, amount=result.amount)

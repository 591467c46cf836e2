"""
QR encoder backed by the ``qrcode`` library.

Produces PNG bytes at a fixed module size with the error-correction
level from QrSettings (medium by default).
"""

import io

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError

from hqledger.config import get_logger
from hqledger.config.settings import QrSettings, get_settings
from hqledger.core.exceptions import RenderError
from hqledger.core.interfaces import IQrEncoder

logger = get_logger(__name__)

ERROR_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


class QrCodeEncoder(IQrEncoder):
    """Encodes payloads (UPI links) as PNG QR images."""

    def __init__(self, qr_settings: QrSettings | None = None) -> None:
        if qr_settings is None:
            qr_settings = get_settings().qr
        self._settings = qr_settings

    def encode(self, payload: str) -> bytes:
        if not payload:
            raise RenderError("qr", "empty payload")

        qr = qrcode.QRCode(
            version=None,
            error_correction=ERROR_LEVELS[self._settings.error_correction],
            box_size=self._settings.box_size,
            border=self._settings.border,
        )
        try:
            qr.add_data(payload)
            qr.make(fit=True)
            image = qr.make_image(
                fill_color=self._settings.fill_color,
                back_color=self._settings.back_color,
            )
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
        except (DataOverflowError, ValueError, OSError) as e:
            raise RenderError("qr", str(e)) from e

        png = buffer.getvalue()
        logger.debug("qr_encoded", version=qr.version, size_bytes=len(png))
        return png

"""QR code encoding infrastructure."""

from hqledger.infrastructure.qr.qrcode_encoder import QrCodeEncoder

__all__ = ["QrCodeEncoder"]

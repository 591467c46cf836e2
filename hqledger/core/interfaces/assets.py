"""Ports for optional visual assets (payment QR, company logo)."""

from abc import ABC, abstractmethod


class IQrEncoder(ABC):
    """Encodes a text payload as a scannable QR image."""

    @abstractmethod
    def encode(self, payload: str) -> bytes:
        """
        Encode payload as PNG bytes.

        Raises:
            RenderError: If the payload cannot be encoded.
        """
        pass


class ILogoLoader(ABC):
    """Loads a company logo from a path or URL."""

    @abstractmethod
    def load(self, source: str) -> bytes | None:
        """
        Return raster image bytes, or None when no logo is configured.

        Raises:
            RenderError: If the logo exists but cannot be fetched or decoded.
        """
        pass

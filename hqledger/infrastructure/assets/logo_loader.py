"""
Company logo loading.

Accepts a local path, a ``data:`` URL or an http(s) URL. Only raster
images are used; SVG and anything Pillow cannot open raise RenderError
so the caller can fall back to the initial-letter placeholder.

Sources come from request bodies, so local paths are confined to
``LOGO_BASE_DIR``, redirects are not followed, literal private and
loopback addresses are refused and downloads stop at ``LOGO_MAX_BYTES``.
"""

import base64
import binascii
import io
import ipaddress
from pathlib import Path

import httpx
from PIL import Image, UnidentifiedImageError

from hqledger.config import get_logger
from hqledger.config.settings import LogoSettings, get_settings
from hqledger.core.exceptions import RenderError
from hqledger.core.interfaces import ILogoLoader

logger = get_logger(__name__)

RASTER_FORMATS = {"PNG", "JPEG", "GIF"}


class LogoLoader(ILogoLoader):
    """Fetches and validates logo images."""

    def __init__(
        self,
        logo_settings: LogoSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        if logo_settings is None:
            logo_settings = get_settings().logo
        self._settings = logo_settings
        self._client = client

    def load(self, source: str) -> bytes | None:
        source = (source or "").strip()
        if not source:
            return None

        if source.startswith("data:"):
            raw = self._from_data_url(source)
        elif source.startswith(("http://", "https://")):
            raw = self._fetch(source)
        else:
            raw = self._read_file(source)

        self._check_size(len(raw))
        return self._validate(raw)

    def _check_size(self, size: int) -> None:
        if size > self._settings.max_bytes:
            raise RenderError("logo", f"image exceeds {self._settings.max_bytes} bytes")

    def _from_data_url(self, url: str) -> bytes:
        header, _, payload = url.partition(",")
        if "svg" in header:
            raise RenderError("logo", "SVG logos are not supported")
        if ";base64" not in header:
            raise RenderError("logo", "data URL is not base64 encoded")
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise RenderError("logo", f"invalid base64 data: {e}") from e

    def _fetch(self, url: str) -> bytes:
        if url.lower().split("?", 1)[0].endswith(".svg"):
            raise RenderError("logo", "SVG logos are not supported")
        logger.debug("fetching_logo", url=url)
        try:
            self._check_host(httpx.URL(url).host)
            if self._client is not None:
                return self._download(self._client, url)
            with httpx.Client(timeout=self._settings.fetch_timeout, follow_redirects=False) as client:
                return self._download(client, url)
        except httpx.HTTPStatusError as e:
            raise RenderError("logo", f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RenderError("logo", f"fetch failed: {e}") from e

    def _check_host(self, host: str) -> None:
        if not host:
            raise RenderError("logo", "URL has no host")
        if self._settings.allow_private_hosts:
            return
        if host == "localhost" or host.endswith(".localhost"):
            raise RenderError("logo", f"host {host} is not allowed")
        try:
            address = ipaddress.ip_address(host)
        except ValueError:
            return
        if not address.is_global:
            raise RenderError("logo", f"host {host} is not allowed")

    def _download(self, client: httpx.Client, url: str) -> bytes:
        with client.stream("GET", url, timeout=self._settings.fetch_timeout) as response:
            response.raise_for_status()
            if "svg" in response.headers.get("content-type", ""):
                raise RenderError("logo", "SVG logos are not supported")

            declared = response.headers.get("content-length", "")
            if declared.isdigit():
                self._check_size(int(declared))

            body = bytearray()
            for chunk in response.iter_bytes():
                body.extend(chunk)
                self._check_size(len(body))
            return bytes(body)

    def _read_file(self, source: str) -> bytes:
        if source.lower().endswith(".svg"):
            raise RenderError("logo", "SVG logos are not supported")
        base_dir = self._settings.base_dir.resolve()
        try:
            path = (base_dir / source).resolve()
            if not path.is_relative_to(base_dir):
                raise RenderError("logo", "path is outside the logo directory")
            self._check_size(path.stat().st_size)
            return path.read_bytes()
        except OSError as e:
            raise RenderError("logo", f"cannot read {source}: {e.strerror}") from e
        except ValueError as e:
            raise RenderError("logo", f"invalid path: {e}") from e

    @staticmethod
    def _validate(raw: bytes) -> bytes:
        """Make sure the bytes decode as a supported raster image."""
        try:
            with Image.open(io.BytesIO(raw)) as image:
                fmt = image.format
                image.verify()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
            raise RenderError("logo", f"not a readable image: {e}") from e
        if fmt not in RASTER_FORMATS:
            raise RenderError("logo", f"unsupported image format {fmt}")
        return raw

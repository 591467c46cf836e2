"""
Jinja2 HTML rendering of invoices and proposals.

The template only prints values from the DocumentView through the
currency/date filters registered here; the QR image is inlined as a
base64 data URI.
"""

import base64
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from hqledger.config import get_logger, get_settings
from hqledger.core.entities.view import DocumentView
from hqledger.core.interfaces import IDocumentRenderer
from hqledger.core.services.money import format_currency, format_date, format_number

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def data_uri(content: bytes | None, mime: str = "image/png") -> str:
    if not content:
        return ""
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"


def _image_mime(content: bytes | None) -> str:
    if content and content[:3] == b"\xff\xd8\xff":
        return "image/jpeg"
    if content and content[:4] == b"GIF8":
        return "image/gif"
    return "image/png"


def build_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["currency"] = lambda value, code="INR": format_currency(value, code)
    env.filters["number"] = lambda value, places=2: format_number(value, places=places)
    env.filters["datefmt"] = lambda value, fmt="%d %b %Y": format_date(value, fmt) if value else ""
    return env


class JinjaHtmlRenderer(IDocumentRenderer):
    """Renders a DocumentView with the document.html template."""

    format_name = "html"
    media_type = "text/html; charset=utf-8"
    extension = "html"

    def __init__(
        self,
        template_name: str = "document.html",
        env: Environment | None = None,
        footer_text: str | None = None,
    ) -> None:
        self._env = env or build_environment()
        self._template_name = template_name
        self._footer_text = footer_text if footer_text is not None else get_settings().pdf.footer_text

    def render(self, view: DocumentView) -> bytes:
        template = self._env.get_template(self._template_name)
        html = template.render(
            view=view,
            meta=view.meta,
            company=view.company,
            party=view.counterparty,
            amounts=view.amounts,
            currency=view.currency,
            qr_src=data_uri(view.qr_png),
            logo_src=data_uri(view.logo_image, _image_mime(view.logo_image)),
            footer_text=self._footer_text,
        )
        logger.debug("document_html_rendered", document=view.meta.number, chars=len(html))
        return html.encode("utf-8")

"""Tests for the Jinja2 HTML document renderer."""

import pytest

from hqledger.core.entities import DocumentView
from hqledger.infrastructure.html import JinjaHtmlRenderer
from hqledger.infrastructure.html.template_renderer import data_uri


@pytest.fixture
def renderer() -> JinjaHtmlRenderer:
    return JinjaHtmlRenderer(footer_text="Thanks for your business")


class TestJinjaHtmlRenderer:
    """Tests for JinjaHtmlRenderer."""

    def test_renders_utf8_html(self, renderer: JinjaHtmlRenderer, document_view: DocumentView):
        html = renderer.render(document_view).decode("utf-8")
        assert "INV-2024-001" in html
        assert "Globex Pvt Ltd" in html
        assert "Thanks for your business" in html

    def test_totals_and_words(self, renderer: JinjaHtmlRenderer, document_view: DocumentView):
        html = renderer.render(document_view).decode("utf-8")
        assert "Tax (18%)" in html
        assert "₹15,930.00" in html
        assert "Fifteen Thousand Nine Hundred Thirty Rupees Only" in html
        assert "Ten Thousand Nine Hundred Thirty Rupees Only" in html

    def test_qr_inlined_as_data_uri(self, renderer: JinjaHtmlRenderer, document_view: DocumentView):
        html = renderer.render(document_view).decode("utf-8")
        assert 'src="data:image/png;base64,' in html
        assert "Scan to Pay" in html

    def test_no_qr_block_without_image(self, renderer: JinjaHtmlRenderer, document_view: DocumentView):
        document_view.qr_png = None
        html = renderer.render(document_view).decode("utf-8")
        assert "data:image/png" not in html

    def test_values_are_escaped(self, renderer: JinjaHtmlRenderer, document_view: DocumentView):
        document_view.counterparty = document_view.counterparty.model_copy(
            update={"name": "<script>alert(1)</script>"}
        )
        html = renderer.render(document_view).decode("utf-8")
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_data_uri(self):
        assert data_uri(b"abc") == "data:image/png;base64,YWJj"
        assert data_uri(None) == ""

"""Tests for RenderDocumentUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hqledger.application.context import RequestContext
from hqledger.application.dto import DocumentRenderRequest, StoredTotals
from hqledger.application.use_cases import RenderDocumentUseCase
from hqledger.core.entities import CompanyProfile, DocumentMeta, DocumentView
from hqledger.core.exceptions import UnsupportedFormatError
from hqledger.core.interfaces import IDocumentRenderer
from hqledger.core.services import DocumentService

TODAY = date(2024, 6, 1)


@pytest.fixture
def mock_renderer() -> MagicMock:
    renderer = MagicMock(spec=IDocumentRenderer)
    renderer.format_name = "html"
    renderer.media_type = "text/html; charset=utf-8"
    renderer.extension = "html"
    renderer.render.return_value = b"<html></html>"
    return renderer


@pytest.fixture
def use_case(mock_renderer: MagicMock) -> RenderDocumentUseCase:
    return RenderDocumentUseCase(DocumentService([mock_renderer]))


def _rendered_view(renderer: MagicMock) -> DocumentView:
    return renderer.render.call_args[0][0]


class TestRenderDocumentUseCase:
    """Tests for RenderDocumentUseCase."""

    def test_renders_with_requested_format(
        self, use_case: RenderDocumentUseCase, mock_renderer: MagicMock, line_items, company, counterparty, invoice_meta
    ):
        request = DocumentRenderRequest(
            line_items=line_items, tax_rate=18, company=company, client=counterparty, meta=invoice_meta
        )
        result = use_case.execute(request, "html", RequestContext(today=TODAY))
        assert result.filename == "invoice_INV-2024-001.html"
        assert result.content == b"<html></html>"
        assert _rendered_view(mock_renderer).amounts["total_amount"] == Decimal("17700.00")

    def test_defaults_filled_from_context(
        self, use_case: RenderDocumentUseCase, mock_renderer: MagicMock, line_items, counterparty
    ):
        request = DocumentRenderRequest(
            line_items=line_items,
            company=CompanyProfile(),
            client=counterparty,
            meta=DocumentMeta(number="INV-9"),
            amount_paid="100",
        )
        use_case.execute(request, "html", RequestContext(today=TODAY))
        view = _rendered_view(mock_renderer)
        assert view.company_name == "HQ Ledger"
        assert view.meta.issue_date == TODAY
        assert view.meta.amount_paid == Decimal("100")

    def test_stored_totals_are_reconciled(
        self, use_case: RenderDocumentUseCase, mock_renderer: MagicMock, line_items, company, counterparty, invoice_meta
    ):
        request = DocumentRenderRequest(
            line_items=line_items,
            company=company,
            client=counterparty,
            meta=invoice_meta,
            stored_totals=StoredTotals(subtotal="14000"),
        )
        use_case.execute(request, "html")
        assert [w.field for w in _rendered_view(mock_renderer).warnings] == ["subtotal"]

    def test_unsupported_format(self, use_case: RenderDocumentUseCase, line_items, company, counterparty, invoice_meta):
        request = DocumentRenderRequest(
            line_items=line_items, company=company, client=counterparty, meta=invoice_meta
        )
        with pytest.raises(UnsupportedFormatError):
            use_case.execute(request, "docx")

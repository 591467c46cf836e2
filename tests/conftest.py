"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from hqledger.application.services import reset_services
from hqledger.config.settings import reset_settings
from hqledger.core.entities import (
    CompanyProfile,
    Counterparty,
    DiscountSpec,
    DiscountType,
    DocumentKind,
    DocumentMeta,
    ExpenseRecord,
    InvoiceRecord,
    LineItem,
)


@pytest.fixture(autouse=True)
def _fresh_singletons() -> Generator[None, None, None]:
    """Settings and service singletons never leak between tests."""
    reset_settings()
    reset_services()
    yield
    reset_settings()
    reset_services()


@pytest.fixture
def app():
    """Create application instance."""
    from hqledger.api.main import create_app

    return create_app()


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Create sync test client."""
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def line_items() -> list[LineItem]:
    """Two billable rows totalling 15,000."""
    return [
        LineItem(description="Website redesign", quantity=1, unit_price="12000"),
        LineItem(description="Hosting (annual)", quantity=2, unit_price="1500"),
    ]


@pytest.fixture
def company() -> CompanyProfile:
    """Issuing company with bank and UPI details."""
    return CompanyProfile(
        company_name="Acme Digital",
        address="12 MG Road, Bengaluru",
        phone="+91 80 1234 5678",
        email="billing@acme.example",
        gstin="29ABCDE1234F1Z5",
        state="Karnataka",
        bank_name="HDFC Bank",
        bank_account_number="50100012345678",
        bank_ifsc_code="HDFC0001234",
        upi_id="acme@okhdfcbank",
        invoice_terms="1. Payment due in 15 days. 2. Late fee 2% per month.",
        proposal_terms="Valid for 30 days.",
        authorized_signatory_name="R. Sharma",
    )


@pytest.fixture
def counterparty() -> Counterparty:
    """Client the document is addressed to."""
    return Counterparty(
        name="Globex Pvt Ltd",
        email="accounts@globex.example",
        address="4th Floor, Bandra Kurla Complex, Mumbai",
        gstin="27AAACG1234H1Z2",
        state="Maharashtra",
    )


@pytest.fixture
def invoice_meta() -> DocumentMeta:
    """Invoice metadata with a partial payment."""
    return DocumentMeta(
        kind=DocumentKind.INVOICE,
        number="INV-2024-001",
        issue_date=date(2024, 4, 1),
        due_date=date(2024, 4, 16),
        amount_paid=Decimal("5000"),
        notes="Thank you for choosing Acme.",
    )


@pytest.fixture
def proposal_meta() -> DocumentMeta:
    """Proposal metadata."""
    return DocumentMeta(
        kind=DocumentKind.PROPOSAL,
        number="PRP-2024-007",
        issue_date=date(2024, 4, 1),
        valid_until=date(2024, 5, 1),
    )


@pytest.fixture
def ten_percent_off() -> DiscountSpec:
    return DiscountSpec(type=DiscountType.PERCENTAGE, value=10)


@pytest.fixture
def invoices() -> list[InvoiceRecord]:
    """Receivables across two clients and every status that matters."""
    return [
        InvoiceRecord(
            id="i1",
            invoice_number="INV-001",
            client_id="c1",
            client_name="Globex",
            client_gstin="27AAACG1234H1Z2",
            inter_state=True,
            issue_date="2024-04-01",
            due_date="2024-04-16",
            status="SENT",
            subtotal="10000",
            tax_amount="1800",
            total_amount="11800",
        ),
        InvoiceRecord(
            id="i2",
            invoice_number="INV-002",
            client_id="c2",
            client_name="Initech",
            issue_date="2024-04-05",
            due_date="2024-05-05",
            status="PARTIALLY_PAID",
            subtotal="5000",
            tax_amount="900",
            total_amount="5900",
            amount_paid="2000",
        ),
        InvoiceRecord(
            id="i3",
            invoice_number="INV-003",
            client_id="c1",
            client_name="Globex",
            client_gstin="27AAACG1234H1Z2",
            inter_state=True,
            issue_date="2024-04-10",
            due_date="2024-04-25",
            status="PAID",
            subtotal="2000",
            tax_amount="240",
            total_amount="2240",
            amount_paid="2240",
        ),
        InvoiceRecord(
            id="i4",
            invoice_number="INV-004",
            client_id="c2",
            client_name="Initech",
            issue_date="2024-04-12",
            due_date="2024-04-27",
            status="DRAFT",
            subtotal="999",
            tax_amount="0",
            total_amount="999",
        ),
    ]


@pytest.fixture
def expenses() -> list[ExpenseRecord]:
    """Expense vouchers, one cancelled and one without GST."""
    return [
        ExpenseRecord(
            id="e1",
            description="Cloud hosting",
            category_id="k1",
            category_name="Infrastructure",
            amount="1180",
            gst_amount="180",
            itc_eligible=True,
            vendor_name="CloudCo",
            vendor_gstin="29AAACC1234C1Z1",
            client_id="c1",
            voucher_number="V-001",
            expense_date="2024-04-03",
        ),
        ExpenseRecord(
            id="e2",
            description="Team lunch",
            category_id="k2",
            category_name="Meals",
            amount="600",
            expense_date="2024-04-04",
        ),
        ExpenseRecord(
            id="e3",
            description="Freelance design",
            category_id="k3",
            category_name="Contractors",
            amount="2360",
            gst_amount="360",
            inter_state=True,
            itc_eligible=False,
            vendor_name="Studio Nine",
            client_id="c2",
            voucher_number="V-002",
            expense_date="2024-04-06",
        ),
        ExpenseRecord(
            id="e4",
            description="Cancelled order",
            category_id="k1",
            category_name="Infrastructure",
            amount="5000",
            gst_amount="900",
            itc_eligible=True,
            expense_date="2024-04-07",
            status="CANCELLED",
        ),
    ]


@pytest.fixture
def document_view(line_items, ten_percent_off, company, counterparty, invoice_meta):
    """Invoice view with a real payment QR, for renderer tests."""
    from hqledger.core.services.document_service import DocumentService
    from hqledger.infrastructure.qr import QrCodeEncoder

    service = DocumentService([], qr_encoder=QrCodeEncoder())
    return service.build_view(line_items, ten_percent_off, 18, company, counterparty, invoice_meta)

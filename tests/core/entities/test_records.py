"""Tests for invoice and expense records and report filters."""

from datetime import date
from decimal import Decimal

from hqledger.core.entities import ExpenseRecord, InvoiceRecord, ReportFilter
from hqledger.core.entities.records import InvoiceStatus


def _invoice(**overrides) -> InvoiceRecord:
    data = {
        "id": "i1",
        "invoice_number": "INV-1",
        "client_id": "c1",
        "client_name": "Globex",
        "issue_date": "2024-04-01",
        "due_date": "2024-04-16",
        "subtotal": "1000",
        "tax_amount": "180",
        "total_amount": "1180",
    }
    data.update(overrides)
    return InvoiceRecord(**data)


class TestInvoiceRecord:
    """Tests for InvoiceRecord."""

    def test_balance_derived(self):
        record = _invoice(amount_paid="180")
        assert record.balance_due == Decimal("1000")
        assert record.is_open

    def test_stored_balance_kept(self):
        assert _invoice(balance_due="50").balance_due == Decimal("50")

    def test_overpaid_balance_floors(self):
        assert _invoice(amount_paid="2000").balance_due == 0

    def test_taxable_value_net_of_discount(self):
        assert _invoice(discount_amount="100").taxable_value == Decimal("900")

    def test_closed_statuses(self):
        for status in (InvoiceStatus.PAID, InvoiceStatus.CANCELLED, InvoiceStatus.DRAFT):
            assert not _invoice(status=status).is_open

    def test_null_money_is_zero(self):
        assert _invoice(discount_amount=None).discount_amount == 0


class TestExpenseRecord:
    def test_taxable_value(self, expenses: list[ExpenseRecord]):
        assert expenses[0].taxable_value == Decimal("1000")
        assert expenses[1].taxable_value == Decimal("600")


class TestReportFilter:
    """Tests for window checks and descriptions."""

    def test_contains_is_inclusive(self):
        window = ReportFilter(start_date="2024-04-01", end_date="2024-04-30")
        assert window.contains(date(2024, 4, 1))
        assert window.contains(date(2024, 4, 30))
        assert not window.contains(date(2024, 5, 1))

    def test_describe(self):
        assert ReportFilter().describe() == "All dates"
        assert ReportFilter(end_date="2024-03-31").describe() == "Up to 2024-03-31"
        assert (
            ReportFilter(start_date="2024-04-01", end_date="2024-06-30").describe()
            == "2024-04-01 to 2024-06-30"
        )

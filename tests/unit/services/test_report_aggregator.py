"""Tests for ReportAggregator."""

from datetime import date
from decimal import Decimal

import pytest

from hqledger.core.entities import ExpenseRecord, InvoiceRecord, ReportFilter, ReportKind
from hqledger.core.exceptions import ValidationError
from hqledger.core.services.report_aggregator import (
    ReportAggregator,
    aging_bucket,
    aging_labels,
    split_tax,
)

AS_OF = date(2024, 5, 20)


@pytest.fixture
def aggregator() -> ReportAggregator:
    return ReportAggregator(today=AS_OF)


class TestAgingBuckets:
    """Bucket boundaries are inclusive at the upper edge."""

    @pytest.mark.parametrize(
        "days,expected",
        [
            (-5, "Current"),
            (0, "Current"),
            (1, "1-30"),
            (30, "1-30"),
            (31, "31-60"),
            (60, "31-60"),
            (61, "61-90"),
            (90, "61-90"),
            (91, "90+"),
            (400, "90+"),
        ],
    )
    def test_boundaries(self, days: int, expected: str):
        assert aging_bucket(days) == expected

    def test_custom_edges(self):
        assert aging_labels((15, 45, 75)) == ["Current", "1-15", "16-45", "46-75", "75+"]
        assert aging_bucket(16, (15, 45, 75)) == "16-45"

    def test_edges_must_be_three(self):
        with pytest.raises(ValidationError):
            ReportAggregator(aging_edges=(30, 60))

    @pytest.mark.parametrize("edges", [(30, 30, 90), (60, 30, 90), (0, 30, 60)])
    def test_edges_must_ascend(self, edges):
        with pytest.raises(ValidationError):
            ReportAggregator(aging_edges=edges)

    def test_every_bucket_present(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        buckets = aggregator.aging_buckets(invoices)
        assert [b.range for b in buckets] == ["Current", "1-30", "31-60", "61-90", "90+"]
        by_range = {b.range: b for b in buckets}
        assert by_range["1-30"].count == 1
        assert by_range["1-30"].amount == Decimal("3900")
        assert by_range["31-60"].amount == Decimal("11800")
        assert by_range["90+"].count == 0

    def test_closed_invoices_excluded(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.invoice_aging(invoices)
        numbers = [row.invoice_number for row in table.rows]
        assert numbers == ["INV-001", "INV-002"]

    def test_table_summary_and_extra(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.invoice_aging(invoices)
        assert table.summary[-1].label == "Total Outstanding"
        assert table.summary[-1].value == Decimal("15700")
        assert table.extra["as_of"] == "2024-05-20"
        assert len(table.extra["buckets"]) == 5

    def test_not_yet_due_is_current(self, invoices: list[InvoiceRecord]):
        table = ReportAggregator().invoice_aging(invoices, as_of=date(2024, 4, 10))
        assert {row.aging_bucket for row in table.rows} == {"Current"}
        assert all(row.days_overdue == 0 for row in table.rows)


class TestRevenueAndProfit:
    """Tests for client-level revenue and profit."""

    def test_revenue_by_client(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.revenue_by_client(invoices)
        assert [row.client_name for row in table.rows] == ["Globex", "Initech"]
        globex = table.rows[0]
        assert globex.total_invoiced == Decimal("14040")
        assert globex.total_paid == Decimal("2240")
        assert globex.total_outstanding == Decimal("11800")
        assert globex.invoice_count == 2

    def test_drafts_are_not_revenue(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.revenue_by_client(invoices)
        initech = table.rows[1]
        assert initech.invoice_count == 1
        assert initech.total_invoiced == Decimal("5900")

    def test_client_filter(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.revenue_by_client(invoices, ReportFilter(client_id="c2"))
        assert [row.client_id for row in table.rows] == ["c2"]

    def test_date_window(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.revenue_by_client(invoices, ReportFilter(start_date="2024-04-06"))
        assert len(table.rows) == 1
        assert table.rows[0].total_invoiced == Decimal("2240")
        assert table.subtitle == "From 2024-04-06"

    def test_profit_by_client(
        self,
        aggregator: ReportAggregator,
        invoices: list[InvoiceRecord],
        expenses: list[ExpenseRecord],
    ):
        table = aggregator.profit_by_client(invoices, expenses)
        rows = {row.client_id: row for row in table.rows}
        assert rows["c1"].expenses == Decimal("1180")
        assert rows["c1"].profit == Decimal("12860")
        assert rows["c1"].margin == Decimal("91.60")
        assert rows["c2"].margin == Decimal("60.00")
        overall = table.summary[-1]
        assert overall.kind == "percent"
        assert overall.value == Decimal("82.25")

    def test_margin_zero_without_revenue(self, aggregator: ReportAggregator, expenses: list[ExpenseRecord]):
        table = aggregator.profit_by_client([], expenses)
        assert all(row.margin == 0 for row in table.rows)
        assert all(row.profit < 0 for row in table.rows)


class TestExpenses:
    def test_by_category(self, aggregator: ReportAggregator, expenses: list[ExpenseRecord]):
        table = aggregator.expenses_by_category(expenses)
        assert [row.category_name for row in table.rows] == ["Contractors", "Infrastructure", "Meals"]
        assert [row.percentage for row in table.rows] == [
            Decimal("57.00"),
            Decimal("28.50"),
            Decimal("14.49"),
        ]
        assert table.summary[0].value == Decimal("4140")

    def test_cancelled_excluded(self, aggregator: ReportAggregator, expenses: list[ExpenseRecord]):
        table = aggregator.expenses_by_category(expenses, ReportFilter(category_id="k1"))
        assert len(table.rows) == 1
        assert table.rows[0].amount == Decimal("1180")
        assert table.rows[0].count == 1


class TestGstReports:
    """Tests for GST registers and summaries."""

    def test_split_tax(self):
        assert split_tax(Decimal("180"), inter_state=False).cgst == Decimal("90")
        heads = split_tax(Decimal("180"), inter_state=True)
        assert heads.igst == Decimal("180")
        assert heads.cgst == 0

    def test_sales_register(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.gst_sales_register(invoices)
        assert [row.invoice_number for row in table.rows] == ["INV-001", "INV-002", "INV-003"]
        assert [row.invoice_type for row in table.rows] == ["B2B", "B2C", "B2B"]
        summary = {item.label: item.value for item in table.summary}
        assert summary["B2B Invoices"] == 2
        assert summary["B2C Invoices"] == 1
        assert summary["CGST"] == Decimal("450")
        assert summary["IGST"] == Decimal("2040")
        assert summary["Taxable Value"] == Decimal("17000")
        assert summary["Invoice Value"] == Decimal("19940")

    def test_purchase_register(self, aggregator: ReportAggregator, expenses: list[ExpenseRecord]):
        table = aggregator.gst_purchase_register(expenses)
        assert [row.voucher_number for row in table.rows] == ["V-001", "V-002"]
        summary = {item.label: item.value for item in table.summary}
        assert summary["Eligible ITC"] == Decimal("180")
        assert summary["Total GST"] == Decimal("540")
        assert summary["ITC Not Eligible"] == 1

    def test_rate_summary(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        table = aggregator.gst_rate_summary(invoices)
        assert [row.rate for row in table.rows] == [Decimal("12.00"), Decimal("18.00")]
        eighteen = table.rows[1]
        assert eighteen.invoice_count == 2
        assert eighteen.taxable_value == Decimal("15000")
        assert eighteen.total_tax == Decimal("2700")

    def test_gstr3b(
        self,
        aggregator: ReportAggregator,
        invoices: list[InvoiceRecord],
        expenses: list[ExpenseRecord],
    ):
        table = aggregator.gstr3b_summary(invoices, expenses)
        rows = {row.particulars: row for row in table.rows}
        assert rows["4. Input Tax Credit (ITC)"].cgst == Decimal("90")
        assert rows["ITC Utilized"].igst == 0
        net = rows["Net Tax Payable"]
        assert (net.cgst, net.sgst, net.igst) == (Decimal("360"), Decimal("360"), Decimal("2040"))
        assert net.total == Decimal("2760")
        assert table.extra["net_tax_payable"]["total"] == "2760"

    def test_net_payable_floors_at_zero(self, aggregator: ReportAggregator, expenses: list[ExpenseRecord]):
        table = aggregator.gstr3b_summary([], expenses)
        net = table.rows[-1]
        assert net.total == 0


class TestBuild:
    def test_dispatch_by_kind(
        self,
        aggregator: ReportAggregator,
        invoices: list[InvoiceRecord],
        expenses: list[ExpenseRecord],
    ):
        for kind in ReportKind:
            table = aggregator.build(kind, invoices, expenses)
            assert table.report == kind
            assert table.columns

    def test_same_snapshot_same_table(self, aggregator: ReportAggregator, invoices: list[InvoiceRecord]):
        first = aggregator.build(ReportKind.GST_SALES_REGISTER, invoices)
        second = aggregator.build(ReportKind.GST_SALES_REGISTER, list(reversed(invoices)))
        assert first.records() == second.records()

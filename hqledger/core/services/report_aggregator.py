"""
Report aggregator.

Groups invoice and expense records into report tables. Every report
filters first, then groups, and sorts its rows deterministically so the
same snapshot always yields the same table.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from hqledger.config import get_logger
from hqledger.core.entities.records import (
    ExpenseRecord,
    ExpenseStatus,
    InvoiceRecord,
    InvoiceStatus,
)
from hqledger.core.entities.report import (
    AgingBucketSummary,
    AgingRow,
    ExpenseCategoryRow,
    GstPurchaseRow,
    GstRateRow,
    GstSalesRow,
    Gstr3bRow,
    ProfitByClientRow,
    ReportColumn,
    ReportFilter,
    ReportKind,
    ReportTable,
    RevenueByClientRow,
    SummaryItem,
    TaxHeads,
)
from hqledger.core.exceptions import ValidationError

logger = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWO_PLACES = Decimal("0.01")

CURRENT_BUCKET = "Current"
DEFAULT_AGING_EDGES = (30, 60, 90)

# Invoices that never became receivables
NON_BILLED = {InvoiceStatus.DRAFT, InvoiceStatus.CANCELLED}


def _pct(part: Decimal, whole: Decimal) -> Decimal:
    if whole == 0:
        return ZERO
    return (part / whole * HUNDRED).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _col(key: str, header: str, width: int = 15, kind: str = "text") -> ReportColumn:
    align = "right" if kind in {"money", "number", "percent", "count"} else "left"
    return ReportColumn(key=key, header=header, width=width, align=align, kind=kind)


REPORT_LAYOUTS: dict[ReportKind, tuple[str, str, list[ReportColumn]]] = {
    ReportKind.INVOICE_AGING: (
        "Invoice Aging",
        "Invoice Aging Report",
        [
            _col("client_name", "Client", 25),
            _col("invoice_number", "Invoice #", 15),
            _col("amount", "Amount", 15, "money"),
            _col("due_date", "Due Date", 12, "date"),
            _col("days_overdue", "Days Overdue", 12, "count"),
            _col("aging_bucket", "Aging Bucket", 15),
        ],
    ),
    ReportKind.REVENUE_BY_CLIENT: (
        "Revenue by Client",
        "Revenue by Client Report",
        [
            _col("client_name", "Client Name", 30),
            _col("total_invoiced", "Total Invoiced", 18, "money"),
            _col("total_paid", "Total Paid", 18, "money"),
            _col("total_outstanding", "Outstanding", 18, "money"),
            _col("invoice_count", "Invoices", 10, "count"),
        ],
    ),
    ReportKind.PROFIT_BY_CLIENT: (
        "Profit by Client",
        "Profit by Client Report",
        [
            _col("client_name", "Client", 25),
            _col("revenue", "Revenue", 18, "money"),
            _col("expenses", "Expenses", 18, "money"),
            _col("profit", "Profit", 18, "money"),
            _col("margin", "Margin %", 12, "percent"),
        ],
    ),
    ReportKind.EXPENSES_BY_CATEGORY: (
        "Expenses by Category",
        "Expense Tracking Report",
        [
            _col("category_name", "Category", 25),
            _col("amount", "Amount", 20, "money"),
            _col("percentage", "Percentage", 15, "percent"),
            _col("count", "Count", 10, "count"),
        ],
    ),
    ReportKind.GST_SALES_REGISTER: (
        "GST Sales Register",
        "GSTR-1 Sales Register",
        [
            _col("invoice_number", "Invoice No", 15),
            _col("invoice_date", "Date", 12, "date"),
            _col("client_name", "Client", 25),
            _col("gstin", "GSTIN", 18),
            _col("invoice_type", "Type", 8),
            _col("taxable_value", "Taxable Value", 15, "money"),
            _col("cgst", "CGST", 12, "money"),
            _col("sgst", "SGST", 12, "money"),
            _col("igst", "IGST", 12, "money"),
            _col("invoice_value", "Total", 15, "money"),
        ],
    ),
    ReportKind.GST_PURCHASE_REGISTER: (
        "GST Purchase Register",
        "Purchase Register (ITC)",
        [
            _col("voucher_number", "Voucher No", 15),
            _col("voucher_date", "Date", 12, "date"),
            _col("vendor_name", "Vendor", 25),
            _col("gstin", "GSTIN", 18),
            _col("description", "Description", 25),
            _col("taxable_value", "Taxable", 12, "money"),
            _col("total_gst", "GST", 12, "money"),
            _col("total_value", "Total", 12, "money"),
            _col("itc_eligible", "ITC", 8, "flag"),
        ],
    ),
    ReportKind.GST_RATE_SUMMARY: (
        "GST Rate Summary",
        "GST Rate-wise Summary",
        [
            _col("rate", "GST Rate", 12, "percent"),
            _col("invoice_count", "Invoices", 10, "count"),
            _col("taxable_value", "Taxable Value", 18, "money"),
            _col("cgst", "CGST", 12, "money"),
            _col("sgst", "SGST", 12, "money"),
            _col("igst", "IGST", 12, "money"),
            _col("total_tax", "Total Tax", 15, "money"),
            _col("invoice_value", "Invoice Value", 18, "money"),
        ],
    ),
    ReportKind.GSTR3B_SUMMARY: (
        "GSTR-3B Summary",
        "GSTR-3B Monthly Summary",
        [
            _col("particulars", "Particulars", 40),
            _col("taxable_value", "Taxable Value", 18, "money"),
            _col("cgst", "CGST", 15, "money"),
            _col("sgst", "SGST", 15, "money"),
            _col("igst", "IGST", 15, "money"),
            _col("total", "Total", 18, "money"),
        ],
    ),
}


def aging_labels(edges: Sequence[int] = DEFAULT_AGING_EDGES) -> list[str]:
    """Bucket labels in order, e.g. Current, 1-30, 31-60, 61-90, 90+."""
    first, second, third = edges
    return [
        CURRENT_BUCKET,
        f"1-{first}",
        f"{first + 1}-{second}",
        f"{second + 1}-{third}",
        f"{third}+",
    ]


def aging_bucket(days: int, edges: Sequence[int] = DEFAULT_AGING_EDGES) -> str:
    """Bucket for a signed day count; upper edges are inclusive."""
    labels = aging_labels(edges)
    if days <= 0:
        return labels[0]
    for label, edge in zip(labels[1:4], edges):
        if days <= edge:
            return label
    return labels[4]


def split_tax(tax: Decimal, inter_state: bool) -> TaxHeads:
    """IGST for inter-state supply, otherwise CGST and SGST in equal halves."""
    if inter_state:
        return TaxHeads(igst=tax)
    half = tax / 2
    return TaxHeads(cgst=half, sgst=half)


def filter_invoices(invoices: Iterable[InvoiceRecord], flt: ReportFilter) -> list[InvoiceRecord]:
    return [
        inv
        for inv in invoices
        if flt.contains(inv.issue_date)
        and (flt.client_id is None or inv.client_id == flt.client_id)
    ]


def filter_expenses(expenses: Iterable[ExpenseRecord], flt: ReportFilter) -> list[ExpenseRecord]:
    return [
        exp
        for exp in expenses
        if exp.status != ExpenseStatus.CANCELLED
        and flt.contains(exp.expense_date)
        and (flt.category_id is None or exp.category_id == flt.category_id)
        and (flt.client_id is None or exp.client_id == flt.client_id)
    ]


class ReportAggregator:
    """
    Builds report tables from caller-supplied records.

    Args:
        aging_edges: Inclusive upper day edges of the three dated buckets.
        today: Fallback reference date for aging when the filter has none.
    """

    def __init__(
        self,
        aging_edges: Sequence[int] = DEFAULT_AGING_EDGES,
        today: date | None = None,
    ):
        if len(aging_edges) != 3:
            raise ValidationError("aging_edges", "exactly three edges are required", aging_edges)
        first, second, third = aging_edges
        if not 0 < first < second < third:
            raise ValidationError("aging_edges", "edges must be strictly ascending and positive", aging_edges)
        self._edges = tuple(aging_edges)
        self._today = today

    def _table(self, kind: ReportKind, flt: ReportFilter, rows: list, summary: list, **extra) -> ReportTable:
        sheet_name, title, columns = REPORT_LAYOUTS[kind]
        table = ReportTable(
            report=kind,
            title=title,
            sheet_name=sheet_name,
            subtitle=flt.describe(),
            columns=columns,
            rows=rows,
            summary=summary,
            extra=extra,
        )
        logger.info("report_aggregated", report=kind.value, rows=len(rows))
        return table

    # ------------------------------------------------------------------
    # Receivables
    # ------------------------------------------------------------------

    def aging_rows(self, invoices: Iterable[InvoiceRecord], as_of: date) -> list[AgingRow]:
        rows = []
        for inv in invoices:
            if not inv.is_open:
                continue
            days = (as_of - inv.due_date).days
            rows.append(
                AgingRow(
                    invoice_id=inv.id,
                    invoice_number=inv.invoice_number,
                    client_name=inv.client_name,
                    amount=inv.balance_due,
                    due_date=inv.due_date,
                    days_overdue=max(0, days),
                    aging_bucket=aging_bucket(days, self._edges),
                )
            )
        rows.sort(key=lambda r: (-r.days_overdue, r.due_date, r.invoice_number))
        return rows

    def aging_buckets(
        self,
        invoices: Iterable[InvoiceRecord],
        as_of: date | None = None,
        flt: ReportFilter | None = None,
    ) -> list[AgingBucketSummary]:
        """Count and amount per bucket; all buckets present in order."""
        flt = flt or ReportFilter()
        as_of = as_of or flt.as_of or self._today or date.today()
        buckets = {label: AgingBucketSummary(range=label) for label in aging_labels(self._edges)}
        for row in self.aging_rows(filter_invoices(invoices, flt), as_of):
            bucket = buckets[row.aging_bucket]
            bucket.count += 1
            bucket.amount += row.amount
            bucket.invoices.append(row)
        return list(buckets.values())

    def invoice_aging(
        self,
        invoices: Iterable[InvoiceRecord],
        as_of: date | None = None,
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        flt = flt or ReportFilter()
        as_of = as_of or flt.as_of or self._today or date.today()
        buckets = self.aging_buckets(invoices, as_of, flt)
        rows = [row for bucket in buckets for row in bucket.invoices]
        rows.sort(key=lambda r: (-r.days_overdue, r.due_date, r.invoice_number))

        summary = [SummaryItem(label=f"{b.range} ({b.count})", value=b.amount) for b in buckets]
        summary.append(
            SummaryItem(label="Total Outstanding", value=sum((r.amount for r in rows), ZERO))
        )
        return self._table(
            ReportKind.INVOICE_AGING,
            flt,
            rows,
            summary,
            as_of=as_of.isoformat(),
            buckets=[b.model_dump(mode="json", exclude={"invoices"}) for b in buckets],
        )

    def revenue_by_client(
        self,
        invoices: Iterable[InvoiceRecord],
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        flt = flt or ReportFilter()
        grouped: dict[str, RevenueByClientRow] = {}
        for inv in filter_invoices(invoices, flt):
            if inv.status in NON_BILLED:
                continue
            row = grouped.get(inv.client_id)
            if row is None:
                row = grouped[inv.client_id] = RevenueByClientRow(
                    client_id=inv.client_id,
                    client_name=inv.client_name,
                    total_invoiced=ZERO,
                    total_paid=ZERO,
                    total_outstanding=ZERO,
                    invoice_count=0,
                )
            row.total_invoiced += inv.total_amount
            row.total_paid += inv.amount_paid
            row.total_outstanding += inv.balance_due
            row.invoice_count += 1

        rows = sorted(grouped.values(), key=lambda r: (-r.total_invoiced, r.client_name, r.client_id))
        summary = [
            SummaryItem(label="Total Invoiced", value=sum((r.total_invoiced for r in rows), ZERO)),
            SummaryItem(label="Total Paid", value=sum((r.total_paid for r in rows), ZERO)),
            SummaryItem(label="Total Outstanding", value=sum((r.total_outstanding for r in rows), ZERO)),
        ]
        return self._table(ReportKind.REVENUE_BY_CLIENT, flt, rows, summary)

    def profit_by_client(
        self,
        invoices: Iterable[InvoiceRecord],
        expenses: Iterable[ExpenseRecord],
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        """Revenue minus client-attributed expenses; margin 0 without revenue."""
        flt = flt or ReportFilter()
        names: dict[str, str] = {}
        revenue: dict[str, Decimal] = defaultdict(lambda: ZERO)
        spent: dict[str, Decimal] = defaultdict(lambda: ZERO)

        for inv in filter_invoices(invoices, flt):
            if inv.status in NON_BILLED:
                continue
            names.setdefault(inv.client_id, inv.client_name)
            revenue[inv.client_id] += inv.total_amount
        for exp in filter_expenses(expenses, flt):
            if not exp.client_id:
                continue
            names.setdefault(exp.client_id, exp.client_id)
            spent[exp.client_id] += exp.amount

        rows = []
        for client_id, client_name in names.items():
            rev = revenue[client_id]
            cost = spent[client_id]
            profit = rev - cost
            rows.append(
                ProfitByClientRow(
                    client_id=client_id,
                    client_name=client_name,
                    revenue=rev,
                    expenses=cost,
                    profit=profit,
                    margin=_pct(profit, rev),
                )
            )
        rows.sort(key=lambda r: (-r.profit, r.client_name, r.client_id))

        total_revenue = sum((r.revenue for r in rows), ZERO)
        total_profit = sum((r.profit for r in rows), ZERO)
        summary = [
            SummaryItem(label="Total Revenue", value=total_revenue),
            SummaryItem(label="Total Expenses", value=sum((r.expenses for r in rows), ZERO)),
            SummaryItem(label="Total Profit", value=total_profit),
            SummaryItem(label="Overall Margin %", value=_pct(total_profit, total_revenue), kind="percent"),
        ]
        return self._table(ReportKind.PROFIT_BY_CLIENT, flt, rows, summary)

    # ------------------------------------------------------------------
    # Expenses
    # ------------------------------------------------------------------

    def expenses_by_category(
        self,
        expenses: Iterable[ExpenseRecord],
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        flt = flt or ReportFilter()
        names: dict[str, str] = {}
        amounts: dict[str, Decimal] = defaultdict(lambda: ZERO)
        counts: dict[str, int] = defaultdict(int)
        for exp in filter_expenses(expenses, flt):
            names.setdefault(exp.category_id, exp.category_name)
            amounts[exp.category_id] += exp.amount
            counts[exp.category_id] += 1

        total = sum(amounts.values(), ZERO)
        rows = [
            ExpenseCategoryRow(
                category_id=category_id,
                category_name=name,
                amount=amounts[category_id],
                count=counts[category_id],
                percentage=_pct(amounts[category_id], total),
            )
            for category_id, name in names.items()
        ]
        rows.sort(key=lambda r: (-r.amount, r.category_name, r.category_id))
        summary = [
            SummaryItem(label="Total Expenses", value=total),
            SummaryItem(label="Entries", value=sum(counts.values()), kind="count"),
        ]
        return self._table(ReportKind.EXPENSES_BY_CATEGORY, flt, rows, summary)

    # ------------------------------------------------------------------
    # GST
    # ------------------------------------------------------------------

    def _sales_rows(self, invoices: Iterable[InvoiceRecord], flt: ReportFilter) -> list[GstSalesRow]:
        rows = []
        for inv in filter_invoices(invoices, flt):
            if inv.status in NON_BILLED:
                continue
            heads = split_tax(inv.tax_amount, inv.inter_state)
            rows.append(
                GstSalesRow(
                    invoice_number=inv.invoice_number,
                    invoice_date=inv.issue_date,
                    client_name=inv.client_name,
                    gstin=inv.client_gstin,
                    place_of_supply=inv.place_of_supply,
                    invoice_type="B2B" if inv.client_gstin else "B2C",
                    taxable_value=inv.taxable_value,
                    cgst=heads.cgst,
                    sgst=heads.sgst,
                    igst=heads.igst,
                    total_gst=heads.total,
                    invoice_value=inv.total_amount,
                    status=inv.status.value,
                )
            )
        rows.sort(key=lambda r: (r.invoice_date, r.invoice_number))
        return rows

    def _purchase_rows(self, expenses: Iterable[ExpenseRecord], flt: ReportFilter) -> list[GstPurchaseRow]:
        rows = []
        for exp in filter_expenses(expenses, flt):
            if exp.gst_amount <= 0:
                continue
            heads = split_tax(exp.gst_amount, exp.inter_state)
            rows.append(
                GstPurchaseRow(
                    voucher_number=exp.voucher_number or exp.id,
                    voucher_date=exp.expense_date,
                    vendor_name=exp.vendor_name,
                    gstin=exp.vendor_gstin,
                    description=exp.description,
                    category=exp.category_name,
                    taxable_value=exp.taxable_value,
                    cgst=heads.cgst,
                    sgst=heads.sgst,
                    igst=heads.igst,
                    total_gst=heads.total,
                    total_value=exp.amount,
                    itc_eligible=exp.itc_eligible,
                )
            )
        rows.sort(key=lambda r: (r.voucher_date, r.voucher_number))
        return rows

    def gst_sales_register(
        self,
        invoices: Iterable[InvoiceRecord],
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        flt = flt or ReportFilter()
        rows = self._sales_rows(invoices, flt)
        b2b = sum(1 for r in rows if r.invoice_type == "B2B")
        summary = [
            SummaryItem(label="Total Invoices", value=len(rows), kind="count"),
            SummaryItem(label="B2B Invoices", value=b2b, kind="count"),
            SummaryItem(label="B2C Invoices", value=len(rows) - b2b, kind="count"),
            SummaryItem(label="Taxable Value", value=sum((r.taxable_value for r in rows), ZERO)),
            SummaryItem(label="CGST", value=sum((r.cgst for r in rows), ZERO)),
            SummaryItem(label="SGST", value=sum((r.sgst for r in rows), ZERO)),
            SummaryItem(label="IGST", value=sum((r.igst for r in rows), ZERO)),
            SummaryItem(label="Total GST", value=sum((r.total_gst for r in rows), ZERO)),
            SummaryItem(label="Invoice Value", value=sum((r.invoice_value for r in rows), ZERO)),
        ]
        return self._table(ReportKind.GST_SALES_REGISTER, flt, rows, summary)

    def gst_purchase_register(
        self,
        expenses: Iterable[ExpenseRecord],
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        flt = flt or ReportFilter()
        rows = self._purchase_rows(expenses, flt)
        eligible = [r for r in rows if r.itc_eligible]
        summary = [
            SummaryItem(label="Total Entries", value=len(rows), kind="count"),
            SummaryItem(label="ITC Eligible", value=len(eligible), kind="count"),
            SummaryItem(label="ITC Not Eligible", value=len(rows) - len(eligible), kind="count"),
            SummaryItem(label="Taxable Value", value=sum((r.taxable_value for r in rows), ZERO)),
            SummaryItem(label="Total GST", value=sum((r.total_gst for r in rows), ZERO)),
            SummaryItem(label="Eligible ITC", value=sum((r.total_gst for r in eligible), ZERO)),
            SummaryItem(label="Purchase Value", value=sum((r.total_value for r in rows), ZERO)),
        ]
        return self._table(ReportKind.GST_PURCHASE_REGISTER, flt, rows, summary)

    def gst_rate_summary(
        self,
        invoices: Iterable[InvoiceRecord],
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        """Sales grouped by effective rate (tax over taxable value)."""
        flt = flt or ReportFilter()
        grouped: dict[Decimal, GstRateRow] = {}
        for sale in self._sales_rows(invoices, flt):
            rate = _pct(sale.total_gst, sale.taxable_value)
            row = grouped.get(rate)
            if row is None:
                row = grouped[rate] = GstRateRow(
                    rate=rate,
                    invoice_count=0,
                    taxable_value=ZERO,
                    cgst=ZERO,
                    sgst=ZERO,
                    igst=ZERO,
                    total_tax=ZERO,
                    invoice_value=ZERO,
                )
            row.invoice_count += 1
            row.taxable_value += sale.taxable_value
            row.cgst += sale.cgst
            row.sgst += sale.sgst
            row.igst += sale.igst
            row.total_tax += sale.total_gst
            row.invoice_value += sale.invoice_value

        rows = [grouped[rate] for rate in sorted(grouped)]
        summary = [
            SummaryItem(label="Taxable Value", value=sum((r.taxable_value for r in rows), ZERO)),
            SummaryItem(label="Total Tax", value=sum((r.total_tax for r in rows), ZERO)),
        ]
        return self._table(ReportKind.GST_RATE_SUMMARY, flt, rows, summary)

    def gstr3b_summary(
        self,
        invoices: Iterable[InvoiceRecord],
        expenses: Iterable[ExpenseRecord],
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        """Outward tax, eligible ITC and net payable per head (floored at 0)."""
        flt = flt or ReportFilter()
        outward = TaxHeads()
        for sale in self._sales_rows(invoices, flt):
            outward.taxable_value += sale.taxable_value
            outward.cgst += sale.cgst
            outward.sgst += sale.sgst
            outward.igst += sale.igst

        itc = TaxHeads()
        for purchase in self._purchase_rows(expenses, flt):
            if not purchase.itc_eligible:
                continue
            itc.taxable_value += purchase.taxable_value
            itc.cgst += purchase.cgst
            itc.sgst += purchase.sgst
            itc.igst += purchase.igst

        utilized = TaxHeads(
            cgst=min(outward.cgst, itc.cgst),
            sgst=min(outward.sgst, itc.sgst),
            igst=min(outward.igst, itc.igst),
        )
        net = TaxHeads(
            cgst=max(ZERO, outward.cgst - itc.cgst),
            sgst=max(ZERO, outward.sgst - itc.sgst),
            igst=max(ZERO, outward.igst - itc.igst),
        )

        def line(particulars: str, heads: TaxHeads) -> Gstr3bRow:
            return Gstr3bRow(
                particulars=particulars,
                taxable_value=heads.taxable_value,
                cgst=heads.cgst,
                sgst=heads.sgst,
                igst=heads.igst,
                total=heads.total,
            )

        rows = [
            line("3.1 Outward taxable supplies", outward),
            line("4. Input Tax Credit (ITC)", itc),
            line("ITC Utilized", utilized),
            line("Net Tax Payable", net),
        ]
        summary = [
            SummaryItem(label="Output Tax", value=outward.total),
            SummaryItem(label="Total ITC", value=itc.total),
            SummaryItem(label="Net Tax Payable", value=net.total),
        ]
        return self._table(
            ReportKind.GSTR3B_SUMMARY,
            flt,
            rows,
            summary,
            outward_supplies=_heads_json(outward),
            input_tax_credit=_heads_json(itc),
            itc_utilization=_heads_json(utilized),
            net_tax_payable=_heads_json(net),
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def build(
        self,
        kind: ReportKind,
        invoices: Sequence[InvoiceRecord] = (),
        expenses: Sequence[ExpenseRecord] = (),
        flt: ReportFilter | None = None,
    ) -> ReportTable:
        """Build any report by kind."""
        flt = flt or ReportFilter()
        if kind == ReportKind.INVOICE_AGING:
            return self.invoice_aging(invoices, flt.as_of, flt)
        if kind == ReportKind.REVENUE_BY_CLIENT:
            return self.revenue_by_client(invoices, flt)
        if kind == ReportKind.PROFIT_BY_CLIENT:
            return self.profit_by_client(invoices, expenses, flt)
        if kind == ReportKind.EXPENSES_BY_CATEGORY:
            return self.expenses_by_category(expenses, flt)
        if kind == ReportKind.GST_SALES_REGISTER:
            return self.gst_sales_register(invoices, flt)
        if kind == ReportKind.GST_PURCHASE_REGISTER:
            return self.gst_purchase_register(expenses, flt)
        if kind == ReportKind.GST_RATE_SUMMARY:
            return self.gst_rate_summary(invoices, flt)
        if kind == ReportKind.GSTR3B_SUMMARY:
            return self.gstr3b_summary(invoices, expenses, flt)
        raise ValidationError("report", "unknown report", kind)


def _heads_json(heads: TaxHeads) -> dict[str, str]:
    return {
        "taxable_value": str(heads.taxable_value),
        "cgst": str(heads.cgst),
        "sgst": str(heads.sgst),
        "igst": str(heads.igst),
        "total": str(heads.total),
    }

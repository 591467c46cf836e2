"""Tests for the document totals calculator."""

from decimal import Decimal

import pytest

from hqledger.core.entities import DiscountSpec, DiscountType, DocumentTotals, LineItem, TaxSpec
from hqledger.core.exceptions import ConsistencyWarning, ValidationError
from hqledger.core.services.totals import (
    balance_due,
    check_tax_rate_consistency,
    compute_totals,
    displayed_tax_rate,
    reconcile_stored_totals,
)


def _item(qty="1", price="100", description="Consulting") -> LineItem:
    return LineItem(description=description, quantity=qty, unit_price=price)


class TestComputeTotals:
    """Tests for compute_totals."""

    def test_percentage_discount_then_tax(self):
        totals = compute_totals(
            [_item()], DiscountSpec(type=DiscountType.PERCENTAGE, value=10), 18
        )
        assert totals.subtotal == Decimal("100")
        assert totals.discount_amount == Decimal("10")
        assert totals.taxable_base == Decimal("90")
        assert totals.tax_amount == Decimal("16.2")
        assert totals.total_amount == Decimal("106.2")

    def test_fixed_discount_clamped_to_subtotal(self):
        totals = compute_totals([_item()], DiscountSpec(type=DiscountType.FIXED, value=150), 18)
        assert totals.discount_amount == Decimal("100")
        assert totals.tax_amount == 0
        assert totals.total_amount == 0

    def test_percentage_over_hundred_clamped(self):
        totals = compute_totals([_item()], DiscountSpec(type=DiscountType.PERCENTAGE, value=120))
        assert totals.discount_amount == Decimal("100")
        assert totals.total_amount == 0

    def test_no_discount_no_tax(self, line_items: list[LineItem]):
        totals = compute_totals(line_items)
        assert totals.subtotal == Decimal("15000")
        assert totals.total_amount == Decimal("15000")

    def test_decimal_exactness(self):
        """Three times 0.1 is exactly 0.3, not 0.30000000000000004."""
        totals = compute_totals([_item(qty=3, price=0.1)])
        assert totals.subtotal == Decimal("0.3")

    def test_full_precision_kept_until_rounded(self):
        totals = compute_totals([_item(qty=1, price="33.333")], tax_rate=18)
        assert totals.tax_amount == Decimal("5.99994")
        assert totals.rounded()["tax_amount"] == Decimal("6.00")
        assert totals.rounded()["total_amount"] == Decimal("39.33")

    def test_identity_holds(self, line_items: list[LineItem], ten_percent_off: DiscountSpec):
        totals = compute_totals(line_items, ten_percent_off, "12.5")
        assert totals.total_amount == (
            max(Decimal("0"), totals.subtotal - totals.discount_amount) + totals.tax_amount
        )

    def test_deterministic(self, line_items: list[LineItem], ten_percent_off: DiscountSpec):
        first = compute_totals(line_items, ten_percent_off, 18)
        second = compute_totals(line_items, ten_percent_off, 18)
        assert first == second

    def test_empty_items_give_zero(self):
        totals = compute_totals([])
        assert totals.total_amount == 0

    def test_accepts_tax_spec(self):
        totals = compute_totals([_item()], tax_rate=TaxSpec(rate="18"))
        assert totals.tax_rate == Decimal("18")
        assert totals.total_amount == Decimal("118")


class TestValidation:
    """Malformed input is rejected, never clamped."""

    def test_zero_quantity(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_totals([_item(), _item(qty=0)])
        assert exc_info.value.details["field"] == "line_items[1].quantity"

    def test_negative_unit_price(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_totals([_item(price=-1)])
        assert exc_info.value.details["field"] == "line_items[0].unit_price"

    def test_missing_description(self):
        with pytest.raises(ValidationError):
            compute_totals([_item(description="  ")])

    def test_non_finite_price(self):
        item = LineItem.model_construct(
            description="Consulting", quantity=Decimal("1"), unit_price=Decimal("NaN")
        )
        with pytest.raises(ValidationError):
            compute_totals([item])

    @pytest.mark.parametrize("rate", [-1, "100.01", "inf"])
    def test_tax_rate_out_of_range(self, rate):
        with pytest.raises(ValidationError) as exc_info:
            compute_totals([_item()], tax_rate=rate)
        assert exc_info.value.details["field"] == "tax_rate"

    @pytest.mark.parametrize("rate", ["ten", True, [18]])
    def test_non_numeric_tax_rate(self, rate):
        with pytest.raises(ValidationError) as exc_info:
            compute_totals([_item()], tax_rate=rate)
        assert exc_info.value.details["field"] == "tax_rate"

    def test_negative_discount(self):
        with pytest.raises(ValidationError):
            compute_totals([_item()], DiscountSpec(value=-5))


class TestDisplayedRate:
    """Tests for the displayed tax rate and drift checks."""

    def test_rate_derived_from_taxable_base(self):
        totals = compute_totals(
            [_item()], DiscountSpec(type=DiscountType.PERCENTAGE, value=10), 18
        )
        assert displayed_tax_rate(totals) == 18

    def test_zero_when_no_tax(self):
        assert displayed_tax_rate(compute_totals([_item()])) == 0

    def test_rounds_half_up_to_whole_percent(self):
        totals = compute_totals([_item()], tax_rate="12.5")
        assert displayed_tax_rate(totals) == 13

    def test_no_warning_when_consistent(self):
        totals = compute_totals([_item()], tax_rate=18)
        assert check_tax_rate_consistency(totals, 18) is None

    def test_warning_on_drift(self):
        totals = DocumentTotals(
            subtotal=Decimal("100"),
            discount_amount=Decimal("0"),
            taxable_base=Decimal("100"),
            tax_rate=Decimal("18"),
            tax_amount=Decimal("12"),
            total_amount=Decimal("112"),
        )
        warning = check_tax_rate_consistency(totals, 18)
        assert isinstance(warning, ConsistencyWarning)
        assert warning.field == "tax_rate"
        assert warning.details["actual"] == "12"

    def test_rounding_within_tolerance_is_not_drift(self):
        totals = compute_totals([_item()], tax_rate="12.5")
        assert check_tax_rate_consistency(totals, "12.5") is None


class TestReconcileStoredTotals:
    """Tests for stored-vs-recomputed reconciliation."""

    def test_penny_difference_is_tolerated(self):
        totals = compute_totals([_item()], tax_rate=18)
        assert reconcile_stored_totals({"total_amount": "118.01"}, totals) == []

    def test_larger_difference_is_flagged(self):
        totals = compute_totals([_item()], tax_rate=18)
        warnings = reconcile_stored_totals(
            {"subtotal": "100", "total_amount": "120", "tax_amount": None}, totals
        )
        assert [w.field for w in warnings] == ["total_amount"]


class TestBalanceDue:
    def test_partial_payment(self):
        totals = compute_totals([_item()], tax_rate=18)
        assert balance_due(totals, "18") == Decimal("100")

    def test_overpayment_floors_at_zero(self):
        totals = compute_totals([_item()], tax_rate=18)
        assert balance_due(totals, 500) == 0

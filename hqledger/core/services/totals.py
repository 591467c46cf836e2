"""
Document totals calculator.

Pure functions: totals are derived from line items, a discount and a
tax rate, kept at full Decimal precision, and never mutate the inputs.
"""

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hqledger.core.entities.document import (
    DiscountSpec,
    DiscountType,
    DocumentTotals,
    LineItem,
    TaxSpec,
    to_decimal,
)
from hqledger.core.exceptions import ComputationError, ConsistencyWarning, ValidationError

ZERO = Decimal("0")
HUNDRED = Decimal("100")

DEFAULT_RATE_TOLERANCE = Decimal("0.5")
STORED_TOTAL_TOLERANCE = Decimal("0.01")

RECONCILED_FIELDS = ("subtotal", "discount_amount", "tax_amount", "total_amount")


def _finite(field: str, value: Decimal) -> Decimal:
    if not value.is_finite():
        raise ValidationError(field, "must be a finite number", value)
    return value


def validate_line_items(line_items: Iterable[LineItem]) -> list[LineItem]:
    """
    Reject malformed rows before any arithmetic.

    Quantity and price are never clamped; only derived values are.
    """
    items = list(line_items)
    for index, item in enumerate(items):
        prefix = f"line_items[{index}]"
        if not item.description:
            raise ValidationError(f"{prefix}.description", "description is required")
        _finite(f"{prefix}.quantity", item.quantity)
        _finite(f"{prefix}.unit_price", item.unit_price)
        if item.quantity <= 0:
            raise ValidationError(f"{prefix}.quantity", "quantity must be positive", item.quantity)
        if item.unit_price < 0:
            raise ValidationError(
                f"{prefix}.unit_price", "unit price cannot be negative", item.unit_price
            )
    return items


def validate_discount(discount: DiscountSpec) -> None:
    _finite("discount.value", discount.value)
    if discount.value < 0:
        raise ValidationError("discount.value", "discount cannot be negative", discount.value)


def validate_tax_rate(tax_rate: Decimal) -> None:
    _finite("tax_rate", tax_rate)
    if tax_rate < 0 or tax_rate > HUNDRED:
        raise ValidationError("tax_rate", "tax rate must be between 0 and 100", tax_rate)


def as_tax_spec(tax_rate: Any) -> TaxSpec:
    """Accept a TaxSpec or a bare percent (number or numeric string)."""
    if isinstance(tax_rate, TaxSpec):
        return tax_rate
    try:
        return TaxSpec(rate=tax_rate)
    except PydanticValidationError as e:
        raise ValidationError("tax_rate", e.errors()[0]["msg"], tax_rate) from e


def compute_totals(
    line_items: Iterable[LineItem],
    discount: DiscountSpec | None = None,
    tax_rate: TaxSpec | Any = 0,
) -> DocumentTotals:
    """
    Derive subtotal, discount, tax and grand total.

    The discount amount is clamped to [0, subtotal]; tax applies to the
    discounted base. Same inputs always give identical totals.

    Raises:
        ValidationError: malformed line items, discount or tax rate.
        ComputationError: arithmetic produced a non-finite result.
    """
    discount = discount or DiscountSpec.none()
    tax = as_tax_spec(tax_rate)

    items = validate_line_items(line_items)
    validate_discount(discount)
    validate_tax_rate(tax.rate)

    subtotal = sum((item.line_total for item in items), ZERO)

    if discount.type == DiscountType.PERCENTAGE:
        discount_amount = subtotal * discount.value / HUNDRED
    else:
        discount_amount = discount.value
    discount_amount = max(ZERO, min(discount_amount, subtotal))

    taxable_base = subtotal - discount_amount
    tax_amount = tax.amount_on(taxable_base)
    total_amount = taxable_base + tax_amount

    if not total_amount.is_finite():
        raise ComputationError("compute_totals", "total is not a finite number")

    return DocumentTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        taxable_base=taxable_base,
        tax_rate=tax.rate,
        tax_amount=tax_amount,
        total_amount=total_amount,
    )


def displayed_tax_rate(totals: DocumentTotals) -> int:
    """Whole-percent rate shown on documents, derived from the amounts."""
    if totals.tax_amount <= 0 or totals.taxable_base <= 0:
        return 0
    rate = totals.tax_amount / totals.taxable_base * HUNDRED
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def check_tax_rate_consistency(
    totals: DocumentTotals,
    entered_rate: Any,
    tolerance: Any = DEFAULT_RATE_TOLERANCE,
) -> ConsistencyWarning | None:
    """Return a warning when the displayed rate drifts from the entered one."""
    entered = to_decimal(entered_rate)
    limit = to_decimal(tolerance)
    shown = Decimal(displayed_tax_rate(totals))
    if totals.tax_amount <= 0:
        # No tax printed; a non-zero entered rate on a zero base is not drift
        return None
    if abs(shown - entered) > limit:
        return ConsistencyWarning("tax_rate", expected=entered, actual=shown, tolerance=limit)
    return None


def reconcile_stored_totals(
    stored: Mapping[str, Any],
    computed: DocumentTotals,
    tolerance: Any = STORED_TOTAL_TOLERANCE,
) -> list[ConsistencyWarning]:
    """Compare totals persisted with a document against a recomputation."""
    limit = to_decimal(tolerance)
    warnings: list[ConsistencyWarning] = []
    for field in RECONCILED_FIELDS:
        if stored.get(field) is None:
            continue
        expected = to_decimal(stored[field])
        actual = getattr(computed, field)
        if abs(expected - actual) > limit:
            warnings.append(ConsistencyWarning(field, expected=expected, actual=actual, tolerance=limit))
    return warnings


def balance_due(totals: DocumentTotals, amount_paid: Any = 0) -> Decimal:
    paid = to_decimal(amount_paid or 0)
    return max(ZERO, totals.total_amount - paid)

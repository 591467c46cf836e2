"""
Compute Totals Use Case.

Derives subtotal, discount, tax, grand total, displayed tax rate and
words for a draft document without rendering it.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import TotalsRequest
from hqledger.application.dto.responses import TotalsResponse, WarningResponse
from hqledger.config import get_logger, get_settings
from hqledger.core.entities.document import DocumentTotals, quantize
from hqledger.core.exceptions import ConsistencyWarning
from hqledger.core.services import (
    balance_due,
    check_tax_rate_consistency,
    compute_totals,
    displayed_tax_rate,
    format_currency,
    number_to_words,
)

logger = get_logger(__name__)


@dataclass
class TotalsResult:
    """Totals plus everything derived from them for display."""

    totals: DocumentTotals
    displayed_rate: int
    amount_in_words: str
    amount_paid: Decimal
    balance_due: Decimal
    currency: str = "INR"
    balance_due_words: str | None = None
    warnings: list[ConsistencyWarning] = field(default_factory=list)


class ComputeTotalsUseCase:
    """
    Use case for previewing document totals.

    Flow:
    1. Validate and compute totals at full precision
    2. Derive displayed rate, balance due and words
    3. Flag tax-rate drift as a warning
    """

    def execute(self, request: TotalsRequest, context: RequestContext | None = None) -> TotalsResult:
        """
        Compute totals for the request.

        Raises:
            ValidationError: Malformed line items, discount or tax rate.
            ComputationError: Totals could not be computed.
        """
        context = context or RequestContext()
        totals = compute_totals(request.line_items, request.discount, request.tax_rate)
        due = balance_due(totals, request.amount_paid)

        warnings: list[ConsistencyWarning] = []
        drift = check_tax_rate_consistency(
            totals, request.tax_rate, get_settings().report.tax_rate_tolerance
        )
        if drift is not None:
            warnings.append(drift)
            logger.warning("tax_rate_drift", **context.log_fields(), **drift.details)

        result = TotalsResult(
            totals=totals,
            displayed_rate=displayed_tax_rate(totals),
            amount_in_words=number_to_words(totals.total_amount),
            amount_paid=request.amount_paid,
            balance_due=due,
            currency=context.currency,
            balance_due_words=number_to_words(due) if request.amount_paid > 0 else None,
            warnings=warnings,
        )
        logger.info(
            "totals_computed",
            **context.log_fields(),
            items=len(request.line_items),
            total=str(quantize(totals.total_amount)),
        )
        return result

    @staticmethod
    def to_response(result: TotalsResult) -> TotalsResponse:
        """Convert result to API response."""
        amounts = result.totals.rounded()
        return TotalsResponse(
            subtotal=str(amounts["subtotal"]),
            discount_amount=str(amounts["discount_amount"]),
            taxable_base=str(amounts["taxable_base"]),
            tax_amount=str(amounts["tax_amount"]),
            total_amount=str(amounts["total_amount"]),
            displayed_tax_rate=result.displayed_rate,
            tax_label=f"Tax ({result.displayed_rate}%)",
            amount_in_words=result.amount_in_words,
            amount_paid=str(quantize(result.amount_paid)),
            balance_due=str(quantize(result.balance_due)),
            balance_due_words=result.balance_due_words,
            formatted_total=format_currency(result.totals.total_amount, result.currency),
            warnings=[warning_response(w) for w in result.warnings],
        )


def warning_response(warning: ConsistencyWarning) -> WarningResponse:
    expected = warning.details.get("expected")
    actual = warning.details.get("actual")
    return WarningResponse(
        field=warning.field,
        expected=None if expected is None else str(expected),
        actual=None if actual is None else str(actual),
        message=warning.message,
    )

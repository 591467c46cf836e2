"""Tests for ComputeTotalsUseCase."""

from datetime import date

import pytest

from hqledger.application.context import RequestContext
from hqledger.application.dto import TotalsRequest
from hqledger.application.use_cases import ComputeTotalsUseCase
from hqledger.core.exceptions import ValidationError


@pytest.fixture
def use_case() -> ComputeTotalsUseCase:
    return ComputeTotalsUseCase()


@pytest.fixture
def request_payload(line_items, ten_percent_off) -> TotalsRequest:
    return TotalsRequest(
        line_items=line_items,
        discount=ten_percent_off,
        tax_rate="18",
        amount_paid="5000",
    )


class TestComputeTotalsUseCase:
    """Tests for the totals preview flow."""

    def test_result(self, use_case: ComputeTotalsUseCase, request_payload: TotalsRequest):
        result = use_case.execute(request_payload, RequestContext(today=date(2024, 4, 1)))
        assert result.displayed_rate == 18
        assert result.amount_in_words == "Fifteen Thousand Nine Hundred Thirty Rupees Only"
        assert result.balance_due_words == "Ten Thousand Nine Hundred Thirty Rupees Only"
        assert result.warnings == []

    def test_response_uses_two_place_strings(self, use_case: ComputeTotalsUseCase, request_payload: TotalsRequest):
        response = ComputeTotalsUseCase.to_response(use_case.execute(request_payload))
        assert response.subtotal == "15000.00"
        assert response.discount_amount == "1500.00"
        assert response.taxable_base == "13500.00"
        assert response.tax_amount == "2430.00"
        assert response.total_amount == "15930.00"
        assert response.amount_paid == "5000.00"
        assert response.balance_due == "10930.00"
        assert response.tax_label == "Tax (18%)"
        assert response.formatted_total == "₹15,930.00"

    def test_context_currency_used_for_display(self, use_case: ComputeTotalsUseCase, request_payload: TotalsRequest):
        result = use_case.execute(request_payload, RequestContext(currency="USD"))
        assert ComputeTotalsUseCase.to_response(result).formatted_total == "$15,930.00"

    def test_no_payment_no_balance_words(self, use_case: ComputeTotalsUseCase, line_items):
        result = use_case.execute(TotalsRequest(line_items=line_items))
        assert result.balance_due_words is None
        assert ComputeTotalsUseCase.to_response(result).tax_label == "Tax (0%)"

    def test_invalid_rate_propagates(self, use_case: ComputeTotalsUseCase, line_items):
        with pytest.raises(ValidationError):
            use_case.execute(TotalsRequest(line_items=line_items, tax_rate="150"))

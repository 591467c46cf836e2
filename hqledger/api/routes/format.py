"""
Formatting endpoints for amounts.
"""

from decimal import Decimal

from fastapi import APIRouter, Query

from hqledger.application.dto.responses import (
    AmountInWordsResponse,
    CurrencyFormatResponse,
    ErrorResponse,
)
from hqledger.core.services import format_currency, format_number, number_to_words

router = APIRouter(prefix="/api/format", tags=["format"])


@router.get(
    "/amount-in-words",
    response_model=AmountInWordsResponse,
    responses={400: {"model": ErrorResponse, "description": "Amount is not finite"}},
)
async def amount_in_words(
    amount: Decimal = Query(..., description="Amount in rupees", examples=["1234567.89"]),
) -> AmountInWordsResponse:
    """Spell an amount in the Indian numbering system."""
    return AmountInWordsResponse(amount=str(amount), words=number_to_words(amount))


@router.get("/currency", response_model=CurrencyFormatResponse)
async def currency(
    amount: Decimal = Query(..., description="Amount to format"),
    currency: str = Query(default="INR", description="ISO currency code"),
) -> CurrencyFormatResponse:
    """Format an amount with symbol and digit grouping."""
    code = currency.strip().upper() or "INR"
    return CurrencyFormatResponse(
        amount=str(amount),
        currency=code,
        formatted=format_currency(amount, code),
        grouped=format_number(amount, code),
    )

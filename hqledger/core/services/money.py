"""
Currency formatting and amount-in-words.

Indian grouping keeps the last three integer digits together and groups
the rest in pairs (12,34,567.89). Words use the Crore/Lakh scale and
work on whole paise so no float rounding leaks into the text.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from hqledger.core.entities.document import coerce_date, to_decimal
from hqledger.core.exceptions import ValidationError

PLACEHOLDER = "-"

CURRENCY_SYMBOLS: dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "AED": "AED ",
    "SGD": "S$",
    "AUD": "A$",
}

# Core PDF fonts are latin-1 only
ASCII_SYMBOLS: dict[str, str] = {
    "INR": "Rs. ",
    "EUR": "EUR ",
}

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
_TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def _as_finite_decimal(amount: Any) -> Decimal | None:
    if amount is None:
        return None
    try:
        value = to_decimal(amount)
    except (ValueError, InvalidOperation):
        return None
    if not value.is_finite():
        return None
    return value


def _round(value: Decimal, places: int) -> Decimal | None:
    """Round half up; None when the result needs more digits than the context holds."""
    try:
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def group_indian(digits: str) -> str:
    """Group an unsigned integer string the Indian way."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def group_western(digits: str) -> str:
    return f"{int(digits):,}"


def format_number(amount: Any, currency_code: str = "INR", places: int = 2) -> str:
    """Grouped number without a symbol; placeholder on bad input."""
    value = _as_finite_decimal(amount)
    if value is None:
        return PLACEHOLDER
    value = _round(value, places)
    if value is None:
        return PLACEHOLDER
    sign = "-" if value < 0 else ""
    text = f"{abs(value):.{places}f}"
    whole, _, frac = text.partition(".")
    if (currency_code or "INR").upper() == "INR":
        whole = group_indian(whole)
    else:
        whole = group_western(whole)
    return f"{sign}{whole}.{frac}" if places else f"{sign}{whole}"


def currency_symbol(currency_code: str = "INR", ascii_symbols: bool = False) -> str:
    code = (currency_code or "INR").upper()
    if ascii_symbols and code in ASCII_SYMBOLS:
        return ASCII_SYMBOLS[code]
    return CURRENCY_SYMBOLS.get(code, f"{code} ")


def format_currency(
    amount: Any,
    currency_code: str = "INR",
    ascii_symbols: bool = False,
    places: int = 2,
) -> str:
    """
    Format an amount with symbol and locale grouping.

    Never raises: None, NaN and non-numeric input render as PLACEHOLDER.
    """
    number = format_number(amount, currency_code, places)
    if number == PLACEHOLDER:
        return PLACEHOLDER
    symbol = currency_symbol(currency_code, ascii_symbols)
    if number.startswith("-"):
        return f"-{symbol}{number[1:]}"
    return f"{symbol}{number}"


def format_percent(value: Any, places: int = 1) -> str:
    number = _as_finite_decimal(value)
    if number is None:
        return PLACEHOLDER
    rounded = _round(number, places)
    return PLACEHOLDER if rounded is None else f"{rounded}%"


def format_date(value: Any, fmt: str = "%b %d, %Y") -> str:
    """Format ISO strings or date values; placeholder when unparseable."""
    if isinstance(value, (date, datetime)):
        return value.strftime(fmt)
    try:
        parsed = coerce_date(value)
    except ValueError:
        return PLACEHOLDER
    return parsed.strftime(fmt) if parsed else PLACEHOLDER


def _below_thousand(n: int) -> str:
    if n == 0:
        return ""
    if n < 20:
        return _ONES[n]
    if n < 100:
        return _TENS[n // 10] + (f" {_ONES[n % 10]}" if n % 10 else "")
    rest = _below_thousand(n % 100)
    return f"{_ONES[n // 100]} Hundred" + (f" {rest}" if rest else "")


def integer_to_words(n: int) -> str:
    """Words for a non-negative integer on the Indian scale."""
    if n == 0:
        return "Zero"
    parts: list[str] = []
    if n >= CRORE:
        # Crore counts above 99 go through the same scale again
        parts.append(f"{integer_to_words(n // CRORE)} Crore")
        n %= CRORE
    if n >= LAKH:
        parts.append(f"{_below_thousand(n // LAKH)} Lakh")
        n %= LAKH
    if n >= THOUSAND:
        parts.append(f"{_below_thousand(n // THOUSAND)} Thousand")
        n %= THOUSAND
    if n:
        parts.append(_below_thousand(n))
    return " ".join(parts)


def split_paise(amount: Any) -> tuple[int, int]:
    """
    Split into (rupees, paise) using whole-paise arithmetic.

    A fraction that rounds to 100 paise carries into the rupee part.
    """
    value = _as_finite_decimal(amount)
    if value is None:
        raise ValidationError("amount", "amount must be a finite number", amount)
    total_paise = _round(abs(value) * 100, 0)
    if total_paise is None:
        raise ValidationError("amount", "amount is too large to spell out", amount)
    rupees, paise = divmod(int(total_paise), 100)
    return rupees, paise


def number_to_words(amount: Any) -> str:
    """
    Amount in words, e.g. 1234567.89 ->
    "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees
    and Eighty Nine Paise Only".
    """
    rupees, paise = split_paise(amount)
    if rupees == 0 and paise == 0:
        return "Zero Rupees Only"

    words = f"{integer_to_words(rupees)} Rupees"
    if paise:
        words += f" and {_below_thousand(paise)} Paise"
    words += " Only"

    if to_decimal(amount) < 0:
        return f"Minus {words}"
    return words

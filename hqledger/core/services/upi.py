"""UPI deep-link payloads for payment QR codes."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any
from urllib.parse import quote, urlencode

from hqledger.core.entities.document import to_decimal
from hqledger.core.exceptions import ValidationError

UPI_SCHEME = "upi://pay"
# UPI collects in rupees only
UPI_CURRENCY = "INR"


def _upi_amount(amount: Any) -> str | None:
    if amount is None or amount == "":
        return None
    try:
        value = to_decimal(amount)
    except (ValueError, InvalidOperation) as e:
        raise ValidationError("amount", "amount must be numeric", amount) from e
    if not value.is_finite() or value <= 0:
        return None
    return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def build_upi_url(
    upi_id: str,
    payee_name: str,
    amount: Any = None,
    note: str | None = None,
) -> str:
    """
    Build ``upi://pay?pa=..&pn=..[&am=..][&tn=..]&cu=INR``.

    ``am`` is left out for absent or non-positive amounts since some UPI
    apps reject a zero amount.
    """
    upi_id = (upi_id or "").strip()
    if not upi_id:
        raise ValidationError("upi_id", "UPI id is required")

    params: list[tuple[str, str]] = [("pa", upi_id), ("pn", (payee_name or "").strip())]
    am = _upi_amount(amount)
    if am is not None:
        params.append(("am", am))
    if note:
        params.append(("tn", note))
    params.append(("cu", UPI_CURRENCY))

    return f"{UPI_SCHEME}?{urlencode(params, quote_via=quote, safe='@')}"


def invoice_payment_note(invoice_number: str) -> str:
    return f"Payment for Invoice {invoice_number}"

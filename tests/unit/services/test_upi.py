"""Tests for the UPI payment link builder."""

from decimal import Decimal
from urllib.parse import parse_qsl, urlsplit

import pytest

from hqledger.core.exceptions import ValidationError
from hqledger.core.services.upi import build_upi_url, invoice_payment_note


class TestBuildUpiUrl:
    """Tests for build_upi_url."""

    def test_full_link_parameter_order(self):
        url = build_upi_url("acme@okhdfcbank", "Acme Digital", Decimal("1062"), "Payment for Invoice INV-1")
        assert url == (
            "upi://pay?pa=acme@okhdfcbank&pn=Acme%20Digital&am=1062.00"
            "&tn=Payment%20for%20Invoice%20INV-1&cu=INR"
        )

    @pytest.mark.parametrize("amount", [None, 0, "0", Decimal("-5"), ""])
    def test_amount_omitted_when_not_positive(self, amount):
        url = build_upi_url("acme@upi", "Acme", amount)
        params = dict(parse_qsl(urlsplit(url).query))
        assert "am" not in params
        assert params["cu"] == "INR"

    def test_amount_rounded_to_paise(self):
        url = build_upi_url("acme@upi", "Acme", "10.005")
        assert "am=10.01" in url

    def test_special_characters_are_encoded(self):
        url = build_upi_url("acme@upi", "A&B Traders", 1)
        params = dict(parse_qsl(urlsplit(url).query))
        assert params["pn"] == "A&B Traders"

    def test_note_omitted_when_empty(self):
        assert "tn=" not in build_upi_url("acme@upi", "Acme", 1)

    @pytest.mark.parametrize("upi_id", ["", "   ", None])
    def test_upi_id_required(self, upi_id):
        with pytest.raises(ValidationError):
            build_upi_url(upi_id, "Acme", 1)

    def test_non_numeric_amount(self):
        with pytest.raises(ValidationError):
            build_upi_url("acme@upi", "Acme", "ten")

    def test_payment_note(self):
        assert invoice_payment_note("INV-9") == "Payment for Invoice INV-9"

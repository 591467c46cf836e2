"""Tests for domain exceptions."""

from decimal import Decimal

from hqledger.core.exceptions import (
    ComputationError,
    ConsistencyWarning,
    HQLedgerError,
    RenderError,
    UnsupportedFormatError,
    ValidationError,
)


class TestExceptions:
    def test_base_defaults_code_to_class_name(self):
        error = HQLedgerError("boom")
        assert error.code == "HQLedgerError"
        assert error.to_dict() == {"error": "HQLedgerError", "message": "boom", "details": {}}

    def test_validation_error_truncates_value(self):
        error = ValidationError("notes", "too long", "x" * 500)
        assert error.code == "VALIDATION_ERROR"
        assert len(error.details["value"]) == 100

    def test_unsupported_format_is_validation_error(self):
        error = UnsupportedFormatError("docx", ["html", "pdf"])
        assert isinstance(error, ValidationError)
        assert error.code == "UNSUPPORTED_FORMAT"
        assert error.details["allowed"] == ["html", "pdf"]
        assert "html, pdf" in error.message

    def test_computation_and_render_details(self):
        assert ComputationError("totals", "overflow").details["operation"] == "totals"
        assert RenderError("qr", "too long").details == {"element": "qr", "reason": "too long"}

    def test_consistency_warning_serializes_decimals(self):
        warning = ConsistencyWarning("tax_rate", Decimal("18"), Decimal("12.5"), Decimal("0.5"))
        assert warning.field == "tax_rate"
        assert warning.details["actual"] == "12.5"
        assert warning.details["tolerance"] == "0.5"

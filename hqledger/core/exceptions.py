"""
Domain exceptions for HQ Ledger.

Computation errors are fatal to a request; rendering errors are
recoverable and consistency warnings are records, not raised.
"""

from decimal import Decimal
from typing import Any


class HQLedgerError(Exception):
    """Base exception for all HQ Ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(HQLedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class UnsupportedFormatError(ValidationError):
    """Requested output format has no renderer."""

    def __init__(self, output_format: str, allowed: list[str]):
        super().__init__(
            field="format",
            message=f"Unsupported format '{output_format}'. Allowed: {', '.join(allowed)}",
            value=output_format,
        )
        self.code = "UNSUPPORTED_FORMAT"
        self.details["allowed"] = allowed


# Computation Exceptions
class ComputationError(HQLedgerError):
    """Totals or words could not be computed from valid-looking input."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Computation failed during {operation}: {reason}",
            code="COMPUTATION_ERROR",
            details={"operation": operation, "reason": reason},
        )


# Rendering Exceptions
class RenderError(HQLedgerError):
    """Drawing or encoding of a document element failed."""

    def __init__(self, element: str, reason: str):
        super().__init__(
            f"Failed to render {element}: {reason}",
            code="RENDER_ERROR",
            details={"element": element, "reason": reason},
        )


class ConsistencyWarning(HQLedgerError):
    """
    Non-fatal data drift between stored/entered and derived values.

    Collected on document views and logged; never raised.
    """

    def __init__(self, field: str, expected: Any, actual: Any, tolerance: Any = None):
        super().__init__(
            f"Inconsistent {field}: expected {expected}, derived {actual}",
            code="CONSISTENCY_WARNING",
            details={
                "field": field,
                "expected": _plain(expected),
                "actual": _plain(actual),
                "tolerance": _plain(tolerance),
            },
        )
        self.field = field


def _plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    return value


# Session Exceptions
class AuthenticationError(HQLedgerError):
    """Session is not in a state that allows the requested transition."""

    def __init__(self, reason: str, state: str | None = None):
        super().__init__(
            f"Authentication failed: {reason}",
            code="AUTHENTICATION_ERROR",
            details={"reason": reason, "state": state},
        )


class ConfigurationError(HQLedgerError):
    """Configuration error."""

    pass

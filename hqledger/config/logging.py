"""
Structured logging configuration using structlog.

JSON output outside development, colored console output in development.
Amounts and dates are logged as plain strings; payee UPI addresses are
masked and oversized values (inline data URLs) are clipped.
"""

import logging
import sys
from datetime import date
from decimal import Decimal
from typing import Any

import structlog
from structlog.types import Processor

from hqledger.config.settings import get_settings

MASKED_KEYS = frozenset({"upi_id", "payee", "upi_url"})
MAX_VALUE_CHARS = 256


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add application context to log events."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    return event_dict


def stringify_amounts(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Render Decimal and date values the way API responses do."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
        elif isinstance(value, date):
            event_dict[key] = value.isoformat()
    return event_dict


def mask_upi_address(value: str) -> str:
    """acme@okhdfcbank -> ac***@okhdfcbank; also masks pa= inside UPI links."""
    if value.startswith("upi://"):
        head, sep, rest = value.partition("pa=")
        if not sep:
            return value
        address, amp, tail = rest.partition("&")
        return f"{head}{sep}{mask_upi_address(address)}{amp}{tail}"
    handle, at, provider = value.partition("@")
    if not at:
        return "***"
    return f"{handle[:2]}***@{provider}"


def redact_payment_fields(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask payee addresses and clip oversized string values."""
    for key, value in event_dict.items():
        if not isinstance(value, str):
            continue
        if key in MASKED_KEYS:
            event_dict[key] = mask_upi_address(value)
        elif len(value) > MAX_VALUE_CHARS and key != "traceback":
            event_dict[key] = f"{value[:MAX_VALUE_CHARS]}...({len(value)} chars)"
    return event_dict


def configure_logging() -> None:
    """Configure structlog for the application."""
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_app_context,
        stringify_amounts,
        redact_payment_fields,
    ]

    if settings.environment == "development":
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )

    # fpdf2 and fontTools are chatty at INFO
    for name in ("fpdf", "fontTools", "PIL", "httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)

"""API middleware."""

from hqledger.api.middleware.error_handler import ErrorHandlerMiddleware
from hqledger.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]

"""Middleware for request processing: request ids, access logging, error mapping."""

from .error_handler import error_handler_middleware
from .logging import LoggingMiddleware
from .request_context import RequestContextMiddleware, get_request_id

__all__ = [
    "error_handler_middleware",
    "get_request_id",
    "LoggingMiddleware",
    "RequestContextMiddleware",
]

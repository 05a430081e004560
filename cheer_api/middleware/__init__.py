"""HTTP middleware."""

from .envelope import EnvelopeMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = ["EnvelopeMiddleware", "RequestLoggingMiddleware"]

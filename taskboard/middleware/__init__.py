"""HTTP middleware: timeout, request ID, correlation ID, security headers.

Applied in main app; order matters (last added = outermost).
"""

from taskboard.middleware.request_context import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
)
from taskboard.middleware.security_headers import SecurityHeadersMiddleware
from taskboard.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]

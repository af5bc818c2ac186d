"""HTTP middleware: security headers and rate limiting"""
from postboard.middleware.rate_limit import build_limiter, rate_limit_exceeded_handler
from postboard.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
    "build_limiter",
    "rate_limit_exceeded_handler",
]

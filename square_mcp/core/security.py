"""HTTP hardening middleware and utilities.

Provides:
- Request size limiting
- Security response headers
- Secret masking for log output
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Security Headers
# ---------------------------------------------------------------------------


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security-related response headers."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


# ---------------------------------------------------------------------------
# Request Size Limiting
# ---------------------------------------------------------------------------


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests with bodies larger than the configured limit."""

    MAX_SIZE = 1 * 1024 * 1024  # 1 MB

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.MAX_SIZE:
            logger.warning("Rejected %s byte request to %s", content_length, request.url.path)
            return JSONResponse(
                status_code=413,
                content={"detail": f"Request body too large. Max: {self.MAX_SIZE} bytes"},
            )
        return await call_next(request)


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def install_security_middleware(app: FastAPI) -> None:
    """Install all security middleware on the FastAPI app.

    Call this during application setup (after CORS middleware).
    """
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestSizeLimitMiddleware)


def mask_secret(value: str, visible: int = 4) -> str:
    """Return a masked representation of a secret string for safe logging."""
    if len(value) <= visible:
        return "****"
    return value[:visible] + "*" * (len(value) - visible)

from __future__ import annotations

import logging

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.config import Settings

logger = logging.getLogger(__name__)

WRITE_METHODS = {"POST", "PUT", "PATCH"}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds hardening headers; report and version payloads are never cached."""

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self._settings = settings
        self._no_store_prefixes = tuple(
            f"{settings.api_prefix}{path}" for path in ("/reports", "/versions", "/change-requests")
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        headers = response.headers
        headers.setdefault("X-Content-Type-Options", "nosniff")
        headers.setdefault("X-Frame-Options", "DENY")
        headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        if request.url.path.startswith(self._no_store_prefixes):
            headers.setdefault("Cache-Control", "no-store")
        if self._settings.security_enable_hsts:
            headers.setdefault(
                "Strict-Transport-Security",
                f"max-age={max(1, self._settings.security_hsts_max_age_seconds)}; includeSubDomains",
            )
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects oversized write bodies before they reach the workflow routes."""

    def __init__(self, app, *, max_bytes: int) -> None:
        super().__init__(app)
        self._max_bytes = max(1, max_bytes)

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method not in WRITE_METHODS:
            return await call_next(request)

        raw_length = request.headers.get("content-length")
        if not raw_length:
            return await call_next(request)
        if not raw_length.isdigit():
            return JSONResponse(
                status_code=400,
                content={"message": "Invalid Content-Length header", "details": {"content_length": raw_length}},
            )

        length = int(raw_length)
        if length > self._max_bytes:
            logger.warning("Rejected %s %s: body of %d bytes", request.method, request.url.path, length)
            return JSONResponse(
                status_code=413,
                content={
                    "message": "Request body too large",
                    "details": {"size_bytes": length, "max_bytes": self._max_bytes},
                },
            )
        return await call_next(request)

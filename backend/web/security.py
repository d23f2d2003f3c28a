"""
Response hardening for the message wall.

`install_security_headers(app, settings)` registers an HTTP middleware that
adds the baseline headers to every response, HTML and JSON alike. The CSP is
strict enough for the kiosk: scripts only from the app and the htmx CDN,
images from any https origin (object storage providers, QR code API).
"""
from __future__ import annotations

import time
import uuid

from fastapi import FastAPI, Request

from .config import Settings

HTMX_ORIGIN = "https://unpkg.com"


def build_csp(settings: Settings) -> str:
    # htmx runs with includeIndicatorStyles=false (see Layout), so style-src
    # needs no inline allowance.
    directives = [
        "default-src 'self'",
        f"script-src 'self' {HTMX_ORIGIN}",
        "style-src 'self'",
        "img-src 'self' https: data:",
        "connect-src 'self'",
        "frame-ancestors 'none'",
    ]
    if settings.is_prod_like:
        directives.append("upgrade-insecure-requests")
    return "; ".join(directives)


def install_security_headers(app: FastAPI, settings: Settings) -> None:
    csp = build_csp(settings)
    hsts = settings.is_prod_like

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers.setdefault("Content-Security-Policy", csp)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        if hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}"
        return response


__all__ = ["build_csp", "install_security_headers"]

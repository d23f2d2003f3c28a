"""Kiosk display pages."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse

from ..components import Layout, QrCode, SlideCard
from ..dependencies import WallServices, get_services

display_router = APIRouter(tags=["Display"])

_NO_STORE = {"Cache-Control": "no-store"}


def _submit_url(request: Request, services: WallServices) -> str:
    base = services.settings.PUBLIC_BASE_URL.strip().rstrip("/")
    if base:
        return f"{base}/submit"
    return str(request.url_for("submit_page"))


@display_router.get("/", response_class=HTMLResponse)
async def kiosk_page(request: Request, services: WallServices = Depends(get_services)):
    settings = services.settings
    slide_html = SlideCard(services.display.frame(), poll_seconds=settings.DISPLAY_POLL_SECONDS).render()
    content = f"""
    <div class="kiosk">
        <header class="kiosk__header">
            <h1 class="kiosk__title">{Layout.escape(settings.EVENT_TITLE)}</h1>
        </header>
        <div class="kiosk__stage">{slide_html}</div>
        <aside class="kiosk__sidebar">{QrCode(_submit_url(request, services)).render()}</aside>
    </div>
    """
    page = Layout(settings.EVENT_TITLE, content, event_title=settings.EVENT_TITLE, body_class="kiosk-body")
    return HTMLResponse(page.render(), headers=_NO_STORE)


@display_router.get("/display/frame")
async def display_frame(seen: Optional[str] = None, services: WallServices = Depends(get_services)):
    """
    Return the current slide fragment for the kiosk poll.

    Behavior:
        - 204 (no swap) when `seen` equals the current frame key.
        - 200 with the slide fragment otherwise.
    """
    frame = services.display.frame()
    if seen is not None and seen == frame.key:
        return Response(status_code=204, headers=_NO_STORE)
    html = SlideCard(frame, poll_seconds=services.settings.DISPLAY_POLL_SECONDS).render()
    return HTMLResponse(html, headers=_NO_STORE)

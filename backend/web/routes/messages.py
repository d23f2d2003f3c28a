"""Feed endpoint consumed by the display client."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import WallServices, get_services

messages_router = APIRouter(tags=["Messages"])


def _no_cache_headers() -> dict[str, str]:
    """Headers that keep browsers, proxies and CDNs from caching the feed."""
    return {
        "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
        "Pragma": "no-cache",
        "Expires": "0",
        "Surrogate-Control": "no-store",
    }


@messages_router.get("/messages")
async def list_messages(services: WallServices = Depends(get_services)):
    """
    Return every wall entry, oldest first.

    Behavior:
        - Always 200. A store outage yields `[]` so the display keeps running.
        - Query parameters (e.g. a `timestamp` cache-buster) are ignored.
    """
    records = await services.feed.execute()
    body = [record.model_dump(mode="json") for record in records]
    return JSONResponse(body, status_code=200, headers=_no_cache_headers())

"""
Health check endpoints for monitoring
"""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import WallServices, get_services

health_router = APIRouter(tags=["Health"])

_NO_STORE = {"Cache-Control": "no-store"}


@health_router.get("/health")
async def health_check(services: WallServices = Depends(get_services)):
    """Status summary with the message store and the active storage provider."""
    store_ok = await services.store.ping()
    body = {
        "status": "healthy" if store_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "message_store": {"healthy": store_ok},
            "object_storage": {"provider": services.storage.provider},
            "display": {"running": services.display.running},
        },
    }
    return JSONResponse(body, headers=_NO_STORE)


@health_router.get("/health/ready")
async def readiness_check(services: WallServices = Depends(get_services)):
    """
    Readiness probe for Kubernetes/Docker
    Returns 200 only if the message store answers a ping
    """
    if not await services.store.ping():
        return JSONResponse(
            {"status": "not_ready", "reason": "message_store_unavailable"},
            status_code=503,
            headers=_NO_STORE,
        )
    return JSONResponse({"status": "ready"}, headers=_NO_STORE)


@health_router.get("/health/live")
async def liveness_check():
    """
    Liveness probe for Kubernetes/Docker
    Returns 200 if service is alive (even if dependencies are down)
    """
    return JSONResponse({"status": "alive"}, headers=_NO_STORE)

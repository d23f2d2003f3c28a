"""
Message wall web application.

`create_app()` wires settings, the Redis message store, the object storage
adapter and the display client into one FastAPI app. Tests call it with
in-memory fakes; production uses the module-level `app`.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from backend.display.client import DisplayClient
from backend.display.sources import FeedSource, HttpFeedSource, StoreFeedSource
from backend.storage.ports import ObjectStorage
from backend.wall.feed import ReadFeedUseCase
from backend.wall.store import MessageStore
from backend.wall.submissions import SubmitMessageUseCase

from .config import Settings, ensure_secure_config_on_startup, get_settings
from .dependencies import WallServices
from .logging_config import configure_logging
from .routes.display import display_router
from .routes.health import health_router
from .routes.messages import messages_router
from .routes.submit import submit_router
from .security import install_security_headers
from .storage_wiring import build_object_storage

logger = structlog.get_logger("wall.web")

static_dir = Path(__file__).parent / "static"

# Remote feed requests must never stall the refresh loop.
DISPLAY_FEED_TIMEOUT_SECONDS = 10.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    services: WallServices = app.state.services
    settings = services.settings
    logger.info(
        "starting_message_wall",
        environment=settings.ENVIRONMENT,
        storage_provider=services.storage.provider,
        display_source="http" if services.display_http_client is not None else "store",
    )

    # The wall still serves pages while Redis is down; the feed fails soft.
    if not await services.store.ping():
        logger.warning("message_store_unreachable_at_startup", key=services.store.key)

    services.display.start()

    yield

    logger.info("shutting_down_message_wall")
    await services.display.stop()
    if services.display_http_client is not None:
        await services.display_http_client.aclose()
    await services.store.close()
    logger.info("message_wall_shutdown_complete")


def create_app(
    settings: Optional[Settings] = None,
    *,
    store: Optional[MessageStore] = None,
    storage: Optional[ObjectStorage] = None,
    display_source: Optional[FeedSource] = None,
) -> FastAPI:
    """Build the message wall app.

    Parameters:
        settings: Defaults to `get_settings()` (environment and `.env`).
        store: Message store; defaults to a Redis store for `REDIS_URL`.
        storage: Object storage adapter; defaults to the provider selected by
            `STORAGE_PROVIDER`.
        display_source: Feed source for the display client; defaults to the
            HTTP source when `DISPLAY_FEED_URL` is set, the in-process store
            otherwise.

    Behavior:
        Raises SystemExit in production-like environments with insecure or
        incomplete configuration. No network connection is opened here.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    ensure_secure_config_on_startup(settings)

    if store is None:
        store = MessageStore.from_url(
            settings.REDIS_URL,
            key=settings.MESSAGES_KEY,
            max_connections=settings.REDIS_MAX_CONNECTIONS,
        )
    if storage is None:
        storage = build_object_storage(settings)

    feed = ReadFeedUseCase(store)
    submit = SubmitMessageUseCase(store, storage, max_image_bytes=settings.MAX_IMAGE_BYTES)

    http_client: Optional[httpx.AsyncClient] = None
    if display_source is None:
        feed_url = settings.DISPLAY_FEED_URL.strip()
        if feed_url:
            http_client = httpx.AsyncClient(timeout=DISPLAY_FEED_TIMEOUT_SECONDS)
            display_source = HttpFeedSource(http_client, feed_url)
        else:
            display_source = StoreFeedSource(feed)
    display = DisplayClient(
        display_source,
        refresh_interval=settings.DISPLAY_REFRESH_SECONDS,
        rotation_interval=settings.DISPLAY_ROTATION_SECONDS,
    )

    app = FastAPI(title=settings.EVENT_TITLE, description="Event message wall", version="0.1.0", lifespan=lifespan)
    app.state.services = WallServices(
        settings=settings,
        store=store,
        storage=storage,
        submit=submit,
        feed=feed,
        display=display,
        display_http_client=http_client,
    )

    install_security_headers(app, settings)
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    app.include_router(health_router)
    app.include_router(messages_router)
    app.include_router(submit_router)
    app.include_router(display_router)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers={"Cache-Control": "no-store"},
        )

    return app


app = create_app()

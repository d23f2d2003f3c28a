"""
Per-app service container.

`create_app` builds one `WallServices` and stores it on `app.state.services`;
routes fetch it through `get_services`. Nothing here is module-global, so
tests can build several isolated apps side by side.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import Request

from backend.display.client import DisplayClient
from backend.storage.ports import ObjectStorage
from backend.wall.feed import ReadFeedUseCase
from backend.wall.store import MessageStore
from backend.wall.submissions import SubmitMessageUseCase

from .config import Settings


@dataclass
class WallServices:
    settings: Settings
    store: MessageStore
    storage: ObjectStorage
    submit: SubmitMessageUseCase
    feed: ReadFeedUseCase
    display: DisplayClient
    display_http_client: Optional[httpx.AsyncClient] = None


def get_services(request: Request) -> WallServices:
    return request.app.state.services


__all__ = ["WallServices", "get_services"]

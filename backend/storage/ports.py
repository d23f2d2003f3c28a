"""
Object storage port used by the submission flow.

Keep this small and framework-agnostic so tests can supply simple fakes.
"""
from __future__ import annotations

from typing import Protocol

from backend.wall.errors import UploadError


class ObjectStorage(Protocol):
    """Minimal interface to persist one image and hand back a public URL.

    Intent:
        Let the submission use case store binary payloads without depending
        on a specific cloud SDK. Exactly one provider is active per process.

    Behavior:
        Each call creates one world-readable object. No retries, no cleanup.

    Errors:
        Implementations raise UploadError on network, auth or provider
        failures.
    """

    provider: str

    def store(self, *, body: bytes, content_type: str, suggested_name: str) -> str: ...


class NullObjectStorage:
    """Fallback adapter that signals the storage backend is not configured."""

    provider = "none"

    def store(self, *, body: bytes, content_type: str, suggested_name: str) -> str:  # noqa: D401
        raise UploadError("storage_adapter_not_configured")


__all__ = ["ObjectStorage", "NullObjectStorage"]

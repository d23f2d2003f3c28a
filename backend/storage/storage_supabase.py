"""
Supabase-backed storage adapter for wall images.

This adapter uses a provided Supabase client and is intentionally duck-typed
to avoid a hard dependency during testing. The client is expected to expose
`.storage.from_(bucket)` (or `.from_(bucket)` for a bare storage3 client)
which returns an object offering:

- upload(path, file, file_options) -> Any
- get_public_url(path) -> str | { publicURL | publicUrl | public_url }

Security:
- The caller must initialize the client with the Service Role key.
- The bucket must be public; the display page loads images anonymously.
"""
from __future__ import annotations

from typing import Any, Dict

import structlog

from backend.wall.errors import UploadError

from .keys import make_image_key

logger = structlog.get_logger(__name__)


class SupabaseStorageAdapter:
    """ObjectStorage implementation using a supabase client."""

    provider = "supabase"

    def __init__(self, client: Any, *, bucket: str):
        self._client = client
        self.bucket = bucket

    # --- Helpers -----------------------------------------------------------------

    def _bucket(self) -> Any:
        """Return a bucket proxy from either supabase client or storage3 client."""
        c = self._client
        storage = getattr(c, "storage", None)
        if storage is not None and hasattr(storage, "from_"):
            return storage.from_(self.bucket)
        if hasattr(c, "from_"):
            return c.from_(self.bucket)
        raise UploadError("invalid_supabase_client")

    @staticmethod
    def _first_key(d: Dict[str, Any], *keys: str) -> Any:
        for k in keys:
            if k in d and d[k] is not None:
                return d[k]
        return None

    def _public_url(self, bucket: Any, key: str) -> str:
        res = bucket.get_public_url(key)
        if isinstance(res, str):
            return res.rstrip("?")
        if isinstance(res, dict):
            url = self._first_key(res, "publicURL", "publicUrl", "public_url")
            data = res.get("data")
            if url is None and isinstance(data, dict):
                url = self._first_key(data, "publicURL", "publicUrl", "public_url")
            if url:
                return str(url)
        raise UploadError("failed_to_resolve_public_url")

    # --- Protocol methods --------------------------------------------------------

    def store(self, *, body: bytes, content_type: str, suggested_name: str) -> str:
        key = make_image_key(filename=suggested_name)
        b = self._bucket()
        # Some client versions expect file options with either kebab or camel case.
        opts = {"content-type": content_type, "contentType": content_type}
        try:
            b.upload(key, body, opts)
            url = self._public_url(b, key)
        except UploadError:
            raise
        except Exception as exc:
            logger.error("supabase_upload_failed", bucket=self.bucket, key=key, error=str(exc))
            raise UploadError(f"supabase upload failed: {exc}") from exc
        logger.info("image_uploaded", provider=self.provider, key=key, size_bytes=len(body))
        return url


__all__ = ["SupabaseStorageAdapter"]

"""
Select and build the single object storage adapter for this process.

Why:
    Exactly one provider is active per deployment and it is chosen from
    configuration at startup. Missing credentials must not crash a dev server;
    the Null adapter is wired instead and every image submission then fails
    with a clear `storage_adapter_not_configured` cause.

Security:
    Credentials stay server-side. Nothing here is rendered to clients.
"""
from __future__ import annotations

import structlog

from backend.storage.ports import NullObjectStorage, ObjectStorage
from backend.web.config import Settings

logger = structlog.get_logger("wall.web")


def _build_spaces(settings: Settings) -> ObjectStorage:
    from backend.storage.spaces import SpacesStorageAdapter

    return SpacesStorageAdapter(
        endpoint=settings.DO_SPACES_ENDPOINT,
        bucket=settings.DO_SPACES_BUCKET,
        region=settings.DO_SPACES_REGION,
        access_key=settings.DO_SPACES_KEY,
        secret_key=settings.DO_SPACES_SECRET,
    )


def _build_google_drive(settings: Settings) -> ObjectStorage:
    from backend.storage.google_drive import GoogleDriveStorageAdapter

    return GoogleDriveStorageAdapter(
        folder_id=settings.GOOGLE_DRIVE_FOLDER_ID,
        service_account_file=settings.GOOGLE_SERVICE_ACCOUNT_FILE,
    )


def _build_supabase(settings: Settings) -> ObjectStorage:
    # Lazy imports keep the optional client out of non-supabase deployments.
    from supabase import create_client

    from backend.storage.storage_supabase import SupabaseStorageAdapter

    client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
    return SupabaseStorageAdapter(client, bucket=settings.SUPABASE_STORAGE_BUCKET)


_BUILDERS = {
    "digitalocean": _build_spaces,
    "googledrive": _build_google_drive,
    "supabase": _build_supabase,
}


def build_object_storage(settings: Settings) -> ObjectStorage:
    """Return the adapter for `settings.STORAGE_PROVIDER`.

    Behavior:
        - Returns the provider adapter when its credentials are present.
        - Returns NullObjectStorage when they are missing or the client
          cannot be constructed. Both cases log a warning.
    """
    provider = settings.STORAGE_PROVIDER
    if not settings.provider_configured():
        logger.warning("storage_provider_not_configured", provider=provider)
        return NullObjectStorage()
    try:
        adapter = _BUILDERS[provider](settings)
    except Exception as exc:
        logger.warning(
            "storage_wiring_skipped",
            provider=provider,
            error_type=exc.__class__.__name__,
            error=str(exc),
        )
        return NullObjectStorage()
    logger.info("storage_adapter_wired", provider=adapter.provider)
    return adapter


__all__ = ["build_object_storage"]

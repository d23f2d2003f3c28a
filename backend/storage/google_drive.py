"""
Google Drive storage adapter.

Uploads each image into a configured Drive folder using a service account,
then grants an ``anyone``/``reader`` permission so the kiosk can embed it.

Scopes: https://www.googleapis.com/auth/drive.file
"""
from __future__ import annotations

import io
from typing import Any

import httplib2
import structlog
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from backend.wall.errors import UploadError

from .keys import make_image_key

logger = structlog.get_logger(__name__)

PUBLIC_VIEW_URL = "https://drive.google.com/uc?export=view&id={file_id}"


class GoogleDriveStorageAdapter:
    """ObjectStorage implementation backed by the Drive v3 API."""

    provider = "googledrive"
    SCOPES = ["https://www.googleapis.com/auth/drive.file"]

    def __init__(self, *, folder_id: str, service_account_file: str, service: Any | None = None) -> None:
        self.folder_id = folder_id
        self._service_account_file = service_account_file
        self._service = service

    def _drive(self) -> Any:
        if self._service is None:
            from google.oauth2 import service_account
            from googleapiclient.discovery import build

            credentials = service_account.Credentials.from_service_account_file(
                self._service_account_file, scopes=self.SCOPES
            )
            self._service = build("drive", "v3", credentials=credentials, cache_discovery=False)
        return self._service

    def store(self, *, body: bytes, content_type: str, suggested_name: str) -> str:
        key = make_image_key(filename=suggested_name)
        metadata: dict[str, Any] = {"name": key}
        if self.folder_id:
            metadata["parents"] = [self.folder_id]
        media = MediaIoBaseUpload(io.BytesIO(body), mimetype=content_type, resumable=False)
        try:
            drive = self._drive()
            created = drive.files().create(body=metadata, media_body=media, fields="id").execute()
            file_id = created.get("id")
            if not file_id:
                raise UploadError("drive upload returned no file id")
            drive.permissions().create(
                fileId=file_id,
                body={"role": "reader", "type": "anyone"},
            ).execute()
        except (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError, ValueError) as exc:
            logger.error("drive_upload_failed", folder_id=self.folder_id, key=key, error=str(exc))
            raise UploadError(f"drive upload failed: {exc}") from exc
        logger.info("image_uploaded", provider=self.provider, file_id=file_id, size_bytes=len(body))
        return PUBLIC_VIEW_URL.format(file_id=file_id)


__all__ = ["GoogleDriveStorageAdapter", "PUBLIC_VIEW_URL"]

"""
S3-compatible storage adapter (DigitalOcean Spaces and friends).

Uploads go through boto3's ``put_object`` with a ``public-read`` ACL so the
display page can load the image directly. The public URL follows the
path-style shape ``{endpoint}/{bucket}/{key}``.
"""
from __future__ import annotations

from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from backend.wall.errors import UploadError

from .keys import make_image_key

logger = structlog.get_logger(__name__)


class SpacesStorageAdapter:
    """ObjectStorage implementation for S3-compatible endpoints."""

    provider = "digitalocean"

    def __init__(
        self,
        *,
        endpoint: str,
        bucket: str,
        region: str,
        access_key: str,
        secret_key: str,
        client: Any | None = None,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.bucket = bucket
        self._region = region
        self._access_key = access_key
        self._secret_key = secret_key
        self._client = client

    def _s3(self) -> Any:
        # Created lazily so app construction never touches the network.
        if self._client is None:
            self._client = boto3.client(
                "s3",
                region_name=self._region or None,
                endpoint_url=self.endpoint,
                aws_access_key_id=self._access_key,
                aws_secret_access_key=self._secret_key,
            )
        return self._client

    def public_url(self, key: str) -> str:
        return f"{self.endpoint}/{self.bucket}/{key}"

    def store(self, *, body: bytes, content_type: str, suggested_name: str) -> str:
        key = make_image_key(filename=suggested_name)
        try:
            # A malformed endpoint only surfaces when the client is built.
            client = self._s3()
            client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
                ACL="public-read",
            )
        except (BotoCoreError, ClientError, ValueError) as exc:
            logger.error("spaces_upload_failed", bucket=self.bucket, key=key, error=str(exc))
            raise UploadError(f"spaces upload failed: {exc}") from exc
        url = self.public_url(key)
        logger.info("image_uploaded", provider=self.provider, key=key, size_bytes=len(body))
        return url


__all__ = ["SpacesStorageAdapter"]

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from anyio import to_thread
import structlog

from backend.storage.ports import ObjectStorage

from .errors import InternalError, StoreUnavailable, UploadError, ValidationError
from .records import SubmissionRecord, new_record, now_ms
from .store import MessageStore

logger = structlog.get_logger(__name__)

MAX_IMAGE_BYTES = 5 * 1024 * 1024

ALLOWED_IMAGE_TYPES = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
)

SUCCESS_PHRASES = (
    "Awesome!",
    "Brilliant!",
    "Nice one!",
    "Love it!",
    "Great job!",
    "So cool!",
    "Fantastic!",
    "Well done!",
    "Superb!",
    "Legendary!",
)


def _format_mb(n_bytes: int) -> str:
    return f"{round(n_bytes / (1024 * 1024), 2):g}MB"


def pick_success_phrase(rng: random.Random | None = None) -> str:
    return (rng or random).choice(SUCCESS_PHRASES)


@dataclass
class ImageUpload:
    body: bytes
    content_type: str
    filename: Optional[str] = None


@dataclass
class SubmissionInput:
    name: str
    message: Optional[str] = None
    image: Optional[ImageUpload] = None


@dataclass(frozen=True)
class _ValidSubmission:
    name: str
    text: Optional[str]
    image: Optional[ImageUpload]


def validate_submission(req: SubmissionInput, *, max_image_bytes: int = MAX_IMAGE_BYTES) -> _ValidSubmission:
    """Apply the submission rules in order; the first failing rule wins.

    An image part with an empty body counts as "no image", which matches how
    browsers send an untouched file input.
    """
    name = (req.name or "").strip()
    if not name:
        raise ValidationError("name_required", "Name is required")

    text = (req.message or "").strip() or None
    image = req.image if req.image is not None and len(req.image.body) > 0 else None

    if text is None and image is None:
        raise ValidationError("content_required", "Either message or image is required")
    if text is not None and image is not None:
        raise ValidationError("content_conflict", "Please submit either a message or an image, not both")

    if image is not None:
        if len(image.body) > max_image_bytes:
            raise ValidationError("image_too_large", f"Image size must be less than {_format_mb(max_image_bytes)}")
        if (image.content_type or "").lower() not in ALLOWED_IMAGE_TYPES:
            raise ValidationError(
                "unsupported_image_type",
                "Invalid image type. Only JPEG, PNG, GIF, and WebP are allowed",
            )
    return _ValidSubmission(name=name, text=text, image=image)


class SubmitMessageUseCase:
    def __init__(
        self,
        store: MessageStore,
        storage: ObjectStorage,
        *,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
        max_image_bytes: int = MAX_IMAGE_BYTES,
    ) -> None:
        self._store = store
        self._storage = storage
        self._clock = clock
        self._id_factory = id_factory
        self._max_image_bytes = max_image_bytes

    async def execute(self, req: SubmissionInput) -> SubmissionRecord:
        """Validate, upload (images only) and append one wall entry.

        Intent:
            Single entry point for the submit route. Framework-free so the
            route only translates errors into HTTP.

        Behavior:
            - Raises ValidationError for rule violations (nothing is stored).
            - Uploads the image before appending; the upload runs in a worker
              thread because provider SDKs are blocking.
            - Wraps UploadError and StoreUnavailable in InternalError.
            - A failed append after a successful upload leaves the blob
              orphaned; this is logged, not compensated.
        """
        valid = validate_submission(req, max_image_bytes=self._max_image_bytes)

        url: Optional[str] = None
        if valid.image is not None:
            image = valid.image
            try:
                url = await to_thread.run_sync(
                    lambda: self._storage.store(
                        body=image.body,
                        content_type=image.content_type.lower(),
                        suggested_name=image.filename or "",
                    )
                )
            except UploadError as exc:
                logger.error("image_upload_failed", provider=self._storage.provider, error=str(exc))
                raise InternalError(f"Failed to submit message: {exc}", cause=exc) from exc

        if url is not None:
            record = new_record(
                kind="image", content=url, name=valid.name, clock=self._clock, id_factory=self._id_factory
            )
        else:
            record = new_record(
                kind="text", content=valid.text or "", name=valid.name, clock=self._clock, id_factory=self._id_factory
            )

        try:
            await self._store.append(record)
        except StoreUnavailable as exc:
            if url is not None:
                logger.warning("orphaned_upload", url=url, record_id=record.id)
            raise InternalError(f"Failed to submit message: {exc}", cause=exc) from exc

        logger.info("submission_accepted", record_id=record.id, kind=record.kind)
        return record


__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "ImageUpload",
    "MAX_IMAGE_BYTES",
    "SUCCESS_PHRASES",
    "SubmissionInput",
    "SubmitMessageUseCase",
    "pick_success_phrase",
    "validate_submission",
]

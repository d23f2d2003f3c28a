"""
Error taxonomy for the message wall.

Routers translate these into HTTP responses:

- ValidationError   -> 400, message identifies the violated rule
- UploadError       -> wrapped into InternalError on the submit path (500)
- StoreUnavailable  -> wrapped into InternalError on the submit path (500),
                       swallowed to an empty feed on the read path
- InternalError     -> 500, carries the underlying cause
"""
from __future__ import annotations


class WallError(Exception):
    """Base class for all message wall errors."""


class ValidationError(WallError):
    """Client input failed one of the submission rules.

    Attributes:
        code: Stable machine-readable reason (e.g. ``name_required``).
        message: Human-readable text surfaced verbatim by the submit form.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class UploadError(WallError):
    """The object storage provider was unreachable or rejected the upload."""


class StoreUnavailable(WallError):
    """The Redis-backed message store could not be reached."""


class InternalError(WallError):
    """A dependency failed while handling an otherwise valid submission."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


__all__ = [
    "WallError",
    "ValidationError",
    "UploadError",
    "StoreUnavailable",
    "InternalError",
]

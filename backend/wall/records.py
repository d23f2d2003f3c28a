"""
Submission record model.

One record is one accepted wall entry: either a short text note or a link to
an image stored with an external object storage provider. Records are
immutable once appended to the message store.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MessageKind = Literal["text", "image"]

MAX_NAME_LENGTH = 25
MAX_TEXT_LENGTH = 280


class SubmissionRecord(BaseModel):
    """A persisted wall entry.

    ``kind`` is serialized as ``kind``; older list entries written with the
    key ``type`` are still accepted when reading.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: MessageKind = Field(validation_alias=AliasChoices("kind", "type"))
    content: str
    name: str
    timestamp: int

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=False)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "SubmissionRecord":
        return cls.model_validate_json(raw)


def now_ms() -> int:
    return int(time.time() * 1000)


def new_record(
    *,
    kind: MessageKind,
    content: str,
    name: str,
    clock: Callable[[], int] = now_ms,
    id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
) -> SubmissionRecord:
    """Build a fresh record with a generated id and acceptance timestamp."""
    return SubmissionRecord(id=id_factory(), kind=kind, content=content, name=name, timestamp=clock())


__all__ = [
    "MessageKind",
    "MAX_NAME_LENGTH",
    "MAX_TEXT_LENGTH",
    "SubmissionRecord",
    "new_record",
    "now_ms",
]

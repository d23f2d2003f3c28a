"""
Helpers to generate object keys for uploaded wall images.

Conventions:
    - Wall images: {uuid_hex}.{ext}

Security:
    - Extensions are lowercased and filtered to alphanumerics.
    - The client-supplied filename never contributes anything but its
      extension, which rules out path traversal.
"""
from __future__ import annotations

import os
import uuid

DEFAULT_IMAGE_EXT = "jpg"
_MAX_EXT_LENGTH = 8


def _sanitize_ext_from_filename(filename: str | None, default_ext: str = DEFAULT_IMAGE_EXT) -> str:
    ext = ""
    if filename:
        _, ext = os.path.splitext(os.path.basename(filename))
    ext = "".join(ch for ch in ext.lower() if ch.isalnum())[:_MAX_EXT_LENGTH]
    return ext or default_ext


def make_image_key(*, filename: str | None, uuid_hex: str | None = None) -> str:
    """Build an object key for a wall image.

    Returns: {uuid}.{ext}, where ext falls back to ``jpg``.
    """
    hexpart = (uuid_hex or "").strip() or uuid.uuid4().hex
    return f"{hexpart}.{_sanitize_ext_from_filename(filename)}"


__all__ = ["make_image_key"]

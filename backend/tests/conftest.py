"""
Pytest configuration for backend tests.

Why: Force AnyIO to use the asyncio backend and keep every test independent
of a running Redis or cloud storage account. Apps are built with
`create_app(...)` and in-memory fakes from `fakes.py`.
"""
import os
import sys
from pathlib import Path

import pytest

# backend.web.main builds a module-level app on import; keep it permissive
# and offline regardless of the developer's shell.
os.environ["ENVIRONMENT"] = "test"
os.environ["STORAGE_PROVIDER"] = "digitalocean"
for _var in ("DISPLAY_FEED_URL", "DO_SPACES_KEY", "DO_SPACES_SECRET"):
    os.environ.pop(_var, None)

REPO_ROOT = Path(__file__).resolve().parents[2]
TESTS_DIR = REPO_ROOT / "backend" / "tests"
for p in (str(REPO_ROOT), str(TESTS_DIR)):
    if p not in sys.path:
        sys.path.insert(0, p)

from fakes import FakeRedis, RecordingStorage  # noqa: E402
from backend.wall.store import MessageStore  # noqa: E402
from backend.web.config import Settings  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the process environment and `.env`."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        EVENT_TITLE="Test Wall",
        STORAGE_PROVIDER="digitalocean",
        DISPLAY_POLL_SECONDS=1.0,
    )


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def store(fake_redis: FakeRedis) -> MessageStore:
    return MessageStore(fake_redis, key="messages")


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()

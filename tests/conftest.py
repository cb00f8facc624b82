"""
Shared pytest fixtures.

Every fixture runs against the in-memory store, so no Redis server is needed.
"""
import os

# Must happen before any zanile import so the default settings never dial Redis
os.environ["REDIS_URL"] = "memory://"
os.environ.setdefault("DEFAULT_TTL_SECONDS", "0")

import pytest
from fastapi.testclient import TestClient

from zanile.config import Settings
from zanile.database import InMemoryStore, NoteStore
from zanile.main import create_app
from zanile.notes import NoteService


@pytest.fixture
def settings():
    """Settings with defaults: no TTL, 100000-byte limit, no public domain."""
    return Settings(
        redis_url="memory://",
        note_key_prefix="note:",
        default_ttl_seconds=0,
        max_bytes=100000,
        app_domain="",
        debug=False,
    )


@pytest.fixture
def memory_store():
    return NoteStore(InMemoryStore(), key_prefix="note:", using_fallback=True)


@pytest.fixture
def note_service(memory_store, settings):
    return NoteService(memory_store, settings)


@pytest.fixture
def make_client(memory_store, settings):
    """Factory for a TestClient; pass settings/store to override the defaults."""

    def _make(app_settings=None, store=None):
        app = create_app(app_settings or settings, store or memory_store)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()

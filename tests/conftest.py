"""
Shared fixtures for song manager tests.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest
from httpx import ASGITransport, AsyncClient

from song_manager.api import routes
from song_manager.main import create_app
from song_manager.models.song_model import Song
from song_manager.services.song_store import SongStore

_BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_song() -> Callable[..., Song]:
    """Build Song records with predictable ids and sensible defaults."""
    counter = itertools.count(1)

    def _make(**overrides) -> Song:
        n = next(counter)
        created = _BASE_TIME + timedelta(minutes=n)
        fields = {
            "id": f"song-{n}",
            "title": f"Song {n}",
            "artist": f"Artist {n}",
            "album": f"Album {n}",
            "year": 1990,
            "duration": 200,
            "genre": "Rock",
            "created_at": created,
            "updated_at": created,
        }
        fields.update(overrides)
        return Song(**fields)

    return _make


@pytest.fixture
def store() -> SongStore:
    return SongStore()


@pytest.fixture
async def client(store: SongStore) -> AsyncClient:
    """Async HTTP client bound to an app whose routes use ``store``."""
    app = create_app()
    routes.song_store = store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    routes.song_store = None

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from song_manager.models.query_model import PaginatedSongs, SongQuery
from song_manager.models.song_model import Song, SongPayload
from song_manager.services.query_engine import run_query

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_song(payload: SongPayload) -> Song:
    now = _utcnow()
    return Song(
        id=str(uuid.uuid4()),
        created_at=now,
        updated_at=now,
        **payload.model_dump(),
    )


class SongStore:
    """
    In-memory, order-preserving song collection.

    One lock guards every mutation and every snapshot read; queries run on
    the snapshot after the lock is released.
    """

    def __init__(self, songs: Optional[Iterable[Song]] = None):
        self._lock = threading.Lock()
        self._songs: list[Song] = list(songs or [])

    def __len__(self) -> int:
        with self._lock:
            return len(self._songs)

    def load(self, songs: Iterable[Song]) -> None:
        with self._lock:
            self._songs = list(songs)
        logger.info(f"Loaded {len(self._songs)} songs into store")

    def snapshot(self) -> list[Song]:
        with self._lock:
            return list(self._songs)

    def get(self, song_id: str) -> Optional[Song]:
        with self._lock:
            return next((s for s in self._songs if s.id == song_id), None)

    def create(self, payload: SongPayload) -> Song:
        song = new_song(payload)
        with self._lock:
            self._songs.insert(0, song)
        logger.info(f"Created song {song.id} ({song.title!r} by {song.artist!r})")
        return song

    def update(self, song_id: str, payload: SongPayload) -> Optional[Song]:
        with self._lock:
            index = self._index_of(song_id)
            if index is None:
                return None
            updated = self._songs[index].model_copy(
                update={**payload.model_dump(), "updated_at": _utcnow()}
            )
            self._songs[index] = updated
        logger.info(f"Updated song {song_id}")
        return updated

    def delete(self, song_id: str) -> bool:
        with self._lock:
            index = self._index_of(song_id)
            if index is None:
                return False
            del self._songs[index]
        logger.info(f"Deleted song {song_id}")
        return True

    def query(self, query: SongQuery) -> PaginatedSongs:
        return run_query(self.snapshot(), query)

    def _index_of(self, song_id: str) -> Optional[int]:
        # caller holds the lock
        for index, song in enumerate(self._songs):
            if song.id == song_id:
                return index
        return None

"""
Tests for song_manager.services.song_store.
"""

from __future__ import annotations

import threading

from song_manager.models.query_model import SongQuery
from song_manager.models.song_model import SongPayload
from song_manager.services.song_store import SongStore


def _payload(**overrides) -> SongPayload:
    fields = {
        "title": "Hey Jude",
        "artist": "The Beatles",
        "album": "Hey Jude",
        "year": 1968,
        "duration": 431,
        "genre": "Rock",
    }
    fields.update(overrides)
    return SongPayload(**fields)


class TestCreate:
    def test_create_assigns_id_and_timestamps(self, store: SongStore) -> None:
        song = store.create(_payload())

        assert song.id
        assert song.created_at == song.updated_at
        assert song.created_at.tzinfo is not None
        assert store.get(song.id) == song

    def test_new_songs_are_prepended(self, store: SongStore) -> None:
        first = store.create(_payload(title="First"))
        second = store.create(_payload(title="Second"))

        assert [s.id for s in store.snapshot()] == [second.id, first.id]

    def test_ids_are_unique(self, store: SongStore) -> None:
        ids = {store.create(_payload()).id for _ in range(50)}
        assert len(ids) == 50

    def test_created_song_is_found_by_title_search(self, store: SongStore) -> None:
        for i in range(5):
            store.create(_payload(title=f"Filler {i}"))
        song = store.create(_payload(title="Purple Haze"))

        result = store.query(SongQuery(search="Purple Haze"))

        assert song in result.data


class TestUpdate:
    def test_update_replaces_fields_and_refreshes_updated_at(self, store: SongStore) -> None:
        original = store.create(_payload())

        updated = store.update(original.id, _payload(title="Let It Be", year=1970))

        assert updated is not None
        assert updated.id == original.id
        assert updated.created_at == original.created_at
        assert updated.updated_at >= original.updated_at
        assert updated.title == "Let It Be"
        assert updated.year == 1970
        assert store.get(original.id) == updated

    def test_update_keeps_position(self, store: SongStore) -> None:
        a = store.create(_payload(title="A"))
        b = store.create(_payload(title="B"))

        store.update(a.id, _payload(title="A2"))

        assert [s.id for s in store.snapshot()] == [b.id, a.id]

    def test_update_missing_returns_none(self, store: SongStore) -> None:
        assert store.update("missing", _payload()) is None


class TestDelete:
    def test_delete_removes_song(self, store: SongStore) -> None:
        song = store.create(_payload())

        assert store.delete(song.id) is True
        assert store.get(song.id) is None
        assert len(store) == 0

    def test_delete_missing_returns_false(self, store: SongStore) -> None:
        assert store.delete("missing") is False


class TestSnapshot:
    def test_snapshot_is_a_copy(self, store: SongStore) -> None:
        store.create(_payload())
        snapshot = store.snapshot()
        snapshot.clear()

        assert len(store) == 1

    def test_load_replaces_collection(self, store: SongStore, make_song) -> None:
        store.create(_payload())
        songs = [make_song(), make_song()]

        store.load(songs)

        assert store.snapshot() == songs

    def test_get_missing_returns_none(self, store: SongStore) -> None:
        assert store.get("nope") is None

    def test_concurrent_creates_are_all_recorded(self, store: SongStore) -> None:
        workers = 8

        def create_many() -> None:
            for i in range(25):
                store.create(_payload(title=f"t{i}"))

        threads = [threading.Thread(target=create_many) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == workers * 25
        assert len({s.id for s in store.snapshot()}) == workers * 25

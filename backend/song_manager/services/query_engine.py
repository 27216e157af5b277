"""
Filter, sort and paginate a song collection.

The engine is a pure function over a snapshot: it never reorders or mutates
the sequence it is given, and it expects a query that was already validated
at the API boundary.
"""
import math
import unicodedata
from typing import Any, Callable, Sequence

from song_manager.models.query_model import PaginatedSongs, SongQuery
from song_manager.models.song_model import Song

TEXT_FIELDS = ("title", "artist", "album", "genre")
NUMERIC_FIELDS = ("year", "duration")


# Letters NFKD leaves whole, folded to the base letters they sort with
PRIMARY_FOLDS = str.maketrans({
    "æ": "ae",
    "œ": "oe",
    "ø": "o",
    "ł": "l",
    "đ": "d",
    "ð": "d",
    "þ": "th",
    "ħ": "h",
    "ı": "i",
})

SYMBOL_WEIGHT, DIGIT_WEIGHT, LETTER_WEIGHT = 0, 1, 2


def _char_weight(ch: str) -> int:
    if ch.isdigit():
        return DIGIT_WEIGHT
    if ch.isalpha():
        return LETTER_WEIGHT
    return SYMBOL_WEIGHT


def _primary_key(value: str) -> tuple[tuple[int, str], ...]:
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    folded = base.casefold().translate(PRIMARY_FOLDS)
    return tuple((_char_weight(ch), ch) for ch in folded)


def collation_key(value: str) -> tuple:
    """
    Locale-style sort key: compare base letters first (ignoring accents and
    case, with spaces, punctuation and symbols before digits before letters),
    then accents, then case with lowercase before uppercase.
    """
    return _primary_key(value), value.casefold(), value.swapcase()


def _sort_key(sort_by: str) -> Callable[[Song], Any]:
    if sort_by in TEXT_FIELDS:
        return lambda song: collation_key(getattr(song, sort_by))
    if sort_by in NUMERIC_FIELDS:
        return lambda song: getattr(song, sort_by)
    raise ValueError(f"Unsupported sort field: {sort_by}")


def matches_search(song: Song, search: str) -> bool:
    needle = search.casefold()
    return (
        needle in song.title.casefold()
        or needle in song.artist.casefold()
        or needle in song.album.casefold()
    )


def run_query(songs: Sequence[Song], query: SongQuery) -> PaginatedSongs:
    filtered = list(songs)

    if query.search:
        filtered = [song for song in filtered if matches_search(song, query.search)]

    if query.genre:
        filtered = [song for song in filtered if song.genre == query.genre]

    # sorted() is stable in both directions, ties keep their filtered order
    filtered = sorted(
        filtered,
        key=_sort_key(query.sort_by),
        reverse=query.sort_order == "desc",
    )

    total = len(filtered)
    start = (query.page - 1) * query.limit
    end = start + query.limit

    return PaginatedSongs(
        data=filtered[start:end],
        total=total,
        page=query.page,
        limit=query.limit,
        total_pages=math.ceil(total / query.limit),
    )

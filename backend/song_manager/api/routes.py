from fastapi import APIRouter, HTTPException, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from datetime import datetime, timezone
from pydantic import ValidationError
from typing import Optional
import time
import logging
from song_manager.config import settings
from song_manager.models.health_model import HealthResponse
from song_manager.models.query_model import PaginatedSongs, SongQuery
from song_manager.models.song_model import GenresResponse, Song, SongPayload
from song_manager.services.song_store import SongStore

logger = logging.getLogger(__name__)

router = APIRouter()

song_store: Optional[SongStore] = None
started_at: float = time.monotonic()

SONG_NOT_FOUND = "Song not found"
INTERNAL_ERROR = "Internal server error"


def get_song_store() -> SongStore:
    if song_store is None:
        raise HTTPException(status_code=503, detail="Song store not initialized")
    return song_store


def get_song_query(request: Request) -> SongQuery:
    """Validate listing query params against SongQuery (page, limit, sortBy, ...)"""
    try:
        return SongQuery.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("query", *error["loc"])} for error in e.errors()]
        )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="OK" if song_store is not None else "unavailable",
        timestamp=datetime.now(timezone.utc),
        uptime=round(time.monotonic() - started_at, 3),
        environment=settings.ENVIRONMENT,
        song_count=len(song_store) if song_store is not None else 0,
        backend_version=settings.API_VERSION,
    )


@router.get("/api/songs", response_model=PaginatedSongs)
async def list_songs(
    query: SongQuery = Depends(get_song_query),
    store: SongStore = Depends(get_song_store),
):
    try:
        result = store.query(query)
        logger.info(
            f"Listed songs page={query.page} limit={query.limit} sortBy={query.sort_by} "
            f"sortOrder={query.sort_order}: {len(result.data)}/{result.total}"
        )
        return result

    except Exception as e:
        logger.error(f"Error fetching songs: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.get("/api/songs/{song_id}", response_model=Song)
async def get_song(song_id: str, store: SongStore = Depends(get_song_store)):
    try:
        song = store.get(song_id)
    except Exception as e:
        logger.error(f"Error fetching song: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if song is None:
        raise HTTPException(status_code=404, detail=SONG_NOT_FOUND)
    return song


@router.post("/api/songs", response_model=Song, status_code=201)
async def create_song(payload: SongPayload, store: SongStore = Depends(get_song_store)):
    try:
        return store.create(payload)
    except Exception as e:
        logger.error(f"Error creating song: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.put("/api/songs/{song_id}", response_model=Song)
async def update_song(
    song_id: str,
    payload: SongPayload,
    store: SongStore = Depends(get_song_store),
):
    try:
        song = store.update(song_id, payload)
    except Exception as e:
        logger.error(f"Error updating song: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if song is None:
        raise HTTPException(status_code=404, detail=SONG_NOT_FOUND)
    return song


@router.delete("/api/songs/{song_id}", status_code=204)
async def delete_song(song_id: str, store: SongStore = Depends(get_song_store)):
    try:
        deleted = store.delete(song_id)
    except Exception as e:
        logger.error(f"Error deleting song: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if not deleted:
        raise HTTPException(status_code=404, detail=SONG_NOT_FOUND)
    return Response(status_code=204)


@router.get("/api/genres", response_model=GenresResponse)
async def list_genres():
    try:
        return GenresResponse(genres=settings.GENRES)
    except Exception as e:
        logger.error(f"Error fetching genres: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

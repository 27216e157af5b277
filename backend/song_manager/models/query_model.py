from typing import Literal
from pydantic import Field

from song_manager.config import settings
from song_manager.models.song_model import CamelModel, Song

SortField = Literal["title", "artist", "album", "year", "genre", "duration"]
SortOrder = Literal["asc", "desc"]


class SongQuery(CamelModel):
    page: int = Field(1, ge=1, description="1-based page number")
    limit: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size")
    search: str = Field("", description="Case-insensitive substring of title, artist or album")
    genre: str = Field("", description="Exact genre match")
    sort_by: SortField = "title"
    sort_order: SortOrder = "asc"


class PaginatedSongs(CamelModel):
    data: list[Song]
    total: int = Field(..., description="Number of matches before pagination")
    page: int
    limit: int
    total_pages: int

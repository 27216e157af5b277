from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from song_manager.config import settings


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (createdAt, totalPages, ...)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SongPayload(CamelModel):
    """Request body for creating or replacing a song"""
    title: str = Field(..., description="Song title")
    artist: str = Field(..., description="Performing artist")
    album: str = Field(..., description="Album the song appears on")
    year: int = Field(..., description="Release year")
    duration: int = Field(..., description="Duration in seconds")
    genre: str = Field(..., description="Genre label")

    @field_validator("title", "artist", "album", "genre")
    @classmethod
    def strip_required_text(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return value

    @field_validator("year", "duration", mode="before")
    @classmethod
    def reject_bool(cls, value, info):
        if isinstance(value, bool):
            raise ValueError(f"{info.field_name.capitalize()} must be an integer")
        return value

    @field_validator("year")
    @classmethod
    def check_year(cls, value: int) -> int:
        max_year = datetime.now(timezone.utc).year + 1
        if not settings.MIN_YEAR <= value <= max_year:
            raise ValueError("Year must be a valid year")
        return value

    @field_validator("duration")
    @classmethod
    def check_duration(cls, value: int) -> int:
        if not 1 <= value <= settings.MAX_DURATION:
            raise ValueError(f"Duration must be between 1 and {settings.MAX_DURATION} seconds")
        return value


class Song(CamelModel):
    id: str = Field(..., description="Unique song identifier")
    title: str
    artist: str
    album: str
    year: int
    duration: int = Field(..., description="Duration in seconds")
    genre: str
    created_at: datetime
    updated_at: datetime


class GenresResponse(BaseModel):
    genres: list[str]

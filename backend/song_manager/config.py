from pydantic_settings import BaseSettings
import os

# Get project root dynamically (3 levels up from this file: backend/song_manager/config.py -> project)
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

class Settings(BaseSettings):

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    API_TITLE: str = "Song Manager API"
    API_VERSION: str = "1.0.0"

    # Paths - relative to PROJECT_ROOT unless absolute
    PROJECT_ROOT: str = _PROJECT_ROOT
    SEED_CSV_PATH: str = os.path.join(_PROJECT_ROOT, "data", "songs.csv")

    # Catalog configuration
    GENRES: list[str] = [
        "Rock",
        "Pop",
        "Jazz",
        "Classical",
        "Hip-Hop",
        "Electronic",
        "Country",
        "R&B",
    ]
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    MIN_YEAR: int = 1000
    MAX_DURATION: int = 3600  # seconds

    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()

from datetime import datetime

from song_manager.models.song_model import CamelModel


class HealthResponse(CamelModel):
    """Health check response model"""
    status: str
    timestamp: datetime
    uptime: float
    environment: str
    song_count: int
    backend_version: str = "1.0.0"

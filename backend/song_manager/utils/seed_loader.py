import os
import logging

import pandas as pd
from pydantic import ValidationError

from song_manager.models.song_model import Song, SongPayload
from song_manager.services.song_store import new_song

logger = logging.getLogger(__name__)

SEED_COLUMNS = ["title", "artist", "album", "year", "duration", "genre"]


def load_seed_songs(csv_path: str) -> list[Song]:
    """Read seed songs from a CSV file, keeping file order."""
    if not os.path.exists(csv_path):
        logger.warning(f"Seed CSV not found at {csv_path}")
        return []

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    missing = [c for c in SEED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Seed CSV {csv_path} is missing columns: {', '.join(missing)}")

    songs = []
    for row_number, row in enumerate(df[SEED_COLUMNS].to_dict(orient="records"), start=2):
        try:
            songs.append(new_song(SongPayload(**row)))
        except ValidationError as e:
            logger.warning(f"Skipping invalid seed row {row_number}: {e.error_count()} error(s)")
            continue

    logger.info(f"Loaded {len(songs)} seed songs from {csv_path}")
    return songs

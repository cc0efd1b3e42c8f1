import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()


def _split_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment."""
    cors_origins: List[str]
    log_level: str
    max_games: int


def load_settings() -> Settings:
    max_games = os.getenv("TTT_MAX_GAMES", "100")
    try:
        max_games_value = int(max_games)
    except ValueError:
        raise ValueError("TTT_MAX_GAMES must be an integer, got %r" % max_games) from None
    if max_games_value < 0:
        raise ValueError("TTT_MAX_GAMES must not be negative")
    log_level = os.getenv("TTT_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError("TTT_LOG_LEVEL must be a logging level name, got %r" % log_level)
    return Settings(
        cors_origins=_split_origins(os.getenv("TTT_CORS_ORIGINS", "*")),
        log_level=log_level,
        max_games=max_games_value,
    )


# PUBLIC_INTERFACE
@lru_cache()
def get_settings() -> Settings:
    """Settings for this process, read once."""
    return load_settings()

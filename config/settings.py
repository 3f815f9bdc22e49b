"""
Library settings loaded from environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic_settings import BaseSettings

# Find repo root (parent of config directory)
_REPO_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _REPO_ROOT / ".env"


class Settings(BaseSettings):
    """Library settings.

    Every field maps to an environment variable prefixed with
    ``TRUNCATE_HTML_`` (e.g. ``TRUNCATE_HTML_ELLIPSIS``). The truncation
    fields seed the process-wide defaults that ``truncation.setup`` mutates.
    """

    # Truncation defaults
    length: Optional[int] = None
    strip_tags: bool = False
    ellipsis: str = "..."
    decode_entities: bool = False
    by_words: bool = False
    reserve_last_word: Union[bool, int] = False
    trim_the_only_word: bool = False
    keep_whitespaces: bool = False

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "TRUNCATE_HTML_"
        env_file = str(_ENV_FILE)
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

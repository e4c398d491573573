import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv(".env.local")

GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_LOG_LEVEL = "INFO"


def _log_level(value):
    level = (value or DEFAULT_LOG_LEVEL).upper()
    # getLevelName returns "Level X" for names logging does not know.
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    model: str = GEMINI_MODEL
    base_url: str = GEMINI_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        return cls(
            # An empty value in the dashboard is the same as no value.
            gemini_api_key=environ.get("GEMINI_API_KEY") or None,
            log_level=_log_level(environ.get("LOG_LEVEL")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    return Settings.from_env()

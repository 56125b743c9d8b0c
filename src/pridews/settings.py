"""Configuration helpers for the PRIDE Archive client."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_BASE_URL = "https://www.ebi.ac.uk/pride/ws/archive"


class Settings(BaseModel):
    """Runtime configuration loaded from env vars with sensible defaults."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    search_query_param: str = "query"
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv()
        return cls(
            base_url=os.environ.get("PRIDE_WS_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.environ.get("PRIDE_WS_TIMEOUT", "30")),
            search_query_param=os.environ.get("PRIDE_WS_QUERY_PARAM", "query"),
            log_level=os.environ.get("PRIDE_WS_LOG_LEVEL", "INFO"),
        )


def get_settings() -> Settings:
    """Convenience accessor for lazy modules."""
    return Settings.load()

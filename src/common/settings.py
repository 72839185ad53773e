"""Application-wide settings helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_json: bool = True
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    regex_max_length: Optional[int] = None  # sem limite por padrão


def _parse_int(raw: Optional[str], default: Optional[int]) -> Optional[int]:
    if raw is None or not raw.strip():
        return default
    try:
        return max(int(raw), 0)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    log_level = os.getenv("LOG_LEVEL", Settings.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = Settings.log_level

    return Settings(
        log_json=os.getenv("LOG_JSON", "true").lower() == "true",
        log_level=log_level,
        api_host=os.getenv("API_HOST", Settings.api_host),
        api_port=_parse_int(os.getenv("API_PORT"), Settings.api_port) or Settings.api_port,
        regex_max_length=_parse_int(os.getenv("MASK_REGEX_MAX_LENGTH"), None),
    )

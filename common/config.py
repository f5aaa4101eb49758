# common/config.py
"""
Runtime settings read from the environment.

`main.py` loads a `.env` file first (python-dotenv, without overriding real
environment variables), so every value below can be set either way. Values
are read when `load_settings()` is called, not at import time.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Tuple

from common.constants import DEFAULT_SOURCE, DEFAULT_DELIMITER


@dataclass(frozen=True)
class Settings:
    source: str
    delimiter: str
    log_level: str
    http_timeout: Tuple[float, float]   # (connect, read) seconds


def load_settings() -> Settings:
    return Settings(
        source=os.getenv("MATCHES_CSV_SOURCE", DEFAULT_SOURCE),
        delimiter=os.getenv("MATCHES_CSV_DELIMITER", DEFAULT_DELIMITER),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        http_timeout=(
            float(os.getenv("HTTP_CONNECT_TIMEOUT", "10")),
            float(os.getenv("HTTP_READ_TIMEOUT", "20")),
        ),
    )

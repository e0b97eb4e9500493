from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

from dotenv import find_dotenv, load_dotenv

DEFAULT_LINK_ENDPOINT = "https://link-checker.nordvpn.com/v1/public-url-checker/check-url"
DEFAULT_FILE_ENDPOINT = "https://file-checker.nordvpn.com/v1/public-filehash-checker/check"
REQUEST_TIMEOUT_SECONDS = 30.0

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _read_endpoint(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"{name} must be an http(s) URL, got {value!r}")
    return value


def _read_log_level(name: str, default: str) -> str:
    value = os.getenv(name, "").strip().upper() or default
    if value not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
    return value


@dataclass(frozen=True)
class Settings:
    link_endpoint: str = DEFAULT_LINK_ENDPOINT
    file_endpoint: str = DEFAULT_FILE_ENDPOINT
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    log_level: str = "WARNING"


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        link_endpoint=_read_endpoint("NORTHCHECK_LINK_ENDPOINT", DEFAULT_LINK_ENDPOINT),
        file_endpoint=_read_endpoint("NORTHCHECK_FILE_ENDPOINT", DEFAULT_FILE_ENDPOINT),
        log_level=_read_log_level("LOG_LEVEL", "WARNING"),
    )

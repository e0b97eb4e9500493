from __future__ import annotations

import sys
from enum import Enum


class Platform(str, Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    OTHER = "other"


_USER_AGENTS: dict[Platform, str] = {
    Platform.WINDOWS: (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/138.0.0.0 Safari/537.36"
    ),
    Platform.MACOS: (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/138.0.0.0 Safari/537.36"
    ),
    Platform.OTHER: (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/138.0.0.0 Safari/537.36"
    ),
}


def platform_family(platform: str | None = None) -> Platform:
    name = sys.platform if platform is None else platform
    if name.startswith("win"):
        return Platform.WINDOWS
    if name == "darwin":
        return Platform.MACOS
    return Platform.OTHER


def user_agent(platform: str | None = None) -> str:
    """Browser user agent matching the running OS; the checkers reject bare clients."""
    return _USER_AGENTS[platform_family(platform)]

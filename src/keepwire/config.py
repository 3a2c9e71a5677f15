from __future__ import annotations

import datetime
import logging
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Zone used when deriving reminder times; empty means the local zone.
TIMEZONE_ENV = "KEEPWIRE_TIMEZONE"
LOG_LEVEL_ENV = "KEEPWIRE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def reminder_timezone() -> Optional[datetime.tzinfo]:
    """Configured zone, or None to follow the local zone's rules per date."""
    name = get_env(TIMEZONE_ENV)
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"{TIMEZONE_ENV}={name!r} is not a known time zone") from None


def log_level() -> str:
    level = get_env(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{LOG_LEVEL_ENV}={level!r} is not a logging level")
    return level

from __future__ import annotations

import datetime
import re
from typing import Any, Optional

from keepwire.exc import MalformedTimestamp, UnencodableValue

# The service writes the epoch instead of null for times that were never set.
SENTINEL = "1970-01-01T00:00:00.000Z"

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

TS_FMT = "%Y-%m-%dT%H:%M:%S.%fZ"

_TS_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", re.ASCII)


def is_unset(value: Optional[datetime.datetime]) -> bool:
    """True for None and for any datetime naming the epoch instant."""
    if value is None:
        return True
    return _to_utc(value) == EPOCH


def _to_utc(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def encode(value: Optional[datetime.datetime]) -> str:
    """Format a time for the wire.

    Naive datetimes are taken to be UTC. Precision below a millisecond is
    truncated.
    """
    if value is None:
        return SENTINEL
    try:
        utc = _to_utc(value)
    except OverflowError:
        raise UnencodableValue("Timestamp", value) from None
    if utc == EPOCH:
        return SENTINEL
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}Z"
    )


def decode(raw: Any) -> Optional[datetime.datetime]:
    """Parse a wire time; the sentinel decodes to None."""
    if raw == SENTINEL:
        return None
    if not isinstance(raw, str) or not _TS_RE.fullmatch(raw):
        raise MalformedTimestamp(raw)
    try:
        parsed = datetime.datetime.strptime(raw, TS_FMT)
    except ValueError:
        raise MalformedTimestamp(raw) from None
    return parsed.replace(tzinfo=datetime.timezone.utc)

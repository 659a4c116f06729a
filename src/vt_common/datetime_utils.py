"""Datetime utilities: UTC now and reference-zone lookup."""

from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


@lru_cache(maxsize=8)
def get_zone(name: str) -> ZoneInfo:
    """Resolve an IANA zone name once; raises ZoneInfoNotFoundError on typos."""
    return ZoneInfo(name)

"""Clock helpers bound to the portal's configured timezone."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from portal.config import get_settings

FALLBACK_TIMEZONE = "Asia/Jakarta"

# Fixed offsets such as "UTC+7", "UTC-03:30" or "GMT+0700".
_FIXED_OFFSET = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_timezone(name: str) -> tzinfo:
    """Turn an ``APP_TIMEZONE`` value into a ``tzinfo``.

    Unknown names resolve to :data:`FALLBACK_TIMEZONE`.
    """

    name = name.strip() or FALLBACK_TIMEZONE
    offset = _FIXED_OFFSET.match(name)
    if offset:
        delta = timedelta(hours=int(offset["hours"]), minutes=int(offset["minutes"] or 0))
        return timezone(-delta if offset["sign"] == "-" else delta)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo(FALLBACK_TIMEZONE)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    return parse_timezone(get_settings().app_timezone or "")


def now_in_app_timezone() -> datetime:
    """Return the current time in the application timezone."""

    return datetime.now(tz=get_app_timezone())

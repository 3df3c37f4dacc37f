# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Date parsing and pattern based formatting.
"""

import math
from datetime import date, datetime, time, tzinfo
from typing import Optional, Union

from ..config import get_config
from ..errors import InvalidDateError

DateInput = Union[datetime, date, int, float, str]

_PARSE_FORMATS = [
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
]


def _from_timestamp(value: Union[int, float], tz: Optional[tzinfo]) -> datetime:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidDateError(value)
    try:
        return datetime.fromtimestamp(value, tz)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(value, cause=e)


def _parse_time_string(time_str: str) -> datetime:
    """Parse a time string in various formats."""
    time_str = time_str.strip()

    # Try ISO format first
    try:
        return datetime.fromisoformat(time_str.replace('Z', '+00:00'))
    except ValueError:
        pass

    for fmt in _PARSE_FORMATS:
        try:
            return datetime.strptime(time_str, fmt)
        except ValueError:
            continue

    raise InvalidDateError(time_str)


def parse_date(value: DateInput, tz: Optional[tzinfo] = None) -> datetime:
    """
    Interpret ``value`` as a datetime.

    Accepts datetimes, dates (at midnight), POSIX timestamps in seconds and
    strings in ISO 8601 or common ``YYYY-MM-DD`` / ``MM/DD/YYYY`` layouts.
    ``tz`` only applies to timestamps.

    Raises:
        InvalidDateError: If the value cannot be interpreted.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, bool):
        raise InvalidDateError(value)
    if isinstance(value, (int, float)):
        return _from_timestamp(value, tz)
    if isinstance(value, str):
        return _parse_time_string(value)
    raise InvalidDateError(value)


def format_time(value: DateInput, fmt: Optional[str] = None,
                tz: Optional[tzinfo] = None) -> str:
    """
    Format a date using ``yyyy``/``MM``/``dd``/``hh``/``mm``/``ss`` placeholders.

    Args:
        value: datetime, date, POSIX timestamp (seconds) or parseable string
        fmt: Pattern, default ``Config.date_format`` ("yyyy-MM-dd")
        tz: Zone used for timestamps and to convert aware datetimes;
            local time when omitted

    Time placeholders are only substituted when the pattern has a time part,
    i.e. contains a space. Anything else in the pattern is kept literally.

    Example:
        format_time(1640995200, tz=timezone.utc) -> "2022-01-01"
        format_time(datetime(2022, 1, 1, 12, 30, 45), "yyyy-MM-dd hh:mm:ss")
            -> "2022-01-01 12:30:45"

    Raises:
        InvalidDateError: If the value cannot be interpreted as a date.
    """
    if fmt is None:
        fmt = get_config().date_format

    moment = parse_date(value, tz)
    if tz is not None and moment.tzinfo is not None:
        moment = moment.astimezone(tz)

    formatted = (
        fmt.replace("yyyy", str(moment.year))
        .replace("MM", f"{moment.month:02d}")
        .replace("dd", f"{moment.day:02d}")
    )
    if len(fmt.split(" ")) > 1:
        formatted = (
            formatted.replace("hh", f"{moment.hour:02d}")
            .replace("mm", f"{moment.minute:02d}")
            .replace("ss", f"{moment.second:02d}")
        )
    return formatted

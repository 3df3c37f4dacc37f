# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Calendar helpers: month, year and week boundaries, leap years and zodiac years.

Functions that default to "now" accept an explicit ``today`` so results are
reproducible. Boundary helpers return strings formatted with format_time.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import List, Optional

from ..errors import InvalidDateError
from .formatting import DateInput, format_time, parse_date

ZODIAC_BASE_YEAR = 1900  # a year of the rat

ZODIAC_ANIMALS = {
    "zh": ["鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪"],
    "en": ["Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
           "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig"],
}


def _resolve_day(today: Optional[DateInput]) -> date:
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return today.date()
    if isinstance(today, date):
        return today
    return parse_date(today).date()


def _resolve_year(value: Optional[DateInput]) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return _resolve_day(value).year


def first_day_of_month(today: Optional[DateInput] = None, fmt: Optional[str] = None) -> str:
    """First day of the current month."""
    day = _resolve_day(today)
    return format_time(day.replace(day=1), fmt)


def last_day_of_month(today: Optional[DateInput] = None, fmt: Optional[str] = None) -> str:
    """Last day of the current month."""
    day = _resolve_day(today)
    return format_time(day.replace(day=calendar.monthrange(day.year, day.month)[1]), fmt)


def first_day_of_year(today: Optional[DateInput] = None, fmt: Optional[str] = None) -> str:
    """January 1st of the current year."""
    return format_time(date(_resolve_day(today).year, 1, 1), fmt)


def last_day_of_year(today: Optional[DateInput] = None, fmt: Optional[str] = None) -> str:
    """December 31st of the current year."""
    return format_time(date(_resolve_day(today).year, 12, 31), fmt)


def week_days(today: Optional[DateInput] = None, fmt: Optional[str] = None) -> List[str]:
    """
    All seven days of the current week, Monday first.

    Sunday belongs to the week that started on the previous Monday.
    """
    day = _resolve_day(today)
    monday = day - timedelta(days=day.weekday())
    return [format_time(monday + timedelta(days=offset), fmt) for offset in range(7)]


def first_day_of_week(today: Optional[DateInput] = None, fmt: Optional[str] = None) -> str:
    """Monday of the current week."""
    return week_days(today, fmt)[0]


def last_day_of_week(today: Optional[DateInput] = None, fmt: Optional[str] = None) -> str:
    """Sunday of the current week."""
    return week_days(today, fmt)[6]


def total_days_of_month(value: Optional[DateInput] = None) -> int:
    """
    Number of days in the month containing ``value`` (default: today).

    Raises:
        InvalidDateError: If ``value`` cannot be parsed.
    """
    day = _resolve_day(value)
    return calendar.monthrange(day.year, day.month)[1]


def is_leap_year(value: Optional[DateInput] = None) -> bool:
    """
    Whether the year of ``value`` (default: today) is a Gregorian leap year.

    An ``int`` is taken as the year itself. Values that cannot be parsed
    give False.
    """
    try:
        year = _resolve_year(value)
    except InvalidDateError:
        return False
    return calendar.isleap(year)


def animal_of_year(value: Optional[DateInput] = None, lang: str = "zh") -> str:
    """
    Chinese zodiac animal for the year of ``value`` (default: today).

    Args:
        value: Date-like value, or an ``int`` year
        lang: "zh" for the traditional characters, "en" for English names

    Raises:
        InvalidDateError: If ``value`` cannot be parsed.
        ValueError: If ``lang`` is not supported.
    """
    animals = ZODIAC_ANIMALS.get(lang)
    if animals is None:
        raise ValueError(f"Unsupported language: {lang}")
    year = _resolve_year(value)
    return animals[(year - ZODIAC_BASE_YEAR) % 12]

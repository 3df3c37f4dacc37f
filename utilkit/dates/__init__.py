# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Date utilities for utilkit.

This package includes:
- Pattern based formatting and tolerant parsing
- Month, year and week boundary helpers
- Day counts, leap year checks and zodiac year lookup
"""

from .formatting import format_time, parse_date
from .periods import (
    first_day_of_month, last_day_of_month,
    first_day_of_year, last_day_of_year,
    week_days, first_day_of_week, last_day_of_week,
    total_days_of_month, is_leap_year, animal_of_year,
    ZODIAC_ANIMALS
)

__all__ = [
    # Formatting
    'format_time', 'parse_date',

    # Boundaries
    'first_day_of_month', 'last_day_of_month',
    'first_day_of_year', 'last_day_of_year',
    'week_days', 'first_day_of_week', 'last_day_of_week',

    # Calendar facts
    'total_days_of_month', 'is_leap_year', 'animal_of_year',
    'ZODIAC_ANIMALS'
]

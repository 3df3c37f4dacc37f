# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
utilkit Python Package

Small general purpose helpers: deep cloning, kind detection, debounce and
throttle decorators, string case conversion, calendar helpers and a JSON-aware
key/value storage wrapper.
"""

__version__ = "1.0.0"
__author__ = "Mauricio Fernandez"
__email__ = "mauricio.fernandez@siemens.com"

from .clone import deep_clone, IdentityMap
from .types import Kind, Symbol, type_of, is_type
from .common import (
    debounce,
    throttle,
    path_to_camel,
    camel_to_snake,
    snake_to_camel,
    camel_to_kebab,
    kebab_to_camel,
)
from .dates import (
    format_time,
    parse_date,
    first_day_of_month,
    last_day_of_month,
    first_day_of_year,
    last_day_of_year,
    week_days,
    first_day_of_week,
    last_day_of_week,
    total_days_of_month,
    is_leap_year,
    animal_of_year,
)
from .store import (
    Storage,
    use_storage,
    use_session_storage,
    use_local_storage,
)
from .config import Config, get_config, set_config
from .errors import (
    UtilKitError,
    UnsupportedKindError,
    UnknownKindError,
    InvalidDateError,
    StorageError,
    ConfigError,
)

__all__ = [
    "deep_clone",
    "IdentityMap",
    "Kind",
    "Symbol",
    "type_of",
    "is_type",
    "debounce",
    "throttle",
    "path_to_camel",
    "camel_to_snake",
    "snake_to_camel",
    "camel_to_kebab",
    "kebab_to_camel",
    "format_time",
    "parse_date",
    "first_day_of_month",
    "last_day_of_month",
    "first_day_of_year",
    "last_day_of_year",
    "week_days",
    "first_day_of_week",
    "last_day_of_week",
    "total_days_of_month",
    "is_leap_year",
    "animal_of_year",
    "Storage",
    "use_storage",
    "use_session_storage",
    "use_local_storage",
    "Config",
    "get_config",
    "set_config",
    "UtilKitError",
    "UnsupportedKindError",
    "UnknownKindError",
    "InvalidDateError",
    "StorageError",
    "ConfigError",
    "__version__",
]

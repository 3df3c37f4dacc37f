# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Common helpers for utilkit.

This package includes:
- debounce and throttle decorators for sync and async callables
- String case conversion helpers
"""

from .decorators import (
    # Rate limiting
    debounce, throttle
)

from .strings import (
    # Case conversion
    path_to_camel, camel_to_snake, snake_to_camel,
    camel_to_kebab, kebab_to_camel
)

__all__ = [
    # Decorators
    'debounce', 'throttle',

    # String operations
    'path_to_camel', 'camel_to_snake', 'snake_to_camel',
    'camel_to_kebab', 'kebab_to_camel'
]

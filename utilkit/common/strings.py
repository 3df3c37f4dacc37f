# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
String case conversion helpers.
"""

import re

_PATH_SEGMENT = re.compile(r'/(\w)')
_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def path_to_camel(path: str) -> str:
    """
    Convert a slash separated path to camel case.

    Every ``/`` followed by a word character is removed and the character is
    upper-cased; other characters are kept as-is.

    Example:
        path_to_camel("/user/list") -> "UserList"
        path_to_camel("api/get-data") -> "apiGet-data"
    """
    return _PATH_SEGMENT.sub(lambda m: m.group(1).upper(), path)


def camel_to_snake(text: str) -> str:
    """Convert ``camelCase`` or ``PascalCase`` to ``snake_case``."""
    return _CAMEL_BOUNDARY.sub('_', text).lower()


def snake_to_camel(text: str, upper: bool = False) -> str:
    """Convert ``snake_case`` to ``camelCase`` (or ``PascalCase`` with upper=True)."""
    words = [word for word in text.split('_') if word]
    if not words:
        return ''
    if upper:
        return ''.join(word[:1].upper() + word[1:] for word in words)
    return words[0].lower() + ''.join(word[:1].upper() + word[1:] for word in words[1:])


def camel_to_kebab(text: str) -> str:
    """Convert ``camelCase`` to ``kebab-case``."""
    return _CAMEL_BOUNDARY.sub('-', text).lower()


def kebab_to_camel(text: str, upper: bool = False) -> str:
    """Convert ``kebab-case`` to ``camelCase``."""
    return snake_to_camel(text.replace('-', '_'), upper=upper)

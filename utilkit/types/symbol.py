# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Unique, labelled tokens.
"""

from typing import Optional


class Symbol:
    """
    A process-unique token with an optional description.

    Two symbols are equal only if they are the same object, even when their
    descriptions match. Useful as dictionary keys or sentinels that must never
    collide with user data.
    """

    __slots__ = ("_description",)

    def __init__(self, description: Optional[str] = None):
        self._description = None if description is None else str(description)

    @property
    def description(self) -> Optional[str]:
        return self._description

    def __repr__(self) -> str:
        if self._description is None:
            return "Symbol()"
        return f"Symbol({self._description!r})"

    def __str__(self) -> str:
        return f"Symbol({self._description or ''})"

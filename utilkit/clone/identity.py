# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Identity-keyed mapping used as the visited set of a clone operation.
"""

from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, Tuple


class IdentityMap(MutableMapping):
    """
    Mapping keyed by object identity rather than equality.

    Keys do not need to be hashable. Each key is kept alive by the map so its
    ``id()`` cannot be reused by another object while the entry exists.
    """

    def __init__(self, items=None):
        self._data: Dict[int, Tuple[Any, Any]] = {}
        if items is not None:
            self.update(items)

    def __getitem__(self, key: Any) -> Any:
        try:
            return self._data[id(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[id(key)] = (key, value)

    def __delitem__(self, key: Any) -> None:
        try:
            del self._data[id(key)]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: Any) -> bool:
        return id(key) in self._data

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in list(self._data.values()))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"IdentityMap(<{len(self._data)} entries>)"

# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Deep cloning of arbitrary value graphs.

The clone preserves shared structure: two references to the same original
object resolve to the same cloned object, and reference cycles terminate.

Traversal is iterative. Each composite value is populated by a generator that
yields the members it needs cloned and receives their clones back, so the
depth of the input graph is bounded by memory rather than the interpreter's
recursion limit.
"""

import logging
import re
from collections import defaultdict
from datetime import date, datetime, time
from typing import Any, Generator, List, Optional, Tuple

from ..errors import UnsupportedKindError
from ..types import Kind, Symbol, type_of
from .identity import IdentityMap

logger = logging.getLogger(__name__)

# A populate step yields members to clone and returns the finished clone.
Populator = Generator[Any, Any, Any]


def _copy_date(value):
    """Build a new date/time/timedelta with the same fields."""
    cls = type(value)
    if isinstance(value, datetime):
        return cls(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second, value.microsecond,
            value.tzinfo, fold=value.fold,
        )
    if isinstance(value, date):
        return cls(value.year, value.month, value.day)
    if isinstance(value, time):
        return cls(
            value.hour, value.minute, value.second, value.microsecond,
            value.tzinfo, fold=value.fold,
        )
    return cls(days=value.days, seconds=value.seconds, microseconds=value.microseconds)


def _empty_map(value):
    if type(value) is defaultdict:
        return defaultdict(value.default_factory)
    return type(value)()


class _Cloner:
    """Single clone operation bound to one visited map."""

    def __init__(self, visited: IdentityMap):
        self.visited = visited

    def clone(self, root: Any) -> Any:
        done, result = self._enter(root)
        if done:
            return result

        stack: List[Populator] = [result]
        sent = None
        while stack:
            try:
                member = stack[-1].send(sent)
            except StopIteration as stop:
                stack.pop()
                sent = stop.value
                continue

            done, result = self._enter(member)
            if done:
                sent = result
            else:
                stack.append(result)
                sent = None
        return sent

    def _enter(self, value: Any) -> Tuple[bool, Any]:
        """
        Start cloning ``value``.

        Returns ``(True, clone)`` when the clone is already complete, or
        ``(False, populator)`` when members still have to be cloned.
        """
        kind = type_of(value)

        if kind.is_primitive:
            return True, value
        if kind is Kind.SYMBOL:
            return True, Symbol(value.description)
        if value in self.visited:
            return True, self.visited[value]
        if kind is Kind.FUNCTION:
            return True, value
        if kind is Kind.UNSUPPORTED:
            raise UnsupportedKindError(type(value).__qualname__)

        if kind is Kind.DATE:
            new = _copy_date(value)
            self.visited[value] = new
            return True, new
        if kind is Kind.REGEXP:
            new = re.compile(value.pattern, value.flags)
            self.visited[value] = new
            return True, new

        if kind is Kind.TUPLE:
            if not value:
                return True, value
            return False, self._build_tuple(value)
        if kind is Kind.SET and type(value) is frozenset:
            if not value:
                return True, value
            return False, self._build_frozenset(value)

        if kind is Kind.ARRAY:
            new = []
            populate = self._populate_list
        elif kind is Kind.SET:
            new = set()
            populate = self._populate_set
        elif kind is Kind.MAP:
            new = _empty_map(value)
            populate = self._populate_map
        else:
            cls = type(value)
            new = cls.__new__(cls)
            populate = self._populate_object

        # Register before populating so cycles resolve to the partial clone.
        self.visited[value] = new
        return False, populate(value, new)

    def _populate_list(self, original: list, new: list) -> Populator:
        for item in original:
            new.append((yield item))
        return new

    def _populate_set(self, original: set, new: set) -> Populator:
        for item in original:
            new.add((yield item))
        return new

    def _populate_map(self, original: dict, new: dict) -> Populator:
        for key, item in original.items():
            new_key = yield key
            new[new_key] = yield item
        return new

    def _populate_object(self, original: Any, new: Any) -> Populator:
        target = vars(new)
        for name, attr in list(vars(original).items()):
            target[name] = yield attr
        return new

    def _build_tuple(self, original: tuple) -> Populator:
        members = []
        for item in original:
            members.append((yield item))
        # A cycle through a mutable member may have built this tuple already.
        if original in self.visited:
            return self.visited[original]
        if type(original) is tuple:
            new = tuple(members)
        else:
            new = type(original)._make(members)
        self.visited[original] = new
        return new

    def _build_frozenset(self, original: frozenset) -> Populator:
        members = []
        for item in original:
            members.append((yield item))
        if original in self.visited:
            return self.visited[original]
        new = frozenset(members)
        self.visited[original] = new
        return new


def deep_clone(value: Any, visited: Optional[IdentityMap] = None) -> Any:
    """
    Return a deep copy of ``value``.

    Args:
        value: Any value. Primitives (None, bools, numbers, strings, bytes,
            enum members) are returned unchanged. Functions, classes and
            modules are returned by reference.
        visited: Identity map from originals to clones. A fresh map is used
            when omitted; pass one explicitly to share structure across
            several calls.

    Returns:
        The cloned value. Within one call, every original composite maps to
        exactly one clone, so shared references and cycles are preserved.

    Raises:
        UnsupportedKindError: If the graph contains a value with no clone
            rule (locks, open files, generators, ``__slots__``-only objects...).
    """
    if visited is None:
        visited = IdentityMap()

    result = _Cloner(visited).clone(value)
    logger.debug(f"Cloned {type(value).__name__} graph ({len(visited)} composite values)")
    return result

# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Runtime kind detection.

Every Python value is classified into exactly one Kind. The classification is
what the clone module dispatches on, and is exposed for callers that need a
coarse, stable type tag (for example when validating decoded JSON).
"""

import functools
import re
import types
from collections import OrderedDict, defaultdict
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Union

from ..errors import UnknownKindError
from .symbol import Symbol


class Kind(Enum):
    """Closed classification of runtime values."""

    NONE = "None"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    BYTES = "Bytes"
    CONSTANT = "Constant"
    SYMBOL = "Symbol"
    FUNCTION = "Function"
    DATE = "Date"
    REGEXP = "RegExp"
    ARRAY = "Array"
    TUPLE = "Tuple"
    SET = "Set"
    MAP = "Map"
    OBJECT = "Object"
    UNSUPPORTED = "Unsupported"

    @property
    def is_primitive(self) -> bool:
        """Primitive values are immutable and compared by value or identity."""
        return self in _PRIMITIVE_KINDS

    @classmethod
    def from_tag(cls, tag: Union["Kind", str]) -> "Kind":
        """Resolve a Kind member or its tag string (e.g. ``"Array"``)."""
        if isinstance(tag, Kind):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise UnknownKindError(str(tag)) from None


_PRIMITIVE_KINDS = frozenset({
    Kind.NONE,
    Kind.BOOLEAN,
    Kind.NUMBER,
    Kind.STRING,
    Kind.BYTES,
    Kind.CONSTANT,
})

_NUMBER_TYPES = (int, float, complex, Decimal, Fraction)

_DATE_TYPES = (date, time, timedelta)

_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ModuleType,
    functools.partial,
    type,
)

_MAP_TYPES = (dict, OrderedDict, defaultdict)


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_make")


def _has_slot_fields(cls: type) -> bool:
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__")
        if slots is None:
            continue
        if isinstance(slots, str):
            slots = (slots,)
        if any(name not in ("__dict__", "__weakref__") for name in slots):
            return True
    return False


def _is_plain_object(value: Any) -> bool:
    """Instances whose whole state lives in ``__dict__``."""
    cls = type(value)
    if cls is types.SimpleNamespace:
        return True
    if not hasattr(value, "__dict__"):
        return False
    return cls.__new__ is object.__new__ and not _has_slot_fields(cls)


def type_of(value: Any) -> Kind:
    """
    Classify a value.

    Order matters: ``bool`` is tested before numbers, enum members (including
    ``IntEnum``) before numbers, and ``datetime`` is covered by ``date``.
    Container subclasses other than the known map variants and named tuples
    are UNSUPPORTED since their constructors may require arguments.
    """
    if value is None:
        return Kind.NONE
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, Enum) or value is Ellipsis or value is NotImplemented:
        return Kind.CONSTANT
    if isinstance(value, _NUMBER_TYPES):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, bytes):
        return Kind.BYTES
    if isinstance(value, Symbol):
        return Kind.SYMBOL
    if isinstance(value, _DATE_TYPES):
        return Kind.DATE
    if isinstance(value, re.Pattern):
        return Kind.REGEXP

    cls = type(value)
    if cls is list:
        return Kind.ARRAY
    if cls is tuple or _is_named_tuple(value):
        return Kind.TUPLE
    if cls is set or cls is frozenset:
        return Kind.SET
    if cls in _MAP_TYPES:
        return Kind.MAP
    if isinstance(value, _FUNCTION_TYPES):
        return Kind.FUNCTION
    if _is_plain_object(value):
        return Kind.OBJECT
    return Kind.UNSUPPORTED


def is_type(kind: Union[Kind, str], value: Any) -> bool:
    """Check whether ``value`` is of the given kind (member or tag string)."""
    return type_of(value) is Kind.from_tag(kind)

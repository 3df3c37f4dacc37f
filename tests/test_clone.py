"""
Tests for deep cloning.
"""

import re
import threading
from collections import OrderedDict, defaultdict, namedtuple
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import SimpleNamespace

import pytest

from utilkit.clone import IdentityMap, deep_clone
from utilkit.errors import UnsupportedKindError
from utilkit.types import Symbol


class Color(Enum):
    RED = 1


class Node:
    def __init__(self, value):
        self.value = value
        self.next = None


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class FrozenBox:
    items: list


Pair = namedtuple("Pair", "left right")


class TestPrimitives:
    """Primitives come back unchanged."""

    @pytest.mark.parametrize("value", [
        None, True, False, 0, 42, 10 ** 40, 3.5, 1 + 2j,
        "text", b"bytes", Decimal("1.10"), Fraction(1, 3),
        Color.RED, Ellipsis,
    ])
    def test_primitive_identity(self, value):
        """deep_clone(v) is v for primitives."""
        assert deep_clone(value) is value

    def test_empty_immutable_containers_are_returned(self):
        """Empty tuples and frozensets hold nothing to copy."""
        empty_tuple = ()
        empty_frozen = frozenset()
        assert deep_clone(empty_tuple) is empty_tuple
        assert deep_clone(empty_frozen) is empty_frozen


class TestStructure:
    """Structural copies do not alias the input."""

    def test_nested_dict_and_list(self):
        """Clone is equal but independent."""
        original = {"a": [1, 2, {"b": "c"}], "d": {"e": [3]}}
        cloned = deep_clone(original)

        assert cloned == original
        assert cloned is not original
        assert cloned["a"] is not original["a"]

        cloned["a"][2]["b"] = "changed"
        cloned["d"]["e"].append(4)
        assert original["a"][2]["b"] == "c"
        assert original["d"]["e"] == [3]

    def test_input_is_not_mutated(self):
        """Cloning leaves the original untouched."""
        original = {"k": [1, {2, 3}], "t": (4, [5])}
        snapshot = repr(original)
        deep_clone(original)
        assert repr(original) == snapshot

    def test_ordered_dict_keeps_type_and_order(self):
        """Map clones keep their concrete type and insertion order."""
        original = OrderedDict([("z", 1), ("a", [2])])
        cloned = deep_clone(original)
        assert type(cloned) is OrderedDict
        assert list(cloned) == ["z", "a"]
        assert cloned["a"] is not original["a"]

    def test_defaultdict_keeps_factory(self):
        """defaultdict clones keep their default factory."""
        original = defaultdict(list)
        original["a"].append(1)
        cloned = deep_clone(original)
        assert cloned.default_factory is list
        assert cloned["a"] == [1]
        assert cloned["a"] is not original["a"]
        cloned["new"].append(2)
        assert "new" not in original

    def test_map_keys_are_cloned(self):
        """Both keys and values of a map are cloned."""
        key = Node("key")
        original = {key: [1]}
        cloned = deep_clone(original)
        (new_key, new_value), = cloned.items()
        assert new_key is not key
        assert new_key.value == "key"
        assert new_value == [1]

    def test_tuple_members_are_cloned(self):
        """Tuples are rebuilt around cloned members."""
        original = ([1], "x")
        cloned = deep_clone(original)
        assert cloned == original
        assert cloned[0] is not original[0]

    def test_named_tuple(self):
        """Named tuples keep their type."""
        original = Pair([1], {"k": 2})
        cloned = deep_clone(original)
        assert type(cloned) is Pair
        assert cloned == original
        assert cloned.left is not original.left


class TestSharedReferences:
    """Shared structure stays shared."""

    def test_shared_dict(self):
        """Two references to one object clone to one object."""
        shared = {"x": 1}
        root = {"a": shared, "b": shared}
        cloned = deep_clone(root)
        assert cloned["a"] is cloned["b"]
        assert cloned["a"] is not shared

    def test_shared_tuple(self):
        """Shared immutable containers are built once."""
        shared = (1, [2])
        cloned = deep_clone([shared, shared])
        assert cloned[0] is cloned[1]
        assert cloned[0][1] is not shared[1]

    def test_caller_supplied_visited_map(self):
        """A visited map shared across calls shares clones across calls."""
        visited = IdentityMap()
        shared = [1, 2]
        first = deep_clone({"x": shared}, visited)
        second = deep_clone({"y": shared}, visited)
        assert first["x"] is second["y"]
        assert shared in visited

    def test_preseeded_visited_map(self):
        """Entries already in the visited map are used as clones."""
        marker = {"replaced": True}
        original = {"v": 1}
        cloned = deep_clone([original], IdentityMap([(original, marker)]))
        assert cloned[0] is marker


class TestCycles:
    """Cycles terminate and are reproduced."""

    def test_self_referencing_dict(self):
        """a['self'] = a clones to result['self'] is result."""
        a = {}
        a["self"] = a
        result = deep_clone(a)
        assert result["self"] is result
        assert result is not a

    def test_self_referencing_list(self):
        """Lists containing themselves."""
        a = [1]
        a.append(a)
        result = deep_clone(a)
        assert result[1] is result

    def test_object_cycle(self):
        """Objects pointing at each other."""
        first = Node(1)
        second = Node(2)
        first.next = second
        second.next = first
        result = deep_clone(first)
        assert result.next.next is result
        assert result.next.value == 2

    def test_cycle_through_tuple(self):
        """A tuple reached again through its own member resolves to one clone."""
        inner = []
        original = (inner,)
        inner.append(original)
        result = deep_clone(original)
        assert result[0][0] is result
        assert result[0] is not inner

    def test_very_deep_nesting(self):
        """Depth is not limited by the recursion limit."""
        root = []
        current = root
        for _ in range(10_000):
            child = []
            current.append(child)
            current = child

        result = deep_clone(root)

        depth = 0
        node = result
        while node:
            assert node is not root
            node = node[0]
            depth += 1
        assert depth == 10_000


class TestValueLikeKinds:
    """Dates, patterns and symbols."""

    def test_datetime(self):
        """Same instant, different instance."""
        original = datetime.fromtimestamp(1_700_000_000, tz=timezone.utc)
        cloned = deep_clone(original)
        assert cloned == original
        assert cloned is not original
        assert cloned.tzinfo is original.tzinfo

    @pytest.mark.parametrize("original", [
        date(2024, 2, 29),
        time(12, 30, 45, 100),
        timedelta(days=2, seconds=5, microseconds=7),
    ])
    def test_other_date_types(self, original):
        """date, time and timedelta are copied field by field."""
        cloned = deep_clone(original)
        assert cloned == original
        assert cloned is not original
        assert type(cloned) is type(original)

    def test_pattern(self):
        """Pattern text and flags are preserved."""
        original = re.compile(r"ab+c", re.IGNORECASE | re.MULTILINE)
        cloned = deep_clone(original)
        assert cloned.pattern == original.pattern
        assert cloned.flags == original.flags
        assert cloned.match("ABBC")

    def test_symbol(self):
        """Symbols are recreated with the same description."""
        sym = Symbol("tag")
        cloned = deep_clone(sym)
        assert cloned.description == "tag"
        assert cloned is not sym
        assert cloned != sym


class TestSetsAndObjects:
    """Set members and object attributes are cloned."""

    def test_set_members(self):
        """Objects inside a set are copied, not aliased."""
        member = Node(1)
        original = {member}
        cloned = deep_clone(original)
        (new_member,) = cloned
        assert new_member is not member
        assert new_member.value == 1

    def test_frozenset(self):
        """frozensets are rebuilt from cloned members."""
        original = frozenset({(1, 2), "a"})
        cloned = deep_clone(original)
        assert cloned == original
        assert type(cloned) is frozenset

    def test_dataclass(self):
        """Dataclass instances compare equal and are independent."""
        original = {"p": Point(1, 2)}
        cloned = deep_clone(original)
        assert cloned == original
        assert cloned["p"] is not original["p"]

    def test_frozen_dataclass(self):
        """Frozen dataclasses can be populated."""
        original = FrozenBox(items=[1, 2])
        cloned = deep_clone(original)
        assert cloned == original
        assert cloned.items is not original.items

    def test_init_is_not_called(self):
        """Objects are created without running __init__."""
        calls = []

        class Tracked:
            def __init__(self):
                calls.append(1)
                self.data = [1]

        original = Tracked()
        cloned = deep_clone(original)
        assert calls == [1]
        assert cloned.data == [1]
        assert cloned.data is not original.data

    def test_simple_namespace(self):
        """SimpleNamespace attributes are cloned."""
        original = SimpleNamespace(a=[1], b="x")
        cloned = deep_clone(original)
        assert cloned == original
        assert cloned.a is not original.a


class TestFallbackPolicy:
    """Functions pass through; unsupported kinds fail fast."""

    def test_functions_are_shared(self):
        """Callables and classes are returned by reference."""
        def handler():
            return 1

        original = {"f": handler, "cls": Point, "builtin": len, "mod": re}
        cloned = deep_clone(original)
        assert cloned["f"] is handler
        assert cloned["cls"] is Point
        assert cloned["builtin"] is len
        assert cloned["mod"] is re

    def test_unsupported_kind_raises(self):
        """Locks cannot be cloned."""
        with pytest.raises(UnsupportedKindError) as exc_info:
            deep_clone({"lock": threading.Lock()})
        assert isinstance(exc_info.value, TypeError)
        assert exc_info.value.type_name == "lock"

    def test_generator_raises(self):
        """Generators cannot be cloned."""
        with pytest.raises(UnsupportedKindError):
            deep_clone([(i for i in range(3))])

    def test_list_subclass_raises(self):
        """Container subclasses are not guessed at."""
        class Tagged(list):
            pass

        with pytest.raises(UnsupportedKindError):
            deep_clone(Tagged([1]))


class TestIdentityMap:
    """Identity-keyed mapping."""

    def test_unhashable_keys(self):
        """Lists can be keys; equal lists are distinct keys."""
        first, second = [1], [1]
        mapping = IdentityMap()
        mapping[first] = "a"
        mapping[second] = "b"
        assert len(mapping) == 2
        assert mapping[first] == "a"
        assert mapping[second] == "b"
        assert [1] not in mapping

    def test_delete_and_iterate(self):
        """Keys iterate as the original objects."""
        key = {"k": 1}
        mapping = IdentityMap([(key, 1)])
        assert list(mapping) == [key]
        assert mapping.get([], "missing") == "missing"
        del mapping[key]
        assert len(mapping) == 0
        with pytest.raises(KeyError):
            mapping[key]

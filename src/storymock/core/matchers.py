"""Argument matchers used when scripting and replaying steps."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from storymock.domain.models import accept_any, is_missing
from storymock.domain.ports import ArgumentMatcher, StepMatcher

_BUFFER_TYPES = (bytes, bytearray, memoryview)

__all__ = ["accept_any", "bind_matcher", "equals_matcher", "structurally_equal"]


def _is_buffer(value: object) -> bool:
    return isinstance(value, _BUFFER_TYPES)


def _buffer_bytes(value: bytes | bytearray | memoryview) -> bytes:
    if isinstance(value, memoryview):
        return value.tobytes()
    return bytes(value)


def _is_dataclass_instance(value: object) -> bool:
    return is_dataclass(value) and not isinstance(value, type)


def _is_container(value: object) -> bool:
    return isinstance(value, (Mapping, list, tuple)) or _is_dataclass_instance(value)


def structurally_equal(expected: Any, actual: Any) -> bool:
    """Compare two values by structure rather than identity.

    Byte buffers compare by content whatever their concrete type, lists and
    tuples compare element-wise (but a list never equals a tuple), mappings
    compare key by key, and dataclass instances compare field by field.
    NaN is equal to NaN, and a bool never equals a number. Self-referencing
    containers compare equal when they repeat the same pair of nodes.
    Everything else falls back to ``==``.
    """
    return _equal(expected, actual, set())


def _equal(expected: Any, actual: Any, active: set[tuple[int, int]]) -> bool:
    if expected is actual:
        return True
    if _is_buffer(expected) or _is_buffer(actual):
        if not (_is_buffer(expected) and _is_buffer(actual)):
            return False
        return _buffer_bytes(expected) == _buffer_bytes(actual)
    if isinstance(expected, float) and isinstance(actual, float):
        if math.isnan(expected) and math.isnan(actual):
            return True
        return expected == actual
    if isinstance(expected, bool) != isinstance(actual, bool):
        return False
    if not _is_container(expected):
        return bool(expected == actual)
    pair = (id(expected), id(actual))
    if pair in active:
        return True
    active.add(pair)
    try:
        return _equal_containers(expected, actual, active)
    finally:
        active.discard(pair)


def _equal_containers(expected: Any, actual: Any, active: set[tuple[int, int]]) -> bool:
    if isinstance(expected, Mapping) or isinstance(actual, Mapping):
        if not (isinstance(expected, Mapping) and isinstance(actual, Mapping)):
            return False
        if expected.keys() != actual.keys():
            return False
        return all(_equal(expected[key], actual[key], active) for key in expected)
    if isinstance(expected, (list, tuple)) or isinstance(actual, (list, tuple)):
        if isinstance(expected, list) != isinstance(actual, list):
            return False
        if not (isinstance(expected, (list, tuple)) and isinstance(actual, (list, tuple))):
            return False
        if len(expected) != len(actual):
            return False
        return all(_equal(left, right, active) for left, right in zip(expected, actual))
    if _is_dataclass_instance(expected) and _is_dataclass_instance(actual):
        if type(expected) is not type(actual):
            return False
        return all(
            _equal(getattr(expected, item.name), getattr(actual, item.name), active)
            for item in fields(expected)
            if item.compare
        )
    return bool(expected == actual)


def equals_matcher(expected: Any, actual: Any) -> bool:
    """Default argument matcher: deep structural equality."""
    return structurally_equal(expected, actual)


def bind_matcher(matcher: ArgumentMatcher | None, arg: Any) -> StepMatcher:
    """Bind a registered matcher to one scripted argument."""
    if matcher is None or is_missing(arg):
        return accept_any

    def _matches(actual: Any) -> bool:
        return bool(matcher(arg, actual))

    return _matches

from __future__ import annotations

from dataclasses import dataclass

import pytest

from storymock.api import StoryMock, equals_matcher
from storymock.core.matchers import accept_any, bind_matcher, structurally_equal
from storymock.domain.models import MISSING


@dataclass
class Point:
    x: int
    y: list[int]


def test_complex_equals_matcher_accepts_structurally_equal_argument() -> None:
    mock = StoryMock().event("a", equals_matcher)
    mock.expect("a", [12, [34, b"wow"]])
    mock.outcome_of("a", [12, [34, bytearray(b"wow")]])
    mock.assert_story_done()


@pytest.mark.parametrize(
    ("expected", "actual"),
    [
        (b"wow", memoryview(b"wow")),
        ({"a": [1, {"b": b"x"}]}, {"a": [1, {"b": bytearray(b"x")}]}),
        ((1, (2, 3)), (1, (2, 3))),
        (Point(1, [2, 3]), Point(1, [2, 3])),
        (float("nan"), float("nan")),
        (None, None),
        ("text", "text"),
    ],
)
def test_structurally_equal_values(expected: object, actual: object) -> None:
    assert structurally_equal(expected, actual) is True


@pytest.mark.parametrize(
    ("expected", "actual"),
    [
        (b"wow", b"wOw"),
        (b"wow", "wow"),
        ([1, 2], (1, 2)),
        ([1, 2], [1, 2, 3]),
        ({"a": 1}, {"a": 1, "b": 2}),
        ({"a": [1]}, {"a": [2]}),
        (Point(1, [2]), Point(1, [3])),
        ([1], 1),
        (1.0, 2.0),
    ],
)
def test_structurally_different_values(expected: object, actual: object) -> None:
    assert structurally_equal(expected, actual) is False


def test_bind_matcher_without_argument_accepts_anything() -> None:
    assert bind_matcher(equals_matcher, MISSING) is accept_any
    assert bind_matcher(None, 1) is accept_any


def test_bind_matcher_passes_scripted_argument_first() -> None:
    calls: list[tuple[object, object]] = []

    def recording(expected: object, actual: object) -> bool:
        calls.append((expected, actual))
        return True

    bound = bind_matcher(recording, "scripted")
    assert bound("received") is True
    assert calls == [("scripted", "received")]


def test_custom_matcher_drives_replay() -> None:
    mock = StoryMock().event("above", lambda expected, actual: actual > expected)
    mock.expect("above", 10).ok("big").expect("above", 10)

    assert mock.outcome_of("above", 11) == "big"
    with pytest.raises(AssertionError):
        mock.outcome_of("above", 9)


@pytest.mark.parametrize(
    ("expected", "actual"),
    [
        ([1], [True]),
        (0, False),
        (True, 1.0),
        ({"flag": False}, {"flag": 0}),
    ],
)
def test_bools_never_equal_numbers(expected: object, actual: object) -> None:
    assert structurally_equal(expected, actual) is False


def test_self_referencing_structures_compare_without_recursion_error() -> None:
    left: list[object] = [1]
    left.append(left)
    right: list[object] = [1]
    right.append(right)
    other: list[object] = [2]
    other.append(other)

    assert structurally_equal(left, right) is True
    assert structurally_equal(left, other) is False

from __future__ import annotations

from typing import Any

import pytest

from storymock.api import StoryDouble, StoryMock, StoryNotDoneError, equals_matcher


class CalculatorDouble(StoryDouble):
    """Calculator stand-in that does no arithmetic; every answer is scripted."""

    def __init__(self) -> None:
        super().__init__(
            StoryMock()
            .event("set", equals_matcher)
            .event("add", equals_matcher)
            .event("gives")
        )

    def num(self, value: int) -> Any:
        return self.story.outcome_of("set", value)

    def plus(self, extra: int) -> Any:
        return self.story.outcome_of("add", extra)

    def gives(self) -> Any:
        return self.story.outcome_of("gives")


def test_calculator_double_replays_fluent_story() -> None:
    calc = CalculatorDouble()
    calc.expect("set", 3).ok(calc).expect("add", 2).ok(calc).expect("gives").ok(5)

    assert calc.num(3).plus(2).gives() == 5
    calc.assert_story_done()


def test_calculator_double_reset_and_tail_shortcuts() -> None:
    calc = CalculatorDouble()
    calc.expect("gives")
    calc.ok(8)

    assert calc.gives() == 8
    calc.reset()
    with pytest.raises(StoryNotDoneError):
        calc.assert_story_done()
    calc.fail("broken")
    with pytest.raises(Exception, match="broken"):
        calc.gives()


def test_doubles_get_independent_stories() -> None:
    first = CalculatorDouble()
    second = CalculatorDouble()
    first.expect("gives").ok(1)

    second.assert_story_done()
    assert first.story is not second.story


def test_default_story_double_owns_an_empty_mock() -> None:
    double = StoryDouble()
    assert isinstance(double.story, StoryMock)
    double.assert_story_done()

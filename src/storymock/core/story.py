"""The scripted story and handles onto its steps."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from storymock.core.errors import EmptyStoryError
from storymock.domain.models import MISSING, ExpectedStep, Fail, Succeed

if TYPE_CHECKING:
    from storymock.core.engine import StoryMock


class Story:
    """Ordered master list of expected steps. Replay never consumes it."""

    def __init__(self) -> None:
        self._steps: list[ExpectedStep] = []

    def append(self, step: ExpectedStep) -> ExpectedStep:
        self._steps.append(step)
        return step

    def last(self) -> ExpectedStep:
        if not self._steps:
            raise EmptyStoryError("Cannot get last event of empty story")
        return self._steps[-1]

    def play(self) -> deque[ExpectedStep]:
        """Return a fresh consumable copy, preserving order."""
        return deque(self._steps)

    def __len__(self) -> int:
        return len(self._steps)


class StepHandle:
    """Handle returned by ``expect``; sets the outcome of exactly its own step."""

    def __init__(self, mock: StoryMock, step: ExpectedStep) -> None:
        self._mock = mock
        self._step = step

    @property
    def step(self) -> ExpectedStep:
        return self._step

    def ok(self, result: Any = None) -> StepHandle:
        """Script the step to succeed, optionally with a result."""
        self._step.outcome = Succeed(result)
        return self

    def fail(self, error: Any = None) -> StepHandle:
        """Script the step to fail, optionally with a given error."""
        self._step.outcome = Fail(error)
        return self

    def expect(self, event: str, arg: Any = MISSING) -> StepHandle:
        """Script the next step on the same mock."""
        return self._mock.expect(event, arg)

    def __repr__(self) -> str:
        return f"StepHandle({self._step!r})"

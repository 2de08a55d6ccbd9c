"""Error taxonomy for scripting and replaying stories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storymock.core.diagnostics import StepSnapshot

UNSPECIFIED_ERROR_MESSAGE = "Unspecified error (story mock)"


class StoryMockError(Exception):
    """Base class for every error raised by a story mock."""


class UnknownEventError(StoryMockError):
    """Raised when an event name was never registered."""


class ArgumentNotAllowedError(StoryMockError):
    """Raised when an argument is scripted for an event without a matcher."""


class EmptyStoryError(StoryMockError):
    """Raised when an outcome is set before any step was scripted."""


class StoryMismatchError(StoryMockError, AssertionError):
    """A replayed call did not fit the story."""


class StoryExhaustedError(StoryMismatchError):
    """A call arrived after every scripted step was consumed."""


class UnexpectedEventError(StoryMismatchError):
    """A call's event differs from the next scripted event."""


class ArgumentMismatchError(StoryMismatchError):
    """A call's argument was rejected by the step's matcher."""


class StoryNotDoneError(StoryMockError, AssertionError):
    """Raised by the completion check when steps remain unconsumed."""

    def __init__(self, message: str, remaining: list[StepSnapshot]) -> None:
        super().__init__(message)
        self.remaining = remaining


class ScriptedFailure(StoryMockError):
    """Wraps a scripted failure value that is not itself an exception."""

    def __init__(self, payload: Any = UNSPECIFIED_ERROR_MESSAGE) -> None:
        super().__init__(str(payload))
        self.payload = payload

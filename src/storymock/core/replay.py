"""Resolution of one replayed call and its delivery by event mode."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Generator
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any

from storymock.core.diagnostics import (
    argument_mismatch_message,
    story_exhausted_message,
    unexpected_event_message,
)
from storymock.core.errors import (
    UNSPECIFIED_ERROR_MESSAGE,
    ArgumentMismatchError,
    ScriptedFailure,
    StoryExhaustedError,
    UnexpectedEventError,
)
from storymock.domain.models import ExpectedStep, Succeed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of one call: either a value or an error to deliver.

    ``logged`` marks mismatches that belong on the diagnostic stream.
    """

    value: Any = None
    error: BaseException | None = None
    logged: bool = False


def normalize_error(error: Any) -> BaseException:
    """Return exceptions unchanged and wrap any other value."""
    if isinstance(error, BaseException):
        return error
    if error is None:
        return ScriptedFailure(UNSPECIFIED_ERROR_MESSAGE)
    return ScriptedFailure(error)


def resolve(
    event: str,
    data: Any,
    *,
    step: ExpectedStep | None,
    remaining: int,
) -> Resolution:
    """Decide the outcome for ``event`` given the popped head of the story.

    ``remaining`` is the length of the current story before the pop.
    """
    if step is None:
        return Resolution(error=StoryExhaustedError(story_exhausted_message(event)), logged=True)
    if step.event != event:
        message = unexpected_event_message(expected=step.event, actual=event, remaining=remaining)
        return Resolution(error=UnexpectedEventError(message), logged=True)
    if not step.matches(data):
        message = argument_mismatch_message(actual=data, expected=step.arg, remaining=remaining)
        return Resolution(error=ArgumentMismatchError(message), logged=True)
    outcome = step.outcome
    if isinstance(outcome, Succeed):
        return Resolution(value=outcome.result)
    return Resolution(error=normalize_error(outcome.error))


def deliver_sync(resolution: Resolution) -> Any:
    """Return the value or raise the error."""
    if resolution.error is not None:
        raise resolution.error
    return resolution.value


class SettledOutcome(Future):
    """Future that is already settled when handed to the caller.

    Awaitable any number of times, and it supports ``add_done_callback``,
    ``result()`` and ``exception()``. It never needs a running event loop
    until it is awaited. A failure that nobody awaits, inspects, or
    subscribes to is logged when the handle is collected.
    """

    def __init__(self) -> None:
        super().__init__()
        self._observed = False

    def __await__(self) -> Generator[Any, None, Any]:
        self._observed = True
        return asyncio.wrap_future(self).__await__()

    def result(self, timeout: float | None = None) -> Any:
        self._observed = True
        return super().result(timeout)

    def exception(self, timeout: float | None = None) -> BaseException | None:
        self._observed = True
        return super().exception(timeout)

    def add_done_callback(self, fn: Callable[[Future], object]) -> None:
        self._observed = True
        super().add_done_callback(fn)

    def __del__(self) -> None:
        if getattr(self, "_observed", True) or not self.done():
            return
        error = Future.exception(self, 0)
        if error is not None:
            logger.error("story.unobserved %s: %s", type(error).__name__, error)


def deliver_async(resolution: Resolution) -> SettledOutcome:
    """Wrap the outcome in a settled future instead of returning or raising."""
    outcome = SettledOutcome()
    if resolution.error is not None:
        outcome.set_exception(resolution.error)
    else:
        outcome.set_result(resolution.value)
    return outcome

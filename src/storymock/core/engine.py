"""Scriptable story mock: event registry, story builder, and replay."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Any

from storymock.core.diagnostics import (
    StepSnapshot,
    argument_not_allowed_message,
    snapshot_steps,
    story_not_done_message,
    undefined_event_message,
    unknown_event_message,
)
from storymock.core.errors import ArgumentNotAllowedError, StoryExhaustedError, StoryNotDoneError
from storymock.core.matchers import bind_matcher
from storymock.core.registry import EventRegistry
from storymock.core.replay import Resolution, deliver_async, deliver_sync, resolve
from storymock.core.story import StepHandle, Story
from storymock.domain.models import MISSING, EventMode, ExpectedStep, is_missing
from storymock.domain.ports import ArgumentMatcher

logger = logging.getLogger(__name__)


class StoryMock:
    """Replays a scripted story of expected events.

    Register events first (``event`` / ``async_event``), script the story with
    ``expect`` and the returned step handles, then route every call of the
    double through ``outcome_of``. Each instance owns its registry and story.
    """

    def __init__(self) -> None:
        self._registry = EventRegistry()
        self._story = Story()
        self._current: deque[ExpectedStep] | None = None
        self._lock = threading.Lock()

    @property
    def registry(self) -> EventRegistry:
        return self._registry

    @property
    def story(self) -> Story:
        return self._story

    def event(self, name: str, matcher: ArgumentMatcher | None = None) -> StoryMock:
        """Register an event whose outcomes are returned or raised directly."""
        self._registry.register(name, EventMode.SYNC, matcher)
        return self

    def async_event(self, name: str, matcher: ArgumentMatcher | None = None) -> StoryMock:
        """Register an event whose outcomes are delivered as awaitables."""
        self._registry.register(name, EventMode.ASYNC, matcher)
        return self

    def expect(self, event: str, arg: Any = MISSING) -> StepHandle:
        """Append a step to the story and return a handle to script its outcome."""
        definition = self._registry.require(event, unknown_event_message(event))
        if not is_missing(arg) and not definition.accepts_argument:
            raise ArgumentNotAllowedError(argument_not_allowed_message(event))
        step = ExpectedStep(event=event, arg=arg, matcher=bind_matcher(definition.matcher, arg))
        with self._lock:
            self._story.append(step)
        return StepHandle(self, step)

    def ok(self, result: Any = None) -> StepHandle:
        """Script the most recently appended step to succeed."""
        return self._last_handle().ok(result)

    def fail(self, error: Any = None) -> StepHandle:
        """Script the most recently appended step to fail."""
        return self._last_handle().fail(error)

    def reset(self) -> None:
        """Rewind so the same story can be replayed from the start."""
        with self._lock:
            self._current = None

    def remaining_steps(self) -> list[StepSnapshot]:
        with self._lock:
            return snapshot_steps(list(self._current_story()))

    def assert_story_done(self) -> None:
        remaining = self.remaining_steps()
        if remaining:
            raise StoryNotDoneError(story_not_done_message(remaining), remaining)

    def outcome_of(self, event: str, data: Any = MISSING) -> Any:
        """Resolve one call against the next scripted step.

        Sync events return the scripted result or raise; async events always
        return a settled, awaitable future, even for mismatches.
        """
        definition = self._registry.require(event, undefined_event_message(event))
        resolution = self._next_resolution(event, data)
        if definition.mode is EventMode.ASYNC:
            return deliver_async(resolution)
        return deliver_sync(resolution)

    def _next_resolution(self, event: str, data: Any) -> Resolution:
        with self._lock:
            current = self._current_story()
            remaining = len(current)
            step = current.popleft() if current else None
        resolution = resolve(event, data, step=step, remaining=remaining)
        if resolution.logged:
            kind = "exhausted" if isinstance(resolution.error, StoryExhaustedError) else "mismatch"
            logger.error("story.%s %s", kind, resolution.error)
        else:
            logger.debug("story.step event=%s remaining=%s", event, remaining - 1)
        return resolution

    def _current_story(self) -> deque[ExpectedStep]:
        if self._current is None:
            self._current = self._story.play()
        return self._current

    def _last_handle(self) -> StepHandle:
        return StepHandle(self, self._story.last())

    def __len__(self) -> int:
        with self._lock:
            return len(self._current_story())

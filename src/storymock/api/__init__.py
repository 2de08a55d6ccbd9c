"""Public API surface for scripting story-driven test doubles."""

from storymock.api.doubles import StoryDouble
from storymock.core.diagnostics import StepSnapshot
from storymock.core.engine import StoryMock
from storymock.core.errors import (
    ArgumentMismatchError,
    ArgumentNotAllowedError,
    EmptyStoryError,
    ScriptedFailure,
    StoryExhaustedError,
    StoryMismatchError,
    StoryMockError,
    StoryNotDoneError,
    UnexpectedEventError,
    UnknownEventError,
)
from storymock.core.matchers import equals_matcher, structurally_equal
from storymock.core.story import StepHandle
from storymock.domain.models import MISSING, EventMode

__all__ = [
    "MISSING",
    "ArgumentMismatchError",
    "ArgumentNotAllowedError",
    "EmptyStoryError",
    "EventMode",
    "ScriptedFailure",
    "StepHandle",
    "StepSnapshot",
    "StoryDouble",
    "StoryExhaustedError",
    "StoryMismatchError",
    "StoryMock",
    "StoryMockError",
    "StoryNotDoneError",
    "UnexpectedEventError",
    "UnknownEventError",
    "equals_matcher",
    "structurally_equal",
]

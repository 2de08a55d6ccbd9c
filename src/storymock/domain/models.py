"""Core story mock domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Final

from storymock.domain.ports import ArgumentMatcher, StepMatcher


class _Missing:
    """Marker for an argument that was never supplied."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final[Any] = _Missing()


def is_missing(value: object) -> bool:
    return value is MISSING


class EventMode(StrEnum):
    """How outcomes of an event are handed back to the caller."""

    SYNC = "sync"
    ASYNC = "async"


@dataclass(frozen=True)
class EventDefinition:
    """A registered event name with its delivery mode and argument matcher."""

    name: str
    mode: EventMode = EventMode.SYNC
    matcher: ArgumentMatcher | None = None

    @property
    def accepts_argument(self) -> bool:
        return self.matcher is not None


@dataclass(frozen=True)
class Succeed:
    """Scripted success, optionally carrying a result."""

    result: Any = None


@dataclass(frozen=True)
class Fail:
    """Scripted failure. `error` is normalized when the step is replayed."""

    error: Any = None


Outcome = Succeed | Fail


def accept_any(actual: Any) -> bool:
    """Step matcher used when no argument was scripted."""
    return True


@dataclass
class ExpectedStep:
    """One scripted story entry."""

    event: str
    arg: Any = MISSING
    matcher: StepMatcher = field(default=accept_any, repr=False)
    outcome: Outcome = field(default_factory=Succeed)

    @property
    def has_arg(self) -> bool:
        return not is_missing(self.arg)

    def matches(self, actual: Any) -> bool:
        return bool(self.matcher(actual))

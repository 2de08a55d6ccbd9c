"""Ports for argument matching."""

from __future__ import annotations

from typing import Any, Protocol


class ArgumentMatcher(Protocol):
    """Compares a scripted argument against the one received at replay."""

    def __call__(self, expected: Any, actual: Any) -> bool:
        ...


class StepMatcher(Protocol):
    """Matcher bound to one step's scripted argument."""

    def __call__(self, actual: Any) -> bool:
        ...

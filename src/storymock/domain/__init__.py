"""Domain models and ports for scripted story doubles."""

from storymock.domain.models import (
    MISSING,
    EventDefinition,
    EventMode,
    ExpectedStep,
    Fail,
    Outcome,
    Succeed,
    accept_any,
    is_missing,
)
from storymock.domain.ports import ArgumentMatcher, StepMatcher

__all__ = [
    "MISSING",
    "ArgumentMatcher",
    "EventDefinition",
    "EventMode",
    "ExpectedStep",
    "Fail",
    "Outcome",
    "StepMatcher",
    "Succeed",
    "accept_any",
    "is_missing",
]

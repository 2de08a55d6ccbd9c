"""Human-readable rendering of steps and values for failure messages."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic_core import PydanticSerializationError, to_json

from storymock.domain.models import ExpectedStep, Succeed, is_missing

UNDEFINED_TEXT = "undefined"


def render_value(value: Any) -> str:
    """Render a value as compact JSON, falling back to ``repr``."""
    if is_missing(value):
        return UNDEFINED_TEXT
    try:
        return to_json(value, fallback=repr).decode("utf-8")
    except (PydanticSerializationError, ValueError):
        return repr(value)


class StepSnapshot(BaseModel):
    """Serializable view of one scripted step."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    event: str
    arg: str | None = None
    outcome: Literal["ok", "fail"] = "ok"
    detail: str | None = None

    @classmethod
    def from_step(cls, step: ExpectedStep) -> StepSnapshot:
        outcome = step.outcome
        if isinstance(outcome, Succeed):
            kind: Literal["ok", "fail"] = "ok"
            detail = None if outcome.result is None else render_value(outcome.result)
        else:
            kind = "fail"
            detail = None if outcome.error is None else render_value(outcome.error)
        return cls(
            event=step.event,
            arg=render_value(step.arg) if step.has_arg else None,
            outcome=kind,
            detail=detail,
        )


_SNAPSHOT_LIST = TypeAdapter(list[StepSnapshot])


def snapshot_steps(steps: list[ExpectedStep]) -> list[StepSnapshot]:
    return [StepSnapshot.from_step(step) for step in steps]


def render_snapshots(snapshots: list[StepSnapshot]) -> str:
    return _SNAPSHOT_LIST.dump_json(snapshots, exclude_none=True).decode("utf-8")


def undefined_event_message(event: str) -> str:
    return f'Undefined event "{event}"'


def unknown_event_message(event: str) -> str:
    return f'Story mock event "{event}" is not defined'


def argument_not_allowed_message(event: str) -> str:
    return f'Story mock event argument not allowed for event "{event}"'


def story_exhausted_message(event: str) -> str:
    return f'Got event of type "{event}", but story is empty'


def unexpected_event_message(*, expected: str, actual: str, remaining: int) -> str:
    return (
        f'Expected story event of type "{expected}", but got "{actual}" '
        f"(remainingSteps = {remaining})"
    )


def argument_mismatch_message(*, actual: Any, expected: Any, remaining: int) -> str:
    return (
        f"Failed to assert that {render_value(actual)} matched the next expected "
        f"event data {render_value(expected)} (remainingSteps = {remaining})"
    )


def story_not_done_message(snapshots: list[StepSnapshot]) -> str:
    return f"Failed to assert story is done (remaining = {render_snapshots(snapshots)})"

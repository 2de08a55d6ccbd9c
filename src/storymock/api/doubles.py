"""Base class for hand-written test doubles driven by a story mock."""

from __future__ import annotations

from typing import Any

from storymock.core.engine import StoryMock
from storymock.core.story import StepHandle
from storymock.domain.models import MISSING


class StoryDouble:
    """Holds a ``StoryMock`` and exposes its scripting API.

    Subclasses add one method per registered event, each forwarding to
    ``self.story.outcome_of``::

        class CalculatorDouble(StoryDouble):
            def __init__(self) -> None:
                super().__init__(StoryMock().event("set", equals_matcher).event("gives"))

            def num(self, value: int) -> Any:
                return self.story.outcome_of("set", value)
    """

    def __init__(self, story: StoryMock | None = None) -> None:
        self._story = story if story is not None else StoryMock()

    @property
    def story(self) -> StoryMock:
        return self._story

    def expect(self, event: str, arg: Any = MISSING) -> StepHandle:
        return self._story.expect(event, arg)

    def ok(self, result: Any = None) -> StepHandle:
        return self._story.ok(result)

    def fail(self, error: Any = None) -> StepHandle:
        return self._story.fail(error)

    def reset(self) -> None:
        self._story.reset()

    def assert_story_done(self) -> None:
        self._story.assert_story_done()

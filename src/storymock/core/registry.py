"""Registry of the event names a double may receive."""

from __future__ import annotations

from storymock.core.errors import UnknownEventError
from storymock.domain.models import EventDefinition, EventMode
from storymock.domain.ports import ArgumentMatcher


class EventRegistry:
    """Maps event names to their definitions. Re-registering overwrites."""

    def __init__(self) -> None:
        self._events: dict[str, EventDefinition] = {}

    def register(
        self,
        name: str,
        mode: EventMode,
        matcher: ArgumentMatcher | None = None,
    ) -> EventDefinition:
        definition = EventDefinition(name=name, mode=EventMode(mode), matcher=matcher)
        self._events[name] = definition
        return definition

    def lookup(self, name: str) -> EventDefinition | None:
        return self._events.get(name)

    def require(self, name: str, message: str) -> EventDefinition:
        definition = self._events.get(name)
        if definition is None:
            raise UnknownEventError(message)
        return definition

    def __contains__(self, name: object) -> bool:
        return name in self._events

    def __len__(self) -> int:
        return len(self._events)

"""Events — structured record of what happened during each tick.

The engine records an ``Event`` for every state change a host might want
to report (feeding, construction, battles, rejections, termination).
Hosts such as the console narrator or tests read them back instead of
scraping log output.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

ANT_ACTED = "ant_acted"
BATTLE = "battle"
ROOM_COMPLETED = "room_completed"
FED = "fed"
STARVING = "starving"
ANT_DIED = "ant_died"
REJECTED = "rejected"
SIMULATION_ENDED = "simulation_ended"


@dataclass(frozen=True)
class Event:
    """A single recorded occurrence.

    Attributes:
        tick: Tick during which the event happened (0 during setup).
        type: One of the module-level event type names.
        data: Event-specific payload.
    """

    tick: int
    type: str
    data: dict[str, Any]


class EventLog:
    """Append-only event history, optionally bounded.

    A bounded log drops its oldest events first.  ``total`` keeps
    counting every recorded event so readers can resume with ``since``.
    """

    def __init__(self, max_entries: int = 0) -> None:
        maxlen = max_entries if max_entries > 0 else None
        self._events: deque[Event] = deque(maxlen=maxlen)
        self.total = 0

    def record(self, tick: int, type: str, **data: Any) -> Event:
        event = Event(tick=tick, type=type, data=data)
        self._events.append(event)
        self.total += 1
        return event

    def query(
        self,
        type: str | None = None,
        after: int | None = None,
        before: int | None = None,
    ) -> list[Event]:
        """Return events filtered by type and/or tick range (exclusive)."""
        result = list(self._events)
        if type is not None:
            result = [e for e in result if e.type == type]
        if after is not None:
            result = [e for e in result if e.tick > after]
        if before is not None:
            result = [e for e in result if e.tick < before]
        return result

    def last(self, type: str) -> Event | None:
        for e in reversed(self._events):
            if e.type == type:
                return e
        return None

    def since(self, position: int) -> list[Event]:
        """Return events recorded after the first ``position`` events.

        Args:
            position: A previous value of ``total``.

        Returns:
            Events still held by the log that were recorded later.
        """
        skip = position - (self.total - len(self._events))
        return list(self._events)[max(skip, 0) :]

    def __len__(self) -> int:
        return len(self._events)

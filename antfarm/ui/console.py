"""Console narration for the ant-farm simulation.

Turns recorded ``Event`` objects into one line of text each and writes
the lines produced since the previous call to a text stream.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from antfarm.simulation import events
from antfarm.simulation.events import Event

if TYPE_CHECKING:
    from antfarm.simulation.engine import SimulationEngine


def format_event(event: Event) -> str:
    """Return a human-readable line for one event."""
    d = event.data
    match event.type:
        case events.ANT_ACTED:
            return f"[{d['colony']}] {d['line']}"
        case events.BATTLE:
            return (
                f"{d['attacker']} attacked {d['defender']}: "
                f"{d['winner']} won "
                f"(hp {d['attacker_hp']} vs {d['defender_hp']})"
            )
        case events.ROOM_COMPLETED:
            return f"[{d['colony']}] Room {d['room']} has been completed."
        case events.FED:
            return (
                f"[{d['colony']}] Ants have been fed. "
                f"Remaining food: {d['remaining']}"
            )
        case events.STARVING:
            return f"[{d['colony']}] No food available. Ants are starving."
        case events.ANT_DIED:
            return f"[{d['colony']}] A {d['species']} ant has died."
        case events.REJECTED:
            return f"Error: {d['message']}"
        case events.SIMULATION_ENDED:
            if d["survivor"] is None:
                return "Simulation ends. No active colony remains."
            return f"Simulation ends. Only {d['survivor']} remains active."
    return f"{event.type}: {d}"


class ConsoleNarrator:
    """Writes newly recorded engine events to a text stream.

    Attributes:
        engine: The simulation engine whose events are narrated.
        stream: Destination for narration lines.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        stream: TextIO | None = None,
    ) -> None:
        self.engine = engine
        self.stream = stream if stream is not None else sys.stdout
        self._position = 0

    def narrate(self) -> int:
        """Write every event recorded since the last call.

        Returns:
            Number of lines written.
        """
        log = self.engine.events
        pending = log.since(self._position)
        self._position = log.total
        for event in pending:
            print(format_event(event), file=self.stream)
        return len(pending)

"""SimulationEngine — the main tick loop.

Owns every registered colony and advances them together in the
canonical tick order:

1. Ants act (every living, awake ant performs its behaviour)
2. Resolve battles between colonies
3. Advance construction of every unfinished room
4. Feed every colony, in registration order
5. Remove dead ants
6. Check for termination (at most one active colony left)

``step`` returns a ``TickStatus`` rather than stopping the process, so
hosts decide what to do once the simulation has ended.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.random import Generator

from antfarm.colony.ant import Ant, Species
from antfarm.colony.colony import Colony
from antfarm.errors import (
    ColonyNotFoundError,
    DuplicateColonyError,
    FarmError,
    SimulationTerminatedError,
)
from antfarm.simulation.config import SimulationConfig
from antfarm.simulation.events import (
    ANT_ACTED,
    ANT_DIED,
    BATTLE,
    FED,
    REJECTED,
    ROOM_COMPLETED,
    SIMULATION_ENDED,
    STARVING,
    EventLog,
)

logger = logging.getLogger(__name__)


class TickStatus(Enum):
    """State of the simulation after a tick."""

    RUNNING = "running"
    TERMINATED = "terminated"


class ActivePolicy(Enum):
    """Which colonies count towards the termination check."""

    REFERENCE = "reference"
    VIABLE = "viable"


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        colonies: Registered colonies in registration order.
        events: Structured history of everything that happened.
        active_policy: Which colonies count towards termination, parsed
            from ``config.active_policy``.
        rng: Master seeded random generator (battle pairing).
        tick: Number of ticks processed so far.
        status: RUNNING until the termination check fires.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    colonies: list[Colony] = field(init=False, default_factory=list)
    events: EventLog = field(init=False)
    active_policy: ActivePolicy = field(init=False)
    rng: Generator = field(init=False)
    tick: int = 0
    status: TickStatus = TickStatus.RUNNING

    def __post_init__(self) -> None:
        """Build the RNG and event log from config."""
        self.rng = np.random.default_rng(self.config.seed)
        self.events = EventLog(max_entries=self.config.event_log_size)
        self.active_policy = ActivePolicy(self.config.active_policy)

    def add_colony(self, colony: Colony) -> None:
        """Register a colony.

        Raises:
            DuplicateColonyError: If a colony with the same label is
                already registered.
        """
        if any(c.species == colony.species for c in self.colonies):
            msg = f"colony {colony.species!r} is already registered"
            raise DuplicateColonyError(msg)
        self.colonies.append(colony)

    def remove_colony(self, species: str) -> Colony:
        """Drop a colony from the simulation.

        Returns:
            The removed colony.

        Raises:
            ColonyNotFoundError: If no colony has this label.
        """
        for i, colony in enumerate(self.colonies):
            if colony.species == species:
                return self.colonies.pop(i)
        msg = f"colony {species!r} is not registered"
        raise ColonyNotFoundError(msg)

    def populate(self) -> None:
        """Create colonies, rooms, and ants from ``config.colonies``.

        Invalid entries (duplicate names, species mismatches, bad build
        targets) are recorded as ``rejected`` events and skipped; the
        rest of the layout is still built.
        """
        for spec in self.config.colonies:
            food = self.config.initial_food if spec.food is None else spec.food
            colony = Colony(species=spec.species, food=food)
            try:
                self.add_colony(colony)
            except FarmError as exc:
                self._reject(exc, colony=spec.species)
                continue

            for room_spec in spec.rooms:
                try:
                    colony.add_room(room_spec.name, room_spec.build_ticks)
                except (FarmError, ValueError) as exc:
                    self._reject(exc, colony=spec.species, room=room_spec.name)
                    continue
                for species in room_spec.ants:
                    self._place(colony, room_spec.name, species)

    def step(self) -> TickStatus:
        """Advance the simulation by one tick.

        Returns:
            The status after this tick's termination check.

        Raises:
            SimulationTerminatedError: If the simulation already ended.
        """
        if self.status is TickStatus.TERMINATED:
            msg = f"simulation ended at tick {self.tick}"
            raise SimulationTerminatedError(msg)

        self.tick += 1

        # 1. Ants act
        if self.config.ant_actions:
            self._act()

        # 2. Battles
        if self.config.battle_chance > 0:
            self._resolve_battles()

        # 3. Construction
        if self.config.advance_rooms:
            for colony in self.colonies:
                for name in colony.contribute_all():
                    self.events.record(
                        self.tick,
                        ROOM_COMPLETED,
                        colony=colony.species,
                        room=name,
                    )

        # 4. Feeding
        for colony in self.colonies:
            report = colony.feed()
            self.events.record(
                self.tick,
                STARVING if report.starving else FED,
                colony=report.species,
                consumed=report.consumed,
                remaining=report.remaining,
            )

        # 5. Dead ants
        if self.config.remove_dead:
            for colony in self.colonies:
                for ant in colony.remove_dead():
                    self.events.record(
                        self.tick,
                        ANT_DIED,
                        colony=colony.species,
                        species=ant.species.value,
                    )

        # 6. Termination
        return self._check_active_colonies()

    def run(self, ticks: int) -> TickStatus:
        """Run up to ``ticks`` ticks, stopping early on termination.

        Args:
            ticks: Maximum number of ticks to advance.

        Returns:
            The status after the last tick processed.
        """
        for _ in range(ticks):
            if self.step() is TickStatus.TERMINATED:
                break
        return self.status

    def active_colonies(self) -> list[Colony]:
        """Return colonies that count as active under the current policy."""
        if self.active_policy is ActivePolicy.VIABLE:
            return [c for c in self.colonies if c.is_viable]
        return list(self.colonies)

    def _check_active_colonies(self) -> TickStatus:
        active = self.active_colonies()
        if len(active) <= 1:
            self.status = TickStatus.TERMINATED
            survivor = active[0].species if active else None
            logger.info(
                "Simulation ends at tick %d. Active colonies: %d",
                self.tick,
                len(active),
            )
            self.events.record(
                self.tick,
                SIMULATION_ENDED,
                active=len(active),
                survivor=survivor,
            )
        return self.status

    def _act(self) -> None:
        for colony in self.colonies:
            for ant in colony.ants:
                if not ant.can_act:
                    continue
                self.events.record(
                    self.tick,
                    ANT_ACTED,
                    colony=colony.species,
                    species=ant.species.value,
                    line=ant.act(),
                )

    def _resolve_battles(self) -> None:
        """Let each pair of active colonies fight at most one battle.

        Pairs are visited in registration order.  The attacker is drawn
        from the earlier-registered colony.
        """
        contenders = self.active_colonies()
        for i, attacker_colony in enumerate(contenders):
            for defender_colony in contenders[i + 1 :]:
                if self.rng.random() >= self.config.battle_chance:
                    continue
                attacker = self._pick_fighter(attacker_colony)
                defender = self._pick_fighter(defender_colony)
                if attacker is None or defender is None:
                    continue
                won = attacker.battle(defender)
                winner, loser = (
                    (attacker_colony, defender_colony)
                    if won
                    else (defender_colony, attacker_colony)
                )
                self.events.record(
                    self.tick,
                    BATTLE,
                    attacker=attacker_colony.species,
                    defender=defender_colony.species,
                    winner=winner.species,
                    loser=loser.species,
                    attacker_hp=attacker.hp,
                    defender_hp=defender.hp,
                )

    def _pick_fighter(self, colony: Colony) -> Ant | None:
        eligible = [a for a in colony.ants if a.can_act]
        if not eligible:
            return None
        return eligible[int(self.rng.integers(len(eligible)))]

    def _place(self, colony: Colony, room_name: str, species: Species) -> None:
        try:
            colony.add_ant(room_name, Ant.spawn(species))
        except FarmError as exc:
            self._reject(
                exc,
                colony=colony.species,
                room=room_name,
                species=species.value,
            )

    def _reject(self, exc: Exception, **context: str) -> None:
        logger.warning("Rejected during setup: %s", exc)
        self.events.record(
            self.tick,
            REJECTED,
            error=type(exc).__name__,
            message=str(exc),
            **context,
        )

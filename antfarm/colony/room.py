"""Room — a named, single-species chamber inside a colony.

A room starts under construction and needs ``required_ticks`` units of
work before it is complete.  The first ant added fixes the room's
species; every later ant must match it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from antfarm.colony.ant import Ant, Species
from antfarm.errors import SpeciesMismatchError

logger = logging.getLogger(__name__)


@dataclass
class Room:
    """A chamber holding ants of one species.

    Attributes:
        name: Room name, unique within its colony.
        required_ticks: Units of work needed to finish construction.
        colony: Label of the owning colony (informational).
        species: Species of the room's ants, unset until the first ant
            is added.
        build_progress: Units of work contributed so far.
        under_construction: True until construction completes.
    """

    name: str
    required_ticks: int
    colony: str = ""
    build_progress: int = 0
    under_construction: bool = True
    _species: Species | None = field(default=None, init=False, repr=False)
    _ants: list[Ant] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Reject negative construction targets."""
        if self.required_ticks < 0:
            msg = f"required_ticks must be >= 0, got {self.required_ticks}"
            raise ValueError(msg)

    @property
    def species(self) -> Species | None:
        """Species of the room's ants, fixed by the first ant added."""
        return self._species

    @property
    def ants(self) -> tuple[Ant, ...]:
        """Members in insertion order (read-only view)."""
        return tuple(self._ants)

    @property
    def is_complete(self) -> bool:
        """Return True once construction has finished."""
        return not self.under_construction

    def add_ant(self, ant: Ant) -> None:
        """Add an ant, tagging the room with its species if untagged.

        Args:
            ant: The ant to add.

        Raises:
            SpeciesMismatchError: If the room already holds a different
                species.  The room is left unchanged.
        """
        if self.species is not None and ant.species is not self.species:
            msg = (
                f"cannot add {ant.species.value} ant to room {self.name!r} "
                f"of {self.species.value} ants"
            )
            raise SpeciesMismatchError(msg)
        if self._species is None:
            self._species = ant.species
        self._ants.append(ant)

    def contribute(self) -> bool:
        """Add one unit of construction work.

        Does nothing once the room is complete.

        Returns:
            True only on the call that completes the room.
        """
        if not self.under_construction:
            return False

        self.build_progress += 1
        if self.build_progress >= self.required_ticks:
            self.under_construction = False
            logger.info("Room %s has been completed", self.name)
            return True
        return False

    def alive_ants(self) -> list[Ant]:
        """Return members that are still alive."""
        return [a for a in self._ants if a.is_alive]

    def remove_dead(self) -> list[Ant]:
        """Remove and return members that have died.

        The room keeps its species tag even if it becomes empty.

        Returns:
            List of ants that were removed.
        """
        dead = [a for a in self._ants if not a.is_alive]
        self._ants = [a for a in self._ants if a.is_alive]
        return dead

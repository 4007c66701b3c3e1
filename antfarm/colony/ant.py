"""Ant — a single combat-capable colony member.

Every ant belongs to one of three species (worker, soldier, queen).  The
species fixes the ant's starting health, its strength, and the behaviour
it performs when it acts.  Species is carried as an explicit enum value,
so two ants can share a room exactly when their ``species`` compare equal.

Combat model:

- **Strength decides**: the strictly stronger ant wins a battle.  Ties go
  to the defender.
- **Mutual aid, not elimination**: the winner gains half of the loser's
  strength (rounded down) as health.  Nobody loses health in a battle.
- **Rest**: a resting ant neither acts nor fights until it recovers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from antfarm.errors import AntUnavailableError

logger = logging.getLogger(__name__)


class Species(Enum):
    """Species tag used to decide which ants may share a room."""

    WORKER = "worker"
    SOLDIER = "soldier"
    QUEEN = "queen"


@dataclass(frozen=True)
class AntProfile:
    """Fixed per-species statistics.

    Attributes:
        hp: Starting health.
        strength: Combat strength (never changes).
        behaviour: What the ant does when it acts.
    """

    hp: int
    strength: int
    behaviour: str


PROFILES: dict[Species, AntProfile] = {
    Species.WORKER: AntProfile(hp=50, strength=10, behaviour="working"),
    Species.SOLDIER: AntProfile(hp=70, strength=30, behaviour="patrolling"),
    Species.QUEEN: AntProfile(
        hp=100,
        strength=50,
        behaviour="commanding the colony",
    ),
}


@dataclass(eq=False)
class Ant:
    """A single ant.

    Ants compare by identity: two workers with equal health are still two
    different ants, and rooms hold references to the same objects the
    caller created.

    Attributes:
        species: Which species this ant belongs to.
        hp: Current health (dies at 0 or below).
        resting: Whether the ant is currently resting.
    """

    species: Species
    hp: int
    resting: bool = False

    @classmethod
    def spawn(cls, species: Species) -> Ant:
        """Create a fresh ant with its species' starting health.

        Args:
            species: Species of the new ant.

        Returns:
            A new, awake Ant.
        """
        return cls(species=species, hp=PROFILES[species].hp)

    @property
    def strength(self) -> int:
        """Combat strength, fixed by species."""
        return PROFILES[self.species].strength

    @property
    def is_alive(self) -> bool:
        """Return True if this ant is still alive."""
        return self.hp > 0

    @property
    def can_act(self) -> bool:
        """Return True if the ant may act or fight this tick."""
        return self.is_alive and not self.resting

    def rest(self) -> None:
        self.resting = True

    def recover(self) -> None:
        self.resting = False

    def act(self) -> str:
        """Perform this ant's species behaviour for one tick.

        Acting has no effect on health or strength; the description of
        what the ant did is returned for the caller to report.

        Returns:
            A sentence such as ``"Worker ant is working."``.

        Raises:
            AntUnavailableError: If the ant is dead or resting.
        """
        self._require_available()
        name = self.species.value.capitalize()
        line = f"{name} ant is {PROFILES[self.species].behaviour}."
        logger.debug(line)
        return line

    def battle(self, other: Ant) -> bool:
        """Fight one round against ``other``.

        The strictly stronger ant wins and gains ``loser.strength // 2``
        health.  On a tie or a loss the defender (``other``) gains
        ``self.strength // 2`` health instead.

        Args:
            other: The defending ant.

        Returns:
            True if this ant won, False otherwise.

        Raises:
            AntUnavailableError: If either ant is dead or resting.  Neither
                ant is modified in that case.
        """
        self._require_available()
        other._require_available()

        if self.strength > other.strength:
            self.hp += other.strength // 2
            won = True
        else:
            other.hp += self.strength // 2
            won = False

        logger.debug(
            "%s ant %s against %s ant",
            self.species.value,
            "won" if won else "lost",
            other.species.value,
        )
        return won

    def _require_available(self) -> None:
        if not self.is_alive:
            msg = f"{self.species.value} ant is dead (hp={self.hp})"
            raise AntUnavailableError(msg)
        if self.resting:
            msg = f"{self.species.value} ant is resting"
            raise AntUnavailableError(msg)

"""Config — load simulation parameters from YAML files.

Tick policy switches, the battle rate, and the starting colony layout
live in YAML and are parsed into typed dataclasses here.  The defaults
reproduce the classic two-colony demo, so a config file is optional.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from antfarm.colony.ant import Species


@dataclass
class RoomSpec:
    """Starting layout for one room.

    Attributes:
        name: Room name.
        build_ticks: Units of work needed to complete the room.
        ants: Species of the ants placed in the room, in order.
    """

    name: str
    build_ticks: int
    ants: list[Species] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RoomSpec:
        """Build a RoomSpec from parsed YAML.

        Raises:
            KeyError: If ``name`` or ``build_ticks`` is missing.
            ValueError: If an ant entry is not a known species.
        """
        return cls(
            name=str(data["name"]),
            build_ticks=int(data["build_ticks"]),
            ants=[Species(str(a).lower()) for a in data.get("ants") or []],
        )


@dataclass
class ColonySpec:
    """Starting layout for one colony.

    Attributes:
        species: Colony label.
        food: Starting food; ``None`` means ``SimulationConfig.initial_food``.
        rooms: Rooms to build, in order.
    """

    species: str
    food: int | None = None
    rooms: list[RoomSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ColonySpec:
        food = data.get("food")
        return cls(
            species=str(data["species"]),
            food=None if food is None else int(food),
            rooms=[RoomSpec.from_dict(r) for r in data.get("rooms") or []],
        )


def _default_colonies() -> list[ColonySpec]:
    return [
        ColonySpec(
            species="RedAnts",
            rooms=[RoomSpec(name="Room1", build_ticks=5, ants=[Species.WORKER])],
        ),
        ColonySpec(
            species="BlackAnts",
            rooms=[RoomSpec(name="Room2", build_ticks=5, ants=[Species.SOLDIER])],
        ),
    ]


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        max_ticks: Tick limit for a command-line run.
        initial_food: Starting food for colonies that do not set their own.
        battle_chance: Per-tick probability that each pair of colonies
            fights one battle.
        ant_actions: Whether every available ant acts each tick.
        advance_rooms: Whether every room under construction gains one
            unit of work each tick.
        remove_dead: Whether dead ants are removed from their rooms at
            the end of each tick.
        active_policy: ``"reference"`` counts every registered colony as
            active; ``"viable"`` counts only colonies with a living ant.
        event_log_size: Maximum retained events (0 = unbounded).
        colonies: Starting colony layout used by ``SimulationEngine.populate``.
    """

    seed: int = 42
    max_ticks: int = 10
    initial_food: int = 100
    battle_chance: float = 0.5

    # Tick wiring
    ant_actions: bool = True
    advance_rooms: bool = True
    remove_dead: bool = True
    active_policy: str = "reference"

    event_log_size: int = 0

    colonies: list[ColonySpec] = field(default_factory=_default_colonies)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Keys left out of the file keep their defaults.  An explicit
        ``colonies:`` list replaces the default layout.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        colonies = data.get("colonies")
        return cls(
            seed=data.get("seed", cls.seed),
            max_ticks=data.get("max_ticks", cls.max_ticks),
            initial_food=data.get("initial_food", cls.initial_food),
            battle_chance=data.get("battle_chance", cls.battle_chance),
            ant_actions=data.get("ant_actions", cls.ant_actions),
            advance_rooms=data.get("advance_rooms", cls.advance_rooms),
            remove_dead=data.get("remove_dead", cls.remove_dead),
            active_policy=data.get("active_policy", cls.active_policy),
            event_log_size=data.get("event_log_size", cls.event_log_size),
            colonies=(
                _default_colonies()
                if colonies is None
                else [ColonySpec.from_dict(c) for c in colonies]
            ),
        )

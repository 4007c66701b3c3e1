"""Colony — aggregate state for one ant farm.

A Colony owns its rooms (each holding ants of a single species) and a
shared food reserve.  Feeding costs one unit of food per room per tick;
food is never replenished implicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from antfarm.colony.ant import Ant
from antfarm.colony.room import Room
from antfarm.errors import DuplicateRoomError, RoomNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedReport:
    """Outcome of one ``Colony.feed`` call.

    Attributes:
        species: Label of the colony that was fed.
        consumed: Food deducted by this call.
        remaining: Food left after the call.
        starving: True if there was no food to hand out.
    """

    species: str
    consumed: int
    remaining: int
    starving: bool


@dataclass
class Colony:
    """Top-level state for a single ant farm.

    Attributes:
        species: Colony label, e.g. ``"RedAnts"``.
        food: Shared food reserve.
        rooms: Rooms keyed by their unique name.
    """

    species: str
    food: int = 100
    rooms: dict[str, Room] = field(default_factory=dict)

    def add_room(self, name: str, required_ticks: int) -> Room:
        """Start building a new room.

        Args:
            name: Room name, unique within this colony.
            required_ticks: Units of work needed to complete it.

        Returns:
            The new Room (also stored in ``self.rooms``).

        Raises:
            DuplicateRoomError: If a room with this name already exists.
        """
        if name in self.rooms:
            msg = f"room {name!r} already exists in {self.species}"
            raise DuplicateRoomError(msg)
        room = Room(name=name, required_ticks=required_ticks, colony=self.species)
        self.rooms[name] = room
        return room

    def room(self, name: str) -> Room:
        """Return the room called ``name``.

        Raises:
            RoomNotFoundError: If the room does not exist.
        """
        try:
            return self.rooms[name]
        except KeyError:
            msg = f"room {name!r} does not exist in {self.species}"
            raise RoomNotFoundError(msg) from None

    def add_ant(self, room_name: str, ant: Ant) -> None:
        """Place an ant in one of this colony's rooms.

        Raises:
            RoomNotFoundError: If the room does not exist.
            SpeciesMismatchError: If the room holds a different species.
        """
        self.room(room_name).add_ant(ant)

    def contribute_to_room(self, room_name: str) -> bool:
        """Add one unit of construction work to a room.

        Returns:
            True if this contribution completed the room.

        Raises:
            RoomNotFoundError: If the room does not exist.
        """
        return self.room(room_name).contribute()

    def contribute_all(self) -> list[str]:
        """Advance every room still under construction by one unit.

        Returns:
            Names of rooms completed by this call.
        """
        return [name for name, room in self.rooms.items() if room.contribute()]

    def feed(self) -> FeedReport:
        """Feed the colony: one unit of food per room.

        When the reserve is already empty the colony is reported as
        starving and food is left untouched.  Otherwise the full room
        count is deducted, which may leave the reserve negative; the
        next call then reports starvation.

        Returns:
            A FeedReport describing the outcome.
        """
        if self.food <= 0:
            logger.warning("No food available. %s are starving", self.species)
            return FeedReport(
                species=self.species,
                consumed=0,
                remaining=self.food,
                starving=True,
            )

        consumed = len(self.rooms)
        self.food -= consumed
        logger.info("%s have been fed. Remaining food: %d", self.species, self.food)
        return FeedReport(
            species=self.species,
            consumed=consumed,
            remaining=self.food,
            starving=False,
        )

    @property
    def ants(self) -> list[Ant]:
        """All ants across all rooms, in room order."""
        return [ant for room in self.rooms.values() for ant in room.ants]

    def alive_ants(self) -> list[Ant]:
        """Return every living ant in the colony."""
        return [ant for room in self.rooms.values() for ant in room.alive_ants()]

    @property
    def is_viable(self) -> bool:
        """Return True if at least one room holds a living ant."""
        return any(room.alive_ants() for room in self.rooms.values())

    def remove_dead(self) -> list[Ant]:
        """Remove and return dead ants from every room."""
        dead: list[Ant] = []
        for room in self.rooms.values():
            dead.extend(room.remove_dead())
        return dead

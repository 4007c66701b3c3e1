"""Errors — recoverable failures raised by colony and simulation operations.

None of these abort the simulation.  Callers that issue an operation are
expected to catch the specific error, report it, and carry on.  Food
starvation is deliberately *not* an exception: ``Colony.feed`` reports it
in its ``FeedReport``.
"""

from __future__ import annotations


class FarmError(Exception):
    """Base class for all ant-farm errors."""


class SpeciesMismatchError(FarmError, ValueError):
    """An ant's species differs from the species of the target room."""


class RoomNotFoundError(FarmError, LookupError):
    """A colony operation named a room that does not exist."""


class ColonyNotFoundError(FarmError, LookupError):
    """The engine was asked for a colony it does not hold."""


class DuplicateRoomError(FarmError, ValueError):
    """A room with the same name already exists in the colony."""


class DuplicateColonyError(FarmError, ValueError):
    """A colony with the same species label is already registered."""


class AntUnavailableError(FarmError, RuntimeError):
    """A dead or resting ant was asked to act or fight."""


class SimulationTerminatedError(FarmError, RuntimeError):
    """A tick was requested after the simulation reached its end state."""

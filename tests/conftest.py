"""Shared fixtures for the Antfarm test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from antfarm.colony.ant import Ant, Species
from antfarm.colony.colony import Colony
from antfarm.simulation.config import SimulationConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def quiet_config() -> SimulationConfig:
    """Config with no battles and no colonies, for hand-built scenarios."""
    return SimulationConfig(battle_chance=0.0, colonies=[])


@pytest.fixture
def red_colony() -> Colony:
    """RedAnts with one 5-tick room holding a single worker."""
    colony = Colony(species="RedAnts")
    colony.add_room("Room1", 5)
    colony.add_ant("Room1", Ant.spawn(Species.WORKER))
    return colony


@pytest.fixture
def black_colony() -> Colony:
    """BlackAnts with one 5-tick room holding a single soldier."""
    colony = Colony(species="BlackAnts")
    colony.add_room("Room2", 5)
    colony.add_ant("Room2", Ant.spawn(Species.SOLDIER))
    return colony

"""Entry point for ``python -m antfarm``.

Loads the YAML config, builds the colonies it describes, and narrates
each tick to the console until the simulation ends or the tick limit is
reached.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from antfarm.simulation.config import SimulationConfig
from antfarm.simulation.engine import SimulationEngine, TickStatus
from antfarm.ui.console import ConsoleNarrator

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, run the tick loop."""
    parser = argparse.ArgumentParser(
        prog="antfarm",
        description="Antfarm - colony construction and combat simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml if present)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Maximum ticks to run (default: max_ticks from config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config RNG seed",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config
    if config_path is None and _DEFAULT_CONFIG.exists():
        config_path = _DEFAULT_CONFIG
    config = (
        SimulationConfig.from_yaml(config_path)
        if config_path is not None
        else SimulationConfig()
    )
    if args.seed is not None:
        config.seed = args.seed

    engine = SimulationEngine(config=config)
    narrator = ConsoleNarrator(engine)
    engine.populate()
    narrator.narrate()

    ticks = args.ticks if args.ticks is not None else config.max_ticks
    for i in range(ticks):
        print(f"Tick: {i + 1}")
        status = engine.step()
        narrator.narrate()
        if status is TickStatus.TERMINATED:
            break


if __name__ == "__main__":
    main()

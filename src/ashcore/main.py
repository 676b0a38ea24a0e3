"""Headless entry point: run a few idle turns on the sandbox map and print the log."""
from __future__ import annotations

import logging
import os

from .core.config import load_config
from .data.registry import load_registry
from .services.simulation import create_simulation


def main() -> None:
    """Run the sandbox simulation for ``ASHCORE_TURNS`` turns."""
    logging.basicConfig(level=logging.DEBUG if os.getenv("ASHCORE_DEBUG") == "1" else logging.WARNING)
    config = load_config(os.getenv("ASHCORE_CONFIG"))
    seed = int(os.getenv("ASHCORE_SEED", "0"))
    turns = int(os.getenv("ASHCORE_TURNS", "5"))

    simulation = create_simulation(load_registry(), config=config, seed=seed)
    simulation.log.subscribe(lambda entry: print(entry.text))
    simulation.controller.queue_shoot_directional(1, 0)
    for _ in range(turns):
        simulation.advance_turn()
        simulation.controller.queue_wait()


if __name__ == "__main__":
    main()

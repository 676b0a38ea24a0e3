"""Fixed five-phase turn scheduler."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

TIME_UNITS_PER_TURN = 100

PhaseHandler = Callable[[], None]


class TurnPhase(str, Enum):
    PLAYER = "player"
    PROJECTILE = "projectile"
    ENVIRONMENT = "environment"
    ENEMY = "enemy"
    STATUS_EFFECT = "status_effect"


PHASE_ORDER: Tuple[TurnPhase, ...] = (
    TurnPhase.PLAYER,
    TurnPhase.PROJECTILE,
    TurnPhase.ENVIRONMENT,
    TurnPhase.ENEMY,
    TurnPhase.STATUS_EFFECT,
)


class TurnManager:
    """Runs every phase's handlers in registration order, then advances the clock."""

    def __init__(self) -> None:
        self.current_turn = 0
        self.total_time_units = 0
        self._handlers: Dict[TurnPhase, List[PhaseHandler]] = {phase: [] for phase in PHASE_ORDER}

    def register(self, phase: TurnPhase, handler: PhaseHandler) -> None:
        self._handlers[phase].append(handler)

    def unregister(self, phase: TurnPhase, handler: PhaseHandler) -> None:
        if handler in self._handlers[phase]:
            self._handlers[phase].remove(handler)

    def handlers(self, phase: TurnPhase) -> List[PhaseHandler]:
        return list(self._handlers[phase])

    def advance_turn(self) -> None:
        for phase in PHASE_ORDER:
            logger.debug("Turn %d phase %s", self.current_turn, phase.value)
            for handler in list(self._handlers[phase]):
                handler()
        self.current_turn += 1
        self.total_time_units += TIME_UNITS_PER_TURN

"""Service layer exports."""

from .errors import FactoryError, ServiceError, SpawnError
from .game_controller import GameController, PendingAction
from .message_log import LoggedMessage, MessageCatalog, MessageLog
from .simulation import Simulation, create_simulation
from .turn_manager import PHASE_ORDER, TIME_UNITS_PER_TURN, TurnManager, TurnPhase

__all__ = [
    "FactoryError",
    "GameController",
    "LoggedMessage",
    "MessageCatalog",
    "MessageLog",
    "PHASE_ORDER",
    "PendingAction",
    "ServiceError",
    "Simulation",
    "SpawnError",
    "TIME_UNITS_PER_TURN",
    "TurnManager",
    "TurnPhase",
    "create_simulation",
]

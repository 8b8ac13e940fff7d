"""Game engines and the contract they share."""

from naipe.game.base import Game, GameError, Player, TickResult
from naipe.game.events import EventEmitter, EventType, GameEvent
from naipe.game.state import WarState
from naipe.game.war import WarGame, WarStalemateError

__all__ = [
    "Game",
    "GameError",
    "Player",
    "TickResult",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "WarState",
    "WarGame",
    "WarStalemateError",
]

"""Game events for tracing what an engine does on each tick."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of War events."""

    # Game flow events
    GAME_STARTED = auto()
    GAME_ENDED = auto()

    # Pile events
    HAND_RESHUFFLED = auto()

    # Trick events
    CARDS_PLAYED = auto()
    TRICK_WON = auto()

    # War events
    WAR_STARTED = auto()
    WAR_ROUND = auto()
    WAR_WON = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are a read-only trace of engine decisions; subscribers can
    observe a game but never steer it.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Publishes game events to subscribers and keeps a history.

    Handlers subscribe to one event type, or to every event with None.
    Every emitted event is also written to the module logger at DEBUG.
    """

    def __init__(self, keep_history: bool = True) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []
        self._keep_history = keep_history

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> bool:
        """
        Unsubscribe from events.

        Returns:
            True if the handler was subscribed
        """
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def emit(self, event: GameEvent) -> None:
        """Record an event and deliver it to matching subscribers."""
        if self._keep_history:
            self._event_history.append(event)
        logger.debug("%s", event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)
        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Create and emit a new event, returning it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def events_of(self, event_type: EventType) -> list[GameEvent]:
        """Return the recorded events of one type, oldest first."""
        return [e for e in self._event_history if e.event_type is event_type]

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()

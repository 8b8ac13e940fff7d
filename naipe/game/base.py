"""The contract every game engine implements."""

from abc import ABC, abstractmethod
from enum import Enum, auto


class TickResult(Enum):
    """Outcome of advancing a game by one step."""

    CONTINUE = auto()
    FINISHED = auto()


class Player(Enum):
    """Seats in a two-player game."""

    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    def __str__(self) -> str:
        return f"Player {self.value}"


class GameError(Exception):
    """Unrecoverable condition inside a game engine."""


class Game(ABC):
    """
    Abstract base class for games driven one step at a time.

    A driver calls `tick` until it returns FINISHED. Once finished, further
    calls keep returning FINISHED without changing anything. Conditions the
    engine cannot recover from are raised as GameError.
    """

    @abstractmethod
    def tick(self) -> TickResult:
        """Advance the game by one step."""
        ...

    def run(self, max_ticks: int | None = None) -> TickResult:
        """
        Tick until the game finishes or `max_ticks` steps have been taken.

        Returns:
            The result of the last tick
        """
        result = TickResult.CONTINUE
        steps = 0
        while result is TickResult.CONTINUE:
            if max_ticks is not None and steps >= max_ticks:
                break
            result = self.tick()
            steps += 1
        return result

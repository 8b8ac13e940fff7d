"""War game state enumeration."""

from enum import Enum, auto


class WarState(Enum):
    """
    War state machine states.

    Flow: PLAYING → FINISHED, or PLAYING → ABORTED if no winner can be found
    """

    # Tricks are being played
    PLAYING = auto()

    # A player has run out of cards
    FINISHED = auto()

    # Both players ran out of cards during a war
    ABORTED = auto()

    def __str__(self) -> str:
        return self.name.title()

"""Card game primitives and the game of War - 100% UI-agnostic."""

from naipe.cards import Card, Deck, NotEnoughCards, Rank, Suit, Suitless, by_rank
from naipe.hand import Hand

__all__ = [
    "Card",
    "Deck",
    "NotEnoughCards",
    "Rank",
    "Suit",
    "Suitless",
    "by_rank",
    "Hand",
]

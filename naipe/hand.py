"""A player's hand: a pile of cards played from the top."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from naipe.cards import Card


@dataclass
class Hand:
    """An ordered pile of cards; the last card added is played first."""

    cards: list[Card] = field(default_factory=list)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        """Create a hand from cards listed bottom to top."""
        return cls(list(cards))

    def add_card(self, card: Card) -> None:
        """Put a card on top of the hand."""
        self.cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Put several cards on top of the hand, in order."""
        self.cards.extend(cards)

    def pop(self) -> Card | None:
        """Remove and return the top card, or None if the hand is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"

"""Card, Suitless, and Deck classes - immutable cards and mutable piles."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from random import Random
from typing import Iterable, Iterator, MutableSequence, Protocol

CARDS_PER_SET = 52


@total_ordering
class Suit(Enum):
    """Card suits, ordered by declaration for full-card ordering."""

    SPADES = 1
    CLUBS = 2
    HEARTS = 3
    DIAMONDS = 4

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
        }
        return symbols[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self.value < other.value


@total_ordering
class Rank(Enum):
    """Card ranks, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 1 < self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def is_directly_after(self, other: "Rank") -> bool:
        """Check if this rank comes immediately after `other` (no wrap-around)."""
        return self.value == other.value + 1


@total_ordering
@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card. Full ordering is by suit, then rank."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self.suit, self.rank) < (other.suit, other.rank)

    @classmethod
    def all_cards(cls) -> list["Card"]:
        """Return one full set of 52 cards in (suit, rank) order."""
        return [cls(rank, suit) for suit in Suit for rank in Rank]

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Suitless:
    """
    A card wrapper that ignores suit when comparing.

    Two wrapped cards are equal iff they share a rank, and are ordered by
    rank alone. The wrapped card is still available through `card`.
    """

    card: Card

    @property
    def rank(self) -> Rank:
        return self.card.rank

    @property
    def suit(self) -> Suit:
        return self.card.suit

    def unwrap(self) -> Card:
        """Return the wrapped card."""
        return self.card

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Suitless):
            return NotImplemented
        return self.card.rank == other.card.rank

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Suitless):
            return NotImplemented
        return self.card.rank < other.card.rank

    def __hash__(self) -> int:
        return hash(self.card.rank)

    def __str__(self) -> str:
        return str(self.card)


def by_rank(card: Card) -> Rank:
    """Sort key that orders cards by rank only."""
    return card.rank


class NotEnoughCards(Exception):
    """Raised when a deal asks for more cards than the deck holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Cannot deal {requested} cards from a deck of {available}"
        )
        self.requested = requested
        self.available = available


class CardPile(Protocol):
    """Anything a deal can extend with cards, e.g. a Hand or a list."""

    def extend(self, cards: Iterable[Card]) -> None: ...


class Deck:
    """
    An ordered pile of cards made of any number of full sets.

    The end of the pile is the top: `add` puts cards there and every deal
    takes cards from there.
    """

    def __init__(
        self,
        sets: int = 1,
        rng: Random | None = None,
        cards: Iterable[Card] | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            sets: Number of full 52-card sets to include
            rng: Random number generator for shuffling
            cards: Exact cards to hold, bottom to top, instead of full sets
        """
        if sets < 1:
            raise ValueError("Deck must have at least 1 set of cards")

        self._rng = rng or Random()
        if cards is not None:
            self._cards: list[Card] = list(cards)
        else:
            self._cards = [card for _ in range(sets) for card in Card.all_cards()]

    @classmethod
    def new_empty(cls, rng: Random | None = None) -> "Deck":
        """Create a deck with no cards."""
        return cls(rng=rng, cards=())

    def shuffle(self, rng: Random | None = None) -> None:
        """Shuffle in place with `rng`, or the deck's own generator."""
        (rng or self._rng).shuffle(self._cards)

    def shuffle_with_default_rng(self) -> None:
        """Shuffle in place with a freshly seeded generator."""
        Random().shuffle(self._cards)

    def add(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Put several cards on top of the deck, in order."""
        self._cards.extend(cards)

    def empty(self) -> None:
        """Discard every card in the deck."""
        self._cards.clear()

    def is_empty(self) -> bool:
        return not self._cards

    def deal_cards(self, hand_count: int, cards_per_hand: int) -> list[list[Card]]:
        """
        Deal cards round-robin from the top into `hand_count` buckets.

        Each round gives one card to every bucket in order, for
        `cards_per_hand` rounds. Nothing is removed if the deck is short.

        Raises:
            NotEnoughCards: If fewer than hand_count * cards_per_hand remain
        """
        if hand_count < 1:
            raise ValueError("Must deal to at least 1 hand")
        if cards_per_hand < 0:
            raise ValueError("Cannot deal a negative number of cards")

        requested = hand_count * cards_per_hand
        if requested > len(self._cards):
            raise NotEnoughCards(requested, len(self._cards))

        buckets: list[list[Card]] = [[] for _ in range(hand_count)]
        for _ in range(cards_per_hand):
            for bucket in buckets:
                bucket.append(self._cards.pop())
        return buckets

    def deal_cards_to_hands(
        self,
        hands: MutableSequence[CardPile],
        cards_per_hand: int,
    ) -> None:
        """Deal like `deal_cards`, extending each of `hands` in place."""
        buckets = self.deal_cards(len(hands), cards_per_hand)
        for hand, bucket in zip(hands, buckets):
            hand.extend(bucket)

    def deal_all_cards(self, hand_count: int) -> list[list[Card]]:
        """
        Deal an equal share to every bucket, leaving the remainder.

        Raises:
            NotEnoughCards: If there are fewer cards than buckets
        """
        if hand_count < 1:
            raise ValueError("Must deal to at least 1 hand")
        if len(self._cards) < hand_count:
            raise NotEnoughCards(hand_count, len(self._cards))
        return self.deal_cards(hand_count, len(self._cards) // hand_count)

    def deal_all_cards_to_hands(self, hands: MutableSequence[CardPile]) -> None:
        """Deal like `deal_all_cards`, extending each of `hands` in place."""
        buckets = self.deal_all_cards(len(hands))
        for hand, bucket in zip(hands, buckets):
            hand.extend(bucket)

    @property
    def cards(self) -> list[Card]:
        """Return a copy of the cards, bottom to top."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

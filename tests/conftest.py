"""Pytest fixtures for naipe tests."""

import pytest
from random import Random

from naipe.cards import Card, Deck, Rank, Suit
from naipe.hand import Hand
from naipe.game import EventEmitter, WarGame


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled single-set deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def six_card_deck():
    """A deck holding c0..c5 bottom to top (c5 is dealt first)."""
    cards = [Card(rank, Suit.SPADES) for rank in list(Rank)[:6]]
    d = Deck.new_empty()
    d.extend(cards)
    return d, cards


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def game(rng, events):
    """A freshly dealt War game."""
    return WarGame(rng=rng, events=events)


@pytest.fixture
def king_vs_five_game(rng, events):
    """Player 1 leads a King, Player 2 leads a Five."""
    return WarGame.from_piles(
        hand_1=[Card(Rank.TWO, Suit.SPADES), Card(Rank.KING, Suit.SPADES)],
        hand_2=[Card(Rank.THREE, Suit.HEARTS), Card(Rank.FIVE, Suit.HEARTS)],
        rng=rng,
        events=events,
    )

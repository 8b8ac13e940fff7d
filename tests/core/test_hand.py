"""Tests for Hand."""

from naipe.cards import Card, Rank, Suit
from naipe.hand import Hand


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.is_empty()
        assert str(empty_hand) == ""

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert not empty_hand.is_empty()

    def test_pop_is_last_in_first_out(self):
        """Test that the last card pushed is played first."""
        first = Card(Rank.TWO, Suit.CLUBS)
        second = Card(Rank.NINE, Suit.HEARTS)
        hand = Hand()
        hand.extend([first, second])

        assert hand.pop() == second
        assert hand.pop() == first

    def test_pop_empty_returns_none(self, empty_hand):
        """Test that popping an empty hand is not an error."""
        assert empty_hand.pop() is None
        assert len(empty_hand) == 0

    def test_from_cards(self):
        """Test building a hand from any iterable."""
        cards = [Card(rank, Suit.DIAMONDS) for rank in (Rank.ACE, Rank.FIVE)]
        hand = Hand.from_cards(iter(cards))
        assert hand.cards == cards

    def test_iteration_is_bottom_to_top(self):
        """Test iterating over a hand."""
        cards = [Card(Rank.THREE, Suit.SPADES), Card(Rank.QUEEN, Suit.CLUBS)]
        hand = Hand(list(cards))
        assert list(hand) == cards

    def test_str(self):
        """Test hand display."""
        hand = Hand([Card(Rank.ACE, Suit.SPADES), Card(Rank.TEN, Suit.HEARTS)])
        assert str(hand) == "A♠ 10♥"

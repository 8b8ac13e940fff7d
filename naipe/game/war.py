"""War game engine with state machine."""

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Callable, Iterable

from transitions import Machine

from naipe.cards import Card, Deck, Suitless
from naipe.hand import Hand
from naipe.game.base import Game, GameError, Player, TickResult
from naipe.game.events import EventEmitter, EventType, GameEvent
from naipe.game.state import WarState

logger = logging.getLogger(__name__)

FACE_DOWN_CARDS = 3


class WarStalemateError(GameError):
    """Both players ran out of cards in the middle of a war."""


@dataclass
class PlayerPiles:
    """The cards one player holds: a hand to play from and a capture pile."""

    hand: Hand = field(default_factory=Hand)
    capture: Deck = field(default_factory=Deck.new_empty)

    @property
    def card_count(self) -> int:
        return len(self.hand) + len(self.capture)

    @property
    def is_exhausted(self) -> bool:
        """A player is out of the game when both piles are empty."""
        return self.hand.is_empty() and self.capture.is_empty()


class WarGame(Game):
    """
    The card game War, advanced one trick per tick.

    Each tick both players play their top card and the higher rank takes
    both. Equal ranks start a war: three cards face down and one face up
    from each player, repeated until the face-up cards differ, and the
    winner takes the whole pot. A player whose hand runs out shuffles their
    capture pile back into it; a player with neither loses.
    """

    STATES = [s.name.lower() for s in WarState]

    TRANSITIONS = [
        {"trigger": "finish", "source": "playing", "dest": "finished"},
        {"trigger": "abort", "source": "playing", "dest": "aborted"},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        face_down_cards: int = FACE_DOWN_CARDS,
        events: EventEmitter | None = None,
        piles: dict[Player, PlayerPiles] | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            rng: Random number generator for reproducible games
            face_down_cards: Cards each player lays face down per war round
            events: Event emitter to publish to (a new one if not provided)
            piles: Starting piles per player; one shuffled deck dealt
                evenly if not provided
        """
        if face_down_cards < 0:
            raise ValueError("face_down_cards cannot be negative")

        self._rng = rng or Random()
        self.face_down_cards = face_down_cards
        self.events = events or EventEmitter()
        self.winner: Player | None = None
        self.ticks = 0
        self.wars = 0

        if piles is None:
            piles = {
                player: PlayerPiles(capture=Deck.new_empty(self._rng)) for player in Player
            }
            deck = Deck(rng=self._rng)
            deck.shuffle()
            deck.deal_all_cards_to_hands([piles[p].hand for p in Player])
        self._piles = piles

        self.total_cards = sum(p.card_count for p in self._piles.values())
        if not self.total_cards:
            raise ValueError("Cannot play War without any cards")

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="playing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self.events.emit_new(
            EventType.GAME_STARTED,
            player_1_cards=self.card_count(Player.ONE),
            player_2_cards=self.card_count(Player.TWO),
        )

    @classmethod
    def from_piles(
        cls,
        hand_1: Iterable[Card],
        hand_2: Iterable[Card],
        capture_1: Iterable[Card] = (),
        capture_2: Iterable[Card] = (),
        rng: Random | None = None,
        face_down_cards: int = FACE_DOWN_CARDS,
        events: EventEmitter | None = None,
    ) -> "WarGame":
        """
        Create a game from explicit piles instead of a fresh deal.

        Cards are listed bottom to top, so the last card of each hand is
        the first one played.
        """
        piles = {
            Player.ONE: PlayerPiles(Hand.from_cards(hand_1), Deck(rng=rng, cards=capture_1)),
            Player.TWO: PlayerPiles(Hand.from_cards(hand_2), Deck(rng=rng, cards=capture_2)),
        }
        return cls(rng=rng, face_down_cards=face_down_cards, events=events, piles=piles)

    @property
    def state(self) -> WarState:
        """Get current game state as enum."""
        return WarState[self._machine_state.upper()]  # type: ignore

    @property
    def is_finished(self) -> bool:
        return self.state in (WarState.FINISHED, WarState.ABORTED)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def hand(self, player: Player) -> Hand:
        return self._piles[player].hand

    def capture(self, player: Player) -> Deck:
        return self._piles[player].capture

    def card_count(self, player: Player) -> int:
        """Cards a player holds across hand and capture pile."""
        return self._piles[player].card_count

    def player_1_won(self) -> bool:
        return self.winner is Player.ONE

    def tick(self) -> TickResult:
        """
        Play one trick, or report that the game is over.

        Returns:
            FINISHED once a player has no cards left or the game was
            aborted, CONTINUE otherwise

        Raises:
            WarStalemateError: If neither player can finish a war. Every
                card at stake goes back to the capture pile of the player
                who put it in, and the game is aborted without a winner.
        """
        if self.is_finished:
            return TickResult.FINISHED

        for player in Player:
            if self._piles[player].is_exhausted:
                self._end_game(winner=player.opponent)
                return TickResult.FINISHED

        self.ticks += 1
        for player in Player:
            if self.hand(player).is_empty():
                self._reshuffle(player)

        card_1 = self.hand(Player.ONE).pop()
        card_2 = self.hand(Player.TWO).pop()
        if card_1 is None or card_2 is None:
            raise GameError("A player with cards left could not play one")

        self.events.emit_new(
            EventType.CARDS_PLAYED,
            tick=self.ticks,
            player_1_card=str(card_1),
            player_2_card=str(card_2),
        )

        pot = [card_1, card_2]
        played_1, played_2 = Suitless(card_1), Suitless(card_2)
        if played_1 == played_2:
            winner = self._resolve_war(pot, {Player.ONE: card_1, Player.TWO: card_2})
        else:
            winner = Player.ONE if played_1 > played_2 else Player.TWO
            self.events.emit_new(EventType.TRICK_WON, player=winner.value, cards=len(pot))

        self.capture(winner).extend(pot)

        logger.debug(
            "Tick %d: %s vs %s, %s takes %d cards (P1 %d/%d, P2 %d/%d)",
            self.ticks,
            card_1,
            card_2,
            winner,
            len(pot),
            len(self.hand(Player.ONE)),
            len(self.capture(Player.ONE)),
            len(self.hand(Player.TWO)),
            len(self.capture(Player.TWO)),
        )
        return TickResult.CONTINUE

    def _resolve_war(self, pot: list[Card], played: dict[Player, Card]) -> Player:
        """
        Escalate a tie until one player's last card outranks the other's.

        Every card drawn is appended to `pot`.
        """
        self.wars += 1
        self.events.emit_new(EventType.WAR_STARTED, rank=str(pot[0].rank))

        stakes = {player: [played[player]] for player in Player}
        round_number = 0
        while True:
            round_number += 1
            last_seen: dict[Player, Card | None] = {player: None for player in Player}

            # Face-down cards, then the face-up tiebreak card
            for _ in range(self.face_down_cards + 1):
                for player in Player:
                    card = self._draw(player)
                    if card is not None:
                        pot.append(card)
                        stakes[player].append(card)
                        last_seen[player] = card

            card_1 = last_seen[Player.ONE]
            card_2 = last_seen[Player.TWO]
            self.events.emit_new(
                EventType.WAR_ROUND,
                round=round_number,
                player_1_card=str(card_1) if card_1 else None,
                player_2_card=str(card_2) if card_2 else None,
                pot=len(pot),
            )

            if card_1 is None and card_2 is None:
                for player in Player:
                    self.capture(player).extend(stakes[player])
                self._abort_game(reason="stalemate")
                raise WarStalemateError(
                    f"Both players ran out of cards during a war with {len(pot)} cards at stake"
                )
            if card_2 is None:
                winner = Player.ONE
            elif card_1 is None:
                winner = Player.TWO
            elif Suitless(card_1) == Suitless(card_2):
                logger.debug("War round %d tied on %s, escalating", round_number, card_1.rank)
                continue
            else:
                winner = Player.ONE if Suitless(card_1) > Suitless(card_2) else Player.TWO

            self.events.emit_new(
                EventType.WAR_WON,
                player=winner.value,
                rounds=round_number,
                cards=len(pot),
            )
            return winner

    def _draw(self, player: Player) -> Card | None:
        """Pop a card for `player`, reshuffling their capture pile if needed."""
        hand = self.hand(player)
        if hand.is_empty():
            if self.capture(player).is_empty():
                return None
            self._reshuffle(player)
        return hand.pop()

    def _reshuffle(self, player: Player) -> None:
        """Shuffle a player's capture pile and move all of it into their hand."""
        capture = self.capture(player)
        if capture.is_empty():
            return
        capture.shuffle(self._rng)
        capture.deal_all_cards_to_hands([self.hand(player)])
        self.events.emit_new(
            EventType.HAND_RESHUFFLED,
            player=player.value,
            cards=len(self.hand(player)),
        )

    def _end_game(self, winner: Player) -> None:
        self.winner = winner
        self.finish()  # Trigger state transition
        self.events.emit_new(
            EventType.GAME_ENDED,
            winner=winner.value,
            ticks=self.ticks,
            wars=self.wars,
        )
        logger.info("%s won after %d ticks and %d wars", winner, self.ticks, self.wars)

    def _abort_game(self, reason: str) -> None:
        self.abort()  # Trigger state transition
        self.events.emit_new(
            EventType.GAME_ENDED,
            winner=None,
            reason=reason,
            ticks=self.ticks,
            wars=self.wars,
        )
        logger.error("Game aborted after %d ticks: %s", self.ticks, reason)

"""Session state representation and round transitions."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .cards import Card, Deck
from .players import Dealer, Player
from .rules import DEALER_STANDS_AT, MINIMUM_BET, RoundOutcome

LOGGER = logging.getLogger(__name__)


class RoundPhase(Enum):
    AWAITING_BET = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    SETTLED = auto()
    CLEANUP = auto()


@dataclass
class SessionStats:
    rounds: int = 0
    wins: int = 0
    losses: int = 0
    pushes: int = 0
    net_chips: int = 0
    current_streak: int = 0
    best_streak: int = 0

    def record(self, outcome: RoundOutcome, wager: int) -> None:
        self.rounds += 1
        if outcome is RoundOutcome.WIN:
            self.wins += 1
            self.net_chips += wager
            self.current_streak = self.current_streak + 1 if self.current_streak > 0 else 1
            self.best_streak = max(self.best_streak, self.current_streak)
        elif outcome is RoundOutcome.LOSE:
            self.losses += 1
            self.net_chips -= wager
            self.current_streak = self.current_streak - 1 if self.current_streak < 0 else -1
        else:
            self.pushes += 1
            self.current_streak = 0


@dataclass(frozen=True)
class RoundResult:
    outcome: RoundOutcome
    bet: int
    player_value: int
    dealer_value: int
    dealer_played: bool
    chips_after: int


@dataclass
class SessionState:
    """Everything that survives between rounds of one session."""

    player: Player
    dealer: Dealer = field(default_factory=Dealer)
    deck: Deck = field(default_factory=Deck)
    phase: RoundPhase = RoundPhase.AWAITING_BET
    round_number: int = 0
    stats: SessionStats = field(default_factory=SessionStats)

    @classmethod
    def new(
        cls,
        starting_chips: int,
        *,
        minimum_bet: int = MINIMUM_BET,
        dealer_stands_at: int = DEALER_STANDS_AT,
        rng: Optional[random.Random] = None,
    ) -> "SessionState":
        player = Player(minimum_bet=minimum_bet)
        player.grant_chips(starting_chips)
        return cls(player=player, dealer=Dealer(stands_at=dealer_stands_at), deck=Deck(rng=rng))

    def load_shoe(self) -> None:
        """Replace the shoe with a freshly ordered, shuffled deck."""

        self.deck.reset()
        self.deck.shuffle()
        LOGGER.debug("Shuffled a fresh deck into the shoe (round %d)", self.round_number)

    def start_round(self, bet: int) -> None:
        self.round_number += 1
        self.phase = RoundPhase.AWAITING_BET
        self.load_shoe()
        self.player.place_bet(bet)
        LOGGER.debug("Round %d: bet %d, %d chips left", self.round_number, bet, self.player.chips_available)

    def _draw(self) -> Card:
        if self.deck.is_empty():
            LOGGER.debug("Shoe ran dry mid-round, reshuffling")
            self.load_shoe()
        return self.deck.draw()

    def deal_to_player(self) -> Card:
        card = self._draw()
        self.player.hit(card)
        LOGGER.debug("Player draws %s (%d)", card, self.player.hand_value())
        return card

    def deal_to_dealer(self) -> Card:
        card = self._draw()
        self.dealer.hit(card)
        LOGGER.debug("Dealer draws %s (%d)", card, self.dealer.hand_value())
        return card

    def settle(self, outcome: RoundOutcome) -> RoundResult:
        wager = self.player.chips_wagered
        dealer_played = self.phase is RoundPhase.DEALER_TURN
        self.player.settle(outcome)
        self.stats.record(outcome, wager)
        self.phase = RoundPhase.SETTLED
        return RoundResult(
            outcome=outcome,
            bet=wager,
            player_value=self.player.hand_value(),
            dealer_value=self.dealer.hand_value(),
            dealer_played=dealer_played,
            chips_after=self.player.chips_available,
        )

    def discard_table(self) -> None:
        """Discard both hands and whatever is left in the shoe."""

        self.player.clear_hand()
        self.dealer.clear_hand()
        self.deck.clear()
        self.phase = RoundPhase.CLEANUP


__all__ = ["RoundPhase", "RoundResult", "SessionState", "SessionStats"]

from __future__ import annotations

from dataclasses import dataclass, field

from .cards import Card
from .errors import BlackjackError, ErrorKind
from .hand import Hand
from .rules import BLACKJACK, DEALER_STANDS_AT, MINIMUM_BET, RoundOutcome, dealer_should_hit, payout


@dataclass
class Player:
    """The single seat at the table: a hand plus a chip ledger."""

    chips_available: int = 0
    chips_wagered: int = 0
    minimum_bet: int = MINIMUM_BET
    hand: Hand = field(default_factory=Hand)

    def grant_chips(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("chip grant must not be negative")
        self.chips_available += amount

    def place_bet(self, amount: int) -> None:
        if amount < self.minimum_bet:
            raise BlackjackError(
                ErrorKind.BET_BELOW_MINIMUM,
                f"player is trying to bet less than the minimum bet of {self.minimum_bet} chip.",
            )
        if amount > self.chips_available:
            raise BlackjackError(
                ErrorKind.INSUFFICIENT_CHIPS,
                "player is trying to bet more than their available chips.",
            )
        self.chips_available -= amount
        self.chips_wagered += amount

    def has_chips_to_play(self) -> bool:
        return self.chips_available >= self.minimum_bet

    def settle(self, outcome: RoundOutcome) -> None:
        self.chips_available += payout(outcome, self.chips_wagered)
        self.chips_wagered = 0

    def settle_win(self) -> None:
        self.settle(RoundOutcome.WIN)

    def settle_push(self) -> None:
        self.settle(RoundOutcome.PUSH)

    def settle_lose(self) -> None:
        self.settle(RoundOutcome.LOSE)

    def hit(self, card: Card) -> None:
        self.hand.add_card(card)

    def hand_value(self) -> int:
        return self.hand.value()

    def is_bust(self) -> bool:
        return self.hand.is_bust()

    def has_blackjack(self) -> bool:
        # Any 21 counts, not only a two-card natural.
        return self.hand.value() == BLACKJACK

    def clear_hand(self) -> None:
        self.hand.clear()


@dataclass
class Dealer:
    stands_at: int = DEALER_STANDS_AT
    hand: Hand = field(default_factory=Hand)

    def hit(self, card: Card) -> None:
        self.hand.add_card(card)

    def hand_value(self) -> int:
        return self.hand.value()

    def is_bust(self) -> bool:
        return self.hand.is_bust()

    def should_stand(self) -> bool:
        return not dealer_should_hit(self.hand.value(), self.stands_at)

    def clear_hand(self) -> None:
        self.hand.clear()


__all__ = ["Player", "Dealer"]

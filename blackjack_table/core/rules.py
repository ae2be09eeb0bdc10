"""Blackjack table rules and helpers.

Single deck, one player against the house, no split/double/surrender,
dealer stands on soft 17 and every win pays 1:1.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable

from .cards import Card

STARTING_CHIPS = 100
MINIMUM_BET = 1
BLACKJACK = 21
DEALER_STANDS_AT = 17
SOFT_ACE_BONUS = 10


class RoundOutcome(Enum):
    WIN = "win"
    PUSH = "push"
    LOSE = "lose"


def hand_value(cards: Iterable[Card]) -> int:
    """Sum card values, counting one ace as 11 when that does not bust.

    Only a single ace is ever promoted, so two aces count as 12.
    """

    total = 0
    has_ace = False
    for card in cards:
        total += card.value
        has_ace = has_ace or card.is_ace
    if has_ace and total + SOFT_ACE_BONUS <= BLACKJACK:
        total += SOFT_ACE_BONUS
    return total


def is_bust(value: int) -> bool:
    return value > BLACKJACK


def dealer_should_hit(value: int, stands_at: int = DEALER_STANDS_AT) -> bool:
    return value < stands_at


def decide_outcome(player_value: int, dealer_value: int) -> RoundOutcome:
    """Outcome for a player that has not busted."""

    if is_bust(dealer_value) or player_value > dealer_value:
        return RoundOutcome.WIN
    if player_value < dealer_value:
        return RoundOutcome.LOSE
    return RoundOutcome.PUSH


def payout(outcome: RoundOutcome, wager: int) -> int:
    """Chips returned to the player for a settled wager."""

    if outcome is RoundOutcome.WIN:
        return wager * 2
    if outcome is RoundOutcome.PUSH:
        return wager
    return 0


__all__ = [
    "STARTING_CHIPS",
    "MINIMUM_BET",
    "BLACKJACK",
    "DEALER_STANDS_AT",
    "RoundOutcome",
    "hand_value",
    "is_bust",
    "dealer_should_hit",
    "decide_outcome",
    "payout",
]

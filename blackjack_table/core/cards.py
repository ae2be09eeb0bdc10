"""Card and deck utilities."""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from .errors import BlackjackError, ErrorKind


class Rank(Enum):
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

    @property
    def label(self) -> str:
        if self in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING):
            return self.name.capitalize()
        return str(self.value)


class Suit(Enum):
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Canonical deck order: suits as declared, Ace through King within each suit.
SUITS = tuple(Suit)
RANKS = tuple(Rank)


@dataclass(frozen=True)
class Card:
    """Representation of a standard playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            try:
                object.__setattr__(self, "rank", Rank(self.rank))
            except ValueError:
                raise BlackjackError(ErrorKind.UNRECOGNIZED_RANK, "card rank is not identified.") from None
        if not isinstance(self.suit, Suit):
            try:
                object.__setattr__(self, "suit", Suit(self.suit))
            except ValueError:
                raise BlackjackError(ErrorKind.UNRECOGNIZED_SUIT, "card suit is not identified.") from None

    @property
    def value(self) -> int:
        """Point value with aces counted low."""
        return min(self.rank.value, 10)

    @property
    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    def __str__(self) -> str:
        return f"{self.rank.label} of {self.suit.label}"


class Deck:
    """A single 52-card dealing shoe. The end of the list is the top."""

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self.reset()

    def reset(self) -> None:
        self._cards = [Card(rank, suit) for suit in SUITS for rank in RANKS]

    def shuffle(self) -> None:
        if self._cards:
            self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            raise BlackjackError(ErrorKind.EMPTY_DECK, "cannot draw card from an empty deck.")
        return self._cards.pop()

    def clear(self) -> None:
        self._cards = []

    def is_empty(self) -> bool:
        return not self._cards

    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def remaining(self) -> Sequence[Card]:
        return tuple(self._cards)


__all__ = ["Card", "Deck", "Rank", "Suit", "SUITS", "RANKS"]

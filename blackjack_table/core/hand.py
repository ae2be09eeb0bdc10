"""Cards held by one participant during a round."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .cards import Card
from .rules import hand_value, is_bust


@dataclass
class Hand:
    """A hand of cards. Append-only until cleared."""

    cards: List[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def value(self) -> int:
        return hand_value(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def card_count(self) -> int:
        return len(self.cards)

    def is_bust(self) -> bool:
        return is_bust(self.value())

    def clear(self) -> None:
        self.cards.clear()

    def snapshot(self) -> Sequence[Card]:
        return tuple(self.cards)


__all__ = ["Hand"]

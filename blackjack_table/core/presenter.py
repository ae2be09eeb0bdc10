"""Boundary between the rules engine and whatever shows the table."""
from __future__ import annotations

from enum import Enum, auto
from typing import Protocol, Sequence

from .cards import Card


class Announcement(Enum):
    WELCOME = auto()
    GOODBYE = auto()
    ROUND_START = auto()
    ROUND_END = auto()
    HOLE_CARD_HIDDEN = auto()
    PLAYER_WINS = auto()
    PLAYER_PUSHES = auto()
    PLAYER_LOSES = auto()
    OUT_OF_CHIPS = auto()


class ChipsDisplay(Enum):
    TO_BET_WITH = auto()
    CURRENT = auto()


class TablePresenter(Protocol):
    """What the engine needs from a console or window.

    ``prompt_bet`` and ``prompt_yes_no`` block until the user gives a valid
    answer; invalid input never reaches the engine.
    """

    def display_hand(self, label: str, cards: Sequence[Card]) -> None:
        ...

    def display_hand_value(self, label: str, value: int) -> None:
        ...

    def display_chips(self, kind: ChipsDisplay, amount: int) -> None:
        ...

    def prompt_bet(self, minimum: int, maximum: int) -> int:
        ...

    def prompt_yes_no(self, prompt: str) -> bool:
        ...

    def announce(self, event: Announcement) -> None:
        ...

    def display_error(self, message: str) -> None:
        ...


__all__ = ["Announcement", "ChipsDisplay", "TablePresenter"]

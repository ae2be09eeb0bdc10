"""Text console presenter."""
from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, Sequence, TextIO

from ..core.cards import Card
from ..core.presenter import Announcement, ChipsDisplay

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}

OWNERS = {"Player": "Your", "Dealer": "Dealer's"}

MESSAGES: Dict[Announcement, str] = {
    Announcement.WELCOME: "\nWelcome to Blackjack! Enjoy your play.\n",
    Announcement.GOODBYE: "\nWe hope you had a great time and to see you again soon!\n",
    Announcement.ROUND_START: "\nA new Blackjack round begins.\n",
    Announcement.ROUND_END: "Current Blackjack round is over.\n",
    Announcement.HOLE_CARD_HIDDEN: "Dealer's second card remains hidden.",
    Announcement.PLAYER_WINS: "You win.",
    Announcement.PLAYER_PUSHES: "You push.",
    Announcement.PLAYER_LOSES: "You lose.",
    Announcement.OUT_OF_CHIPS: "Sorry but you have no more chips to bet with.",
}


def plural(quantity: int, noun: str) -> str:
    return f"{quantity} {noun}{'s' if quantity > 1 else ''}"


def format_hand(cards: Sequence[Card]) -> str:
    return "".join(f"{card} | " for card in cards)


def parse_yes_no(answer: str) -> Optional[bool]:
    """Map a free-form answer to True/False, or None if it is neither."""

    answer = answer.strip().lower()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    return None


def parse_bet(answer: str, minimum: int, maximum: int) -> Optional[int]:
    try:
        amount = int(answer.strip())
    except ValueError:
        return None
    if minimum <= amount <= maximum:
        return amount
    return None


class ConsolePresenter:
    """Plays the table through ``input()`` and a text stream."""

    def __init__(self, *, input_fn: Optional[Callable[[str], str]] = None, stream: Optional[TextIO] = None) -> None:
        self._input = input_fn or input
        self._stream = stream

    def _say(self, text: str) -> None:
        print(text, file=self._stream or sys.stdout)

    def display_hand(self, label: str, cards: Sequence[Card]) -> None:
        self._say(f"{OWNERS.get(label, label)} hand contains:  {format_hand(cards)}")

    def display_hand_value(self, label: str, value: int) -> None:
        self._say(f"{OWNERS.get(label, label)} hand value is:  {value}")

    def display_chips(self, kind: ChipsDisplay, amount: int) -> None:
        if kind is ChipsDisplay.TO_BET_WITH:
            self._say(f"You have {plural(amount, 'chip')} to bet with.")
        else:
            self._say(f"Your current number of chips is {amount}.")

    def prompt_bet(self, minimum: int, maximum: int) -> int:
        answer = self._input(f"Place your bet please (minimum bet is {minimum}):  ")
        amount = parse_bet(answer, minimum, maximum)
        while amount is None:
            answer = self._input(
                f"Please try to bet again. Your bet should be a number between {minimum} "
                "and up to your available chips:  "
            )
            amount = parse_bet(answer, minimum, maximum)
        self._say(f"Your bet is {plural(amount, 'chip')}.")
        return amount

    def prompt_yes_no(self, prompt: str) -> bool:
        choice = parse_yes_no(self._input(f"{prompt}  "))
        while choice is None:
            choice = parse_yes_no(
                self._input(f"{prompt} Please type 'y' or 'n' (without the quotes):  ")
            )
        return choice

    def announce(self, event: Announcement) -> None:
        self._say(MESSAGES[event])

    def display_error(self, message: str) -> None:
        self._say(f"\n{message}")
        self._say("Quitting Blackjack... Goodbye!\n")


__all__ = ["ConsolePresenter", "format_hand", "parse_bet", "parse_yes_no", "plural"]

"""PyQt6 application bootstrap."""
from __future__ import annotations

from typing import List, Sequence

from PyQt6 import QtWidgets

from ..core.cards import Card
from ..core.engine import GameConfig, RoundEngine
from ..core.presenter import Announcement, ChipsDisplay
from .console import MESSAGES, plural
from .table import TableWindow


class QtPresenter:
    """Shows the table in a window and asks questions with modal dialogs.

    The dialogs run their own event loop, so the engine can stay blocking.
    """

    def __init__(self, window: TableWindow) -> None:
        self.window = window
        self._dealer_cards: List[Card] = []

    def _refresh(self) -> None:
        QtWidgets.QApplication.processEvents()

    def display_hand(self, label: str, cards: Sequence[Card]) -> None:
        if label == "Dealer":
            self._dealer_cards = list(cards)
        self.window.row(label).show_cards(cards)
        self._refresh()

    def display_hand_value(self, label: str, value: int) -> None:
        self.window.row(label).show_value(value)
        self._refresh()

    def display_chips(self, kind: ChipsDisplay, amount: int) -> None:
        self.window.chips_label.setText(f"Chips: {amount}")
        if kind is ChipsDisplay.TO_BET_WITH:
            self.window.append_message(f"You have {plural(amount, 'chip')} to bet with.")
        self._refresh()

    def prompt_bet(self, minimum: int, maximum: int) -> int:
        amount, accepted = QtWidgets.QInputDialog.getInt(
            self.window, "Place Your Bet", f"Bet between {minimum} and {maximum} chips:", minimum, minimum, maximum
        )
        while not accepted:
            amount, accepted = QtWidgets.QInputDialog.getInt(
                self.window, "Place Your Bet", "A bet is required to play the round:", minimum, minimum, maximum
            )
        self.window.append_message(f"Your bet is {plural(amount, 'chip')}.")
        return amount

    def prompt_yes_no(self, prompt: str) -> bool:
        buttons = QtWidgets.QMessageBox.StandardButton.Yes | QtWidgets.QMessageBox.StandardButton.No
        answer = QtWidgets.QMessageBox.question(self.window, "Blackjack", prompt.replace(" (y/n)", ""), buttons)
        return answer == QtWidgets.QMessageBox.StandardButton.Yes

    def announce(self, event: Announcement) -> None:
        if event is Announcement.ROUND_START:
            self.window.clear_table()
        elif event is Announcement.HOLE_CARD_HIDDEN:
            self.window.row("Dealer").show_cards(self._dealer_cards[:1], hidden=1)
        self.window.append_message(MESSAGES[event].strip())
        self._refresh()

    def display_error(self, message: str) -> None:
        QtWidgets.QMessageBox.critical(self.window, "Blackjack Error", message)


def launch_qt(config: GameConfig, argv: Sequence[str]) -> int:
    app = QtWidgets.QApplication(list(argv))
    window = TableWindow()
    window.show()
    engine = RoundEngine(QtPresenter(window), config)
    result = engine.run_session()
    summary = f"Session over with {plural(result.chips, 'chip')}."
    window.append_message(summary)
    QtWidgets.QMessageBox.information(window, "Blackjack", summary)
    window.close()
    app.quit()
    return 0


__all__ = ["QtPresenter", "launch_qt"]

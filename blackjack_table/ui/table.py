"""Qt widgets representing the Blackjack table."""
from __future__ import annotations

from typing import Dict, List, Sequence

from PyQt6 import QtWidgets

from ..core.cards import Card
from .widgets import CardLabel


class HandRow(QtWidgets.QGroupBox):
    """One participant's cards and running value."""

    def __init__(self, title: str) -> None:
        super().__init__(title)
        layout = QtWidgets.QVBoxLayout(self)
        self.cards_layout = QtWidgets.QHBoxLayout()
        self.cards_layout.setSpacing(8)
        self.cards_layout.addStretch()
        layout.addLayout(self.cards_layout)
        self.value_label = QtWidgets.QLabel("Value: -")
        layout.addWidget(self.value_label)
        self.card_labels: List[CardLabel] = []

    def show_cards(self, cards: Sequence[Card], hidden: int = 0) -> None:
        for label in self.card_labels:
            self.cards_layout.removeWidget(label)
            label.deleteLater()
        self.card_labels = [CardLabel(card) for card in cards]
        self.card_labels.extend(CardLabel() for _ in range(hidden))
        for index, label in enumerate(self.card_labels):
            self.cards_layout.insertWidget(index, label)

    def show_value(self, value: int) -> None:
        self.value_label.setText(f"Value: {value}")

    def reset(self) -> None:
        self.show_cards(())
        self.value_label.setText("Value: -")


class TableWindow(QtWidgets.QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Blackjack")
        self.resize(720, 520)
        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)

        self.rows: Dict[str, HandRow] = {"Dealer": HandRow("Dealer"), "Player": HandRow("You")}
        layout.addWidget(self.rows["Dealer"])
        layout.addWidget(self.rows["Player"])

        self.chips_label = QtWidgets.QLabel("Chips: -")
        layout.addWidget(self.chips_label)

        self.log = QtWidgets.QPlainTextEdit()
        self.log.setReadOnly(True)
        layout.addWidget(self.log, stretch=1)

        self.setCentralWidget(central)
        self.status = self.statusBar()
        self.status.showMessage("Welcome to Blackjack")

    def row(self, label: str) -> HandRow:
        if label not in self.rows:
            self.rows[label] = HandRow(label)
            self.centralWidget().layout().insertWidget(len(self.rows) - 1, self.rows[label])
        return self.rows[label]

    def append_message(self, text: str) -> None:
        self.log.appendPlainText(text)
        self.status.showMessage(text)

    def clear_table(self) -> None:
        for row in self.rows.values():
            row.reset()


__all__ = ["TableWindow", "HandRow"]

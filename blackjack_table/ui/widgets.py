"""Reusable Qt widgets for the Blackjack table."""
from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets

from ..core.cards import Card, Suit

RED_SUITS = {Suit.HEARTS, Suit.DIAMONDS}


class CardLabel(QtWidgets.QLabel):
    """Simple label that renders a playing card, or its back when hidden."""

    def __init__(self, card: Optional[Card] = None, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.setMinimumWidth(56)
        self.set_card(card)

    def set_card(self, card: Optional[Card]) -> None:
        if card is None:
            self.setText("??")
            colour = "#333"
        else:
            self.setText(f"{card.rank.label}\n{card.suit.value}")
            colour = "#b00" if card.suit in RED_SUITS else "#111"
        self.setStyleSheet(
            f"border: 1px solid #666; padding: 6px; background: #fff; color: {colour}; font-weight: bold;"
        )


__all__ = ["CardLabel"]

"""Error kinds raised by the Blackjack rules engine."""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    UNRECOGNIZED_RANK = "unrecognized_rank"
    UNRECOGNIZED_SUIT = "unrecognized_suit"
    EMPTY_DECK = "empty_deck"
    BET_BELOW_MINIMUM = "bet_below_minimum"
    INSUFFICIENT_CHIPS = "insufficient_chips"
    INVALID_CONFIG = "invalid_config"


class BlackjackError(Exception):
    """A broken table rule. None of these are recoverable inside a round."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"


__all__ = ["ErrorKind", "BlackjackError"]

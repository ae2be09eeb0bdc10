"""High level round orchestration."""
from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional

from .errors import BlackjackError, ErrorKind
from .game import RoundPhase, RoundResult, SessionState, SessionStats
from .presenter import Announcement, ChipsDisplay, TablePresenter
from .rules import BLACKJACK, DEALER_STANDS_AT, MINIMUM_BET, STARTING_CHIPS, RoundOutcome, decide_outcome

LOGGER = logging.getLogger(__name__)

INTERFACES = ("console", "qt", "tk")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PLAYER_LABEL = "Player"
DEALER_LABEL = "Dealer"

ANOTHER_CARD_PROMPT = "Would you like 1 more card (y/n)?"
ANOTHER_ROUND_PROMPT = "Would you like to play another round (y/n)?"

OUTCOME_ANNOUNCEMENTS = {
    RoundOutcome.WIN: Announcement.PLAYER_WINS,
    RoundOutcome.PUSH: Announcement.PLAYER_PUSHES,
    RoundOutcome.LOSE: Announcement.PLAYER_LOSES,
}


@dataclass
class GameConfig:
    starting_chips: int = STARTING_CHIPS
    minimum_bet: int = MINIMUM_BET
    dealer_stands_at: int = DEALER_STANDS_AT
    interface: str = "console"
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def validate(self) -> None:
        if self.starting_chips < 0:
            raise BlackjackError(ErrorKind.INVALID_CONFIG, "starting chips must not be negative.")
        if self.minimum_bet < 1:
            raise BlackjackError(ErrorKind.INVALID_CONFIG, "minimum bet must be at least 1 chip.")
        if not 1 <= self.dealer_stands_at <= BLACKJACK:
            raise BlackjackError(
                ErrorKind.INVALID_CONFIG, f"dealer must stand at a value between 1 and {BLACKJACK}."
            )
        if self.interface not in INTERFACES:
            raise BlackjackError(
                ErrorKind.INVALID_CONFIG,
                f"unknown interface {self.interface!r}, expected one of {', '.join(INTERFACES)}.",
            )
        if self.log_level not in LOG_LEVELS:
            raise BlackjackError(
                ErrorKind.INVALID_CONFIG,
                f"unknown log level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}.",
            )


def load_game_config(path: Path) -> GameConfig:
    """Read a :class:`GameConfig` from a JSON file. Unknown keys are ignored."""

    try:
        data = json.loads(Path(path).read_text())
    except OSError as exc:
        raise BlackjackError(ErrorKind.INVALID_CONFIG, f"unable to read {path}: {exc.strerror}.") from exc
    except ValueError as exc:
        raise BlackjackError(ErrorKind.INVALID_CONFIG, f"{path} is not valid JSON.") from exc
    if not isinstance(data, dict):
        raise BlackjackError(ErrorKind.INVALID_CONFIG, f"{path} must contain a JSON object.")

    defaults = GameConfig()
    try:
        config = GameConfig(
            starting_chips=int(data.get("starting_chips", defaults.starting_chips)),
            minimum_bet=int(data.get("minimum_bet", defaults.minimum_bet)),
            dealer_stands_at=int(data.get("dealer_stands_at", defaults.dealer_stands_at)),
            interface=str(data.get("interface", defaults.interface)).lower(),
            seed=None if data.get("seed") is None else int(data["seed"]),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
        )
    except (TypeError, ValueError) as exc:
        raise BlackjackError(ErrorKind.INVALID_CONFIG, f"{path} holds a malformed value: {exc}.") from exc
    config.validate()
    return config


class SessionStatus(Enum):
    COMPLETED = auto()
    ABORTED = auto()


@dataclass
class SessionResult:
    status: SessionStatus
    chips: int
    stats: SessionStats
    rounds: List[RoundResult] = field(default_factory=list)
    error: Optional[BlackjackError] = None


class RoundEngine:
    """Runs Blackjack rounds against the house until the player leaves."""

    def __init__(
        self,
        presenter: TablePresenter,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.presenter = presenter
        self.config = config or GameConfig()
        self.config.validate()
        if rng is None and self.config.seed is not None:
            rng = random.Random(self.config.seed)
        self.state = SessionState.new(
            self.config.starting_chips,
            minimum_bet=self.config.minimum_bet,
            dealer_stands_at=self.config.dealer_stands_at,
            rng=rng,
        )

    def play_round(self) -> RoundResult:
        """Play one round from the bet through cleanup."""

        state = self.state
        player, dealer = state.player, state.dealer
        self.presenter.announce(Announcement.ROUND_START)

        self.presenter.display_chips(ChipsDisplay.TO_BET_WITH, player.chips_available)
        bet = self.presenter.prompt_bet(player.minimum_bet, player.chips_available)
        state.start_round(bet)

        state.deal_to_player()
        state.deal_to_player()
        self._show_player()
        state.deal_to_dealer()
        self._show_dealer()
        state.deal_to_dealer()
        self.presenter.announce(Announcement.HOLE_CARD_HIDDEN)

        state.phase = RoundPhase.PLAYER_TURN
        while not player.is_bust() and not player.has_blackjack():
            if not self.presenter.prompt_yes_no(ANOTHER_CARD_PROMPT):
                break
            state.deal_to_player()
            self._show_player()

        if player.is_bust():
            result = state.settle(RoundOutcome.LOSE)
        else:
            state.phase = RoundPhase.DEALER_TURN
            self._show_dealer()
            while not dealer.should_stand():
                state.deal_to_dealer()
                self._show_dealer()
            result = state.settle(decide_outcome(player.hand_value(), dealer.hand_value()))

        LOGGER.info(
            "Round %d: %s (player %d, dealer %d), %d chips",
            state.round_number,
            result.outcome.value,
            result.player_value,
            result.dealer_value,
            result.chips_after,
        )
        self.presenter.announce(OUTCOME_ANNOUNCEMENTS[result.outcome])
        self.presenter.display_chips(ChipsDisplay.CURRENT, player.chips_available)

        self.presenter.announce(Announcement.ROUND_END)
        state.discard_table()
        return result

    def run_session(self) -> SessionResult:
        """Play rounds until the player is out of chips or declines to go on."""

        rounds: List[RoundResult] = []
        try:
            self.presenter.announce(Announcement.WELCOME)
            if self.state.player.has_chips_to_play():
                while True:
                    rounds.append(self.play_round())
                    if not self.state.player.has_chips_to_play():
                        break
                    if not self.presenter.prompt_yes_no(ANOTHER_ROUND_PROMPT):
                        self.presenter.announce(Announcement.GOODBYE)
                        return self._result(SessionStatus.COMPLETED, rounds)
            self.presenter.announce(Announcement.OUT_OF_CHIPS)
            self.presenter.announce(Announcement.GOODBYE)
        except BlackjackError as exc:
            LOGGER.error("Session aborted after %d rounds: %s", len(rounds), exc.message)
            self.presenter.display_error(str(exc))
            return self._result(SessionStatus.ABORTED, rounds, error=exc)
        return self._result(SessionStatus.COMPLETED, rounds)

    def _result(
        self, status: SessionStatus, rounds: List[RoundResult], error: Optional[BlackjackError] = None
    ) -> SessionResult:
        return SessionResult(
            status=status,
            chips=self.state.player.chips_available,
            stats=self.state.stats,
            rounds=rounds,
            error=error,
        )

    def _show_player(self) -> None:
        hand = self.state.player.hand
        self.presenter.display_hand(PLAYER_LABEL, hand.snapshot())
        self.presenter.display_hand_value(PLAYER_LABEL, hand.value())

    def _show_dealer(self) -> None:
        hand = self.state.dealer.hand
        self.presenter.display_hand(DEALER_LABEL, hand.snapshot())
        self.presenter.display_hand_value(DEALER_LABEL, hand.value())


def run_session(presenter: TablePresenter, config: Optional[GameConfig] = None) -> SessionResult:
    return RoundEngine(presenter, config).run_session()


__all__ = [
    "GameConfig",
    "RoundEngine",
    "SessionResult",
    "SessionStatus",
    "load_game_config",
    "run_session",
]

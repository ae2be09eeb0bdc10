"""Application bootstrap for the Blackjack table."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .core.engine import GameConfig, SessionStatus, load_game_config, run_session
from .core.errors import BlackjackError
from .ui.console import ConsolePresenter

LOGGER = logging.getLogger(__name__)


def _launch_gui(config: GameConfig, argv: list[str]) -> Optional[int]:
    """Run a windowed session, or return None when no GUI can start."""

    if config.interface == "qt":
        try:
            from .ui.qt_app import launch_qt
        except Exception as exc:  # pragma: no cover - Qt not available during tests
            LOGGER.warning("Falling back to Tkinter UI due to PyQt6 load failure")
            LOGGER.debug("PyQt6 import error: %s", exc)
        else:
            return launch_qt(config, argv)

    try:
        from .ui.tk_app import create_root, launch_tk

        root = create_root()
    except Exception as exc:  # pragma: no cover - headless CI
        LOGGER.warning("Tkinter fallback unavailable, playing in the console")
        LOGGER.debug("Tkinter error: %s", exc)
        return None
    return launch_tk(config, root)


def run(argv: Optional[list[str]] = None) -> int:
    """Run a Blackjack session. ``argv[1]``, if given, is a JSON config file."""

    argv = list(sys.argv if argv is None else argv)
    try:
        config = load_game_config(Path(argv[1]).expanduser()) if len(argv) > 1 else GameConfig()
    except BlackjackError as exc:
        print(exc, file=sys.stderr)
        return 1
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if config.interface != "console":
        code = _launch_gui(config, argv)
        if code is not None:
            return code

    try:
        result = run_session(ConsolePresenter(), config)
    except (EOFError, KeyboardInterrupt):
        print("\nQuitting Blackjack... Goodbye!")
        return 0
    if result.status is SessionStatus.ABORTED:
        LOGGER.debug("Session ended on %s", result.error.kind if result.error else "unknown error")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

"""Minimal Tkinter fallback UI."""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox, simpledialog
from typing import Sequence

from ..core.cards import Card
from ..core.engine import GameConfig, RoundEngine
from ..core.presenter import Announcement, ChipsDisplay
from .console import MESSAGES, OWNERS, format_hand, plural

LOGGER = logging.getLogger(__name__)


class TkPresenter:
    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self.text = tk.Text(root, width=72, height=24, state="disabled")
        self.text.pack(padx=20, pady=20, fill="both", expand=True)

    def _say(self, line: str) -> None:
        self.text.configure(state="normal")
        self.text.insert("end", line + "\n")
        self.text.see("end")
        self.text.configure(state="disabled")
        self.root.update()

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
        amount = None
        while amount is None:
            amount = simpledialog.askinteger(
                "Place Your Bet",
                f"Bet between {minimum} and {maximum} chips:",
                parent=self.root,
                minvalue=minimum,
                maxvalue=maximum,
            )
        self._say(f"Your bet is {plural(amount, 'chip')}.")
        return amount

    def prompt_yes_no(self, prompt: str) -> bool:
        return messagebox.askyesno("Blackjack", prompt.replace(" (y/n)", ""), parent=self.root)

    def announce(self, event: Announcement) -> None:
        self._say(MESSAGES[event])

    def display_error(self, message: str) -> None:
        messagebox.showerror("Blackjack Error", message, parent=self.root)


def create_root() -> tk.Tk:
    root = tk.Tk()
    root.title("Blackjack (Fallback)")
    return root


def launch_tk(config: GameConfig, root: tk.Tk) -> int:
    try:
        RoundEngine(TkPresenter(root), config).run_session()
    except tk.TclError:
        LOGGER.info("Tk window closed during the session")
        return 0
    root.destroy()
    return 0


__all__ = ["TkPresenter", "create_root", "launch_tk"]

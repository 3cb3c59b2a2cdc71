from __future__ import annotations

from enum import Enum
from typing import Callable

from rich.console import Console


RULE = "-" * 79
BANNER = "=" * 79

TITLE_LINES = [
    "           /\\                     /\\                     /\\",
    "          /  \\        /\\         /  \\        /\\         /  \\",
    "     /\\  /    \\  /\\  /  \\  /\\  /    \\  /\\  /  \\  /\\  /    \\  /\\",
    "    /  \\/      \\/  \\/    \\/  \\/      \\/  \\/    \\/  \\/      \\/  \\",
    BANNER,
    "                              LANDS OF FELLMORE",
    BANNER,
    "                     a game made by Tnac09 & Dothmar",
    RULE,
    "",
    "    [S] START GAME",
    "    [H] HELP",
    "    [Q] QUIT",
    "",
    RULE,
]

HELP_LINES = [
    "================================== HELP ==================================",
    "  MOVEMENT:  north   south   east   west",
    "  INVENTORY: inventory   (or)   inv",
    "  PICKUP:    pick up <item>",
    "  USE:       use <item>",
    "  BUY:       buy <item>",
    "  OTHER:     look   quit",
    "==========================================================================",
]


class TitleChoice(Enum):
    NONE = "none"
    START = "start"
    HELP = "help"
    QUIT = "quit"


def parse_title_choice(raw: str) -> TitleChoice:
    choice = raw.strip().upper()
    if choice == "S":
        return TitleChoice.START
    if choice == "H":
        return TitleChoice.HELP
    if choice == "Q":
        return TitleChoice.QUIT
    return TitleChoice.NONE


class Screens:
    """Title menu and help page drawn on a rich console."""

    def __init__(self, console: Console, ask: Callable[[str], str], clear_screen: bool = True):
        self.console = console
        self.ask = ask
        self.clear_screen = clear_screen

    def _show(self, lines: list[str]) -> None:
        if self.clear_screen:
            self.console.clear()
        for line in lines:
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def show_title(self) -> TitleChoice:
        self._show(TITLE_LINES)
        try:
            return parse_title_choice(self.ask("> "))
        except EOFError:
            return TitleChoice.QUIT

    def show_help(self) -> None:
        self._show(HELP_LINES)
        try:
            self.ask("Press ENTER to return...")
        except EOFError:
            pass

    def title_menu(self) -> bool:
        """Loop on the title menu; True means start a game, False means quit."""
        while True:
            choice = self.show_title()
            if choice is TitleChoice.QUIT:
                return False
            if choice is TitleChoice.HELP:
                self.show_help()
                continue
            if choice is TitleChoice.START:
                return True

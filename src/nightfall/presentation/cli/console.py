"""Text console adapter used by the CLI loop."""
from __future__ import annotations

import os
from typing import Protocol


class Console(Protocol):
    """Minimal text I/O surface the game loop needs."""

    def clear(self) -> None: ...

    def write_line(self, text: str = "") -> None: ...

    def write(self, text: str) -> None: ...

    def read_line(self) -> str: ...


class TerminalConsole:
    """Console backed by stdin/stdout."""

    def __init__(self, *, clear_screen: bool = True) -> None:
        self._clear_screen = clear_screen

    def clear(self) -> None:
        if self._clear_screen:
            os.system("cls" if os.name == "nt" else "clear")

    def write_line(self, text: str = "") -> None:
        print(text)

    def write(self, text: str) -> None:
        print(text, end="", flush=True)

    def read_line(self) -> str:
        """Read one line; EOF reads as an empty string."""
        try:
            return input()
        except EOFError:
            return ""

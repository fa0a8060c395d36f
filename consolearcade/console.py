"""Terminal helpers: colours, cursor control and non-blocking key reads."""

from __future__ import annotations

import enum
import os
import select
import shutil
import sys
import time
from typing import IO, Iterable

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

ESCAPE = "\x1b"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_UP = "up"
KEY_DOWN = "down"

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
HOME = "\x1b[H"
CLEAR = "\x1b[2J\x1b[H"
RESET = "\x1b[0m"

_WINDOWS_ARROWS = {"K": KEY_LEFT, "M": KEY_RIGHT, "H": KEY_UP, "P": KEY_DOWN}
_ANSI_ARROWS = {b"D": KEY_LEFT, b"C": KEY_RIGHT, b"A": KEY_UP, b"B": KEY_DOWN}


class Color(enum.IntEnum):
    """Console text colours, numbered as classic console attributes."""

    GREEN = 10
    CYAN = 11
    RED = 12
    MAGENTA = 13
    YELLOW = 14
    DEFAULT = 7


_ANSI_CODES = {
    Color.GREEN: 92,
    Color.CYAN: 96,
    Color.RED: 91,
    Color.MAGENTA: 95,
    Color.YELLOW: 93,
    Color.DEFAULT: 39,
}


def colored(text: str, color: Color) -> str:
    """Wrap text in the escape sequence for the colour, followed by a reset."""
    return f"\x1b[{_ANSI_CODES[Color(color)]}m{text}{RESET}"


class Console:
    """A text console with cursor control and non-blocking keyboard input.

    When ``keys`` is given, keys are taken from it instead of the keyboard,
    one per ``read_key`` call (``None`` entries mean no key was pressed),
    and ``pause`` does not sleep.
    """

    def __init__(self, stream: IO[str] | None = None, keys: Iterable[str | None] | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self._script = iter(keys) if keys is not None else None
        self._saved_mode = None

    def __enter__(self) -> "Console":
        if self._script is None and termios is not None and sys.stdin.isatty():
            fd = sys.stdin.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        self._emit(HIDE_CURSOR)
        return self

    def __exit__(self, *args) -> None:
        self._emit(SHOW_CURSOR)
        if self._saved_mode is not None:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None

    def read_key(self) -> str | None:
        """Return the pending key, or None when no key is waiting."""
        if self._script is not None:
            return next(self._script, None)
        if msvcrt is not None:
            return self._read_windows_key()
        return self._read_posix_key()

    def home(self) -> None:
        """Move the cursor to the top-left corner without clearing."""
        self._emit(HOME)

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self._emit(CLEAR)

    def write(self, text: str, color: Color | None = None) -> None:
        """Write text, optionally in a colour."""
        self._emit(text if color is None else colored(text, color))

    def width(self) -> int:
        """Number of columns of the terminal."""
        return shutil.get_terminal_size(fallback=(80, 24)).columns

    def pause(self, seconds: float) -> None:
        """Wait for the given time; scripted consoles return at once."""
        if self._script is None and seconds > 0:
            time.sleep(seconds)

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    @staticmethod
    def _read_windows_key() -> str | None:
        if not msvcrt.kbhit():
            return None
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WINDOWS_ARROWS.get(msvcrt.getwch())
        return ch

    @staticmethod
    def _read_posix_key() -> str | None:
        fd = sys.stdin.fileno()
        ready, _, _ = select.select([fd], [], [], 0)
        if not ready:
            return None
        data = os.read(fd, 1)
        if not data:
            return None
        if data == ESCAPE.encode():
            more, _, _ = select.select([fd], [], [], 0.01)
            if not more:
                return ESCAPE
            seq = os.read(fd, 2)
            if seq[:1] in (b"[", b"O"):
                return _ANSI_ARROWS.get(seq[1:2])
            return ESCAPE
        return data.decode(errors="replace")
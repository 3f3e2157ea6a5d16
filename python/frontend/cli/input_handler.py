"""Single-keypress reader for the terminal frontend.

Letters slide tiles (WASD), arrow keys move the selection cursor, Enter
or Space slides the selected line. Works on macOS / Linux (tty+termios)
and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

# Action names returned by ``get_key`` / ``get_key_timeout``.
SLIDES = ("up", "down", "left", "right")
CURSOR = ("cursor_up", "cursor_down", "cursor_left", "cursor_right")

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "n": "new",
    "x": "reset",
    "k": "rankings",
    "\r": "select",
    "\n": "select",
    " ": "select",
}

# ESC [ A/B/C/D
_ARROW_MAP: dict[str, str] = {
    "A": "cursor_up",
    "B": "cursor_down",
    "C": "cursor_right",
    "D": "cursor_left",
}

# Windows scan codes that follow \xe0 / \x00
_SCAN_MAP: dict[str, str] = {
    "H": "cursor_up",
    "P": "cursor_down",
    "M": "cursor_right",
    "K": "cursor_left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string.

    Unmapped printable characters come back unchanged (menu digits);
    anything else becomes ``""``.
    """
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    lower = ch.lower()
    if lower in _KEY_MAP and lower.isalpha():
        return _KEY_MAP[lower]
    return ch if ch.isprintable() else ""


# -- platform readers ---------------------------------------------------------


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _SCAN_MAP.get(msvcrt.getwch(), "")
    if ch == "\x1b":
        return "quit"
    return resolve(ch)


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _byte(wait: float | None) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        # os.read is unbuffered, so select() still sees the rest of a
        # multi-byte escape sequence.
        ch = _byte(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return resolve(ch)

        if _byte(0.1) != "[":
            return "quit"  # bare Escape
        code = _byte(0.1)
        return _ARROW_MAP.get(code or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ---------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string."""
    key = _read(None)
    return key or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but return ``None`` if nothing arrives in *timeout* s."""
    return _read(timeout)

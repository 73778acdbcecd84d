import curses
from dataclasses import dataclass


PRESS = "press"
RELEASE = "release"
REPEAT = "repeat"


class InputReadError(OSError):
    """Raised when the terminal stops delivering key events."""


@dataclass(frozen=True)
class KeyEvent:
    # a single character for text keys, otherwise a key name like "left"
    code: str
    kind: str = PRESS

    @property
    def is_char(self) -> bool:
        return len(self.code) == 1

    @property
    def is_press(self) -> bool:
        return self.kind == PRESS


_CHAR_NAMES = {
    "\x1b": "esc",
    "\n": "enter",
    "\r": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}

_KEY_NAMES = {
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_ENTER: "enter",
    curses.KEY_RESIZE: "resize",
}


def translate(wch) -> KeyEvent:
    """Turn a value returned by ``get_wch`` into a KeyEvent.

    curses only reports key presses, so every event is a press.
    """
    if isinstance(wch, str):
        return KeyEvent(_CHAR_NAMES.get(wch, wch))
    return KeyEvent(_KEY_NAMES.get(wch, "unknown"))


def read_key_event(win) -> KeyEvent:
    """Block until the next key event arrives on ``win``.

    A failed read is not retried; it surfaces as InputReadError.
    """
    try:
        wch = win.get_wch()
    except curses.error as exc:
        raise InputReadError(f"could not read key event: {exc}") from exc
    return translate(wch)

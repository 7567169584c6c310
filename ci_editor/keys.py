"""Reading keystrokes from the terminal and applying them to the editor."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from .editor import Editor


class Key(IntEnum):
    QUIT = 1000
    BACKSPACE = 1001
    CARRIAGE = 1002
    ESCAPE = 1003
    UP = 1004
    DOWN = 1005
    LEFT = 1006
    RIGHT = 1007
    PAGE_UP = 1008
    PAGE_DOWN = 1009
    HOME = 1010
    END = 1011
    DEL = 1012


_COMMANDS = {
    "1": Key.HOME,
    "3": Key.DEL,
    "4": Key.END,
    "5": Key.PAGE_UP,
    "6": Key.PAGE_DOWN,
    "7": Key.HOME,
    "8": Key.END,
}

_ARROWS = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
    "H": Key.HOME,
    "F": Key.END,
}


def ctrl_key(char: str) -> int:
    """Return the code that Ctrl plus ``char`` produces."""
    return ord(char) & 0x1F


def _read_escape(read_byte: Callable[[], bytes]) -> Key:
    first = read_byte()
    second = read_byte() if first else b""
    if not second:
        return Key.ESCAPE
    lead, code = chr(first[0]), chr(second[0])
    if lead == "[" and code.isdigit() and code.isascii():
        tail = read_byte()
        if not tail or tail[:1] != b"~":
            return Key.ESCAPE
        return _COMMANDS.get(code, Key.ESCAPE)
    return _ARROWS.get(code, Key.ESCAPE)


def read_key(read_byte: Callable[[], bytes]) -> tuple[Key | None, str]:
    """Read one keystroke.

    ``read_byte`` returns one byte, or an empty result when nothing is
    available. The result is the recognised key (None for an ordinary
    character) and the first character read.
    """
    data = read_byte()
    while not data:
        data = read_byte()
    byte = data[0]
    char = chr(byte)
    if byte == 0x1B:
        return _read_escape(read_byte), char
    if byte == ctrl_key("l"):
        return Key.ESCAPE, char
    if byte == ctrl_key("q"):
        return Key.QUIT, char
    if byte == 127 or byte == ctrl_key("h"):
        return Key.BACKSPACE, char
    if char == "\r":
        return Key.CARRIAGE, char
    return None, char


def process_key(editor: Editor, key: Key | None, char: str) -> bool:
    """Apply a keystroke to ``editor``; return False when the user quits."""
    match key:
        case Key.QUIT:
            return False
        case Key.ESCAPE | Key.BACKSPACE | Key.CARRIAGE | Key.DEL:
            pass
        case Key.UP:
            editor.move_up()
            editor.move_eol()
        case Key.DOWN:
            editor.move_down()
            editor.move_eol()
        case Key.LEFT:
            editor.move_left()
        case Key.RIGHT:
            editor.move_right()
        case Key.PAGE_UP:
            editor.move_top()
        case Key.PAGE_DOWN:
            editor.move_bottom()
        case Key.HOME:
            editor.move_begin()
        case Key.END:
            editor.move_end()
        case _:
            editor.insert_char(char)
    return True
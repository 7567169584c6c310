"""Building the escape-sequence output that draws the editor screen."""

from __future__ import annotations

import time

from .editor import MESSAGE_SIZE, Editor
from .row import Row

VERSION = "0.0.1"

CLEAR_LINE = "\x1b[K"
HIDE_CURSOR_AND_HOME = "\x1b[?25l\x1b[H"
SHOW_CURSOR = "\x1b[?25h"
INVERT = "\x1b[7m"
RESET = "\x1b[m"
STATUS_TIMEOUT = 5


def _visible_part(editor: Editor, row: Row) -> str:
    start = editor.coloff
    width = max(editor.wincols, 0)
    return row.render[start : start + width]


def _welcome(editor: Editor) -> str:
    message = f"CI Editor -- version {VERSION}"[: MESSAGE_SIZE - 1]
    length = max(min(len(message), editor.wincols), 0)
    pad = (editor.wincols - length) // 2
    return "~" + " " * max(pad - 1, 0) + message[:length]


def render_file(editor: Editor) -> str:
    """Return the text area: the visible rows, then tildes for empty lines."""
    parts: list[str] = []
    shown = max(min(editor.nrows, editor.winrows), 0)
    for y in range(shown):
        parts.append(CLEAR_LINE)
        row = editor.row_at(y + editor.rowoff)
        if row is not None:
            parts.append(_visible_part(editor, row))
        parts.append("\r\n")
    for y in range(shown, editor.winrows):
        parts.append(CLEAR_LINE)
        if editor.nrows == 0 and y == editor.winrows // 3:
            parts.append(_welcome(editor))
        else:
            parts.append("~")
        parts.append("\r\n")
    parts.append(CLEAR_LINE)
    return "".join(parts)


def render_status_bar(editor: Editor) -> str:
    """Return the inverted status line: file name, line count and position."""
    name = editor.filename if editor.filename is not None else "[No Name]"
    left = f"{name[:20]} - {editor.nrows} lines"[: MESSAGE_SIZE - 1]
    length = max(min(len(left), editor.wincols), 0)
    right = f"{editor.cursor_y + 1}/{editor.nrows}"[: MESSAGE_SIZE - 1]
    parts = [INVERT, left[:length]]
    target = editor.wincols - len(right)
    if length < target:
        parts.append(" " * (target - length))
        length = target
    if length == target:
        parts.append(right)
    parts.append(RESET)
    return "".join(parts)


def render_message_bar(editor: Editor, now: float | None = None) -> str:
    """Return the message line; the message shows for five seconds."""
    if now is None:
        now = time.time()
    message = editor.status_message[: max(editor.wincols, 0)]
    if message and now - editor.status_time < STATUS_TIMEOUT:
        return CLEAR_LINE + message
    return CLEAR_LINE


def cursor_position(y: int, x: int) -> str:
    """Return the sequence that moves the cursor to zero-based row ``y``, column ``x``."""
    return f"\x1b[{y + 1};{x + 1}H"


def build_frame(editor: Editor, now: float | None = None) -> str:
    """Scroll ``editor`` to its cursor and return the whole screen update."""
    editor.update_scroll()
    return "".join(
        (
            HIDE_CURSOR_AND_HOME,
            render_file(editor),
            render_status_bar(editor),
            cursor_position(editor.winrows + 2, 1),
            render_message_bar(editor, now),
            cursor_position(
                editor.cursor_y - editor.rowoff, editor.render_x - editor.coloff
            ),
            SHOW_CURSOR,
        )
    )


def clear_screen() -> str:
    """Return the sequence that clears the screen and homes the cursor."""
    return "\x1b[2J\x1b[H"
"""Editor state: the rows of text, the cursor and the visible window."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field

from .row import TAB_STOP, Row

MESSAGE_SIZE = 80


@dataclass
class Editor:
    """The text being edited, the cursor and the scroll position."""

    winrows: int = 0
    wincols: int = 0
    rows: list[Row] = field(default_factory=list)
    filename: str | None = None
    cursor_x: int = 0
    cursor_y: int = 0
    rowoff: int = 0
    coloff: int = 0
    render_x: int = 0
    status_message: str = ""
    status_time: float = 0.0

    @property
    def nrows(self) -> int:
        return len(self.rows)

    def row_at(self, index: int) -> Row | None:
        """Return the row at ``index``, or None past the last row."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def open_file(self, path) -> None:
        """Append the lines of the file at ``path`` as rows."""
        with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as fh:
            lines = [Row(line.rstrip("\r\n")) for line in fh]
        self.filename = os.fspath(path)
        self.rows.extend(lines)

    def insert_char(self, char: str) -> None:
        """Insert ``char`` at the cursor, adding a row when past the end."""
        if self.cursor_y == self.nrows:
            self.rows.append(Row())
        row = self.row_at(self.cursor_y)
        if row is not None:
            row.insert_char(self.cursor_x, char)

    def set_status_message(self, message: str, now: float | None = None) -> None:
        """Show ``message`` in the message bar from time ``now`` on."""
        self.status_message = message[: MESSAGE_SIZE - 1]
        self.status_time = time.time() if now is None else now

    def update_scroll(self) -> None:
        """Recompute the rendered cursor column and scroll to keep it visible."""
        row = self.row_at(self.cursor_y)
        if row is None:
            return
        render_x = 0
        for ch in row.raw[: self.cursor_x]:
            if ch == "\t":
                render_x += (TAB_STOP - 1) - render_x % TAB_STOP
            render_x += 1
        render_x += max(0, self.cursor_x - len(row.raw))
        self.render_x = render_x

        if self.cursor_y <= self.rowoff:
            self.rowoff = self.cursor_y
        if self.cursor_y >= self.rowoff + self.winrows:
            self.rowoff = self.cursor_y - self.winrows + 1
        if self.render_x <= self.coloff:
            self.coloff = self.render_x
        if self.render_x >= self.coloff + self.wincols:
            self.coloff = self.render_x - self.wincols + 1

    def move_up(self) -> None:
        if self.cursor_y > 0:
            self.cursor_y -= 1

    def move_down(self) -> None:
        if self.cursor_y < self.nrows:
            self.cursor_y += 1

    def move_left(self) -> None:
        if self.cursor_x > 0:
            self.cursor_x -= 1

    def move_right(self) -> None:
        row = self.row_at(self.cursor_y)
        if row is not None and self.cursor_x < len(row.raw):
            self.cursor_x += 1

    def move_top(self) -> None:
        """Jump one screen up from the top of the window."""
        self.cursor_y = self.rowoff
        if self.cursor_y > 0:
            self.cursor_y = max(0, self.cursor_y - max(self.winrows, 0))

    def move_bottom(self) -> None:
        """Jump one screen down from the bottom of the window."""
        self.cursor_y = min(self.rowoff + self.winrows, self.nrows)
        if self.cursor_y < self.nrows:
            self.cursor_y = min(self.cursor_y + max(self.winrows, 0), self.nrows)

    def move_begin(self) -> None:
        self.cursor_x = 1

    def move_end(self) -> None:
        row = self.row_at(self.cursor_y)
        if row is not None:
            self.cursor_x = len(row.raw)

    def move_eol(self) -> None:
        """Pull the cursor back onto the end of a shorter row."""
        row = self.row_at(self.cursor_y)
        if row is not None and self.cursor_x > len(row.raw):
            self.cursor_x = len(row.raw)
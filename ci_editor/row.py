"""A single line of text together with its on-screen rendering."""

from __future__ import annotations

from dataclasses import dataclass

TAB_STOP = 8


def render_tabs(raw: str) -> str:
    """Return ``raw`` with every tab expanded to the next tab stop."""
    parts: list[str] = []
    column = 0
    for ch in raw:
        if ch == "\t":
            width = TAB_STOP - column % TAB_STOP
            parts.append(" " * width)
            column += width
        else:
            parts.append(ch)
            column += 1
    return "".join(parts)


@dataclass
class Row:
    """One line of the edited text."""

    raw: str = ""

    @property
    def render(self) -> str:
        """The text as it is drawn on screen, tabs expanded."""
        return render_tabs(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def insert_char(self, index: int, char: str) -> Row:
        """Insert ``char`` before ``index``; an index out of range appends."""
        if index < 0 or index > len(self.raw):
            index = len(self.raw)
        self.raw = self.raw[:index] + char + self.raw[index:]
        return self
"""Terminal control and the editor's main loop."""

from __future__ import annotations

import fcntl
import os
import re
import struct
import sys
import termios
import time
from collections.abc import Iterator
from contextlib import contextmanager

from .editor import Editor
from .keys import process_key, read_key
from .render import build_frame, clear_screen

CURSOR_BUFFER_SIZE = 32

_REPORT_RE = re.compile(rb"\s*([+-]?\d+);\s*([+-]?\d+)")


class TerminalError(Exception):
    """A terminal operation failed."""


def parse_cursor_report(data: bytes) -> tuple[int, int]:
    """Parse a cursor position report ``ESC [ rows ; cols R``."""
    if data[:2] != b"\x1b[":
        raise TerminalError("malformed cursor position report")
    match = _REPORT_RE.match(data, 2)
    if match is None:
        raise TerminalError("malformed cursor position report")
    return int(match.group(1)), int(match.group(2))


class Terminal:
    """A terminal attached to an input and an output file descriptor."""

    def __init__(self, infd: int = 0, outfd: int = 1) -> None:
        self.infd = infd
        self.outfd = outfd
        try:
            self._saved = termios.tcgetattr(infd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"tcgetattr: {exc}") from exc

    def window_size(self) -> tuple[int, int]:
        """Return the rows and columns left for text, keeping two for the bars."""
        try:
            packed = fcntl.ioctl(self.outfd, termios.TIOCGWINSZ, b"\0" * 8)
            rows, cols, _, _ = struct.unpack("HHHH", packed)
        except OSError:
            rows = cols = 0
        if cols == 0:
            rows, cols = self._query_size()
        return rows - 2, cols

    def _query_size(self) -> tuple[int, int]:
        try:
            self.write(b"\x1b[999C\x1b[999B")
            self.write(b"\x1b[6n")
        except OSError as exc:
            raise TerminalError(f"window size: {exc}") from exc
        reply = bytearray()
        while len(reply) < CURSOR_BUFFER_SIZE:
            try:
                byte = os.read(self.infd, 1)
            except OSError:
                break
            if not byte or byte == b"R":
                break
            reply += byte
        return parse_cursor_report(bytes(reply))

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Put the terminal in raw mode, restoring its settings on exit."""
        raw = [list(a) if isinstance(a, list) else a for a in self._saved]
        raw[0] &= ~(termios.IXON | termios.ICRNL | termios.BRKINT | termios.INPCK | termios.ISTRIP)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        raw[6][termios.VMIN] = 1
        try:
            termios.tcsetattr(self.infd, termios.TCSAFLUSH, raw)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"tcsetattr: {exc}") from exc
        try:
            yield
        finally:
            try:
                termios.tcsetattr(self.infd, termios.TCSAFLUSH, self._saved)
            except (termios.error, OSError) as exc:
                raise TerminalError(f"tcsetattr: {exc}") from exc

    def read_byte(self) -> bytes:
        """Read one byte; empty when nothing is available."""
        try:
            return os.read(self.infd, 1)
        except BlockingIOError:
            return b""
        except OSError as exc:
            raise TerminalError(f"read: {exc}") from exc

    def write(self, data: bytes | str) -> None:
        """Write all of ``data`` to the output."""
        if isinstance(data, str):
            data = data.encode("utf-8", "surrogateescape")
        view = memoryview(data)
        while view:
            written = os.write(self.outfd, view)
            view = view[written:]


def run(editor: Editor, terminal) -> None:
    """Redraw and handle keys until the user quits, then clear the screen."""
    while True:
        terminal.write(build_frame(editor, time.time()))
        key, char = read_key(terminal.read_byte)
        if not process_key(editor, key, char):
            terminal.write(clear_screen())
            return


def main(argv: list[str] | None = None) -> int:
    """Start the editor, optionally on the file named first in ``argv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        terminal = Terminal()
        rows, cols = terminal.window_size()
        editor = Editor(winrows=rows, wincols=cols)
        with terminal.raw_mode():
            if args:
                editor.open_file(args[0])
            editor.set_status_message("HELP: CTRL-Q = quit")
            run(editor, terminal)
    except TerminalError as exc:
        print(f"ci: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"ci: {exc}", file=sys.stderr)
        return 1
    return 0
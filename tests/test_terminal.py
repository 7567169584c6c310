import fcntl
import os
import struct
import termios

import pytest

from ci_editor.editor import Editor
from ci_editor.render import clear_screen
from ci_editor.terminal import Terminal, TerminalError, parse_cursor_report, run


@pytest.fixture
def pty_pair():
    master, slave = os.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)


def set_size(fd, rows, cols):
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


class FakeTerminal:
    def __init__(self, data):
        self._data = list(data)
        self.written = []

    def read_byte(self):
        if self._data:
            return bytes([self._data.pop(0)])
        return b""

    def write(self, data):
        self.written.append(data)


def test_parse_cursor_report():
    assert parse_cursor_report(b"\x1b[24;80R") == (24, 80)
    assert parse_cursor_report(b"\x1b[7;132") == (7, 132)


@pytest.mark.parametrize("data", [b"", b"24;80R", b"\x1b[abc", b"\x1b[24R", b"x[1;2"])
def test_parse_cursor_report_rejects_garbage(data):
    with pytest.raises(TerminalError):
        parse_cursor_report(data)


def test_non_terminal_rejected(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text("hello")
    with open(path, "rb") as fh, pytest.raises(TerminalError):
        Terminal(fh.fileno(), fh.fileno())


def test_window_size_reserves_two_rows(pty_pair):
    _, slave = pty_pair
    set_size(slave, 30, 100)
    term = Terminal(slave, slave)
    assert term.window_size() == (28, 100)


def test_window_size_falls_back_to_cursor_query(pty_pair):
    master, slave = pty_pair
    set_size(slave, 0, 0)
    term = Terminal(slave, slave)
    with term.raw_mode():
        os.write(master, b"\x1b[40;120R")
        assert term.window_size() == (38, 120)


def test_raw_mode_sets_and_restores(pty_pair):
    _, slave = pty_pair
    before = termios.tcgetattr(slave)
    term = Terminal(slave, slave)
    with term.raw_mode():
        inside = termios.tcgetattr(slave)
        assert inside[3] & termios.ECHO == 0
        assert inside[3] & termios.ICANON == 0
        assert inside[1] & termios.OPOST == 0
        assert inside[0] & termios.IXON == 0
    assert termios.tcgetattr(slave) == before


def test_read_byte_reads_one_byte(pty_pair):
    master, slave = pty_pair
    term = Terminal(slave, slave)
    with term.raw_mode():
        os.write(master, b"xy")
        assert term.read_byte() == b"x"
        assert term.read_byte() == b"y"


def test_read_byte_empty_when_nothing_waiting(pty_pair):
    _, slave = pty_pair
    term = Terminal(slave, slave)
    os.set_blocking(slave, False)
    with term.raw_mode():
        assert term.read_byte() == b""


def test_write_reaches_other_side(pty_pair):
    master, slave = pty_pair
    term = Terminal(slave, slave)
    sequence = clear_screen()
    with term.raw_mode():
        term.write(sequence)
        received = os.read(master, 64)
    assert received == sequence.encode()
    assert received == b"\x1b[2J\x1b[H"
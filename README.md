# ci-editor

A small text editor that runs in your terminal. It switches the terminal into
raw mode, shows the file with tabs expanded to the next multiple of 8 columns,
scrolls with the cursor, and draws an inverted status bar with the file name
(first 20 characters), the line count and the cursor's line. A message line
under it shows a help hint for five seconds after start-up.

It needs a POSIX terminal (it uses `termios` and `fcntl`).

## Installation

```
pip install .
```

## Usage

Open a file:

```
ci notes.txt
```

Start with an empty buffer:

```
ci
```

If the terminal cannot be set up or the file cannot be read, `ci` prints the
error to standard error and exits with status 1.

### Keys

| Key                 | Action                                              |
|---------------------|-----------------------------------------------------|
| Arrow keys          | Move the cursor                                     |
| Page Up / Page Down | Jump a screen up or down                            |
| Home                | Put the cursor at column 1 (after the first character) |
| End                 | Put the cursor at the end of the line               |
| Other keys          | Insert the character at the cursor                  |
| Ctrl-Q              | Clear the screen and quit                           |

## What it does not do

Backspace, Delete, Enter and Escape are read but do nothing: characters can
only be inserted, lines cannot be split or joined, and nothing can be
removed. Edits stay in memory; there is no command to save, so nothing is
ever written back to disk. There is no search and no undo.

## Using it as a library

The editing state is kept apart from the terminal, so it can be driven
without a tty:

```python
from ci_editor.editor import Editor
from ci_editor.keys import Key, process_key
from ci_editor.render import build_frame

editor = Editor(winrows=22, wincols=80)
process_key(editor, None, "h")       # an ordinary character is inserted
process_key(editor, Key.RIGHT, "")   # a recognised key moves the cursor
frame = build_frame(editor, now=0)   # the escape sequences for one redraw
```

- `ci_editor.editor.Editor` holds the rows, cursor, scroll offsets and status
  message, with `open_file`, `insert_char`, `set_status_message`,
  `update_scroll` and the `move_*` cursor methods.
- `ci_editor.keys.read_key(read_byte)` decodes one keystroke, including
  `ESC [` sequences, from a callable returning one byte at a time, and gives
  back `(Key or None, char)`. `process_key` applies it and returns `False`
  on Ctrl-Q.
- `ci_editor.render` builds the screen: `render_file`, `render_status_bar`,
  `render_message_bar`, `cursor_position`, `build_frame` and `clear_screen`.
- `ci_editor.row.Row` is one line of text; `render_tabs` expands tabs the way
  the screen shows them.
- `ci_editor.terminal.Terminal` is the raw-mode terminal the `ci` command runs
  on (`window_size`, the `raw_mode` context manager, `read_byte`, `write`);
  `run(editor, terminal)` is the redraw-and-read loop.

## Running the tests

```
pip install .[test]
pytest
```
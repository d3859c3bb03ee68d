"""Terminal I/O for prompts.

This module provides the two halves of the terminal collaborator:
- TerminalRegion: writes renders through a Rich console and erases the
  lines written by the previous render
- RawInputReader: puts stdin in raw mode via prompt_toolkit and turns
  key presses into InputEvents

The output console is process-wide and replaceable (set_console), so
hosts can redirect prompts to another stream.
"""

from __future__ import annotations

import select
import sys
import threading
from typing import TYPE_CHECKING, Any, TextIO

from prompt_toolkit.input import create_input
from prompt_toolkit.keys import Keys
from rich.cells import cell_len
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from .base import InputEvent

if TYPE_CHECKING:
    from prompt_toolkit.input import Input
    from prompt_toolkit.key_binding import KeyPress

# How long to wait for the rest of an escape sequence before treating a
# lone ESC byte as the Escape key.
ESCAPE_TIMEOUT = 0.05

# DEC private mode 2004: the terminal wraps pasted text in
# ESC[200~ ... ESC[201~, which prompt_toolkit reports as BracketedPaste.
BRACKETED_PASTE_ON = "\x1b[?2004h"
BRACKETED_PASTE_OFF = "\x1b[?2004l"

_console_lock = threading.Lock()
_console: Console | None = None


def get_console() -> Console:
    """Return the console prompts write to (stderr by default)."""
    global _console
    with _console_lock:
        if _console is None:
            _console = Console(stderr=True, highlight=False)
        return _console


def set_console(console: Console | None) -> None:
    """Redirect prompt output; None restores the stderr console."""
    global _console
    with _console_lock:
        _console = console


class TerminalRegion:
    """The block of lines owned by the prompt currently on screen.

    ``render`` erases whatever the previous render wrote and writes the
    new text; ``release`` leaves the current output in place so the next
    prompt starts below it.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console
        self._last_lines = 0
        self._render_lock = threading.Lock()

    @property
    def console(self) -> Console:
        return self._console or get_console()

    @property
    def last_lines(self) -> int:
        return self._last_lines

    def line_count(self, text: Text | str) -> int:
        """Count screen lines, including soft wraps at the console width."""
        plain = text.plain if isinstance(text, Text) else text
        if not plain:
            return 0
        lines = plain.split("\n")
        if plain.endswith("\n"):
            lines.pop()
        width = max(self.console.width, 1)
        return sum(max(1, -(-cell_len(line) // width)) for line in lines)

    def write(self, text: Text | str) -> None:
        """Write text as-is, outside the region."""
        with self._render_lock:
            self._write(text)

    def _write(self, text: Text | str) -> None:
        if isinstance(text, str):
            text = Text(text)
        self.console.print(text, end="", soft_wrap=True)
        self.console.file.flush()

    def clear_last_lines(self, n: int) -> None:
        """Erase the ``n`` lines above the cursor and move up to them."""
        if n <= 0:
            return
        codes = [Control.move_to_column(0)]
        for _ in range(n):
            codes.append(
                Control((ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2))
            )
        self.console.control(*codes)

    def render(self, text: Text) -> None:
        """Replace the previous render with ``text``."""
        with self._render_lock:
            self.clear_last_lines(self._last_lines)
            self._write(text)
            self._last_lines = self.line_count(text)

    def release(self) -> None:
        """Keep the current render on screen; the next render starts fresh."""
        with self._render_lock:
            self._last_lines = 0

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def set_bracketed_paste(self, enabled: bool) -> None:
        """Turn bracketed paste on or off. Skipped when not a terminal."""
        if not self.console.is_terminal:
            return
        code = BRACKETED_PASTE_ON if enabled else BRACKETED_PASTE_OFF
        with self._render_lock:
            self.console.file.write(code)
            self.console.file.flush()

    def clear_screen(self) -> None:
        with self._render_lock:
            self.console.clear()
            self._last_lines = 0


_KEY_NAMES: dict[Any, str] = {
    Keys.Enter: "Enter",
    Keys.ControlJ: "Enter",
    Keys.Escape: "Escape",
    Keys.Backspace: "Backspace",
    Keys.Delete: "Delete",
    Keys.Up: "Up",
    Keys.Down: "Down",
    Keys.Left: "Left",
    Keys.Right: "Right",
    Keys.Home: "Home",
    Keys.End: "End",
    Keys.Tab: "Tab",
    Keys.BackTab: "BackTab",
}


def to_input_event(key_press: KeyPress) -> InputEvent | None:
    """Convert a prompt_toolkit KeyPress; None for keys prompts ignore."""
    key = key_press.key
    if key in _KEY_NAMES:
        return InputEvent(key=_KEY_NAMES[key])
    if key == Keys.BracketedPaste:
        return InputEvent(key="Paste", char=key_press.data)
    if isinstance(key, str) and len(key) == 1:
        return InputEvent.from_char(key)
    name = key.value if isinstance(key, Keys) else str(key)
    if name.startswith("c-") and len(name) == 3:
        # Ctrl+letter: key and char are the letter
        return InputEvent(key=name[2], char=name[2], ctrl=True)
    return None


class RawInputReader:
    """Blocking key reader over a raw-mode terminal.

    Usage:
        with RawInputReader() as reader:
            event = reader.read()
        # Terminal mode restored automatically

    The read blocks until a key arrives; there is no timeout. A closed
    input stream raises EOFError.
    """

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin = stdin
        self._input: Input | None = None
        self._raw_mode_ctx: Any = None
        self._pending: list[InputEvent] = []

    def start(self) -> None:
        """Enable raw mode. Errors propagate after cleanup."""
        if self._input is not None:
            return
        try:
            self._input = create_input(self._stdin or sys.stdin)
            self._raw_mode_ctx = self._input.raw_mode()
            self._raw_mode_ctx.__enter__()
        except Exception:
            self.stop()
            raise

    def stop(self) -> None:
        """Restore the terminal mode. Safe to call more than once."""
        try:
            if self._raw_mode_ctx is not None:
                self._raw_mode_ctx.__exit__(None, None, None)
        finally:
            self._raw_mode_ctx = None
            if self._input is not None:
                self._input.close()
                self._input = None
            self._pending.clear()

    def __enter__(self) -> RawInputReader:
        self.start()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.stop()

    def _wait_readable(self, timeout: float | None) -> bool:
        assert self._input is not None
        ready, _, _ = select.select([self._input.fileno()], [], [], timeout)
        return bool(ready)

    def read(self) -> InputEvent:
        """Block until the next key event."""
        if self._input is None:
            raise RuntimeError("RawInputReader is not started")
        while not self._pending:
            if self._input.closed:
                key_presses = self._input.flush_keys()
                if not key_presses:
                    raise EOFError("input stream closed")
            elif self._wait_readable(ESCAPE_TIMEOUT):
                key_presses = self._input.read_keys()
            else:
                # A lone ESC stays buffered in the parser until flushed.
                key_presses = self._input.flush_keys()
                if not key_presses:
                    self._wait_readable(None)
            for key_press in key_presses:
                event = to_input_event(key_press)
                if event is not None:
                    self._pending.append(event)
        return self._pending.pop(0)

"""Tests for terminal I/O in clack/elements/terminal.py.

Covers:
- KeyPress to InputEvent conversion
- Line accounting with soft wraps
- Raw input reading from a pipe, including a lone Escape
- Bracketed paste mode and pasted text decoding
"""

from __future__ import annotations

import io
import os
from typing import Iterator

import pytest
from conftest import RecordingRegion, make_console
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from rich.console import Console
from rich.text import Text

from clack.elements import (
    ElementManager,
    Input,
    InputEvent,
    RawInputReader,
    TerminalRegion,
)
from clack.elements.terminal import (
    BRACKETED_PASTE_OFF,
    BRACKETED_PASTE_ON,
    get_console,
    set_console,
    to_input_event,
)


class TestKeyConversion:
    """Tests for to_input_event()."""

    def test_named_keys(self) -> None:
        assert to_input_event(KeyPress(Keys.Enter, "\r")) == InputEvent(key="Enter")
        assert to_input_event(KeyPress(Keys.Escape, "\x1b")) == InputEvent(key="Escape")
        assert to_input_event(KeyPress(Keys.Up, "")) == InputEvent(key="Up")
        assert to_input_event(KeyPress(Keys.Backspace, "\x7f")) == InputEvent(
            key="Backspace"
        )
        assert to_input_event(KeyPress(Keys.Tab, "\t")) == InputEvent(key="Tab")

    def test_printable_char(self) -> None:
        assert to_input_event(KeyPress("a", "a")) == InputEvent(key="a", char="a")
        assert to_input_event(KeyPress(" ", " ")) == InputEvent(key=" ", char=" ")

    def test_ctrl_letter(self) -> None:
        event = to_input_event(KeyPress(Keys.ControlC, "\x03"))
        assert event == InputEvent(key="c", char="c", ctrl=True)
        assert event is not None and event.is_cancel()

    def test_paste(self) -> None:
        event = to_input_event(KeyPress(Keys.BracketedPaste, "pasted"))
        assert event == InputEvent(key="Paste", char="pasted")

    def test_unhandled_keys_are_dropped(self) -> None:
        assert to_input_event(KeyPress(Keys.F5, "")) is None


class TestTerminalRegion:
    """Tests for output accounting."""

    def test_line_count_plain(self) -> None:
        region = TerminalRegion(make_console(width=80))
        assert region.line_count(Text("a\nb\nc\n")) == 3
        assert region.line_count(Text("")) == 0

    def test_line_count_counts_wraps(self) -> None:
        region = TerminalRegion(make_console(width=10))
        assert region.line_count(Text("x" * 25 + "\n")) == 3
        assert region.line_count(Text("\n")) == 1

    def test_render_tracks_lines_and_release_resets(self) -> None:
        region = TerminalRegion(make_console())
        region.render(Text("one\ntwo\n"))
        assert region.last_lines == 2
        region.release()
        assert region.last_lines == 0

    def test_write_does_not_touch_region(self) -> None:
        console = make_console()
        region = TerminalRegion(console)
        region.render(Text("one\n"))
        region.write("banner\n")
        assert region.last_lines == 1
        assert console.file.getvalue() == "one\nbanner\n"  # type: ignore[attr-defined]


@pytest.fixture
def restore_console() -> Iterator[None]:
    yield
    set_console(None)


class TestConsoleConfig:
    """Tests for the process-wide console."""

    def test_default_console_is_stderr(self, restore_console: None) -> None:
        set_console(None)
        assert get_console().stderr

    def test_set_console_redirects_regions(self, restore_console: None) -> None:
        console = Console(file=io.StringIO(), color_system=None)
        set_console(console)
        TerminalRegion().write("hello\n")
        assert console.file.getvalue() == "hello\n"  # type: ignore[attr-defined]


@pytest.fixture
def pipe_reader() -> Iterator[tuple[RawInputReader, int]]:
    read_fd, write_fd = os.pipe()
    stdin = os.fdopen(read_fd, "r", encoding="utf-8")
    reader = RawInputReader(stdin)
    reader.start()
    try:
        yield reader, write_fd
    finally:
        reader.stop()
        stdin.close()
        try:
            os.close(write_fd)
        except OSError:
            pass


class TestRawInputReader:
    """Tests for reading keys from a file descriptor."""

    def test_reads_chars_arrows_and_enter(
        self, pipe_reader: tuple[RawInputReader, int]
    ) -> None:
        reader, write_fd = pipe_reader
        os.write(write_fd, b"hi\x1b[B\r")
        events = [reader.read() for _ in range(4)]
        assert events == [
            InputEvent(key="h", char="h"),
            InputEvent(key="i", char="i"),
            InputEvent(key="Down"),
            InputEvent(key="Enter"),
        ]

    def test_lone_escape_is_flushed(
        self, pipe_reader: tuple[RawInputReader, int]
    ) -> None:
        reader, write_fd = pipe_reader
        os.write(write_fd, b"\x1b")
        assert reader.read() == InputEvent(key="Escape")

    def test_closed_input_raises_eof(
        self, pipe_reader: tuple[RawInputReader, int]
    ) -> None:
        reader, write_fd = pipe_reader
        os.close(write_fd)
        with pytest.raises(EOFError):
            reader.read()

    def test_read_before_start_is_misuse(self) -> None:
        with pytest.raises(RuntimeError):
            RawInputReader().read()


class TestBracketedPaste:
    """Tests for bracketed paste mode and paste decoding."""

    def test_codes_written_to_terminal(self) -> None:
        console = Console(file=io.StringIO(), force_terminal=True, color_system=None)
        region = TerminalRegion(console)
        region.set_bracketed_paste(True)
        region.set_bracketed_paste(False)
        assert console.file.getvalue() == (  # type: ignore[attr-defined]
            BRACKETED_PASTE_ON + BRACKETED_PASTE_OFF
        )

    def test_codes_skipped_off_terminal(self) -> None:
        console = make_console()
        TerminalRegion(console).set_bracketed_paste(True)
        assert console.file.getvalue() == ""  # type: ignore[attr-defined]

    def test_reader_decodes_paste(
        self, pipe_reader: tuple[RawInputReader, int]
    ) -> None:
        reader, write_fd = pipe_reader
        os.write(write_fd, b"\x1b[200~ab\r\ncd\x1b[201~\r")
        assert reader.read() == InputEvent(key="Paste", char="ab\r\ncd")
        assert reader.read() == InputEvent(key="Enter")

    def test_pasted_lines_join_into_one_input(
        self, pipe_reader: tuple[RawInputReader, int]
    ) -> None:
        reader, write_fd = pipe_reader
        os.write(write_fd, b"\x1b[200~ab\r\ncd\x1b[201~\r")
        region = RecordingRegion()
        manager = ElementManager(region=region, reader=reader)
        assert Input("Name?").interact(manager) == "ab cd"
        assert region.paste_modes == [True, False]

"""Pytest configuration for local test runs."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Iterator

import pytest
from rich.console import Console


def _add_repo_root_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_add_repo_root_to_path()

from clack.elements import InputEvent, TerminalRegion  # noqa: E402
from clack.theme import reset_theme  # noqa: E402


def make_console(width: int = 80) -> Console:
    """A console writing plain text to memory."""
    return Console(file=io.StringIO(), width=width, color_system=None, highlight=False)


class FakeReader:
    """Replays a fixed list of key events instead of reading a terminal."""

    def __init__(self, events: list[InputEvent]) -> None:
        self.events = list(events)
        self.started = 0
        self.stopped = 0

    def start(self) -> None:
        self.started += 1

    def stop(self) -> None:
        self.stopped += 1

    def read(self) -> InputEvent:
        if not self.events:
            raise EOFError("no more events")
        return self.events.pop(0)


class RecordingRegion(TerminalRegion):
    """Real region over an in-memory console that keeps every render."""

    def __init__(self, width: int = 80) -> None:
        super().__init__(make_console(width))
        self.renders: list[str] = []
        self.cursor_hidden = False
        self.releases = 0
        self.cleared: list[int] = []
        self.paste_modes: list[bool] = []

    def render(self, text) -> None:  # type: ignore[no-untyped-def]
        super().render(text)
        self.renders.append(text.plain)

    def clear_last_lines(self, n: int) -> None:
        self.cleared.append(n)
        super().clear_last_lines(n)

    def release(self) -> None:
        super().release()
        self.releases += 1

    def set_bracketed_paste(self, enabled: bool) -> None:
        self.paste_modes.append(enabled)
        super().set_bracketed_paste(enabled)

    def hide_cursor(self) -> None:
        self.cursor_hidden = True

    def show_cursor(self) -> None:
        self.cursor_hidden = False

    def output(self) -> str:
        return self.console.file.getvalue()  # type: ignore[attr-defined]


def keys(*names: str) -> list[InputEvent]:
    """Build events: named keys ('Enter', 'Down', ...) or typed text."""
    events: list[InputEvent] = []
    for name in names:
        if len(name) > 1 and name[0].isupper():
            events.append(InputEvent(key=name))
        else:
            events.extend(InputEvent.from_char(ch) for ch in name)
    return events


@pytest.fixture
def region() -> RecordingRegion:
    return RecordingRegion()


@pytest.fixture(autouse=True)
def _default_theme() -> Iterator[None]:
    reset_theme()
    yield
    reset_theme()

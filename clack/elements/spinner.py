"""Spinner element.

A spinner is not key-driven: a background thread advances the frame on
a fixed interval and redraws, while the caller's work runs in the
foreground. Stopping joins the thread before the final render.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..theme import get_theme
from .base import State, StateKind
from .terminal import TerminalRegion

if TYPE_CHECKING:
    from rich.text import Text


class SpinnerStatus(Enum):
    """Lifecycle of a spinner."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"
    CANCELLED = "cancelled"
    ERROR = "error"


_STATUS_STATES = {
    SpinnerStatus.IDLE: StateKind.ACTIVE,
    SpinnerStatus.RUNNING: StateKind.ACTIVE,
    SpinnerStatus.STOPPED: StateKind.SUBMIT,
    SpinnerStatus.CANCELLED: StateKind.CANCEL,
    SpinnerStatus.ERROR: StateKind.ERROR,
}


@dataclass
class SpinnerState:
    """Shared between the tick thread (writer) and the render path."""

    frame_index: int = 0
    message: str = ""
    status: SpinnerStatus = SpinnerStatus.IDLE


class Spinner:
    """Animated progress indicator.

    Usage:
        spinner = Spinner()
        spinner.start("Installing...")
        # ... do work ...
        spinner.stop("Installation complete")

    Or as a context manager, which stops with the current message on
    normal exit and with the error glyph when an exception escapes:
        with Spinner() as spinner:
            spinner.start("Installing...")
    """

    def __init__(
        self, region: TerminalRegion | None = None, interval: float = 0.08
    ) -> None:
        self._region = region or TerminalRegion()
        self.interval = interval
        self.state = SpinnerState()
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self.state.status is SpinnerStatus.RUNNING

    def render(self) -> Text:
        with self._lock:
            kind = _STATUS_STATES[self.state.status]
            frame = self.state.frame_index
            message = self.state.message
        return get_theme().render_spinner(State(kind), frame, message)

    def start(self, message: str) -> None:
        if self.is_running:
            raise RuntimeError("Spinner is already running")
        with self._lock:
            self.state = SpinnerState(message=str(message), status=SpinnerStatus.RUNNING)
        self._stop_event.clear()
        self._region.hide_cursor()
        self._region.render(self.render())
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def set_message(self, message: str) -> None:
        with self._lock:
            self.state.message = str(message)
        if self.is_running:
            self._region.render(self.render())

    def tick(self) -> None:
        """Advance one frame and redraw."""
        with self._lock:
            self.state.frame_index += 1
        self._region.render(self.render())

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            self.tick()

    def stop(self, message: str) -> None:
        """Finish with the success glyph."""
        self._finish(SpinnerStatus.STOPPED, message)

    def cancel(self, message: str) -> None:
        """Finish with the cancelled glyph."""
        self._finish(SpinnerStatus.CANCELLED, message)

    def error(self, message: str) -> None:
        """Finish with the error glyph."""
        self._finish(SpinnerStatus.ERROR, message)

    def _finish(self, status: SpinnerStatus, message: str) -> None:
        if not self.is_running:
            raise RuntimeError("Spinner is not running")
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        with self._lock:
            self.state.status = status
            self.state.message = str(message)
        try:
            self._region.render(self.render())
        finally:
            self._region.release()
            self._region.show_cursor()

    def __enter__(self) -> Spinner:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not self.is_running:
            return
        if exc_type is None:
            self.stop(self.state.message)
        else:
            self.error(self.state.message)

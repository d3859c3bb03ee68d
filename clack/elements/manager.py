"""Element manager: the read/notify/render loop.

ElementManager owns the terminal while one prompt runs:
- Enables raw mode and bracketed paste and hides the cursor, restoring
  all three on every exit
- Renders the element, erasing exactly the lines of the previous render
- Feeds key events to the element until it submits or cancels
"""

from __future__ import annotations

from typing import Any, TypeVar

from ..errors import PromptCancelled
from .base import ActiveElement, State, StateKind
from .terminal import RawInputReader, TerminalRegion

T = TypeVar("T")


class ElementManager:
    """Runs one element at a time against a terminal.

    Prompts are sequential: running a second element while one is
    active is a programming error.
    """

    def __init__(
        self,
        region: TerminalRegion | None = None,
        reader: RawInputReader | None = None,
    ) -> None:
        self._region = region or TerminalRegion()
        self._input = reader
        self._active: ActiveElement[Any] | None = None

    @property
    def region(self) -> TerminalRegion:
        return self._region

    def _ensure_input(self) -> RawInputReader:
        """Lazily initialize input reader."""
        if self._input is None:
            self._input = RawInputReader()
        return self._input

    def run(self, element: ActiveElement[T]) -> T:
        """Run an element until it returns a result.

        Returns:
            The submitted value.

        Raises:
            PromptCancelled: The element reached the Cancel state.
            OSError, EOFError: Terminal I/O failed; not retried.
        """
        if self._active:
            raise RuntimeError("Another element is already active")

        self._active = element
        try:
            element.on_activate()
            input_reader = self._ensure_input()
            input_reader.start()
            try:
                self._region.hide_cursor()
                self._region.set_bracketed_paste(True)
                state: State[T] = State.active()
                self._region.render(element.render(state))

                while not state.is_terminal:
                    event = input_reader.read()
                    state = element.notify(event)
                    self._region.render(element.render(state))
            finally:
                try:
                    self._region.release()
                    self._region.set_bracketed_paste(False)
                    self._region.show_cursor()
                finally:
                    input_reader.stop()
        finally:
            element.on_deactivate()
            self._active = None

        if state.kind is StateKind.CANCEL:
            raise PromptCancelled()
        return state.value  # type: ignore[return-value]

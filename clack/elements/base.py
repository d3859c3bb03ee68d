"""Base classes for interactive prompt elements.

This module provides the core abstractions:
- InputEvent: Keyboard input event
- StateKind / State: Outcome of processing one event
- ActiveElement: Prompt state machine with exclusive input control
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from rich.text import Text

    from .manager import ElementManager

T = TypeVar("T")


@dataclass(frozen=True)
class InputEvent:
    """A keyboard input event."""

    key: str  # 'Enter', 'Escape', 'Backspace', 'Up', 'Down', or the character
    char: str | None = None  # Printable character or None
    ctrl: bool = False

    @classmethod
    def from_char(cls, char: str) -> InputEvent:
        return cls(key=char, char=char)

    def is_cancel(self) -> bool:
        """Escape and Ctrl+C abort every prompt."""
        return self.key == "Escape" or (self.ctrl and self.char == "c")


class StateKind(Enum):
    """Kind of an interaction state."""

    ACTIVE = "active"
    ERROR = "error"  # Recoverable, message shown below the prompt
    SUBMIT = "submit"
    CANCEL = "cancel"


@dataclass(frozen=True)
class State(Generic[T]):
    """Result of feeding one event to a prompt.

    Attributes:
        kind: Which of the four states this is
        value: Submitted value (only for SUBMIT)
        message: Validation message (only for ERROR)
    """

    kind: StateKind
    value: T | None = None
    message: str = ""

    @classmethod
    def active(cls) -> State[Any]:
        return cls(StateKind.ACTIVE)

    @classmethod
    def error(cls, message: str) -> State[Any]:
        return cls(StateKind.ERROR, message=message)

    @classmethod
    def submit(cls, value: T) -> State[T]:
        return cls(StateKind.SUBMIT, value=value)

    @classmethod
    def cancel(cls) -> State[Any]:
        return cls(StateKind.CANCEL)

    @property
    def is_terminal(self) -> bool:
        """Submit and Cancel end the interaction."""
        return self.kind in (StateKind.SUBMIT, StateKind.CANCEL)


class ActiveElement(ABC, Generic[T]):
    """An interactive prompt with exclusive input control.

    Lifecycle:
        1. on_activate() - setup, misuse checks
        2. render(state) -> Text for the current state
        3. notify(event) -> State, repeated until Submit or Cancel
        4. on_deactivate() - cleanup

    ``notify`` and ``render`` never perform I/O; the ElementManager
    owns the terminal.
    """

    _final_state: State[T] | None = None

    def notify(self, event: InputEvent) -> State[T]:
        """Feed one key event and return the resulting state.

        Cancel keys are handled here for every prompt kind. Once a
        terminal state has been produced, further events are ignored and
        the same state is returned.
        """
        if self._final_state is not None:
            return self._final_state
        if event.is_cancel():
            state: State[T] = State.cancel()
        else:
            state = self.handle_input(event)
        if state.is_terminal:
            self._final_state = state
        return state

    @abstractmethod
    def handle_input(self, event: InputEvent) -> State[T]:
        """Handle a non-cancel input event."""
        ...

    @abstractmethod
    def render(self, state: State[T]) -> Text:
        """Return the prompt's visuals for ``state``."""
        ...

    def on_activate(self) -> None:
        """Called before the first render."""
        pass

    def on_deactivate(self) -> None:
        """Called when the interaction ends, on every exit path."""
        pass

    def interact(self, manager: ElementManager | None = None) -> T:
        """Run the prompt until the user submits or cancels.

        Raises:
            PromptCancelled: The user pressed Escape or Ctrl+C.
            OSError: Reading keys or writing output failed.
        """
        from .manager import ElementManager

        return (manager or ElementManager()).run(self)

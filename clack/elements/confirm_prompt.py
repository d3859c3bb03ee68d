"""Yes/No confirmation prompt element."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..theme import get_theme
from .base import ActiveElement, InputEvent, State

if TYPE_CHECKING:
    from rich.text import Text


class Confirm(ActiveElement[bool]):
    """Yes/No confirmation prompt.

    Left/Right, Up/Down, or Tab flip the highlighted answer and Enter
    submits it. 'y' and 'n' (any case) answer immediately, regardless of
    the highlight.
    """

    def __init__(self, prompt: str) -> None:
        self.prompt = str(prompt)
        self.value = True

    def initial_value(self, value: bool) -> Confirm:
        self.value = value
        return self

    def handle_input(self, event: InputEvent) -> State[bool]:
        char = (event.char or "").lower() if not event.ctrl else ""
        if char == "y":
            self.value = True
            return State.submit(True)
        elif char == "n":
            self.value = False
            return State.submit(False)
        elif event.key == "Enter":
            return State.submit(self.value)
        elif event.key in ("Left", "Right", "Up", "Down", "Tab"):
            self.value = not self.value
        return State.active()

    def render(self, state: State[bool]) -> Text:
        return get_theme().render_confirm(state, self.prompt, self.value)

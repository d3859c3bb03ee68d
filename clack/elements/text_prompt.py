"""Single-line text and password prompts.

Line editing: printable characters insert at the caret, Backspace/Delete
remove around it, Left/Right/Home/End (and Ctrl+A/Ctrl+E) move it.
Enter runs the validator, then the parser, and submits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from ..theme import get_theme
from .base import ActiveElement, InputEvent, State
from .cursor import StringCursor

if TYPE_CHECKING:
    from rich.text import Text

# Returns an error message, or None when the value is acceptable.
# Raising ValueError(message) is accepted as well.
Validator = Callable[[str], "str | None"]


def run_validator(validator: Callable[..., str | None] | None, value: object) -> str | None:
    """Apply a validator and return its error message, if any."""
    if validator is None:
        return None
    try:
        return validator(value)
    except ValueError as e:
        return str(e) or "Invalid value"


class Input(ActiveElement[Any]):
    """Text input with basic line editing.

    Returns the entered text on Enter, or the parser's result when one is
    set with ``parse()``. Validation runs only when Enter is pressed; a
    failure shows the message below the input and keeps the typed text.
    """

    def __init__(self, prompt: str) -> None:
        self.prompt = str(prompt)
        self.input = StringCursor()
        self._placeholder = StringCursor()
        self._validator: Validator | None = None
        self._parser: Callable[[str], Any] | None = None

    def placeholder(self, placeholder: str) -> Input:
        """Dim hint shown while nothing is typed; never submitted."""
        self._placeholder = StringCursor(placeholder)
        return self

    def default_input(self, value: str) -> Input:
        """Pre-fill the buffer; the caret starts at the end."""
        self.input.extend(value)
        return self

    def validate(self, validator: Validator) -> Input:
        self._validator = validator
        return self

    def parse(self, parser: Callable[[str], Any]) -> Input:
        """Convert the text before submitting, e.g. ``parse(int)``.

        The validator still sees the raw text. A ValueError from the
        parser is shown the same way as a validation error.
        """
        self._parser = parser
        return self

    def _normalize_paste(self, text: str) -> str:
        return text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", " ")

    def _submit(self) -> State[Any]:
        value = str(self.input)
        error = run_validator(self._validator, value)
        if error is not None:
            return State.error(error)
        if self._parser is None:
            return State.submit(value)
        try:
            parsed = self._parser(value)
        except ValueError as e:
            return State.error(str(e) or "Invalid value")
        return State.submit(parsed)

    def handle_input(self, event: InputEvent) -> State[Any]:
        if event.key == "Enter":
            return self._submit()
        elif event.key == "Paste" and event.char:
            for ch in self._normalize_paste(event.char):
                self.input.insert(ch)
        elif event.key == "Backspace":
            self.input.delete_left()
        elif event.key == "Delete":
            self.input.delete_right()
        elif event.key == "Left":
            self.input.move_left()
        elif event.key == "Right":
            self.input.move_right()
        elif event.key == "Home" or (event.ctrl and event.char == "a"):
            self.input.move_home()
        elif event.key == "End" or (event.ctrl and event.char == "e"):
            self.input.move_end()
        elif not event.ctrl and event.char and event.char.isprintable():
            self.input.insert(event.char)
        return State.active()

    def render(self, state: State[Any]) -> Text:
        return get_theme().render_text(state, self.prompt, self.input, self._placeholder)


class Password(Input):
    """Text input that echoes a mask glyph instead of the characters.

    The buffer is the same as Input's; only rendering differs. A
    placeholder is shown unmasked while the buffer is empty.
    """

    def __init__(self, prompt: str) -> None:
        super().__init__(prompt)
        self._mask = "▪"

    def mask(self, mask: str) -> Password:
        if len(mask) != 1:
            raise ValueError("mask must be a single character")
        self._mask = mask
        return self

    def render(self, state: State[Any]) -> Text:
        return get_theme().render_password(
            state, self.prompt, self.input, self._mask, self._placeholder
        )

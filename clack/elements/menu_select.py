"""Menu selection elements.

Allow the user to pick from a list of options using arrow keys (or j/k).
The highlight clamps at both ends of the list; it never wraps around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar

from ..theme import get_theme
from .base import ActiveElement, InputEvent, State
from .text_prompt import run_validator

if TYPE_CHECKING:
    from rich.text import Text

T = TypeVar("T")

_PREV_KEYS = ("Up", "Left")
_NEXT_KEYS = ("Down", "Right")


@dataclass
class Item(Generic[T]):
    """One selectable option.

    Values are compared with ``==``; duplicates are allowed but make
    ``initial_value`` pick the first match.
    """

    value: T
    label: str
    hint: str = ""


def move_highlight(index: int, count: int, delta: int) -> int:
    """Move a highlight by ``delta``, clamped to ``[0, count - 1]``."""
    return max(0, min(index + delta, count - 1))


def _highlight_delta(event: InputEvent) -> int:
    if event.key in _PREV_KEYS or (not event.ctrl and event.char == "k"):
        return -1
    if event.key in _NEXT_KEYS or (not event.ctrl and event.char == "j"):
        return 1
    return 0


class _Menu(ActiveElement[Any]):
    """Shared option list and highlight handling."""

    def __init__(self, prompt: str) -> None:
        self.prompt = str(prompt)
        self.options: list[Item[Any]] = []
        self.cursor = 0

    def item(self, value: Any, label: str, hint: str = "") -> Any:
        self.options.append(Item(value, str(label), str(hint)))
        return self

    def items(self, items: Iterable[tuple[Any, str, str]]) -> Any:
        """Add several ``(value, label, hint)`` triples."""
        for value, label, hint in items:
            self.item(value, label, hint)
        return self

    def on_activate(self) -> None:
        if not self.options:
            raise ValueError(f"{type(self).__name__} prompt requires at least one item")

    def _move(self, event: InputEvent) -> bool:
        delta = _highlight_delta(event)
        if delta:
            self.cursor = move_highlight(self.cursor, len(self.options), delta)
        return bool(delta)


class Select(_Menu, Generic[T]):
    """Single choice from a list; Enter submits the highlighted value."""

    def __init__(self, prompt: str) -> None:
        super().__init__(prompt)
        self._initial_value: Any = None
        self._has_initial = False

    def initial_value(self, value: T) -> Select[T]:
        self._initial_value = value
        self._has_initial = True
        return self

    def on_activate(self) -> None:
        super().on_activate()
        if self._has_initial:
            for i, option in enumerate(self.options):
                if option.value == self._initial_value:
                    self.cursor = i
                    break

    def handle_input(self, event: InputEvent) -> State[T]:
        if event.key == "Enter":
            if not self.options:
                raise ValueError("Select prompt requires at least one item")
            return State.submit(self.options[self.cursor].value)
        self._move(event)
        return State.active()

    def render(self, state: State[T]) -> Text:
        return get_theme().render_select(state, self.prompt, self.options, self.cursor)


class MultiSelect(_Menu, Generic[T]):
    """Several choices from a list.

    Space toggles the highlighted option. Enter submits the selected
    values in list order, not in the order they were toggled.
    """

    def __init__(self, prompt: str) -> None:
        super().__init__(prompt)
        self.selected_indices: set[int] = set()
        self._initial_values: list[Any] = []
        self._required = False
        self._validator: Callable[[list[T]], str | None] | None = None

    def initial_values(self, values: Iterable[T]) -> MultiSelect[T]:
        self._initial_values = list(values)
        return self

    def required(self, required: bool = True) -> MultiSelect[T]:
        """Reject an empty selection on submit."""
        self._required = required
        return self

    def validate(self, validator: Callable[[list[T]], str | None]) -> MultiSelect[T]:
        """Check the ordered selected values on submit."""
        self._validator = validator
        return self

    def on_activate(self) -> None:
        super().on_activate()
        for i, option in enumerate(self.options):
            if option.value in self._initial_values:
                self.selected_indices.add(i)

    def selected_values(self) -> list[T]:
        return [
            self.options[i].value
            for i in range(len(self.options))
            if i in self.selected_indices
        ]

    def handle_input(self, event: InputEvent) -> State[list[T]]:
        if event.key == "Enter":
            values = self.selected_values()
            if self._required and not values:
                return State.error("Please select at least one option.")
            error = run_validator(self._validator, values)
            if error is not None:
                return State.error(error)
            return State.submit(values)
        elif event.char == " " and not event.ctrl:
            if self.cursor in self.selected_indices:
                self.selected_indices.remove(self.cursor)
            else:
                self.selected_indices.add(self.cursor)
        else:
            self._move(event)
        return State.active()

    def render(self, state: State[list[T]]) -> Text:
        return get_theme().render_multiselect(
            state, self.prompt, self.options, self.cursor, self.selected_indices
        )

"""Themes: how prompts look in every state.

A theme maps an interaction state to glyphs and styles and assembles the
full output of each prompt kind. Every method is a pure function of its
arguments, so re-rendering the same state produces identical text.

Usage:
    from rich.style import Style
    from clack import Theme, set_theme

    class MagentaTheme(Theme):
        def state_symbol_color(self, state):
            return Style(color="magenta")

    set_theme(MagentaTheme())
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Sequence

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from .elements.base import State, StateKind

if TYPE_CHECKING:
    from .elements.cursor import StringCursor
    from .elements.menu_select import Item

S_STEP_ACTIVE = "◆"
S_STEP_CANCEL = "■"
S_STEP_ERROR = "▲"
S_STEP_SUBMIT = "◇"

S_BAR_START = "┌"
S_BAR = "│"
S_BAR_END = "└"

S_RADIO_ACTIVE = "●"
S_RADIO_INACTIVE = "○"
S_CHECKBOX_ACTIVE = "◻"
S_CHECKBOX_SELECTED = "◼"
S_CHECKBOX_INACTIVE = "◻"

S_BAR_H = "─"
S_CORNER_TOP_RIGHT = "╮"
S_CONNECT_LEFT = "├"
S_CORNER_BOTTOM_RIGHT = "╯"

S_INFO = "●"
S_WARN = "▲"
S_ERROR = "■"

SPINNER_FRAMES = "◒◐◓◑"

DIM = Style(dim=True)


def _line(*parts: str | Text) -> Text:
    """Join parts into one newline-terminated Text."""
    text = Text()
    for part in parts:
        text.append(part)
    text.append("\n")
    return text


class Theme:
    """Default look, overridable method by method.

    Subclass and override any method to customize glyphs, colors, or
    whole-line layout; anything not overridden keeps the default.
    """

    # -- state styling --

    def bar_color(self, state: State) -> Style:
        return {
            StateKind.ACTIVE: Style(color="cyan"),
            StateKind.CANCEL: Style(color="red"),
            StateKind.SUBMIT: Style(color="bright_black"),
            StateKind.ERROR: Style(color="yellow"),
        }[state.kind]

    def state_symbol_color(self, state: State) -> Style:
        return {
            StateKind.ACTIVE: Style(color="cyan"),
            StateKind.CANCEL: Style(color="red"),
            StateKind.SUBMIT: Style(color="green"),
            StateKind.ERROR: Style(color="yellow"),
        }[state.kind]

    def state_symbol(self, state: State) -> Text:
        symbol = {
            StateKind.ACTIVE: S_STEP_ACTIVE,
            StateKind.CANCEL: S_STEP_CANCEL,
            StateKind.SUBMIT: S_STEP_SUBMIT,
            StateKind.ERROR: S_STEP_ERROR,
        }[state.kind]
        return Text(symbol, style=self.state_symbol_color(state))

    def radio_symbol(self, state: State, selected: bool) -> Text:
        if state.kind in (StateKind.ACTIVE, StateKind.ERROR) and selected:
            return Text(S_RADIO_ACTIVE, style="green")
        if state.kind in (StateKind.ACTIVE, StateKind.ERROR):
            return Text(S_RADIO_INACTIVE, style=DIM)
        return Text("")

    def checkbox_symbol(self, state: State, selected: bool, active: bool) -> Text:
        if state.kind not in (StateKind.ACTIVE, StateKind.ERROR):
            return Text("")
        if selected:
            return Text(S_CHECKBOX_SELECTED, style="green")
        if active:
            return Text(S_CHECKBOX_ACTIVE, style="cyan")
        return Text(S_CHECKBOX_INACTIVE, style=DIM)

    def input_style(self, state: State) -> Style:
        if state.kind is StateKind.CANCEL:
            return Style(dim=True, strike=True)
        if state.kind is StateKind.SUBMIT:
            return DIM
        return Style()

    def placeholder_style(self, state: State) -> Style:
        if state.kind is StateKind.CANCEL:
            return Style(dim=True, strike=True)
        return DIM

    # -- line builders --

    def _bar(self, state: State) -> Text:
        return Text(S_BAR, style=self.bar_color(state))

    def format_header(self, state: State, prompt: str) -> Text:
        text = _line(Text(S_BAR, style="bright_black"))
        text.append(_line(self.state_symbol(state), "  ", prompt))
        return text

    def format_footer(self, state: State) -> Text:
        if state.kind is StateKind.SUBMIT:
            return _line(self._bar(state))
        if state.kind is StateKind.CANCEL:
            tail = f"{S_BAR_END}  Operation cancelled."
        elif state.kind is StateKind.ERROR:
            tail = f"{S_BAR_END}  {state.message}"
        else:
            tail = S_BAR_END
        return _line(Text(tail, style=self.bar_color(state)))

    def _cursor_text(
        self, state: State, cursor: StringCursor, style: Style, mask: str | None = None
    ) -> Text:
        if state.kind in (StateKind.SUBMIT, StateKind.CANCEL):
            value = str(cursor) if mask is None else mask * len(cursor)
            return Text(value, style=style)
        left, under, right = cursor.split(mask)
        text = Text(left, style=style)
        text.append(under, style=style + Style(reverse=True))
        text.append(right, style=style)
        return text

    def format_input(
        self, state: State, cursor: StringCursor, mask: str | None = None
    ) -> Text:
        value = self._cursor_text(state, cursor, self.input_style(state), mask)
        return _line(self._bar(state), "  ", value)

    def format_placeholder(self, state: State, cursor: StringCursor) -> Text:
        if state.kind is StateKind.SUBMIT:
            return _line(self._bar(state))
        style = self.placeholder_style(state)
        value = str(cursor)
        if state.kind is StateKind.CANCEL:
            return _line(self._bar(state), "  ", Text(value, style=style))
        # Caret sits on the first placeholder character.
        text = Text(value[:1], style=style + Style(reverse=True))
        text.append(value[1:], style=style)
        return _line(self._bar(state), "  ", text)

    def format_select_item(
        self, state: State, active: bool, label: str, hint: str
    ) -> Text:
        if state.kind is StateKind.SUBMIT:
            return _line(self._bar(state), "  ", Text(label, style=DIM))
        if state.kind is StateKind.CANCEL:
            return _line(
                self._bar(state), "  ", Text(label, style=Style(dim=True, strike=True))
            )
        text = Text()
        text.append(self.radio_symbol(state, active))
        text.append(" ")
        text.append(label, style=None if active else DIM)
        if active and hint:
            text.append(f" ({hint})", style=DIM)
        return _line(self._bar(state), "  ", text)

    def format_multiselect_item(
        self, state: State, selected: bool, active: bool, label: str, hint: str
    ) -> Text:
        text = Text()
        text.append(self.checkbox_symbol(state, selected, active))
        text.append(" ")
        text.append(label, style=None if active or selected else DIM)
        if active and hint:
            text.append(f" ({hint})", style=DIM)
        return _line(self._bar(state), "  ", text)

    def format_confirm(self, state: State, confirm: bool) -> Text:
        yes, no = "Yes", "No"
        if state.kind is StateKind.SUBMIT:
            value = Text(yes if confirm else no, style=DIM)
            return _line(self._bar(state), "  ", value)
        if state.kind is StateKind.CANCEL:
            value = Text(yes if confirm else no, style=Style(dim=True, strike=True))
            return _line(self._bar(state), "  ", value)
        text = Text()
        text.append(self.radio_symbol(state, confirm))
        text.append(f" {yes}", style=None if confirm else DIM)
        text.append(" / ", style=DIM)
        text.append(self.radio_symbol(state, not confirm))
        text.append(f" {no}", style=DIM if confirm else None)
        return _line(self._bar(state), "  ", text)

    # -- session and log blocks --

    def format_intro(self, title: str) -> Text:
        return _line(
            Text(S_BAR_START, style="bright_black"),
            "  ",
            Text(f" {title} ", style=Style(reverse=True)),
        )

    def format_outro(self, message: str) -> Text:
        text = _line(Text(S_BAR, style="bright_black"))
        text.append(_line(Text(S_BAR_END, style="bright_black"), "  ", message))
        text.append("\n")
        return text

    def format_outro_cancel(self, message: str) -> Text:
        text = _line(Text(S_BAR, style="bright_black"))
        text.append(
            _line(Text(S_BAR_END, style="bright_black"), "  ", Text(message, style="red"))
        )
        text.append("\n")
        return text

    def format_note(self, is_outro: bool, prompt: str, message: str) -> Text:
        """A boxed note. The outro variant closes the session bar."""
        bar = Text(S_BAR, style="bright_black")
        lines = message.split("\n")
        width = max([cell_len(prompt)] + [cell_len(line) for line in lines])

        text = _line(bar)
        header = Text()
        header.append(Text(S_STEP_SUBMIT, style="green"))
        header.append(f"  {prompt} ")
        header.append(
            S_BAR_H * (width + 1 - cell_len(prompt)) + S_CORNER_TOP_RIGHT,
            style="bright_black",
        )
        text.append(_line(header))
        blank = Text(S_BAR + " " * (width + 4) + S_BAR, style="bright_black")
        text.append(_line(blank))
        for line in lines:
            pad = " " * (width - cell_len(line))
            text.append(_line(bar, "  ", Text(line, style=DIM), pad, "  ", bar))
        text.append(_line(blank))
        corner = S_BAR_END if is_outro else S_CONNECT_LEFT
        text.append(
            _line(
                Text(
                    corner + S_BAR_H * (width + 4) + S_CORNER_BOTTOM_RIGHT,
                    style="bright_black",
                )
            )
        )
        if is_outro:
            text.append("\n")
        return text

    def format_log(self, text: str, symbol: Text) -> Text:
        bar = Text(S_BAR, style="bright_black")
        out = _line(bar)
        lines = text.split("\n")
        out.append(_line(symbol, "  ", lines[0]))
        for line in lines[1:]:
            out.append(_line(bar, "  ", line))
        return out

    def remark_symbol(self) -> Text:
        return Text(S_CONNECT_LEFT, style="bright_black")

    def info_symbol(self) -> Text:
        return Text(S_INFO, style="blue")

    def warning_symbol(self) -> Text:
        return Text(S_WARN, style="yellow")

    def error_symbol(self) -> Text:
        return Text(S_ERROR, style="red")

    def active_symbol(self) -> Text:
        return Text(S_STEP_ACTIVE, style="green")

    def submit_symbol(self) -> Text:
        return Text(S_STEP_SUBMIT, style="green")

    # -- spinner --

    def spinner_frames(self) -> str:
        return SPINNER_FRAMES

    def format_spinner(self, state: State, frame: int, message: str) -> Text:
        """Spinner line; ACTIVE means running, other kinds are final glyphs."""
        if state.kind is StateKind.ACTIVE:
            frames = self.spinner_frames()
            symbol = Text(frames[frame % len(frames)], style="magenta")
        else:
            symbol = self.state_symbol(state)
        return _line(symbol, "  ", message)

    # -- whole prompts --

    def render_text(
        self,
        state: State,
        prompt: str,
        cursor: StringCursor,
        placeholder: StringCursor,
    ) -> Text:
        text = self.format_header(state, prompt)
        if cursor.is_empty() and not placeholder.is_empty():
            text.append(self.format_placeholder(state, placeholder))
        else:
            text.append(self.format_input(state, cursor))
        text.append(self.format_footer(state))
        return text

    def render_password(
        self,
        state: State,
        prompt: str,
        cursor: StringCursor,
        mask: str,
        placeholder: StringCursor | None = None,
    ) -> Text:
        text = self.format_header(state, prompt)
        if cursor.is_empty() and placeholder is not None and not placeholder.is_empty():
            text.append(self.format_placeholder(state, placeholder))
        else:
            text.append(self.format_input(state, cursor, mask))
        text.append(self.format_footer(state))
        return text

    def render_confirm(self, state: State, prompt: str, confirm: bool) -> Text:
        text = self.format_header(state, prompt)
        text.append(self.format_confirm(state, confirm))
        text.append(self.format_footer(state))
        return text

    def render_select(
        self, state: State, prompt: str, items: Sequence[Item], cursor: int
    ) -> Text:
        text = self.format_header(state, prompt)
        for i, item in enumerate(items):
            if state.is_terminal and i != cursor:
                continue
            text.append(
                self.format_select_item(state, i == cursor, item.label, item.hint)
            )
        text.append(self.format_footer(state))
        return text

    def render_multiselect(
        self,
        state: State,
        prompt: str,
        items: Sequence[Item],
        cursor: int,
        selected: set[int],
    ) -> Text:
        text = self.format_header(state, prompt)
        if state.is_terminal:
            labels = ", ".join(
                item.label for i, item in enumerate(items) if i in selected
            )
            value = Text(labels, style=self.input_style(state))
            text.append(_line(self._bar(state), "  ", value))
        else:
            for i, item in enumerate(items):
                text.append(
                    self.format_multiselect_item(
                        state, i in selected, i == cursor, item.label, item.hint
                    )
                )
        text.append(self.format_footer(state))
        return text

    def render_spinner(self, state: State, frame: int, message: str) -> Text:
        text = _line(Text(S_BAR, style="bright_black"))
        text.append(self.format_spinner(state, frame, message))
        return text


class ClackTheme(Theme):
    """The built-in theme."""


_theme_lock = threading.Lock()
_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the active theme, falling back to the built-in one."""
    global _theme
    with _theme_lock:
        if _theme is None:
            _theme = ClackTheme()
        return _theme


def set_theme(theme: Theme) -> None:
    """Replace the theme for every prompt rendered from now on."""
    global _theme
    with _theme_lock:
        _theme = theme


def reset_theme() -> None:
    """Go back to the built-in theme."""
    global _theme
    with _theme_lock:
        _theme = ClackTheme()

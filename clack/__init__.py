"""Minimal, themed interactive prompts for the terminal.

Usage:
    import clack

    clack.intro("create-my-app")
    name = clack.input("Project name?").placeholder("my-app").interact()
    kind = (
        clack.select("Pick a project type")
        .item("ts", "TypeScript")
        .item("js", "JavaScript")
        .interact()
    )
    clack.outro("You're all set!")

Features:
    - input, password, confirm, select, multiselect, and spinner prompts
    - Escape or Ctrl+C raises PromptCancelled after a cancelled render
    - log.* and intro/outro/note blocks for non-interactive output
    - Theme support via set_theme()
"""

from . import log
from .elements import (
    ActiveElement,
    Confirm,
    ElementManager,
    Input,
    InputEvent,
    Item,
    MultiSelect,
    Password,
    Select,
    Spinner,
    State,
    StateKind,
    get_console,
    set_console,
)
from .errors import PromptCancelled
from .session import clear_screen, intro, note, outro, outro_cancel, outro_note
from .theme import ClackTheme, Theme, get_theme, reset_theme, set_theme


def input(prompt: str) -> Input:
    """Construct a text Input prompt."""
    return Input(prompt)


def password(prompt: str) -> Password:
    """Construct a Password prompt."""
    return Password(prompt)


def confirm(prompt: str) -> Confirm:
    """Construct a yes/no Confirm prompt."""
    return Confirm(prompt)


def select(prompt: str) -> Select:
    """Construct a single-choice Select prompt."""
    return Select(prompt)


def multiselect(prompt: str) -> MultiSelect:
    """Construct a MultiSelect prompt."""
    return MultiSelect(prompt)


def spinner() -> Spinner:
    """Construct a Spinner; call start() to show it."""
    return Spinner()


__all__ = [
    # Prompts
    "input",
    "password",
    "confirm",
    "select",
    "multiselect",
    "spinner",
    "Input",
    "Password",
    "Confirm",
    "Item",
    "Select",
    "MultiSelect",
    "Spinner",
    # Session and log output
    "intro",
    "outro",
    "outro_cancel",
    "outro_note",
    "note",
    "clear_screen",
    "log",
    # Theme
    "Theme",
    "ClackTheme",
    "get_theme",
    "set_theme",
    "reset_theme",
    # Machinery
    "ActiveElement",
    "ElementManager",
    "InputEvent",
    "State",
    "StateKind",
    "PromptCancelled",
    "get_console",
    "set_console",
]

"""Interactive prompt elements.

This module provides the state machines behind every prompt kind and the
manager that drives them against a terminal.

Usage:
    from clack.elements import ElementManager, Confirm, Select

    manager = ElementManager()

    # Get user confirmation
    ok = manager.run(Confirm("Apply changes?"))

    # Pick one option
    lang = manager.run(
        Select("Pick a language").item("ts", "TypeScript").item("js", "JavaScript")
    )
"""

from .base import ActiveElement, InputEvent, State, StateKind
from .confirm_prompt import Confirm
from .cursor import StringCursor
from .manager import ElementManager
from .menu_select import Item, MultiSelect, Select
from .spinner import Spinner, SpinnerState, SpinnerStatus
from .terminal import RawInputReader, TerminalRegion, get_console, set_console
from .text_prompt import Input, Password

__all__ = [
    # Base
    "ActiveElement",
    "InputEvent",
    "State",
    "StateKind",
    "StringCursor",
    # Manager
    "ElementManager",
    # Terminal
    "TerminalRegion",
    "RawInputReader",
    "get_console",
    "set_console",
    # Elements
    "Input",
    "Password",
    "Confirm",
    "Item",
    "Select",
    "MultiSelect",
    "Spinner",
    "SpinnerState",
    "SpinnerStatus",
]

"""Session banners: the blocks that open and close a prompt sequence."""

from __future__ import annotations

from rich.text import Text

from .elements.terminal import TerminalRegion
from .theme import get_theme


def term_write(text: Text) -> None:
    TerminalRegion().write(text)


def clear_screen() -> None:
    """Clear the output console."""
    TerminalRegion().clear_screen()


def intro(title: str) -> None:
    """Print the header of a prompt sequence."""
    term_write(get_theme().format_intro(str(title)))


def outro(message: str) -> None:
    """Print the footer of a prompt sequence."""
    term_write(get_theme().format_outro(str(message)))


def outro_cancel(message: str) -> None:
    """Print the footer of a prompt sequence in the failure style."""
    term_write(get_theme().format_outro_cancel(str(message)))


def outro_note(prompt: str, message: str) -> None:
    """Print a note box that also closes the sequence."""
    term_write(get_theme().format_note(True, str(prompt), str(message)))


def note(prompt: str, message: str) -> None:
    """Print a note box inside the sequence."""
    term_write(get_theme().format_note(False, str(prompt), str(message)))

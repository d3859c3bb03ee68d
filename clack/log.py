"""Non-interactive messages of different styles.

Usage:
    from clack import log

    log.info("Hello, world!")
    log.warning("Something is wrong")
    log.error("Something is terribly wrong")
"""

from __future__ import annotations

from rich.text import Text

from .session import term_write
from .theme import get_theme


def _log(text: str, symbol: Text) -> None:
    term_write(get_theme().format_log(str(text), symbol))


def remark(text: str) -> None:
    _log(text, get_theme().remark_symbol())


def info(text: str) -> None:
    _log(text, get_theme().info_symbol())


def warning(message: str) -> None:
    _log(message, get_theme().warning_symbol())


def error(message: str) -> None:
    _log(message, get_theme().error_symbol())


def success(message: str) -> None:
    _log(message, get_theme().active_symbol())


def step(message: str) -> None:
    """A completed step, drawn like a submitted prompt."""
    _log(message, get_theme().submit_symbol())

"""Exceptions raised by interactive prompts."""

from __future__ import annotations


class PromptCancelled(Exception):
    """The user aborted a prompt with Escape or Ctrl+C.

    Raised by ``interact()`` after the prompt has been redrawn in its
    cancelled style. Callers usually catch it around a whole prompt
    sequence and finish with ``outro_cancel()``.
    """

    def __init__(self, message: str = "Operation cancelled.") -> None:
        super().__init__(message)

"""Editable single-line text buffer with a caret."""

from __future__ import annotations


class StringCursor:
    """A string plus a caret position in ``[0, len(value)]``.

    Every character is one editing unit; wide characters and grapheme
    clusters are not merged.
    """

    def __init__(self, value: str = "") -> None:
        self._value = value
        self._pos = len(value)

    @property
    def position(self) -> int:
        return self._pos

    def __str__(self) -> str:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f"StringCursor({self._value!r}, position={self._pos})"

    def is_empty(self) -> bool:
        return not self._value

    def insert(self, ch: str) -> None:
        self._value = self._value[: self._pos] + ch + self._value[self._pos :]
        self._pos += len(ch)

    def extend(self, text: str) -> None:
        """Append text and move the caret to the end."""
        self._value += text
        self._pos = len(self._value)

    def delete_left(self) -> None:
        if self._pos > 0:
            self._value = self._value[: self._pos - 1] + self._value[self._pos :]
            self._pos -= 1

    def delete_right(self) -> None:
        if self._pos < len(self._value):
            self._value = self._value[: self._pos] + self._value[self._pos + 1 :]

    def move_left(self) -> None:
        if self._pos > 0:
            self._pos -= 1

    def move_right(self) -> None:
        if self._pos < len(self._value):
            self._pos += 1

    def move_home(self) -> None:
        self._pos = 0

    def move_end(self) -> None:
        self._pos = len(self._value)

    def clear(self) -> None:
        self._value = ""
        self._pos = 0

    def split(self, mask: str | None = None) -> tuple[str, str, str]:
        """Return (before caret, character under caret, after caret).

        The middle part is a single space when the caret is at the end.
        With ``mask`` every character is replaced by the mask glyph; the
        caret position and length are preserved.
        """
        value = self._value if mask is None else mask * len(self._value)
        left = value[: self._pos]
        under = value[self._pos : self._pos + 1] or " "
        right = value[self._pos + 1 :]
        return left, under, right

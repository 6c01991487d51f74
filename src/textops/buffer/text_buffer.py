"""Growable text buffer used to assemble output strings."""

from __future__ import annotations

from typing import List

LINE_TERMINATOR = "\n"


class TextBuffer:
    """Mutable character buffer with fluent appends.

    Fragments are kept in a list and joined lazily, so repeated appends stay
    linear. The buffer is meant to be owned by one caller at a time; it does
    no locking of its own.
    """

    __slots__ = ("_parts", "_length")

    def __init__(self, text: str = "") -> None:
        self._parts: List[str] = [text] if text else []
        self._length = len(text)

    def append(self, text: str) -> "TextBuffer":
        if text:
            self._parts.append(text)
            self._length += len(text)
        return self

    def append_line(self, text: str = "") -> "TextBuffer":
        return self.append(text).append(LINE_TERMINATOR)

    def remove(self, start: int, count: int) -> "TextBuffer":
        """Drop ``count`` characters beginning at ``start``.

        Callers are expected to have validated the range already.
        """

        if count == 0:
            return self
        text = self._flatten()
        self._reset(text[:start] + text[start + count :])
        return self

    def clear(self) -> "TextBuffer":
        self._reset("")
        return self

    def _flatten(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def _reset(self, text: str) -> None:
        self._parts = [text] if text else []
        self._length = len(text)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self._flatten()

    def __repr__(self) -> str:
        return f"TextBuffer({self._flatten()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return str(self) == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


__all__ = ["LINE_TERMINATOR", "TextBuffer"]

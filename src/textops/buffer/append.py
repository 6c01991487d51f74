"""Conditional appends keyed on whether a buffer already holds text."""

from __future__ import annotations

from typing import Optional

from textops.validation import guarded

from .text_buffer import TextBuffer


@guarded("buffer", "text")
def append_if_empty(buffer: TextBuffer, text: str) -> TextBuffer:
    if len(buffer) == 0:
        buffer.append(text)
    return buffer


@guarded("buffer", "text")
def append_if_not_empty(buffer: TextBuffer, text: str) -> TextBuffer:
    if len(buffer) > 0:
        buffer.append(text)
    return buffer


@guarded("buffer")
def append_line_if_empty(buffer: TextBuffer, text: Optional[str] = None) -> TextBuffer:
    """Append ``text`` and a line terminator to an empty buffer.

    Without ``text`` only the terminator is written.
    """

    if len(buffer) == 0:
        buffer.append_line(text or "")
    return buffer


@guarded("buffer")
def append_line_if_not_empty(
    buffer: TextBuffer, text: Optional[str] = None
) -> TextBuffer:
    """Append ``text`` and a line terminator when the buffer already has text.

    Without ``text`` only the terminator is written; this is how list
    rendering separates items.
    """

    if len(buffer) > 0:
        buffer.append_line(text or "")
    return buffer


__all__ = [
    "append_if_empty",
    "append_if_not_empty",
    "append_line_if_empty",
    "append_line_if_not_empty",
]

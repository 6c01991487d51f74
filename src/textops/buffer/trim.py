"""Remove a fixed number of characters from either end of text."""

from __future__ import annotations

from textops.validation import ensure_count, guarded

from .text_buffer import TextBuffer


@guarded("value", "character_count")
def remove_from_end(value: str, character_count: int) -> str:
    ensure_count(character_count, len(value), "character_count")
    return value[: len(value) - character_count]


@guarded("value", "character_count")
def remove_from_start(value: str, character_count: int) -> str:
    ensure_count(character_count, len(value), "character_count")
    return value[character_count:]


@guarded("buffer", "character_count")
def remove_from_buffer_end(buffer: TextBuffer, character_count: int) -> TextBuffer:
    """Drop the last ``character_count`` characters of ``buffer`` in place.

    Raises :class:`~textops.validation.OutOfRangeError` when the count is
    negative or longer than the buffer. Removing the whole buffer is allowed
    and leaves it empty.
    """

    length = len(buffer)
    ensure_count(character_count, length, "character_count")
    if length == 0:
        return buffer
    if length - character_count == 0:
        return buffer.clear()
    return buffer.remove(length - character_count, character_count)


@guarded("buffer", "character_count")
def remove_from_buffer_start(buffer: TextBuffer, character_count: int) -> TextBuffer:
    """Drop the first ``character_count`` characters of ``buffer`` in place."""

    length = len(buffer)
    ensure_count(character_count, length, "character_count")
    if length == 0:
        return buffer
    if length - character_count == 0:
        return buffer.clear()
    return buffer.remove(0, character_count)


__all__ = [
    "remove_from_end",
    "remove_from_start",
    "remove_from_buffer_end",
    "remove_from_buffer_start",
]

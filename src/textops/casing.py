"""Segment text at casing transitions."""

from __future__ import annotations

from .buffer.text_buffer import TextBuffer
from .validation import guarded


@guarded("value", "insert_characters")
def add_characters_by_casing(value: str, insert_characters: str) -> str:
    """Insert ``insert_characters`` before every "uppercase" character.

    A character counts as uppercase when ``char.upper() == char``, so digits
    and symbols qualify too: ``"Route66"`` with ``"_"`` becomes
    ``"Route_6_6"``. Nothing is inserted ahead of the first character.

    >>> add_characters_by_casing("TheQuickBrownFox", "|")
    'The|Quick|Brown|Fox'
    """

    builder = TextBuffer()
    for char in value:
        if char == char.upper() and len(builder) > 0:
            builder.append(insert_characters)
        builder.append(char)
    return str(builder)


def add_spaces_by_casing(value: str) -> str:
    """``"TheQuickBrownFox"`` -> ``"The Quick Brown Fox"``."""

    return add_characters_by_casing(value, " ")


__all__ = ["add_characters_by_casing", "add_spaces_by_casing"]

"""Growable text buffer plus conditional-append and trimming helpers."""

from .append import (
    append_if_empty,
    append_if_not_empty,
    append_line_if_empty,
    append_line_if_not_empty,
)
from .text_buffer import LINE_TERMINATOR, TextBuffer
from .trim import (
    remove_from_buffer_end,
    remove_from_buffer_start,
    remove_from_end,
    remove_from_start,
)

__all__ = [
    "LINE_TERMINATOR",
    "TextBuffer",
    "append_if_empty",
    "append_if_not_empty",
    "append_line_if_empty",
    "append_line_if_not_empty",
    "remove_from_end",
    "remove_from_start",
    "remove_from_buffer_end",
    "remove_from_buffer_start",
]

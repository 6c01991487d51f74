"""Small, stateless text operations: casing, buffers, splitting and joining."""

from .buffer import (
    LINE_TERMINATOR,
    TextBuffer,
    append_if_empty,
    append_if_not_empty,
    append_line_if_empty,
    append_line_if_not_empty,
    remove_from_buffer_end,
    remove_from_buffer_start,
    remove_from_end,
    remove_from_start,
)
from .casing import add_characters_by_casing, add_spaces_by_casing
from .delimiters import DELIMITER_CANDIDATES, choose_working_delimiter, split
from .render import (
    delimit,
    delimit_mapping,
    delimit_pairs,
    list_items,
    list_mapping,
    list_pairs,
)
from .validation import (
    ArgumentValidationError,
    EmptyArgumentError,
    NullArgumentError,
    OutOfRangeError,
    is_not_null_or_empty,
    is_null_or_empty,
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
    "add_characters_by_casing",
    "add_spaces_by_casing",
    "DELIMITER_CANDIDATES",
    "choose_working_delimiter",
    "split",
    "delimit",
    "delimit_pairs",
    "delimit_mapping",
    "list_items",
    "list_pairs",
    "list_mapping",
    "ArgumentValidationError",
    "NullArgumentError",
    "EmptyArgumentError",
    "OutOfRangeError",
    "is_null_or_empty",
    "is_not_null_or_empty",
]

__version__ = "0.1.0"

"""Split text on multi-character delimiters.

``str.split`` already handles multi-character separators, but the split here
deliberately goes through a single stand-in character: the full delimiter is
first replaced by a "working delimiter" chosen from
:data:`DELIMITER_CANDIDATES`, then the text is split on that character.

The working delimiter is ``":"`` unless the text already contains a colon,
in which case the first candidate missing from the text wins. If every
candidate occurs in the text, the first character of the caller's delimiter
is used instead. That last resort can collide with ordinary content and
split the text in places the caller never marked, so pick a delimiter whose
first character cannot appear in the input when that case is possible.
"""

from __future__ import annotations

from typing import List

from textops.runtime.telemetry import record_event, span

from .validation import guarded

DELIMITER_CANDIDATES: tuple[str, ...] = (":", "|", "^", "=", "/", "-")


@guarded("value", non_empty=("delimiter",))
def choose_working_delimiter(value: str, delimiter: str) -> str:
    """Return the single character that will stand in for ``delimiter``."""

    return _choose(value, delimiter)


def _choose(value: str, delimiter: str) -> str:
    default = DELIMITER_CANDIDATES[0]
    if default not in value:
        return default
    for candidate in DELIMITER_CANDIDATES[1:]:
        if candidate not in value:
            return candidate

    record_event(
        "delimiters.candidates_exhausted",
        level="warning",
        data={"delimiter": delimiter, "fallback": delimiter[0]},
    )
    return delimiter[0]


@guarded("value", non_empty=("delimiter",))
def split(value: str, delimiter: str) -> List[str]:
    """Split ``value`` on every occurrence of ``delimiter``.

    Empty pieces between adjacent delimiters are kept:

    >>> split("a::::b", "::")
    ['a', '', 'b']
    """

    with span(
        "delimiters::split",
        component="delimiters",
        metadata={"delimiter": delimiter},
    ) as handle:
        working = _choose(value, delimiter)
        handle.add_metadata("working_delimiter", working)
        return value.replace(delimiter, working).split(working)


__all__ = ["DELIMITER_CANDIDATES", "choose_working_delimiter", "split"]

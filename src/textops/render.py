"""Render collections as delimited lines or line-per-item lists."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Tuple

from textops.runtime.telemetry import span

from .buffer import TextBuffer, append_if_not_empty, append_line_if_not_empty
from .validation import guarded

DEFAULT_DELIMITER = ", "
DEFAULT_KEY_VALUE_SEPARATOR = ": "

Pair = Tuple[str, Any]
Separator = Callable[[TextBuffer], TextBuffer]


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _delimiter(delimiter: str) -> Separator:
    return lambda builder: append_if_not_empty(builder, delimiter)


def _line_break(builder: TextBuffer) -> TextBuffer:
    return append_line_if_not_empty(builder)


def _render(
    name: str,
    pairs: Iterable[Pair],
    separate: Separator,
    *,
    exclude_keys: bool,
    key_value_separator: str,
) -> str:
    builder = TextBuffer()
    with span(f"render::{name}", component="render") as handle:
        count = 0
        for key, value in pairs:
            separate(builder)
            if not exclude_keys:
                builder.append(_as_text(key))
                builder.append(key_value_separator)
            builder.append(_as_text(value))
            count += 1
        handle.add_metadata("items", count)
    return str(builder)


def _values(items: Iterable[Any]) -> Iterable[Pair]:
    return (("", item) for item in items)


@guarded("items", "delimiter")
def delimit(items: Iterable[Any], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join ``items`` with ``delimiter``: ``["a", "b"]`` -> ``"a, b"``.

    A separator is only written once the output holds text, so leading
    empty items leave no trace: ``delimit(["", "a"], ",")`` is ``"a"``, and
    splitting that result will not give the empty item back.
    """

    return _render(
        "delimit",
        _values(items),
        _delimiter(delimiter),
        exclude_keys=True,
        key_value_separator="",
    )


@guarded("pairs", "delimiter", "key_value_separator")
def delimit_pairs(
    pairs: Iterable[Pair],
    delimiter: str = DEFAULT_DELIMITER,
    key_value_separator: str = DEFAULT_KEY_VALUE_SEPARATOR,
) -> str:
    """Join ``(key, value)`` pairs: ``[("a", 1)]`` -> ``"a: 1"``."""

    return _render(
        "delimit_pairs",
        pairs,
        _delimiter(delimiter),
        exclude_keys=False,
        key_value_separator=key_value_separator,
    )


@guarded("mapping", "delimiter", "key_value_separator")
def delimit_mapping(
    mapping: Mapping[str, Any],
    delimiter: str = DEFAULT_DELIMITER,
    exclude_keys: bool = False,
    key_value_separator: str = DEFAULT_KEY_VALUE_SEPARATOR,
) -> str:
    """Join a mapping in its iteration order, optionally values only."""

    return _render(
        "delimit_mapping",
        mapping.items(),
        _delimiter(delimiter),
        exclude_keys=exclude_keys,
        key_value_separator=key_value_separator,
    )


@guarded("items")
def list_items(items: Iterable[Any]) -> str:
    """Render one item per line, without a trailing line break."""

    return _render(
        "list_items",
        _values(items),
        _line_break,
        exclude_keys=True,
        key_value_separator="",
    )


@guarded("pairs", "key_value_separator")
def list_pairs(
    pairs: Iterable[Pair], key_value_separator: str = DEFAULT_KEY_VALUE_SEPARATOR
) -> str:
    return _render(
        "list_pairs",
        pairs,
        _line_break,
        exclude_keys=False,
        key_value_separator=key_value_separator,
    )


@guarded("mapping", "key_value_separator")
def list_mapping(
    mapping: Mapping[str, Any],
    exclude_keys: bool = False,
    key_value_separator: str = DEFAULT_KEY_VALUE_SEPARATOR,
) -> str:
    return _render(
        "list_mapping",
        mapping.items(),
        _line_break,
        exclude_keys=exclude_keys,
        key_value_separator=key_value_separator,
    )


__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_KEY_VALUE_SEPARATOR",
    "delimit",
    "delimit_pairs",
    "delimit_mapping",
    "list_items",
    "list_pairs",
    "list_mapping",
]

import pytest

from textops import NullArgumentError, add_characters_by_casing, add_spaces_by_casing


def test_spaces_inserted_at_each_capital() -> None:
    assert add_spaces_by_casing("TheQuickBrownFox") == "The Quick Brown Fox"


def test_custom_marker() -> None:
    assert add_characters_by_casing("TheQuickBrownFox", "|") == "The|Quick|Brown|Fox"


def test_empty_input_stays_empty() -> None:
    assert add_characters_by_casing("", "-") == ""


def test_lowercase_input_unchanged() -> None:
    assert add_spaces_by_casing("abc") == "abc"


def test_leading_capital_gets_no_marker() -> None:
    assert add_spaces_by_casing("Fox") == "Fox"


def test_empty_marker_is_noop() -> None:
    assert add_characters_by_casing("TheQuickBrownFox", "") == "TheQuickBrownFox"


def test_digits_and_symbols_count_as_uppercase() -> None:
    assert add_characters_by_casing("Route66", "_") == "Route_6_6"
    assert add_characters_by_casing("a.b", " ") == "a .b"


def test_consecutive_capitals_each_get_marker() -> None:
    assert add_spaces_by_casing("HTTPServer") == "H T T P Server"


@pytest.mark.parametrize("kwargs, parameter", [
    ({"value": None, "insert_characters": " "}, "value"),
    ({"value": "Fox", "insert_characters": None}, "insert_characters"),
])
def test_none_arguments_rejected(kwargs, parameter) -> None:
    with pytest.raises(NullArgumentError) as excinfo:
        add_characters_by_casing(**kwargs)

    assert excinfo.value.parameter == parameter

"""Unit tests for shared scalar parsing helpers."""

import pytest

from segmark.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_positive_int,
    parse_required_boolean,
    split_csv_tokens,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
        (True, True),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_for_invalid_token() -> None:
    """Strict boolean parsing should name the field in its message."""

    with pytest.raises(
        ValueError,
        match=(
            r"`keep_preamble` must be a boolean value "
            r"\(`true`/`false`, `1`/`0`, `yes`/`no`\)\."
        ),
    ):
        parse_required_boolean("maybe", "keep_preamble")


@pytest.mark.parametrize(("value", "expected"), [(5, 5), (" 12 ", 12), ("200", 200)])
def test_parse_positive_int_accepts_ints_and_numeric_strings(value: object, expected: int) -> None:
    """Positive integers are accepted from ints and trimmed numeric strings."""

    assert parse_positive_int(value, "words_per_minute") == expected


@pytest.mark.parametrize("value", [0, -1, "0", "", None, "1.5", True])
def test_parse_positive_int_rejects_invalid_values(value: object) -> None:
    """Zero, negatives, blanks, floats, and booleans are rejected."""

    with pytest.raises(ValueError, match="`words_per_minute` must be a positive integer"):
        parse_positive_int(value, "words_per_minute")


def test_split_csv_tokens_handles_strings_and_lists() -> None:
    """CSV strings and lists produce stripped, non-empty tokens."""

    assert split_csv_tokens(" a, ,b ,c ") == ("a", "b", "c")
    assert split_csv_tokens(["x ", " ", "y"]) == ("x", "y")
    assert split_csv_tokens(None) == ()

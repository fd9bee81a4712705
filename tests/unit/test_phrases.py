"""Unit tests for clause-level phrase splitting."""

from __future__ import annotations

import pytest

from segmark.text.phrases import PhraseSplitter


def test_split_phrases_keeps_delimiter_and_leading_space() -> None:
    """Delimiters stay on the left phrase; following spaces stay on the right one."""

    assert PhraseSplitter().split_phrases("Hello, world.") == ["Hello,", " world."]


def test_split_phrases_handles_each_delimiter_kind() -> None:
    """Commas, semicolons, colons, em dashes, and full-width marks are split points."""

    splitter = PhraseSplitter()

    assert splitter.split_phrases("Wait—what?") == ["Wait—", "what?"]
    assert splitter.split_phrases("One; two: three") == ["One;", " two:", " three"]
    assert splitter.split_phrases("你好，世界。") == ["你好，", "世界。"]


def test_split_phrases_groups_consecutive_delimiters() -> None:
    """Runs of delimiters close a single phrase."""

    assert PhraseSplitter().split_phrases("a,; b") == ["a,;", " b"]


def test_split_phrases_ignores_numeric_separators() -> None:
    """Thousands separators and clock times are not clause boundaries."""

    assert PhraseSplitter().split_phrases("1,000 people came at 10:30, then left.") == [
        "1,000 people came at 10:30,",
        " then left.",
    ]


def test_split_phrases_returns_single_phrase_without_delimiters() -> None:
    """A sentence without clause punctuation is one phrase."""

    assert PhraseSplitter().split_phrases("No delimiters here.") == ["No delimiters here."]


def test_split_phrases_appends_whitespace_tail_to_last_phrase() -> None:
    """A whitespace-only remainder must not become its own phrase."""

    assert PhraseSplitter().split_phrases("end,  ") == ["end,  "]


def test_split_phrases_returns_empty_list_for_empty_input() -> None:
    """Empty input has no phrases."""

    assert PhraseSplitter().split_phrases("") == []


@pytest.mark.parametrize(
    "sentence",
    [
        "Salt, rice, and tea.",
        "  leading, and trailing  ",
        "A—B—C; D: E, F",
        "Xin chào, thế giới; tạm biệt.",
    ],
)
def test_split_phrases_is_lossless(sentence: str) -> None:
    """Concatenated phrases should reproduce the input exactly."""

    assert "".join(PhraseSplitter().split_phrases(sentence)) == sentence

"""Unit tests for punctuation-driven sentence boundary detection."""

from __future__ import annotations

import pytest

from segmark.text.sentences import SentenceBoundaryDetector


def test_split_keeps_abbreviations_inside_sentence() -> None:
    """Known abbreviations followed by a space should not end a sentence."""

    assert SentenceBoundaryDetector().split("Dr. Smith went to St. Louis.") == [
        "Dr. Smith went to St. Louis."
    ]


@pytest.mark.parametrize(
    "text",
    ["Gov. Brown arrived.", "Sen. Smith spoke.", "Pres. Lee left.", "Ald. Park voted."],
)
def test_split_keeps_short_capitalized_abbreviations_inside_sentence(text: str) -> None:
    """A capital plus up to three lowercase letters before `. ` is an abbreviation."""

    assert SentenceBoundaryDetector().split(text) == [text]


def test_split_breaks_after_longer_capitalized_words() -> None:
    """Capitalized words of five or more letters still end sentences."""

    assert SentenceBoundaryDetector().split("They met in Paris. Then they left.") == [
        "They met in Paris.",
        "Then they left.",
    ]


def test_split_keeps_decimal_numbers_inside_sentence() -> None:
    """Periods between digits should not end a sentence."""

    assert SentenceBoundaryDetector().split("The price is $99.99 today.") == [
        "The price is $99.99 today."
    ]


@pytest.mark.parametrize("text", ["", "   \n\n  "])
def test_split_returns_empty_list_for_blank_input(text: str) -> None:
    """Blank input should produce no sentences and no error."""

    assert SentenceBoundaryDetector().split(text) == []


def test_split_breaks_on_terminal_punctuation() -> None:
    """Periods, question marks, and exclamation marks should end sentences."""

    assert SentenceBoundaryDetector().split("Hello there. How are you? Fine!") == [
        "Hello there.",
        "How are you?",
        "Fine!",
    ]


def test_split_requires_uppercase_after_terminator() -> None:
    """A lowercase continuation should not start a new sentence."""

    assert SentenceBoundaryDetector().split("Version 2. is out. Nice.") == [
        "Version 2. is out.",
        "Nice.",
    ]


def test_split_treats_single_capitals_as_initials() -> None:
    """Single capital letters are initials, except the pronoun `I`."""

    detector = SentenceBoundaryDetector()

    assert detector.split("J. R. R. Tolkien wrote books. They sold well.") == [
        "J. R. R. Tolkien wrote books.",
        "They sold well.",
    ]
    assert detector.split("So did I. Then we left.") == ["So did I.", "Then we left."]


def test_split_keeps_dotted_acronyms_and_latin_abbreviations() -> None:
    """Acronyms like `U.S.` and `e.g.` should not end a sentence."""

    detector = SentenceBoundaryDetector()

    assert detector.split("He moved to the U.S. in May.") == ["He moved to the U.S. in May."]
    assert detector.split("I like fruit, e.g. apples and pears.") == [
        "I like fruit, e.g. apples and pears."
    ]


def test_split_handles_ellipsis() -> None:
    """An ellipsis ends a sentence only before an uppercase word."""

    detector = SentenceBoundaryDetector()

    assert detector.split("Wait... Then he left.") == ["Wait...", "Then he left."]
    assert detector.split("Well… maybe not.") == ["Well… maybe not."]


def test_split_keeps_closing_quotes_with_sentence() -> None:
    """Closing quotes after a terminator belong to the ending sentence."""

    assert SentenceBoundaryDetector().split('He said "Stop." Then silence.') == [
        'He said "Stop."',
        "Then silence.",
    ]


def test_split_treats_newlines_as_hard_boundaries() -> None:
    """Each line is split independently."""

    assert SentenceBoundaryDetector().split("First line\r\nSecond line") == [
        "First line",
        "Second line",
    ]


def test_split_keeps_brace_groups_attached_to_their_sentence() -> None:
    """Translation groups stay with the sentence in front of them."""

    detector = SentenceBoundaryDetector()

    assert detector.split("Hello world. {Xin chào thế giới.} Next one. {Tiếp theo.}") == [
        "Hello world. {Xin chào thế giới.}",
        "Next one. {Tiếp theo.}",
    ]
    assert detector.split("Hello world. {Xin chào. Thế giới.}") == [
        "Hello world. {Xin chào. Thế giới.}"
    ]


def test_split_without_brace_protection_scans_inside_groups() -> None:
    """Disabling brace protection lets terminators inside groups split."""

    detector = SentenceBoundaryDetector(protect_brace_groups=False)

    assert detector.split("Hi. {Chào. Bạn.}") == ["Hi. {Chào.", "Bạn.}"]


def test_split_accepts_extra_abbreviations() -> None:
    """Configured abbreviations should suppress boundaries like built-in ones."""

    text = "It weighs approx. Ten kilos."

    assert SentenceBoundaryDetector().split(text) == ["It weighs approx.", "Ten kilos."]
    assert SentenceBoundaryDetector(extra_abbreviations=["approx"]).split(text) == [text]


def test_split_returns_cjk_line_as_single_sentence() -> None:
    """Scripts without Latin terminators are not split inside a line."""

    assert SentenceBoundaryDetector().split("我们走吧。他说。") == ["我们走吧。他说。"]

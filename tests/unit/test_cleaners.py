"""Unit tests for deterministic text cleaning rules."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from segmark.text.cleaners import CollapseWhitespace, RemoveFootnoteMarkers, TextCleaner


def test_text_cleaner_removes_footnote_markers() -> None:
    """Bracketed numeric markers should be removed from primary and secondary text."""

    cleaner = TextCleaner()

    assert cleaner.clean("English part[23].") == "English part."
    assert cleaner.clean("Phần Tiếng Việt.[45]") == "Phần Tiếng Việt."


def test_text_cleaner_keeps_non_numeric_brackets() -> None:
    """Only numeric markers count as footnotes."""

    assert TextCleaner().clean("See [note] and [a1].") == "See [note] and [a1]."


def test_text_cleaner_collapses_whitespace_and_trims() -> None:
    """Horizontal whitespace should collapse and line edges should be trimmed."""

    assert TextCleaner().clean("  a \t  b \n   c  ") == "a b\nc"


def test_text_cleaner_reports_removed_footnote_count() -> None:
    """Cleaning report should expose how many markers were removed."""

    report = TextCleaner().clean_with_report("One[1] two[2] three[10].")

    assert report.cleaned_text == "One two three."
    assert report.footnotes_removed_count == 3


def test_remove_footnote_markers_repeats_until_stable() -> None:
    """Removing an inner marker can expose an outer one, which is removed too."""

    rule = RemoveFootnoteMarkers()

    assert rule.apply("Text[1[2]].") == "Text."
    assert rule.apply_with_count("Text[1[2]].") == ("Text.", 2)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "Plain sentence.",
        "Text[1[2]] with  gaps\t\tand[3] notes.",
        "  line one  \n\n  line two[9]  ",
        "Nested [[1]] marker",
    ],
)
def test_text_cleaner_is_idempotent(text: str) -> None:
    """Cleaning an already cleaned string should not change it."""

    cleaner = TextCleaner()
    once = cleaner.clean(text)

    assert cleaner.clean(once) == once


def test_text_cleaner_accepts_custom_rule_sequence() -> None:
    """Custom rule lists should replace the default sequence."""

    cleaner = TextCleaner(rules=[CollapseWhitespace()])

    assert cleaner.clean("a[1]   b") == "a[1] b"
    assert cleaner.clean_with_report("a[1]").footnotes_removed_count == 0


def test_text_cleaner_reports_per_call_counts_across_threads() -> None:
    """A shared cleaner reports each call's own footnote count."""

    cleaner = TextCleaner()
    counts = [index % 7 for index in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        reports = list(
            pool.map(lambda count: cleaner.clean_with_report("x" + "[1]" * count), counts)
        )

    assert [report.footnotes_removed_count for report in reports] == counts
    assert {report.cleaned_text for report in reports} == {"x"}

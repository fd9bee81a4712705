"""Unit tests for document title and chapter splitting."""

from __future__ import annotations

from segmark.config import SegmenterConfig
from segmark.ids import SequentialIdGenerator
from segmark.io.chapter_splitter import ChapterSplitter, compute_chapter_stats
from segmark.models.datatypes import SentenceContent
from segmark.origin import parse_origin

EN = parse_origin("en")
EN_VI = parse_origin("en-vi")


def _splitter(config: SegmenterConfig | None = None) -> ChapterSplitter:
    return ChapterSplitter(config=config, id_generator=SequentialIdGenerator())


def _titles(document, language: str = "en") -> list[str]:
    return [chapter.title.text(language) for chapter in document.chapters]


def test_split_document_extracts_title_and_chapter() -> None:
    """The level-1 heading is the title and level-2 headings start chapters."""

    document = _splitter().split_document("# My Book Title\n\n## Chapter 1\nContent.", EN)

    assert document.title.text("en") == "My Book Title"
    assert _titles(document) == ["Chapter 1"]
    assert [segment.text("en") for segment in document.chapters[0].segments] == ["Content."]


def test_split_document_creates_synthetic_chapter_without_chapter_headings() -> None:
    """A titled document without chapter markers gets one chapter holding all segments."""

    document = _splitter().split_document("# Book\n\nFirst. Second.\n\nThird.", EN)

    assert _titles(document) == ["Chapter 1"]
    assert [segment.text("en") for segment in document.chapters[0].segments] == [
        "First.",
        "Second.",
        "Third.",
    ]


def test_split_document_falls_back_to_level_three_title() -> None:
    """A level-3 heading before the first chapter is used when no level-1 exists."""

    document = _splitter().split_document("### Small Title\n\n## Chapter A\nText.", EN)

    assert document.title.text("en") == "Small Title"
    assert _titles(document) == ["Chapter A"]


def test_split_document_ignores_level_three_headings_inside_chapters_for_title() -> None:
    """Subsection headings after the first chapter are not titles."""

    document = _splitter().split_document("Opening line.\n\n## One\n### Sub\nText.", EN)

    assert document.title.text("en") == "Opening line."
    assert _titles(document) == ["One"]
    assert [segment.text("en") for segment in document.chapters[0].segments] == ["Sub", "Text."]


def test_split_document_uses_first_line_as_last_title_fallback() -> None:
    """Without level-1 or level-3 headings the first non-blank line is the title."""

    document = _splitter().split_document("Plain opening line\n## Part\nContent.", EN)

    assert document.title.text("en") == "Plain opening line"
    assert _titles(document) == ["Part"]


def test_split_document_fallback_chapter_heading_title_keeps_its_chapter() -> None:
    """A leading chapter heading titles the document without its marker and keeps its body."""

    document = _splitter().split_document(
        "## Chapter 1\nFirst content.\n## Chapter 2\nSecond content.", EN
    )

    assert document.title.text("en") == "Chapter 1"
    assert _titles(document) == ["Chapter 1", "Chapter 2"]
    assert [segment.text("en") for segment in document.chapters[0].segments] == [
        "First content."
    ]


def test_split_document_returns_default_title_for_empty_input() -> None:
    """Empty and whitespace-only documents have the default title and no chapters."""

    for markdown in ("", "   \n\n  "):
        document = _splitter().split_document(markdown, EN)

        assert document.title == SentenceContent(texts={"en": "Untitled"})
        assert document.chapters == ()


def test_split_document_keeps_preamble_as_introduction_chapter() -> None:
    """Text between the title and the first chapter becomes a leading chapter."""

    markdown = "# Book\n\nPreface text.\n\n## One\nBody."

    assert _titles(_splitter().split_document(markdown, EN)) == ["Introduction", "One"]
    assert _titles(
        _splitter(SegmenterConfig(keep_preamble=False)).split_document(markdown, EN)
    ) == ["One"]


def test_split_document_prunes_only_untitled_empty_chapters() -> None:
    """Empty explicit chapters survive when titled; untitled empty ones are dropped."""

    document = _splitter().split_document("# Book\n## Empty\n##\n## Full\nText.", EN)

    assert _titles(document) == ["Empty", "Full"]
    assert document.chapters[0].segments == ()
    assert [chapter.order for chapter in document.chapters] == [0, 1]


def test_split_document_drops_synthetic_chapter_without_segments() -> None:
    """A title-only document has no chapters."""

    assert _splitter().split_document("# Only Title", EN).chapters == ()


def test_split_document_restarts_segment_order_per_chapter() -> None:
    """Segment orders are contiguous from zero inside each chapter."""

    document = _splitter().split_document("# B\n## One\nAlpha. Bravo. Gamma.\n## Two\nDelta. Echo.", EN)

    for chapter in document.chapters:
        orders = [segment.order for segment in chapter.segments]
        assert orders == list(range(len(orders)))
        assert all(left < right for left, right in zip(orders, orders[1:]))


def test_split_document_parses_bilingual_titles(bilingual_book: str) -> None:
    """Document and chapter titles use the bilingual title convention."""

    document = _splitter().split_document(bilingual_book, EN_VI)

    assert document.title == SentenceContent(
        texts={"en": "The Quiet Harbor", "vi": "Bến Cảng Yên Tĩnh"}
    )
    assert _titles(document, "en") == ["Introduction", "Chapter 1: Arrival", "Chapter 2: The Market"]
    assert _titles(document, "vi") == ["", "Chương 1: Đến nơi", "Chương 2: Khu chợ"]


def test_split_document_normalizes_crlf() -> None:
    """Windows line endings behave like LF."""

    document = _splitter().split_document("# Book\r\n\r\n## One\r\nText.\r\n", EN)

    assert document.title.text("en") == "Book"
    assert _titles(document) == ["One"]


def test_compute_chapter_stats_rounds_reading_time_up() -> None:
    """Reading time is the ceiling of words over words per minute."""

    document = _splitter().split_document("# B\n## One\nOne two three. Four five.", EN)
    segments = document.chapters[0].segments

    stats = compute_chapter_stats(segments, "en", words_per_minute=2)

    assert stats.total_segments == 2
    assert stats.total_words == 5
    assert stats.estimated_reading_time == 3
    assert document.chapters[0].stats.estimated_reading_time == 1


def test_compute_chapter_stats_for_empty_chapter() -> None:
    """Empty chapters have zero counts and zero reading time."""

    stats = compute_chapter_stats((), "en", words_per_minute=200)

    assert (stats.total_segments, stats.total_words, stats.estimated_reading_time) == (0, 0, 0)

"""Document title and chapter splitting.

Responsibilities:
- Resolve the document title (level-1 heading, then level-3, then the first
  non-blank line) and discard everything in front of it.
- Split the remaining lines at level-2 headings into chapter spans.
- Build segments per chapter and compute chapter statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

from ..config import SegmenterConfig
from ..ids import IdGenerator, random_id
from ..models.datatypes import (
    Chapter,
    ChapterStats,
    Origin,
    ParsedDocument,
    Segment,
    SentenceContent,
)
from ..text.bilingual import BilingualPairer
from ..text.segments import SegmentBuilder
from ..text.sentences import SentenceBoundaryDetector
from ..text.structure import CHAPTER_HEADING_LEVEL, LineKind, MarkdownLineClassifier

_TITLE_HEADING_LEVEL = 1
_FALLBACK_TITLE_HEADING_LEVEL = 3


@dataclass(frozen=True, slots=True)
class _ChapterSpan:
    """Lines of one chapter before segment building."""

    title: SentenceContent
    lines: Sequence[str]
    explicit: bool


def compute_chapter_stats(
    segments: Sequence[Segment], primary_language: str, words_per_minute: int
) -> ChapterStats:
    """Count segments and primary-language words and estimate reading minutes."""

    total_words = sum(len(segment.text(primary_language).split()) for segment in segments)
    return ChapterStats(
        total_segments=len(segments),
        total_words=total_words,
        estimated_reading_time=math.ceil(total_words / words_per_minute),
    )


def normalize_newlines(text: str) -> str:
    """Convert CRLF and CR line endings to LF."""

    return (text or "").replace("\r\n", "\n").replace("\r", "\n")


class ChapterSplitter:
    """Split a Markdown document into a title and chapter records."""

    def __init__(
        self,
        config: SegmenterConfig | None = None,
        id_generator: IdGenerator | None = None,
        segment_builder: SegmentBuilder | None = None,
        pairer: BilingualPairer | None = None,
        classifier: MarkdownLineClassifier | None = None,
    ) -> None:
        """Initialize splitter collaborators; defaults are created when omitted."""

        self._config = config or SegmenterConfig()
        self._id_generator = id_generator or random_id
        self._segment_builder = segment_builder or SegmentBuilder(
            id_generator=self._id_generator,
            sentence_detector=SentenceBoundaryDetector(self._config.extra_abbreviations),
        )
        self._pairer = pairer or BilingualPairer()
        self._classifier = classifier or MarkdownLineClassifier()

    def split_document(self, markdown: str, origin: Origin) -> ParsedDocument:
        """Split a full document into `ParsedDocument`.

        Chapter spans that produce no segments are kept only when they come
        from an explicit heading with a non-empty title.
        """

        lines = normalize_newlines(markdown).split("\n")
        title_index = self._find_title_index(lines)
        if title_index is None:
            return ParsedDocument(
                title=self._default_title(origin),
                chapters=(),
                bilingual_format=origin.bilingual_format,
            )

        title = self._parse_title_line(lines[title_index], origin)
        body_start = title_index + 1
        if self._classifier.classify(lines[title_index]).is_chapter_heading:
            # A chapter heading used as fallback title still opens its chapter.
            body_start = title_index
        chapters: list[Chapter] = []
        for span in self._chapter_spans(lines[body_start:], origin):
            segments = self._segment_builder.build("\n".join(span.lines), origin)
            has_title = bool(span.title.text(origin.primary))
            if not segments and not (span.explicit and has_title):
                continue
            chapters.append(
                Chapter(
                    id=self._id_generator(),
                    order=len(chapters),
                    title=span.title,
                    segments=tuple(segments),
                    stats=compute_chapter_stats(
                        segments, origin.primary, self._config.words_per_minute
                    ),
                )
            )

        return ParsedDocument(
            title=title,
            chapters=tuple(chapters),
            bilingual_format=origin.bilingual_format,
        )

    def _find_title_index(self, lines: Sequence[str]) -> int | None:
        """Return the title line index using the heading fallback chain.

        A level-3 heading only counts as a title before the first chapter
        heading; later ones are chapter subsections.
        """

        levels = [self._classifier.heading_level(line) for line in lines]
        for index, level in enumerate(levels):
            if level == _TITLE_HEADING_LEVEL:
                return index
        for index, level in enumerate(levels):
            if level == CHAPTER_HEADING_LEVEL:
                break
            if level == _FALLBACK_TITLE_HEADING_LEVEL:
                return index
        for index, line in enumerate(lines):
            if line.strip():
                return index
        return None

    def _parse_title_line(self, line: str, origin: Origin) -> SentenceContent:
        """Parse the resolved title line; headings of any level lose their marker."""

        classified = self._classifier.classify(line)
        text = classified.text if classified.kind is LineKind.HEADING else classified.raw
        title = self._pairer.parse_title(text, origin)
        if not title.text(origin.primary):
            return self._default_title(origin)
        return title

    def _chapter_spans(self, lines: Sequence[str], origin: Origin) -> list[_ChapterSpan]:
        """Group lines after the title into chapter spans."""

        starts = [
            index for index, line in enumerate(lines) if self._classifier.classify(line).is_chapter_heading
        ]
        if not starts:
            return [
                _ChapterSpan(
                    title=self._titled(self._config.default_chapter_title, origin),
                    lines=lines,
                    explicit=False,
                )
            ]

        spans: list[_ChapterSpan] = []
        preamble = lines[: starts[0]]
        if self._config.keep_preamble and any(line.strip() for line in preamble):
            spans.append(
                _ChapterSpan(
                    title=self._titled(self._config.preamble_chapter_title, origin),
                    lines=preamble,
                    explicit=False,
                )
            )

        for position, start in enumerate(starts):
            end = starts[position + 1] if position + 1 < len(starts) else len(lines)
            heading_text = self._classifier.classify(lines[start]).text
            spans.append(
                _ChapterSpan(
                    title=self._pairer.parse_title(heading_text, origin),
                    lines=lines[start + 1 : end],
                    explicit=True,
                )
            )
        return spans

    @staticmethod
    def _titled(text: str, origin: Origin) -> SentenceContent:
        return SentenceContent(texts={origin.primary: text})

    def _default_title(self, origin: Origin) -> SentenceContent:
        return self._titled(self._config.default_document_title, origin)

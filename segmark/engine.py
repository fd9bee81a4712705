"""Markdown segmentation engine facade.

Responsibilities:
- Parse an origin descriptor once per call and run the segmentation stages.
- Return best-effort structured output; unexpected failures while parsing
  content are logged and turned into empty results.
- Offer the fallback-chapter helper orchestrators use when a document yields
  segments but no chapters.

Key public types:
- `MarkdownSegmentationEngine`: pure, synchronous, safe to share between
  threads (no state changes after construction).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from .config import SegmenterConfig
from .ids import IdGenerator, random_id
from .io.chapter_splitter import ChapterSplitter, compute_chapter_stats
from .models.datatypes import Chapter, ParsedDocument, Segment, SentenceContent
from .origin import parse_origin
from .telemetry.logger import ParseLogger
from .text.bilingual import BilingualPairer
from .text.cleaners import TextCleaner
from .text.segments import SegmentBuilder
from .text.sentences import SentenceBoundaryDetector


class MarkdownSegmentationEngine:
    """Convert generated Markdown into segments and chapters."""

    def __init__(
        self,
        config: SegmenterConfig | None = None,
        id_generator: IdGenerator | None = None,
        run_logger: ParseLogger | None = None,
    ) -> None:
        """Initialize the engine and its stage collaborators."""

        self.config = config or SegmenterConfig()
        self.config.validate()
        self._id_generator = id_generator or random_id
        self._logger = run_logger or ParseLogger()

        cleaner = TextCleaner()
        self._pairer = BilingualPairer(cleaner=cleaner)
        self._segment_builder = SegmentBuilder(
            id_generator=self._id_generator,
            cleaner=cleaner,
            sentence_detector=SentenceBoundaryDetector(self.config.extra_abbreviations),
            pairer=self._pairer,
        )
        self._chapter_splitter = ChapterSplitter(
            config=self.config,
            id_generator=self._id_generator,
            segment_builder=self._segment_builder,
            pairer=self._pairer,
        )

    def parse_document(self, markdown: str, origin: str) -> ParsedDocument:
        """Parse a full document into a title and chapters.

        Raises:
            OriginError: If the origin descriptor has no primary language.
        """

        parsed_origin = parse_origin(origin)
        stage = "parse-document"
        self._logger.log_stage_start(stage, origin=parsed_origin.descriptor, chars=len(markdown or ""))
        try:
            document = self._chapter_splitter.split_document(markdown or "", parsed_origin)
        except Exception as exc:
            self._logger.log_stage_failure(stage, type(exc).__name__)
            return ParsedDocument(
                title=SentenceContent(
                    texts={parsed_origin.primary: self.config.default_document_title}
                ),
                chapters=(),
                bilingual_format=parsed_origin.bilingual_format,
            )

        segment_count = sum(len(chapter.segments) for chapter in document.chapters)
        if not document.chapters and (markdown or "").strip():
            self._logger.log_stage_warning(stage, "recovered", reason="no_chapters")
        self._logger.log_stage_complete(
            stage, chapters=len(document.chapters), segments=segment_count
        )
        return document

    def parse_segments(self, markdown: str, origin: str) -> list[Segment]:
        """Parse chapter-less content into a flat segment list.

        Raises:
            OriginError: If the origin descriptor has no primary language.
        """

        parsed_origin = parse_origin(origin)
        stage = "parse-segments"
        self._logger.log_stage_start(stage, origin=parsed_origin.descriptor, chars=len(markdown or ""))
        try:
            segments = self._segment_builder.build(markdown or "", parsed_origin)
        except Exception as exc:
            self._logger.log_stage_failure(stage, type(exc).__name__)
            return []
        self._logger.log_stage_complete(stage, segments=len(segments))
        return segments

    def fallback_chapter(self, segments: Sequence[Segment], origin: str) -> Chapter | None:
        """Wrap loose segments into one chapter, or return `None` when empty.

        Segment order values are rewritten to be contiguous from 0 and the
        first segment is marked as a paragraph start.
        """

        if not segments:
            return None
        parsed_origin = parse_origin(origin)
        reordered = tuple(
            replace(
                segment,
                order=position,
                metadata=replace(segment.metadata, is_new_para=True)
                if position == 0
                else segment.metadata,
            )
            for position, segment in enumerate(segments)
        )
        return Chapter(
            id=self._id_generator(),
            order=0,
            title=SentenceContent(texts={parsed_origin.primary: self.config.default_chapter_title}),
            segments=reordered,
            stats=compute_chapter_stats(
                reordered, parsed_origin.primary, self.config.words_per_minute
            ),
        )

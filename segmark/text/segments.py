"""Segment construction for one document block.

Responsibilities:
- Walk block lines, skipping chapter markers and blank lines.
- Compose cleaning, bilingual run splitting, and sentence splitting per line.
- Assign ids, contiguous order values, types, and paragraph flags.
"""

from __future__ import annotations

from typing import Iterator

from ..ids import IdGenerator, random_id
from ..models.datatypes import (
    Origin,
    PhraseContent,
    Segment,
    SegmentContent,
    SegmentMetadata,
    SegmentType,
    SentenceContent,
)
from .bilingual import BilingualPairer, BilingualRun
from .cleaners import TextCleaner
from .dialogue import DialogueDetector
from .sentences import SentenceBoundaryDetector
from .structure import ClassifiedLine, LineKind, MarkdownLineClassifier

_STRUCTURAL_TYPES = {
    LineKind.BLOCKQUOTE: SegmentType.BLOCKQUOTE,
    LineKind.LIST_ITEM: SegmentType.LIST_ITEM,
}


class SegmentBuilder:
    """Build ordered `Segment` records from a Markdown block."""

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        cleaner: TextCleaner | None = None,
        sentence_detector: SentenceBoundaryDetector | None = None,
        pairer: BilingualPairer | None = None,
        dialogue_detector: DialogueDetector | None = None,
        classifier: MarkdownLineClassifier | None = None,
    ) -> None:
        """Initialize builder collaborators; defaults are created when omitted."""

        self._id_generator = id_generator or random_id
        self._cleaner = cleaner or TextCleaner()
        self._sentence_detector = sentence_detector or SentenceBoundaryDetector()
        self._pairer = pairer or BilingualPairer(cleaner=self._cleaner)
        self._dialogue_detector = dialogue_detector or DialogueDetector()
        self._classifier = classifier or MarkdownLineClassifier()

    def build(self, block: str, origin: Origin, start_order: int = 0) -> list[Segment]:
        """Build segments for a block.

        The first segment, and the first segment after any blank line or
        thematic break, opens a new paragraph. Skipped chapter-marker lines
        do not consume the pending paragraph flag.

        Args:
            block: Markdown text of one chapter or flat document.
            origin: Parsed language configuration.
            start_order: Order value of the first emitted segment.

        Returns:
            Segments with contiguous `order` values.
        """

        segments: list[Segment] = []
        pending_new_para = True
        for raw_line in (block or "").splitlines():
            line = self._classifier.classify(raw_line)
            if line.kind in (LineKind.BLANK, LineKind.THEMATIC_BREAK):
                pending_new_para = True
                continue
            if line.is_chapter_heading:
                continue

            for segment_type, content, metadata_extra in self._line_contents(line, origin):
                segments.append(
                    Segment(
                        id=self._id_generator(),
                        order=start_order + len(segments),
                        type=segment_type,
                        content=content,
                        metadata=SegmentMetadata(
                            is_new_para=pending_new_para,
                            bilingual_format=origin.bilingual_format,
                            **metadata_extra,
                        ),
                    )
                )
                pending_new_para = False
        return segments

    def _line_contents(
        self, line: ClassifiedLine, origin: Origin
    ) -> Iterator[tuple[SegmentType, SegmentContent, dict[str, object]]]:
        """Yield `(type, content, metadata extras)` for one classified line."""

        if line.kind is LineKind.HEADING:
            content = self._pairer.title_content(line.text, origin)
            if content.text(origin.primary):
                yield SegmentType.HEADING, content, {"heading_level": line.heading_level}
            return

        if line.kind is LineKind.IMAGE:
            alt_text = self._cleaner.clean(line.text)
            image_content: SegmentContent
            if origin.is_phrase_mode:
                image_content = PhraseContent(phrases=({origin.primary: alt_text},))
            else:
                image_content = SentenceContent(texts={origin.primary: alt_text})
            yield SegmentType.IMAGE, image_content, {"image_src": line.image_src}
            return

        structural_type = _STRUCTURAL_TYPES.get(line.kind)
        cleaned = self._cleaner.clean(line.text)
        for run in self._line_runs(cleaned, origin):
            if run.secondary is not None:
                # A translated run stays whole, however many sentences it holds.
                content = self._pairer.pair_run(run, origin)
                if content is not None:
                    yield self._segment_type(run.primary, structural_type), content, {}
                continue
            for unit in self._sentence_detector.split(run.primary):
                segment_type = self._segment_type(unit, structural_type)
                for content in self._pairer.pair_unit(unit, origin):
                    yield segment_type, content, {}

    def _line_runs(self, cleaned: str, origin: Origin) -> list[BilingualRun]:
        """Split a cleaned line into delimiter runs for bilingual origins."""

        if not origin.is_bilingual:
            return [BilingualRun(primary=cleaned)]
        return self._pairer.split_runs(cleaned)

    def _segment_type(self, text: str, structural_type: SegmentType | None) -> SegmentType:
        if structural_type is not None:
            return structural_type
        if self._dialogue_detector.is_dialogue(text):
            return SegmentType.DIALOG
        return SegmentType.TEXT

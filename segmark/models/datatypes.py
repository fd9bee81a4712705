"""Core datatypes shared across segmark modules.

Responsibilities:
- Represent immutable records produced by one parse call.
- Keep sentence-mode and phrase-mode content as distinct types so callers
  cannot treat one shape as the other.

Key types:
- `Origin`, `BilingualFormat`, `SegmentType`, `SentenceContent`,
  `PhraseContent`, `SegmentMetadata`, `Segment`, `ChapterStats`, `Chapter`,
  and `ParsedDocument`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Union


class BilingualFormat(str, Enum):
    """Alignment granularity for bilingual documents."""

    SENTENCE = "sentence"
    PHRASE = "phrase"


class SegmentType(str, Enum):
    """Structural classification of one segment."""

    TEXT = "text"
    DIALOG = "dialog"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    LIST_ITEM = "list_item"
    IMAGE = "image"


@dataclass(frozen=True, slots=True)
class Origin:
    """Parsed language configuration of one document.

    Attributes:
        primary: Primary language code, always non-empty.
        secondary: Optional secondary language code.
        bilingual_format: Sentence or phrase alignment.
    """

    primary: str
    secondary: str | None = None
    bilingual_format: BilingualFormat = BilingualFormat.SENTENCE

    @property
    def is_bilingual(self) -> bool:
        """Return whether a secondary language is configured."""

        return self.secondary is not None

    @property
    def is_phrase_mode(self) -> bool:
        """Return whether phrase-level alignment is active."""

        return self.bilingual_format is BilingualFormat.PHRASE

    @property
    def languages(self) -> tuple[str, ...]:
        """Return configured language codes, primary first."""

        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)

    @property
    def descriptor(self) -> str:
        """Return the compact `lang[-lang2[-ph]]` descriptor."""

        parts = list(self.languages)
        if self.is_phrase_mode and self.is_bilingual:
            parts.append("ph")
        return "-".join(parts)


@dataclass(frozen=True, slots=True)
class SentenceContent:
    """Language-keyed content of a sentence-mode segment or a title."""

    texts: Mapping[str, str] = field(default_factory=dict)

    def text(self, language: str) -> str:
        """Return text for one language, or an empty string."""

        return self.texts.get(language, "")

    def languages(self) -> tuple[str, ...]:
        """Return language keys present in this content."""

        return tuple(self.texts.keys())


PhraseMap = Mapping[str, str]


@dataclass(frozen=True, slots=True)
class PhraseContent:
    """Ordered phrase maps of a phrase-mode segment."""

    phrases: tuple[PhraseMap, ...] = field(default_factory=tuple)

    def text(self, language: str) -> str:
        """Return the lossless concatenation of one language's phrases."""

        return "".join(phrase.get(language, "") for phrase in self.phrases)

    def languages(self) -> tuple[str, ...]:
        """Return language keys present in any phrase, in first-seen order."""

        seen: dict[str, None] = {}
        for phrase in self.phrases:
            for language in phrase:
                seen.setdefault(language, None)
        return tuple(seen)

    def by_language(self) -> dict[str, list[str]]:
        """Return the language-keyed view `{lang: [phrase, ...]}`."""

        return {
            language: [phrase.get(language, "") for phrase in self.phrases]
            for language in self.languages()
        }


SegmentContent = Union[SentenceContent, PhraseContent]


@dataclass(frozen=True, slots=True)
class SegmentMetadata:
    """Per-segment layout metadata.

    Attributes:
        is_new_para: Whether the segment opens a paragraph.
        bilingual_format: Document-wide alignment format.
        heading_level: ATX heading level for `heading` segments.
        image_src: Image source for `image` segments.
    """

    is_new_para: bool
    bilingual_format: BilingualFormat
    heading_level: int | None = None
    image_src: str | None = None


@dataclass(frozen=True, slots=True)
class Segment:
    """Atomic content unit.

    Attributes:
        id: Unique identifier from the id-generator collaborator.
        order: 0-based contiguous position inside the chapter or flat list.
        type: Structural classification.
        content: Sentence or phrase content.
        metadata: Paragraph and format metadata.
    """

    id: str
    order: int
    type: SegmentType
    content: SegmentContent
    metadata: SegmentMetadata

    def text(self, language: str) -> str:
        """Return this segment's text in one language."""

        return self.content.text(language)


@dataclass(frozen=True, slots=True)
class ChapterStats:
    """Computed chapter statistics."""

    total_segments: int
    total_words: int
    estimated_reading_time: int


@dataclass(frozen=True, slots=True)
class Chapter:
    """Ordered collection of segments with a title.

    Attributes:
        id: Unique identifier from the id-generator collaborator.
        order: 0-based contiguous chapter position.
        title: Language-keyed chapter title.
        segments: Ordered chapter segments.
        stats: Segment/word counts and reading time.
    """

    id: str
    order: int
    title: SentenceContent
    segments: tuple[Segment, ...]
    stats: ChapterStats


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Result of parsing one full Markdown document."""

    title: SentenceContent
    chapters: tuple[Chapter, ...]
    bilingual_format: BilingualFormat

    def segments(self) -> list[Segment]:
        """Return all segments in chapter order."""

        return [segment for chapter in self.chapters for segment in chapter.segments]

    def chapter_segments(self, index: int) -> list[Segment]:
        """Return segments of the chapter at 0-based `index`, or an empty list."""

        if index < 0 or index >= len(self.chapters):
            return []
        return list(self.chapters[index].segments)

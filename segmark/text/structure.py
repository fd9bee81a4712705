"""Markdown line structure classification.

Responsibilities:
- Recognize ATX headings, blockquotes, list items, standalone images,
  thematic breaks, and blank lines.
- Strip structural markers so downstream stages see plain text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re


class LineKind(str, Enum):
    """Structural kind of one Markdown line."""

    BLANK = "blank"
    THEMATIC_BREAK = "thematic_break"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    LIST_ITEM = "list_item"
    IMAGE = "image"
    TEXT = "text"


CHAPTER_HEADING_LEVEL = 2


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """One Markdown line with its marker removed.

    Attributes:
        kind: Structural kind.
        text: Line content without the structural marker.
        raw: Original line, stripped of surrounding whitespace.
        heading_level: ATX level for headings.
        image_src: Source for standalone images.
    """

    kind: LineKind
    text: str
    raw: str
    heading_level: int | None = None
    image_src: str | None = None

    @property
    def is_chapter_heading(self) -> bool:
        """Return whether this line is a level-2 chapter marker."""

        return self.kind is LineKind.HEADING and self.heading_level == CHAPTER_HEADING_LEVEL


class MarkdownLineClassifier:
    """Classify Markdown lines with anchored line-level patterns."""

    _HEADING_RE = re.compile(r"^(?P<marks>#{1,6})(?:[ \t]+(?P<title>.*?))?(?:[ \t]+#+)?[ \t]*$")
    _BLOCKQUOTE_RE = re.compile(r"^>[ \t]?(?P<body>.*)$")
    _LIST_ITEM_RE = re.compile(r"^(?:[-*+]|\d{1,9}[.)])[ \t]+(?P<body>.*)$")
    _IMAGE_RE = re.compile(
        r"^!\[(?P<alt>[^\]]*)\]\((?P<src>[^)\s]*)(?:[ \t]+\"[^\"]*\")?\)$"
    )
    _THEMATIC_BREAK_RE = re.compile(r"^(?:(?:\*[ \t]*){3,}|(?:-[ \t]*){3,}|(?:_[ \t]*){3,})$")

    def classify(self, line: str) -> ClassifiedLine:
        """Classify one line."""

        stripped = line.strip()
        if not stripped:
            return ClassifiedLine(kind=LineKind.BLANK, text="", raw="")

        if self._THEMATIC_BREAK_RE.match(stripped):
            return ClassifiedLine(kind=LineKind.THEMATIC_BREAK, text="", raw=stripped)

        heading = self._HEADING_RE.match(stripped)
        if heading is not None:
            return ClassifiedLine(
                kind=LineKind.HEADING,
                text=(heading.group("title") or "").strip(),
                raw=stripped,
                heading_level=len(heading.group("marks")),
            )

        image = self._IMAGE_RE.match(stripped)
        if image is not None:
            return ClassifiedLine(
                kind=LineKind.IMAGE,
                text=image.group("alt").strip(),
                raw=stripped,
                image_src=image.group("src"),
            )

        quote = self._BLOCKQUOTE_RE.match(stripped)
        if quote is not None:
            return ClassifiedLine(kind=LineKind.BLOCKQUOTE, text=quote.group("body").strip(), raw=stripped)

        item = self._LIST_ITEM_RE.match(stripped)
        if item is not None:
            return ClassifiedLine(kind=LineKind.LIST_ITEM, text=item.group("body").strip(), raw=stripped)

        return ClassifiedLine(kind=LineKind.TEXT, text=stripped, raw=stripped)

    def heading_level(self, line: str) -> int | None:
        """Return the ATX level of a heading line, or `None`."""

        classified = self.classify(line)
        return classified.heading_level if classified.kind is LineKind.HEADING else None

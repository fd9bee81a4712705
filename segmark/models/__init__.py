"""Shared typed data models for segmark.

This package contains dataclasses used across parsing modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import (
    BilingualFormat,
    Chapter,
    ChapterStats,
    Origin,
    ParsedDocument,
    PhraseContent,
    PhraseMap,
    Segment,
    SegmentContent,
    SegmentMetadata,
    SegmentType,
    SentenceContent,
)

__all__ = [
    "BilingualFormat",
    "Chapter",
    "ChapterStats",
    "Origin",
    "ParsedDocument",
    "PhraseContent",
    "PhraseMap",
    "Segment",
    "SegmentContent",
    "SegmentMetadata",
    "SegmentType",
    "SentenceContent",
]

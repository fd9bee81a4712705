"""JSON-ready payload builders for parse results.

Field names follow the camelCase shape consumed by reading clients
(`isNewPara`, `bilingualFormat`, `totalSegments`, `totalWords`,
`estimatedReadingTime`). Sentence content serializes as a language map and
phrase content as an ordered list of phrase maps.
"""

from __future__ import annotations

from typing import Any, Sequence

from .models.datatypes import (
    Chapter,
    ParsedDocument,
    PhraseContent,
    Segment,
    SegmentContent,
    SentenceContent,
)


def content_payload(content: SegmentContent) -> dict[str, str] | list[dict[str, str]]:
    """Serialize sentence or phrase content."""

    if isinstance(content, PhraseContent):
        return [dict(phrase) for phrase in content.phrases]
    return dict(content.texts)


def segment_payload(segment: Segment) -> dict[str, Any]:
    """Serialize one segment; optional metadata keys are omitted when unset."""

    metadata: dict[str, Any] = {
        "isNewPara": segment.metadata.is_new_para,
        "bilingualFormat": segment.metadata.bilingual_format.value,
    }
    if segment.metadata.heading_level is not None:
        metadata["headingLevel"] = segment.metadata.heading_level
    if segment.metadata.image_src is not None:
        metadata["imageSrc"] = segment.metadata.image_src
    return {
        "id": segment.id,
        "order": segment.order,
        "type": segment.type.value,
        "content": content_payload(segment.content),
        "metadata": metadata,
    }


def segments_payload(segments: Sequence[Segment]) -> list[dict[str, Any]]:
    return [segment_payload(segment) for segment in segments]


def chapter_payload(chapter: Chapter) -> dict[str, Any]:
    """Serialize one chapter with its segments and stats."""

    return {
        "id": chapter.id,
        "order": chapter.order,
        "title": _title_payload(chapter.title),
        "segments": segments_payload(chapter.segments),
        "stats": {
            "totalSegments": chapter.stats.total_segments,
            "totalWords": chapter.stats.total_words,
            "estimatedReadingTime": chapter.stats.estimated_reading_time,
        },
    }


def document_payload(document: ParsedDocument) -> dict[str, Any]:
    """Serialize a full parsed document."""

    return {
        "title": _title_payload(document.title),
        "bilingualFormat": document.bilingual_format.value,
        "chapters": [chapter_payload(chapter) for chapter in document.chapters],
    }


def _title_payload(title: SentenceContent) -> dict[str, str]:
    return dict(title.texts)

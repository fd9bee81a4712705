"""Text segmentation components.

This package provides deterministic cleanup, sentence and phrase splitting,
bilingual pairing, and segment construction used by the engine.
"""

from .bilingual import BilingualPairer, BilingualRun
from .cleaners import CollapseWhitespace, RemoveFootnoteMarkers, StripText, TextCleaner
from .dialogue import DialogueDetector
from .phrases import PhraseSplitter
from .segments import SegmentBuilder
from .sentences import SentenceBoundaryDetector
from .structure import MarkdownLineClassifier

__all__ = [
    "BilingualPairer",
    "BilingualRun",
    "CollapseWhitespace",
    "DialogueDetector",
    "MarkdownLineClassifier",
    "PhraseSplitter",
    "RemoveFootnoteMarkers",
    "SegmentBuilder",
    "SentenceBoundaryDetector",
    "StripText",
    "TextCleaner",
]

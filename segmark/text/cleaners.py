"""Deterministic text cleaning rules.

Responsibilities:
- Strip bracketed numeric footnote markers left by the generative model.
- Normalize horizontal whitespace and trim.
- Keep cleaning idempotent: `clean(clean(x)) == clean(x)`.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Protocol


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class RemoveFootnoteMarkers:
    """Remove `[12]`-style footnote annotations.

    Removal repeats until no marker is left, since deleting an inner marker
    can expose a new one (`[1[2]]` becomes `[1]`).
    """

    _FOOTNOTE_RE = re.compile(r"\[\d+\]")

    def apply(self, text: str) -> str:
        """Remove all footnote markers."""

        return self.apply_with_count(text)[0]

    def apply_with_count(self, text: str) -> tuple[str, int]:
        """Remove all footnote markers and return the text with the removal count."""

        removed = 0
        current = text
        while True:
            current, count = self._FOOTNOTE_RE.subn("", current)
            if count == 0:
                break
            removed += count
        return current, removed


class CollapseWhitespace:
    """Collapse runs of non-newline whitespace into single spaces."""

    _HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
    _LINE_EDGE_RE = re.compile(r" *\n *")

    def apply(self, text: str) -> str:
        """Collapse horizontal whitespace and strip spaces around newlines."""

        text = self._HORIZONTAL_WS_RE.sub(" ", text)
        return self._LINE_EDGE_RE.sub("\n", text)


class StripText:
    """Trim leading and trailing whitespace."""

    def apply(self, text: str) -> str:
        return text.strip()


@dataclass(frozen=True, slots=True)
class TextCleaningReport:
    """Structured output of one cleaning pass."""

    cleaned_text: str
    footnotes_removed_count: int


class TextCleaner:
    """Apply a sequence of deterministic cleaner rules."""

    def __init__(self, rules: list[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules = rules or [
            RemoveFootnoteMarkers(),
            CollapseWhitespace(),
            StripText(),
        ]

    def clean_with_report(self, text: str) -> TextCleaningReport:
        """Apply all configured rules and return cleaned text with diagnostics."""

        current = text or ""
        removed = 0
        for rule in self.rules:
            if isinstance(rule, RemoveFootnoteMarkers):
                current, count = rule.apply_with_count(current)
                removed += count
            else:
                current = rule.apply(current)
        return TextCleaningReport(cleaned_text=current, footnotes_removed_count=removed)

    def clean(self, text: str) -> str:
        """Apply all configured rules in order."""

        return self.clean_with_report(text).cleaned_text
"""Dialogue detection by balanced quotation marks.

Supported styles: straight double quotes, curly double quotes, guillemets,
and CJK corner brackets. Single quotes are ignored because they collide with
apostrophes.
"""

from __future__ import annotations

_PAIRED_QUOTES = {
    "“": "”",
    "«": "»",
    "»": "«",
    "「": "」",
    "『": "』",
    "„": "“",
}
_STRAIGHT_QUOTE = '"'


class DialogueDetector:
    """Classify text as dialogue when it holds a complete quotation pair."""

    def is_dialogue(self, text: str) -> bool:
        """Return whether the text contains at least one balanced quote pair."""

        if not text:
            return False
        if text.count(_STRAIGHT_QUOTE) >= 2:
            return True
        return self._has_paired_quote(text)

    @staticmethod
    def _has_paired_quote(text: str) -> bool:
        """Scan for an opening mark followed later by its matching closer."""

        expected_closers: list[str] = []
        for char in text:
            if char in expected_closers:
                return True
            if char in _PAIRED_QUOTES:
                expected_closers.append(_PAIRED_QUOTES[char])
        return False

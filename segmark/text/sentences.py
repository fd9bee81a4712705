"""Punctuation-driven sentence boundary detection.

Responsibilities:
- Split a text block into trimmed, non-empty sentence strings.
- Avoid false boundaries on abbreviations, initials, decimals, and ellipses.
- Keep balanced `{...}` translation groups attached to their sentence.

The scanner is language-agnostic. Scripts whose sentences end with other
marks (for example `。`) come back as one run-on sentence per line.
"""

from __future__ import annotations

from enum import Enum
import re
from typing import Iterable


class ScanState(Enum):
    """Named states of the boundary scanner."""

    IN_SENTENCE = "in_sentence"
    AFTER_TERMINATOR = "after_terminator"
    IN_ABBREVIATION_CANDIDATE = "in_abbreviation_candidate"
    IN_ELLIPSIS = "in_ellipsis"


DEFAULT_ABBREVIATIONS = frozenset(
    {
        "mr.",
        "mrs.",
        "ms.",
        "dr.",
        "prof.",
        "sr.",
        "jr.",
        "st.",
        "mt.",
        "ave.",
        "blvd.",
        "rd.",
        "gen.",
        "col.",
        "lt.",
        "sgt.",
        "capt.",
        "rev.",
        "hon.",
        "fig.",
        "no.",
        "vol.",
        "vs.",
        "etc.",
        "al.",
        "e.g.",
        "i.e.",
    }
)

_TERMINATORS = ".!?"
_ELLIPSIS_CHARS = ".…"
_TRAILING_CLOSERS = "\"'”’»」』)]"
_SENTENCE_OPENERS = "\"'“‘«„「『¿¡"
_ACRONYM_RE = re.compile(r"^(?:[A-Za-z]\.){2,}$")
_SHORT_CAPITALIZED_RE = re.compile(r"^[A-Z][a-z]{0,3}$")


class SentenceBoundaryDetector:
    """Split text into sentences with a character-level state machine."""

    def __init__(
        self,
        extra_abbreviations: Iterable[str] = (),
        protect_brace_groups: bool = True,
    ) -> None:
        """Initialize detector with optional extra dotted abbreviations."""

        normalized_extra = {
            token.strip().lower() if token.strip().endswith(".") else f"{token.strip().lower()}."
            for token in extra_abbreviations
            if token and token.strip()
        }
        self._abbreviations = DEFAULT_ABBREVIATIONS | frozenset(normalized_extra)
        self._protect_brace_groups = protect_brace_groups

    def split(self, text: str) -> list[str]:
        """Split text into sentences; newlines are hard boundaries."""

        if not text:
            return []
        sentences: list[str] = []
        for line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
            sentences.extend(self._split_line(line))
        return sentences

    def _split_line(self, line: str) -> list[str]:
        """Scan one line and return its sentences."""

        sentences: list[str] = []
        length = len(line)
        start = 0
        index = 0
        state = ScanState.IN_SENTENCE

        while index < length:
            if state is ScanState.IN_SENTENCE:
                char = line[index]
                if char == "{" and self._protect_brace_groups:
                    close = line.find("}", index + 1)
                    if close != -1:
                        group_terminated = self._group_is_terminated(line, start, index, close)
                        index = close + 1
                        if group_terminated:
                            state = ScanState.AFTER_TERMINATOR
                        continue
                if char == "…" or line.startswith("...", index):
                    state = ScanState.IN_ELLIPSIS
                    continue
                if char in _TERMINATORS:
                    if char == "." and self._is_decimal_period(line, index):
                        index += 1
                        continue
                    if char == "." and self._is_abbreviation_period(line, index):
                        state = ScanState.IN_ABBREVIATION_CANDIDATE
                        continue
                    index += 1
                    state = ScanState.AFTER_TERMINATOR
                    continue
                index += 1

            elif state is ScanState.IN_ABBREVIATION_CANDIDATE:
                # Suppressed only when the period is followed by a space.
                index += 1
                if index < length and line[index].isspace():
                    state = ScanState.IN_SENTENCE
                else:
                    state = ScanState.AFTER_TERMINATOR

            elif state is ScanState.IN_ELLIPSIS:
                while index < length and line[index] in _ELLIPSIS_CHARS:
                    index += 1
                if index < length and line[index] in "!?":
                    state = ScanState.AFTER_TERMINATOR
                    continue
                end = self._consume_closers(line, index)
                next_start = self._skip_whitespace(line, end)
                if next_start > end and next_start < length and self._is_uppercase(line[next_start]):
                    self._emit(sentences, line[start:end])
                    start = next_start
                    index = next_start
                else:
                    index = end
                state = ScanState.IN_SENTENCE

            elif state is ScanState.AFTER_TERMINATOR:
                while index < length and line[index] in _TERMINATORS:
                    index += 1
                end = self._consume_closers(line, index)
                next_start = self._skip_whitespace(line, end)
                if next_start >= length:
                    index = length
                elif next_start > end and self._opens_sentence(line[next_start]):
                    self._emit(sentences, line[start:end])
                    start = next_start
                    index = next_start
                else:
                    index = end
                state = ScanState.IN_SENTENCE

        self._emit(sentences, line[start:])
        return sentences

    @staticmethod
    def _emit(sentences: list[str], fragment: str) -> None:
        """Append a trimmed fragment when it is non-empty."""

        stripped = fragment.strip()
        if stripped:
            sentences.append(stripped)

    @staticmethod
    def _group_is_terminated(line: str, start: int, open_index: int, close_index: int) -> bool:
        """Return whether a brace group closes a sentence.

        True when the secondary text inside the group, or the primary text in
        front of it, ends with terminal punctuation.
        """

        inner = line[open_index + 1 : close_index].rstrip().rstrip(_TRAILING_CLOSERS)
        before = line[start:open_index].rstrip().rstrip(_TRAILING_CLOSERS)
        return bool(
            (inner and inner[-1] in _TERMINATORS + "…")
            or (before and before[-1] in _TERMINATORS + "…")
        )

    @staticmethod
    def _is_decimal_period(line: str, index: int) -> bool:
        """Return whether the period sits between two digits."""

        if index <= 0 or index + 1 >= len(line):
            return False
        return line[index - 1].isdigit() and line[index + 1].isdigit()

    def _is_abbreviation_period(self, line: str, index: int) -> bool:
        """Return whether the period closes an abbreviation, acronym, or initial."""

        start = index
        while start > 0 and (line[start - 1].isalpha() or line[start - 1] == "."):
            start -= 1
        token = line[start:index]
        if not token or not token[0].isalpha():
            return False

        dotted = f"{token}."
        if "." in token:
            return dotted.lower() in self._abbreviations or bool(_ACRONYM_RE.match(dotted))
        if token == "I":
            # The pronoun ends sentences.
            return False
        if _SHORT_CAPITALIZED_RE.match(token):
            return True
        return dotted.lower() in self._abbreviations

    @staticmethod
    def _consume_closers(line: str, index: int) -> int:
        """Advance past closing quotes and brackets that trail a terminator."""

        while index < len(line) and line[index] in _TRAILING_CLOSERS:
            index += 1
        return index

    @staticmethod
    def _skip_whitespace(line: str, index: int) -> int:
        """Advance past whitespace."""

        while index < len(line) and line[index].isspace():
            index += 1
        return index

    @staticmethod
    def _is_uppercase(char: str) -> bool:
        return char.isupper() or char.istitle()

    def _opens_sentence(self, char: str) -> bool:
        """Return whether a character can start the next sentence."""

        return self._is_uppercase(char) or char in _SENTENCE_OPENERS

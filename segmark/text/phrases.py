"""Clause-level phrase splitting for phrase-mode bilingual alignment."""

from __future__ import annotations

PHRASE_DELIMITERS = frozenset(",;:—，；：")
_NUMERIC_SEPARATORS = frozenset(",:")


class PhraseSplitter:
    """Split a sentence at clause punctuation without losing characters.

    Delimiters stay attached to the phrase in front of them, so
    `"".join(split_phrases(s)) == s` always holds.
    """

    def split_phrases(self, sentence: str) -> list[str]:
        """Return ordered phrases; a sentence without delimiters is one phrase."""

        if not sentence:
            return []

        phrases: list[str] = []
        current_start = 0
        index = 0
        length = len(sentence)
        while index < length:
            char = sentence[index]
            if char in PHRASE_DELIMITERS and not self._is_numeric_separator(sentence, index):
                index += 1
                while index < length and sentence[index] in PHRASE_DELIMITERS:
                    index += 1
                phrases.append(sentence[current_start:index])
                current_start = index
                continue
            index += 1

        tail = sentence[current_start:]
        if tail.strip() or not phrases:
            phrases.append(tail)
        else:
            phrases[-1] += tail
        return phrases

    @staticmethod
    def _is_numeric_separator(sentence: str, index: int) -> bool:
        """Return whether a comma or colon sits inside a number or time (`1,000`, `10:30`)."""

        if sentence[index] not in _NUMERIC_SEPARATORS:
            return False
        if index <= 0 or index + 1 >= len(sentence):
            return False
        return sentence[index - 1].isdigit() and sentence[index + 1].isdigit()

"""Bilingual content pairing.

Responsibilities:
- Extract secondary-language text embedded with the brace convention
  (`primary {secondary}`) or the slash convention (`primary / secondary`).
- Build sentence-mode or phrase-mode content for an origin.
- Recover from malformed delimiters by falling back to primary-only content.

Delimiter outcomes:
- Complete brace group: `{primary, secondary}`; an empty group gives `""`.
- Slash separator: `{primary, secondary}`.
- No delimiter or an unbalanced brace: `{primary}` only, text kept as written.

Phrase-mode alignment is positional. The first `min(n, m)` phrases are fully
paired; overflow phrases on the longer side get an empty counterpart.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Sequence

from ..models.datatypes import Origin, PhraseContent, SegmentContent, SentenceContent
from .cleaners import TextCleaner
from .phrases import PhraseSplitter

_SLASH_SEPARATOR_RE = re.compile(r"\s+/\s+")


@dataclass(frozen=True, slots=True)
class BilingualRun:
    """One primary run and its optional secondary counterpart.

    Attributes:
        primary: Primary-language text as written.
        secondary: Secondary text, `""` for an empty brace group, or `None`
            when no delimiter applied.
    """

    primary: str
    secondary: str | None = None


class BilingualPairer:
    """Turn sentence units into language-keyed content for one origin."""

    def __init__(
        self,
        cleaner: TextCleaner | None = None,
        phrase_splitter: PhraseSplitter | None = None,
    ) -> None:
        """Initialize pairer collaborators."""

        self._cleaner = cleaner or TextCleaner()
        self._phrase_splitter = phrase_splitter or PhraseSplitter()

    def pair(self, units: Sequence[str], origin: Origin) -> list[SegmentContent]:
        """Pair every unit and return contents in input order."""

        contents: list[SegmentContent] = []
        for unit in units:
            contents.extend(self.pair_unit(unit, origin))
        return contents

    def pair_unit(self, unit: str, origin: Origin) -> list[SegmentContent]:
        """Pair one sentence unit; a unit may yield several runs."""

        if not origin.is_bilingual:
            runs = [BilingualRun(primary=unit)]
        else:
            runs = self.split_runs(unit)

        contents: list[SegmentContent] = []
        for run in runs:
            content = self.pair_run(run, origin)
            if content is not None:
                contents.append(content)
        return contents

    def split_runs(self, unit: str) -> list[BilingualRun]:
        """Split a unit into bilingual runs, brace convention first."""

        brace_runs = self._split_brace_runs(unit)
        if brace_runs is not None:
            return brace_runs
        slash_run = self._split_slash_run(unit)
        if slash_run is not None:
            return [slash_run]
        return [BilingualRun(primary=unit)]

    def parse_title(self, text: str, origin: Origin) -> SentenceContent:
        """Parse a heading or title line with the bilingual title convention."""

        run = self._title_run(text) if origin.is_bilingual else BilingualRun(primary=text)
        texts = {origin.primary: self._cleaner.clean(run.primary)}
        if origin.secondary is not None and run.secondary is not None:
            texts[origin.secondary] = self._cleaner.clean(run.secondary)
        return SentenceContent(texts=texts)

    def title_content(self, text: str, origin: Origin) -> SegmentContent:
        """Return heading content in the document's content shape."""

        title = self.parse_title(text, origin)
        if origin.is_phrase_mode:
            return PhraseContent(phrases=(dict(title.texts),))
        return title

    def _title_run(self, text: str) -> BilingualRun:
        """Resolve a title into one run using brace, then slash convention."""

        stripped = text.strip()
        open_index = stripped.find("{")
        if open_index != -1 and stripped.endswith("}"):
            return BilingualRun(
                primary=stripped[:open_index],
                secondary=stripped[open_index + 1 : -1],
            )
        slash_run = self._split_slash_run(stripped)
        if slash_run is not None:
            return slash_run
        return BilingualRun(primary=stripped)

    @staticmethod
    def _split_brace_runs(unit: str) -> list[BilingualRun] | None:
        """Scan brace groups; return `None` when the unit has no complete group."""

        runs: list[BilingualRun] = []
        cursor = 0
        length = len(unit)
        while cursor < length:
            open_index = unit.find("{", cursor)
            if open_index == -1:
                break
            close_index = unit.find("}", open_index + 1)
            nested_open = unit.find("{", open_index + 1)
            if close_index == -1 or (nested_open != -1 and nested_open < close_index):
                # Unbalanced group: the rest of the unit stays primary-only.
                break
            runs.append(
                BilingualRun(
                    primary=unit[cursor:open_index],
                    secondary=unit[open_index + 1 : close_index],
                )
            )
            cursor = close_index + 1

        if not runs:
            return None
        trailing = unit[cursor:]
        if trailing.strip():
            runs.append(BilingualRun(primary=trailing))
        return runs

    @staticmethod
    def _split_slash_run(unit: str) -> BilingualRun | None:
        """Split `primary / secondary` at the first spaced slash."""

        parts = _SLASH_SEPARATOR_RE.split(unit, maxsplit=1)
        if len(parts) != 2:
            return None
        return BilingualRun(primary=parts[0], secondary=parts[1])

    def pair_run(self, run: BilingualRun, origin: Origin) -> SegmentContent | None:
        """Build content for one run, or `None` when the primary text is empty."""

        primary = self._cleaner.clean(run.primary)
        if not primary:
            return None
        secondary = None
        if origin.secondary is not None and run.secondary is not None:
            secondary = self._cleaner.clean(run.secondary)

        if not origin.is_phrase_mode:
            texts = {origin.primary: primary}
            if secondary is not None and origin.secondary is not None:
                texts[origin.secondary] = secondary
            return SentenceContent(texts=texts)

        return PhraseContent(phrases=self._align_phrases(primary, secondary, origin))

    def _align_phrases(
        self, primary: str, secondary: str | None, origin: Origin
    ) -> tuple[dict[str, str], ...]:
        """Align primary and secondary phrases by index."""

        primary_phrases = self._phrase_splitter.split_phrases(primary)
        if secondary is None or origin.secondary is None:
            return tuple({origin.primary: phrase} for phrase in primary_phrases)

        secondary_phrases = self._phrase_splitter.split_phrases(secondary)
        count = max(len(primary_phrases), len(secondary_phrases))
        return tuple(
            {
                origin.primary: primary_phrases[index] if index < len(primary_phrases) else "",
                origin.secondary: (
                    secondary_phrases[index] if index < len(secondary_phrases) else ""
                ),
            }
            for index in range(count)
        )

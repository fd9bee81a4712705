"""Chapter selection parsing for the command line.

Responsibilities:
- Parse 1-based chapter selection expressions (`1`, `1,3`, `2-5`, mixed).
- Validate indices against the number of parsed chapters.
- Format selected indices back into compact range syntax.
"""

from __future__ import annotations

from typing import Iterable

_SYNTAX_HINT = "Use syntax like `1`, `1,3`, `2-4`, or `1,3-5`."


def parse_chapter_selection(selection: str | None, chapter_count: int) -> list[int]:
    """Parse a selection expression into sorted unique 1-based indices.

    Args:
        selection: User selection string. `None` or blank selects all chapters.
        chapter_count: Number of chapters available for selection.

    Returns:
        Sorted selected chapter indices.

    Raises:
        ValueError: If the syntax is malformed, an index is out of range, or
            ranges overlap.
    """

    if chapter_count < 1:
        raise ValueError("No chapters are available for selection.")
    if selection is None or not selection.strip():
        return list(range(1, chapter_count + 1))

    tokens = [part.strip() for part in selection.split(",")]
    if any(not token for token in tokens):
        raise ValueError(f"Malformed chapter selection: empty item in list. {_SYNTAX_HINT}")

    seen: set[int] = set()
    for token in tokens:
        for index in _expand_token(token, chapter_count):
            if index in seen:
                raise ValueError(
                    f"Overlapping chapter selection contains duplicate index `{index}`."
                )
            seen.add(index)
    return sorted(seen)


def format_chapter_selection(indices: Iterable[int]) -> str:
    """Format indices into normalized compact range syntax (`1-3,5`)."""

    ordered = sorted(set(int(index) for index in indices))
    if not ordered:
        return ""

    parts: list[str] = []
    start = end = ordered[0]
    for index in ordered[1:]:
        if index == end + 1:
            end = index
            continue
        parts.append(str(start) if start == end else f"{start}-{end}")
        start = end = index
    parts.append(str(start) if start == end else f"{start}-{end}")
    return ",".join(parts)


def _expand_token(token: str, chapter_count: int) -> list[int]:
    """Expand one token (`N` or `N-M`) to concrete chapter indices."""

    if "-" not in token:
        return [_checked_index(token, chapter_count)]

    start_text, _, end_text = token.partition("-")
    if not start_text or not end_text or "-" in end_text:
        raise ValueError(f"Malformed chapter range `{token}`. Use closed range syntax like `2-4`.")

    start = _checked_index(start_text, chapter_count)
    end = _checked_index(end_text, chapter_count)
    if start > end:
        raise ValueError(
            f"Malformed chapter range `{token}`: range start must be less than or equal to end."
        )
    return list(range(start, end + 1))


def _checked_index(token: str, chapter_count: int) -> int:
    """Parse one positive index and check it against the chapter count."""

    try:
        value = int(token.strip(), 10)
    except ValueError as exc:
        raise ValueError(f"Invalid chapter index `{token}`. Indices must be integers.") from exc
    if value < 1:
        raise ValueError(f"Invalid chapter index `{token}`. Indices must be positive and 1-based.")
    if value > chapter_count:
        raise ValueError(f"Chapter index `{value}` is out of available bounds `1-{chapter_count}`.")
    return value

"""Origin descriptor handling.

Responsibilities:
- Parse compact `lang[-lang2[-ph]]` descriptors into `Origin` records.
- Validate descriptors strictly for callers that accept user input.
- Build descriptors from an ordered language list and an alignment unit.

Examples:
- `en`: monolingual English.
- `en-vi`: English with Vietnamese, sentence alignment.
- `en-vi-ph`: English with Vietnamese, phrase alignment.
"""

from __future__ import annotations

import re
from typing import Sequence

from .errors import OriginError
from .models.datatypes import BilingualFormat, Origin

PHRASE_FLAG = "ph"
_LANGUAGE_CODE_RE = re.compile(r"^[a-z]{2,3}$")


def parse_origin(descriptor: str) -> Origin:
    """Parse an origin descriptor leniently.

    The first part is the primary language. The first remaining part that is
    not the phrase flag is the secondary language. Phrase alignment is only
    kept for bilingual origins, and a secondary equal to the primary is
    dropped.

    Raises:
        OriginError: If the primary language code is missing.
    """

    parts = [part.strip() for part in (descriptor or "").strip().split("-")]
    primary = parts[0] if parts else ""
    if not primary or primary == PHRASE_FLAG:
        raise OriginError(f"Origin `{descriptor}` has no primary language code.")

    rest = parts[1:]
    secondary = next((part for part in rest if part and part != PHRASE_FLAG), None)
    if secondary == primary:
        secondary = None

    is_phrase = PHRASE_FLAG in rest and secondary is not None
    return Origin(
        primary=primary,
        secondary=secondary,
        bilingual_format=BilingualFormat.PHRASE if is_phrase else BilingualFormat.SENTENCE,
    )


def validate_origin(descriptor: str) -> Origin:
    """Validate an origin descriptor strictly and return the parsed origin.

    Raises:
        OriginError: If the descriptor is empty, has too many parts, contains
            an invalid language code, or uses an unknown format flag.
    """

    if descriptor is None or not descriptor.strip():
        raise OriginError("Origin cannot be empty.")

    parts = descriptor.strip().split("-")
    if len(parts) > 3:
        raise OriginError(f"Invalid origin format: `{descriptor}`.")

    for position, part in enumerate(parts):
        if position == 2 and part != PHRASE_FLAG:
            raise OriginError(f"Invalid format flag in origin: `{descriptor}`.")
        if part == PHRASE_FLAG:
            if position != len(parts) - 1 or position == 0:
                raise OriginError(f"Invalid format flag position in origin: `{descriptor}`.")
            continue
        if not _LANGUAGE_CODE_RE.match(part):
            raise OriginError(f"Invalid language code `{part}` in origin: `{descriptor}`.")

    return parse_origin(descriptor)


def calculate_origin(languages: Sequence[str], unit: str | BilingualFormat = "sentence") -> str:
    """Build a descriptor from an ordered language list and alignment unit.

    Raises:
        OriginError: If no language is provided.
    """

    codes = [code.strip() for code in languages if code and code.strip()]
    if not codes:
        raise OriginError("At least one language must be provided.")

    primary = codes[0]
    secondary = codes[1] if len(codes) > 1 and codes[1] != primary else None

    descriptor = primary
    if secondary is not None:
        descriptor += f"-{secondary}"
        if BilingualFormat(unit) is BilingualFormat.PHRASE:
            descriptor += f"-{PHRASE_FLAG}"
    return descriptor

"""Configuration model and loaders for segmark.

Responsibilities:
- Define parser tunables as a typed dataclass with validation.
- Provide loader entry points for YAML files and environment variables.

Key types:
- `SegmenterConfig`: normalized settings for one engine instance.
- `ConfigLoader`: static construction helpers for `SegmenterConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_positive_int,
    parse_required_boolean,
    split_csv_tokens,
)

_DEFAULT_WORDS_PER_MINUTE = 200
_DEFAULT_DOCUMENT_TITLE = "Untitled"
_DEFAULT_CHAPTER_TITLE = "Chapter 1"
_DEFAULT_PREAMBLE_CHAPTER_TITLE = "Introduction"


@dataclass(slots=True)
class SegmenterConfig:
    """Runtime configuration for the segmentation engine.

    Attributes:
        words_per_minute: Reading speed used for `estimatedReadingTime`.
        default_document_title: Title used when a document has no title line.
        default_chapter_title: Title of the synthetic chapter.
        preamble_chapter_title: Title of the chapter holding text between the
            document title and the first chapter heading.
        keep_preamble: Whether that leading text is kept as a chapter.
        extra_abbreviations: Additional dotted abbreviations that never end a
            sentence when followed by a space.
    """

    words_per_minute: int = _DEFAULT_WORDS_PER_MINUTE
    default_document_title: str = _DEFAULT_DOCUMENT_TITLE
    default_chapter_title: str = _DEFAULT_CHAPTER_TITLE
    preamble_chapter_title: str = _DEFAULT_PREAMBLE_CHAPTER_TITLE
    keep_preamble: bool = True
    extra_abbreviations: tuple[str, ...] = field(default_factory=tuple)

    def validate(self) -> None:
        """Validate configuration values before use."""

        if isinstance(self.words_per_minute, bool) or self.words_per_minute <= 0:
            raise ValueError("`words_per_minute` must be a positive integer.")
        self._require_non_empty(self.default_document_title, "default_document_title")
        self._require_non_empty(self.default_chapter_title, "default_chapter_title")
        self._require_non_empty(self.preamble_chapter_title, "preamble_chapter_title")
        for token in self.extra_abbreviations:
            if not isinstance(token, str) or not token.strip():
                raise ValueError("`extra_abbreviations` must contain non-empty strings.")

    @staticmethod
    def _require_non_empty(value: str, field_name: str) -> None:
        """Validate that a string field is not empty."""

        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"`{field_name}` must be a non-empty string.")


class ConfigLoader:
    """Factory methods for creating `SegmenterConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset(
        {
            "words_per_minute",
            "default_document_title",
            "default_chapter_title",
            "preamble_chapter_title",
            "keep_preamble",
            "extra_abbreviations",
        }
    )
    _ENV_KEYS = {
        "words_per_minute": "SEGMARK_WORDS_PER_MINUTE",
        "default_document_title": "SEGMARK_DEFAULT_DOCUMENT_TITLE",
        "default_chapter_title": "SEGMARK_DEFAULT_CHAPTER_TITLE",
        "preamble_chapter_title": "SEGMARK_PREAMBLE_CHAPTER_TITLE",
        "keep_preamble": "SEGMARK_KEEP_PREAMBLE",
        "extra_abbreviations": "SEGMARK_EXTRA_ABBREVIATIONS",
    }

    @staticmethod
    def from_yaml(path: Path) -> SegmenterConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SegmenterConfig:
        """Create a validated config from `SEGMARK_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key, env_key in ConfigLoader._ENV_KEYS.items():
            value = normalize_optional_string(env_map.get(env_key))
            if value is not None:
                payload[key] = value
        return ConfigLoader.from_mapping(payload, source_label="environment")

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "mapping") -> SegmenterConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        config = SegmenterConfig()
        try:
            if "words_per_minute" in payload:
                config.words_per_minute = parse_positive_int(
                    payload["words_per_minute"], "words_per_minute"
                )
            for key in ("default_document_title", "default_chapter_title", "preamble_chapter_title"):
                value = normalize_optional_string(payload.get(key))
                if value is not None:
                    setattr(config, key, value)
            if "keep_preamble" in payload:
                config.keep_preamble = parse_required_boolean(
                    payload["keep_preamble"], "keep_preamble"
                )
            if "extra_abbreviations" in payload:
                config.extra_abbreviations = split_csv_tokens(payload["extra_abbreviations"])
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

"""Shared pytest fixtures for the full segmark test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from segmark.engine import MarkdownSegmentationEngine
from segmark.ids import SequentialIdGenerator

_FIXTURES_DIR = Path(__file__).resolve().parent / "files"


@pytest.fixture
def bilingual_book_path() -> Path:
    """Provide the bilingual Markdown book fixture path."""

    return _FIXTURES_DIR / "bilingual_book.md"


@pytest.fixture
def bilingual_book(bilingual_book_path: Path) -> str:
    """Provide the bilingual Markdown book fixture text."""

    return bilingual_book_path.read_text(encoding="utf-8")


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    """Provide a deterministic id generator."""

    return SequentialIdGenerator()


@pytest.fixture
def engine(id_generator: SequentialIdGenerator) -> MarkdownSegmentationEngine:
    """Provide an engine with deterministic ids."""

    return MarkdownSegmentationEngine(id_generator=id_generator)

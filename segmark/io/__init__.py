"""Input/output stage components for segmark.

This package contains chapter splitting and the file helpers used by the CLI.
"""

from .chapter_splitter import ChapterSplitter
from .documents import read_markdown, write_json

__all__ = ["ChapterSplitter", "read_markdown", "write_json"]

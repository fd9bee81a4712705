"""Filesystem helpers for Markdown input and JSON output.

Responsibilities:
- Read Markdown sources as UTF-8, tolerating a byte-order mark and CRLF.
- Write JSON payloads deterministically (sorted keys, UTF-8, indented).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_markdown(path: Path) -> str:
    """Read a Markdown file and normalize line endings to LF."""

    text = path.read_text(encoding="utf-8-sig")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def dump_json(payload: Any) -> str:
    """Render a JSON payload with stable formatting."""

    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def write_json(path: Path, payload: Any) -> Path:
    """Save a JSON-serializable payload and return the final path."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_json(payload) + "\n", encoding="utf-8")
    return path

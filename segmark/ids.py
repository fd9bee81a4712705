"""Identifier-generator collaborators for segment and chapter ids.

Any zero-argument callable returning a unique string can be injected into the
engine. Two implementations are provided:
- `random_id`: uuid4-based, unique across processes and concurrent calls.
- `SequentialIdGenerator`: deterministic ids for reproducible output
  (tests, cached CLI runs). Unique per generator instance only.
"""

from __future__ import annotations

import itertools
import threading
from typing import Callable
import uuid

IdGenerator = Callable[[], str]


def random_id() -> str:
    """Return a fresh random identifier."""

    return uuid.uuid4().hex


class SequentialIdGenerator:
    """Produce `<prefix>-<n>` identifiers in call order."""

    def __init__(self, prefix: str = "seg", start: int = 1) -> None:
        """Initialize generator with a prefix and first counter value."""

        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        """Return the next identifier."""

        with self._lock:
            value = next(self._counter)
        return f"{self._prefix}-{value}"

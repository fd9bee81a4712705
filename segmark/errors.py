"""Domain exceptions for parsing and CLI diagnostics."""

from __future__ import annotations


class OriginError(ValueError):
    """Raised when an origin descriptor cannot be parsed or validated."""


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

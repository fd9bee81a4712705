"""Structured phase logging for parse runs.

Responsibilities:
- Emit concise, deterministic phase-level log lines through `loguru`.
- Keep document text out of log records; only counts and error types.

The package disables its loguru records on import. Constructing a
`ParseLogger` with a sink opts back in.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger

_PACKAGE_NAME = "segmark"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in "-_.:/" else "_" for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in sorted key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class ParseLogger:
    """Emit deterministic phase logs for engine activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger; attach a plain-message sink when one is given.

        Attaching a sink replaces existing loguru handlers so each record is
        written once, in the deterministic `{message}` format.
        """

        self._handler_id: int | None = None
        if sink is not None:
            logger.remove()
            logger.enable(_PACKAGE_NAME)
            self._handler_id = logger.add(
                sink,
                format="{message}",
                level=level,
                colorize=False,
                filter=_PACKAGE_NAME,
            )

    def close(self) -> None:
        """Detach the sink added by this logger, if any."""

        if self._handler_id is not None:
            logger.remove(self._handler_id)
            self._handler_id = None

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured log line."""

        logger.log(level, f"[phase] level={level} stage={stage} event={event}{_format_context(context)}")

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event with result counts."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_warning(self, stage: str, event: str, **context: object) -> None:
        """Emit a recoverable-condition event."""

        self._emit("WARNING", event, stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

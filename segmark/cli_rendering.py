"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
chapter listing rows, and origin summaries.
"""

from __future__ import annotations

from typing import NoReturn, Sequence

import typer

from .errors import CommandStageError
from .models.datatypes import Chapter, Origin


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def format_chapter_row(position: int, chapter: Chapter, language: str) -> str:
    """Return one `N. title (stats)` row for a 1-based chapter position."""

    stats = chapter.stats
    title = chapter.title.text(language) or "(untitled)"
    return (
        f"{position}. {title} ({stats.total_segments} segments, "
        f"{stats.total_words} words, ~{stats.estimated_reading_time} min)"
    )


def echo_chapter_list(
    chapters: Sequence[Chapter], language: str, selected: Sequence[int] | None = None
) -> None:
    """Print chapter rows, optionally restricted to selected 1-based indices."""

    wanted = set(selected) if selected is not None else None
    for position, chapter in enumerate(chapters, start=1):
        if wanted is not None and position not in wanted:
            continue
        typer.echo(format_chapter_row(position, chapter, language))


def echo_origin_summary(origin: Origin) -> None:
    """Print parsed origin parts."""

    typer.echo(f"Descriptor: {origin.descriptor}")
    typer.echo(f"Primary: {origin.primary}")
    typer.echo(f"Secondary: {origin.secondary or '(none)'}")
    typer.echo(f"Format: {origin.bilingual_format.value}")

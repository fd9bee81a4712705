"""Command-line interface for segmark.

Responsibilities:
- Expose user-facing commands for parsing Markdown books.
- Resolve configuration from YAML files or `SEGMARK_*` environment variables.
- Map input and configuration failures to stage-scoped diagnostics.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Annotated

import typer

from .cli_rendering import echo_chapter_list, echo_origin_summary, exit_with_command_error
from .config import ConfigLoader, SegmenterConfig
from .engine import MarkdownSegmentationEngine
from .errors import CommandStageError, OriginError
from .ids import SequentialIdGenerator
from .io.documents import dump_json, read_markdown, write_json
from .models.datatypes import Origin
from .origin import validate_origin
from .serialization import document_payload, segments_payload
from .telemetry.logger import ParseLogger
from .text.chapter_selection import format_chapter_selection, parse_chapter_selection

app = typer.Typer(
    name="segmark",
    no_args_is_help=True,
    help="Segment generated Markdown books into chapters and bilingual segments.",
)


def _load_config(config_path: Path | None) -> SegmenterConfig:
    """Load YAML config when requested, otherwise environment config."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=str(exc),
                hint="Fix or unset the `SEGMARK_*` environment variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except Exception as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_origin(descriptor: str) -> Origin:
    """Validate the `--origin` option strictly."""

    try:
        return validate_origin(descriptor)
    except OriginError as exc:
        raise CommandStageError(
            stage="origin",
            detail=str(exc),
            hint="Use `lang`, `lang-lang2`, or `lang-lang2-ph`, for example `en-vi-ph`.",
        ) from exc


def _read_input(input_md: Path) -> str:
    """Read the Markdown input and map filesystem failures to stage errors."""

    try:
        return read_markdown(input_md)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Markdown file not found: `{input_md}`.",
            hint="Pass an existing `<file.md>` path.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Markdown file `{input_md}` is not valid UTF-8.",
            hint="Re-save the file with UTF-8 encoding.",
        ) from exc


def _build_engine(
    config: SegmenterConfig, stable_ids: bool, run_logger: ParseLogger
) -> MarkdownSegmentationEngine:
    id_generator = SequentialIdGenerator() if stable_ids else None
    return MarkdownSegmentationEngine(config=config, id_generator=id_generator, run_logger=run_logger)


OriginOption = Annotated[
    str,
    typer.Option("--origin", help="Origin descriptor: `en`, `en-vi`, or `en-vi-ph`."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="YAML config file (defaults to `SEGMARK_*` environment)."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Log parse phases to stderr."),
]


@app.command("parse")
def parse_command(
    input_md: Annotated[Path, typer.Argument(help="Path to the Markdown book.")],
    origin: OriginOption = "en",
    flat: Annotated[
        bool,
        typer.Option("--flat", help="Emit a flat segment list without chapters."),
    ] = False,
    stable_ids: Annotated[
        bool,
        typer.Option("--stable-ids", help="Use sequential ids for reproducible output."),
    ] = False,
    config_file: ConfigOption = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write JSON to this file instead of stdout."),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Parse a Markdown book and print the JSON payload."""

    run_logger = ParseLogger(sink=sys.stderr, level="INFO" if verbose else "WARNING")
    try:
        parsed_origin = _resolve_origin(origin)
        config = _load_config(config_file)
        markdown = _read_input(input_md)
        engine = _build_engine(config, stable_ids, run_logger)
        if flat:
            payload: object = segments_payload(
                engine.parse_segments(markdown, parsed_origin.descriptor)
            )
        else:
            payload = document_payload(engine.parse_document(markdown, parsed_origin.descriptor))
        if out is not None:
            write_json(out, payload)
    except Exception as exc:
        exit_with_command_error("parse", exc)
    finally:
        run_logger.close()

    if out is not None:
        typer.echo(f"Output: {out}")
    else:
        typer.echo(dump_json(payload))


@app.command("list-chapters")
def list_chapters_command(
    input_md: Annotated[Path, typer.Argument(help="Path to the Markdown book.")],
    origin: OriginOption = "en",
    chapters: Annotated[
        str | None,
        typer.Option(
            "--chapters",
            help="1-based chapter selection: `5`, `1,3,7`, `2-4`, or mixed `1,3-5`.",
        ),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """List chapter titles with segment, word, and reading-time stats."""

    run_logger = ParseLogger(sink=sys.stderr, level="INFO" if verbose else "WARNING")
    try:
        parsed_origin = _resolve_origin(origin)
        config = _load_config(config_file)
        markdown = _read_input(input_md)
        document = _build_engine(config, False, run_logger).parse_document(
            markdown, parsed_origin.descriptor
        )
        selected: list[int] | None = None
        if document.chapters:
            try:
                selected = parse_chapter_selection(chapters, len(document.chapters))
            except ValueError as exc:
                raise CommandStageError(
                    stage="chapter-selection",
                    detail=str(exc),
                    hint=f"Available chapters: `1-{len(document.chapters)}`.",
                ) from exc
    except Exception as exc:
        exit_with_command_error("list-chapters", exc)
    finally:
        run_logger.close()

    typer.echo(f"Title: {document.title.text(parsed_origin.primary)}")
    if not document.chapters:
        typer.echo("No chapters found.")
        return
    typer.echo(f"Chapter scope: {format_chapter_selection(selected or [])}")
    echo_chapter_list(document.chapters, parsed_origin.primary, selected)


@app.command("origin")
def origin_command(
    descriptor: Annotated[str, typer.Argument(help="Origin descriptor to validate.")],
) -> None:
    """Validate an origin descriptor and print its parts."""

    try:
        parsed_origin = _resolve_origin(descriptor)
    except Exception as exc:
        exit_with_command_error("origin", exc)

    echo_origin_summary(parsed_origin)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()

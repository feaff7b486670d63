"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
processed text, applied operations, statistics, and stage listings.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import ProcessingStatistics, StageOutcome, ValidationState
from .text.cleaners import CleanerRule


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
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


def echo_validation_warnings(state: ValidationState) -> None:
    """Print non-blocking input policy warnings to stderr."""

    for warning in state.warnings:
        typer.secho(f"Warning: {warning}", fg=typer.colors.YELLOW, err=True)


def echo_processed_text(text: str) -> None:
    """Print the processed text block."""

    typer.echo("Processed text:")
    typer.echo(text)


def echo_applied_operations(operations: Sequence[str]) -> None:
    """Print applied operation names on one line."""

    typer.echo(f"Applied operations: {', '.join(operations) if operations else '(none)'}")


def echo_statistics(statistics: ProcessingStatistics) -> None:
    """Print run statistics."""

    typer.echo(f"Original length: {statistics.original_length}")
    typer.echo(f"Processed length: {statistics.processed_length}")
    typer.echo(f"Words removed: {statistics.words_removed}")
    typer.echo(f"Lines removed: {statistics.lines_removed}")
    typer.echo(f"Processing time (ms): {statistics.processing_time_ms}")


def echo_stage_trace(outcomes: Sequence[StageOutcome]) -> None:
    """Print one deterministic row per executed stage."""

    total = len(outcomes)
    for index, outcome in enumerate(outcomes, start=1):
        changed = "yes" if outcome.changed else "no"
        typer.echo(f"[stage] {index}/{total} {outcome.key} changed={changed}")


def echo_stage_list(stages: Sequence[CleanerRule]) -> None:
    """Print stage keys and operation names in execution order."""

    for index, stage in enumerate(stages, start=1):
        typer.echo(f"{index}. {stage.key}: {stage.name}")


def echo_export_path(path: Path | None) -> None:
    """Print the export location, if one was written."""

    typer.echo(f"Export: {path if path is not None else '(not written)'}")

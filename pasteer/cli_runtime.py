"""CLI runtime resolution helpers.

This module isolates config resolution, input reading, input policy
enforcement, and export writing from the command wiring layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path

import typer

from .config import ConfigLoader, PasteerConfig
from .errors import PipelineStageError
from .io.exporters import ContentExporter
from .io.storage import ArtifactStore
from .models.datatypes import ValidationState
from .parsing import normalize_optional_string
from .validation import validate_content

_STDIN_MARKER = "-"


def load_base_config(
    config_path: Path | None,
    env: Mapping[str, str] | None = None,
) -> PasteerConfig:
    """Load `PASTEER_*` and optional YAML defaults and map failures to stage errors."""

    try:
        return ConfigLoader.load(config_path, env)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        source = "environment" if config_path is None else f"config file `{config_path}`"
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid {source}: {exc}",
            hint="Fix config schema/values (YAML file or `PASTEER_*` variables) and rerun.",
        ) from exc
    except OSError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def resolve_command_config(
    config_file: Path | None,
    out: Path | None,
    export_format: str | None,
    trace: bool | None,
    env: Mapping[str, str] | None = None,
) -> PasteerConfig:
    """Resolve effective command config.

    Precedence is CLI overrides, then YAML values, then `PASTEER_*`
    environment values, then defaults.
    """

    config = load_base_config(config_file, env)
    if out is not None:
        config.output_dir = out
    normalized_format = normalize_optional_string(export_format)
    if normalized_format is not None:
        config.export_format = normalized_format.lower()
    if trace is not None:
        config.trace = trace

    try:
        config.validate()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Use `--format json`, `--format markdown`, or `--format text`.",
        ) from exc
    return config


def read_input_text(input_path: Path | None) -> str:
    """Read raw text from a file, or from stdin when no path or `-` is given.

    Undecodable bytes are replaced rather than rejected.
    """

    if input_path is None or str(input_path) == _STDIN_MARKER:
        return typer.get_binary_stream("stdin").read().decode("utf-8", errors="replace")

    try:
        return input_path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Input file not found: `{input_path}`.",
            hint="Pass an existing text file or pipe text through stdin.",
        ) from exc
    except OSError as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Failed to read input file `{input_path}`: {exc}",
            hint="Verify the path points to a readable file.",
        ) from exc


def enforce_input_policy(raw_text: str, config: PasteerConfig) -> ValidationState:
    """Validate input and raise a stage error when it must not be processed.

    Returns:
        The validation state, so callers can surface warnings.
    """

    state = validate_content(
        raw_text,
        max_length=config.max_input_chars,
        max_words=config.max_words,
    )
    if not state.is_valid:
        raise PipelineStageError(
            stage="validate",
            detail="; ".join(state.errors) + ".",
            hint=f"Provide non-empty text of at most {config.max_input_chars} characters.",
        )
    return state


def write_export(
    content: str,
    config: PasteerConfig,
    generated_at: datetime | None = None,
) -> Path | None:
    """Write an export file when an output directory is configured."""

    if config.output_dir is None:
        return None

    exporter = ContentExporter(ArtifactStore(config.output_dir))
    try:
        return exporter.export(content, config.export_format, generated_at)
    except OSError as exc:
        raise PipelineStageError(
            stage="export",
            detail=f"Failed to write {config.export_format} export to `{config.output_dir}`: {exc}",
            hint="Verify the output directory is writable.",
        ) from exc

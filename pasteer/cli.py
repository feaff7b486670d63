"""Command-line interface for Pasteer.

Responsibilities:
- Expose user-facing commands for text normalization and toggle processing.
- Convert CLI arguments into `PasteerConfig` and print run results.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_applied_operations,
    echo_export_path,
    echo_processed_text,
    echo_stage_list,
    echo_stage_trace,
    echo_statistics,
    echo_validation_warnings,
    exit_with_command_error,
)
from .cli_runtime import (
    enforce_input_policy,
    read_input_text,
    resolve_command_config,
    write_export,
)
from .errors import PipelineStageError
from .pipeline import NormalizationPipeline
from .telemetry.logger import RunLogger
from .text.options import ProcessingOptions, apply_processing_options
from .text.stats import word_count

app = typer.Typer(
    name="pasteer",
    no_args_is_help=True,
    help="Pasteer text cleaning CLI.",
)

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a UTF-8 text file. Reads stdin when omitted or `-`."),
]
OutOption = Annotated[
    Path | None,
    typer.Option("--out", help="Directory for the export file (overrides config file value)."),
]
FormatOption = Annotated[
    str | None,
    typer.Option("--format", help="Export format: `json`, `markdown`, or `text`."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Emit per-stage run logs on stderr."),
]


@app.command("clean")
def clean_command(
    input_path: InputArgument = None,
    out: OutOption = None,
    export_format: FormatOption = None,
    config_file: ConfigOption = None,
    trace: Annotated[
        bool | None,
        typer.Option("--trace/--no-trace", help="Print whether each stage changed the text."),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Run the full normalization pipeline."""

    try:
        config = resolve_command_config(
            config_file=config_file,
            out=out,
            export_format=export_format,
            trace=trace,
        )
        raw_text = read_input_text(input_path)
        validation = enforce_input_policy(raw_text, config)
        pipeline = NormalizationPipeline(
            record_trace=config.trace,
            run_logger=RunLogger() if verbose else None,
        )
        result = pipeline.run(raw_text)
        export_path = write_export(result.final_text, config)
    except Exception as exc:
        exit_with_command_error("clean", exc)

    echo_validation_warnings(validation)
    echo_processed_text(result.final_text)
    if config.trace:
        echo_stage_trace(result.stage_outcomes)
    echo_applied_operations(result.applied_operations)
    echo_statistics(result.statistics)
    echo_export_path(export_path)


@app.command("transform")
def transform_command(
    input_path: InputArgument = None,
    remove_whitespace: Annotated[
        bool, typer.Option("--remove-whitespace", help="Collapse all whitespace and trim.")
    ] = False,
    normalize_line_breaks: Annotated[
        bool, typer.Option("--normalize-line-breaks", help="Convert CRLF/CR to LF.")
    ] = False,
    remove_special_chars: Annotated[
        bool,
        typer.Option("--remove-special-chars", help="Keep only letters, digits, `_`, whitespace."),
    ] = False,
    uppercase: Annotated[bool, typer.Option("--uppercase", help="Convert to uppercase.")] = False,
    lowercase: Annotated[bool, typer.Option("--lowercase", help="Convert to lowercase.")] = False,
    title_case: Annotated[
        bool, typer.Option("--title-case", help="Capitalize each space-separated word.")
    ] = False,
    remove_duplicates: Annotated[
        bool, typer.Option("--remove-duplicates", help="Drop repeated lines.")
    ] = False,
    sort_lines: Annotated[bool, typer.Option("--sort-lines", help="Sort lines.")] = False,
    count_words: Annotated[
        bool, typer.Option("--count-words", help="Print the word count of the result.")
    ] = False,
    out: OutOption = None,
    export_format: FormatOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Apply individually toggled transformations."""

    options = ProcessingOptions(
        remove_whitespace=remove_whitespace,
        normalize_line_breaks=normalize_line_breaks,
        remove_special_chars=remove_special_chars,
        convert_to_uppercase=uppercase,
        convert_to_lowercase=lowercase,
        convert_to_title_case=title_case,
        remove_duplicates=remove_duplicates,
        sort_lines=sort_lines,
        count_words=count_words,
    )
    try:
        config = resolve_command_config(
            config_file=config_file,
            out=out,
            export_format=export_format,
            trace=None,
        )
        raw_text = read_input_text(input_path)
        validation = enforce_input_policy(raw_text, config)
        report = apply_processing_options(raw_text, options)
        if not report.success:
            raise PipelineStageError(
                stage="transform",
                detail="; ".join(report.errors),
                hint="Retry with fewer options enabled.",
            )
        export_path = write_export(report.processed_text, config)
    except Exception as exc:
        exit_with_command_error("transform", exc)

    echo_validation_warnings(validation)
    echo_processed_text(report.processed_text)
    echo_applied_operations(report.applied_operations)
    if options.count_words:
        typer.echo(f"Word count: {word_count(report.processed_text)}")
    echo_statistics(report.statistics)
    echo_export_path(export_path)


@app.command("stages")
def stages_command() -> None:
    """List normalization stages in execution order."""

    echo_stage_list(NormalizationPipeline().stages)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()

"""Core datatypes shared across Pasteer modules.

Responsibilities:
- Represent immutable results produced by the normalization pipeline.
- Provide explicit typing for serialization into CLI output and exports.

Key types:
- `ProcessingStatistics`, `StageOutcome`, `PipelineResult`,
  `ProcessingReport`, `ContentStats`, and `ValidationState`.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ProcessingStatistics:
    """Before/after measurements for one processing run.

    Attributes:
        original_length: Length of the raw input in UTF-16 code units.
        processed_length: Length of the final text in UTF-16 code units.
        words_removed: Word count of input minus word count of output (may be negative).
        lines_removed: Line count of input minus line count of output (may be negative).
        processing_time_ms: Wall-clock duration of the run in whole milliseconds.
    """

    original_length: int
    processed_length: int
    words_removed: int
    lines_removed: int
    processing_time_ms: int

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping using the original camelCase field names."""

        return {
            "originalLength": self.original_length,
            "processedLength": self.processed_length,
            "wordsRemoved": self.words_removed,
            "linesRemoved": self.lines_removed,
            "processingTime": self.processing_time_ms,
        }


@dataclass(frozen=True, slots=True)
class StageOutcome:
    """Trace entry for one stage of a pipeline run.

    Attributes:
        key: Machine identifier of the stage.
        name: Operation name reported when the stage changes text.
        changed: Whether stage output differed from its input.
        text: Stage output text.
    """

    key: str
    name: str
    changed: bool
    text: str


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Immutable outcome of one normalization pipeline run.

    Attributes:
        final_text: Text after every stage ran.
        applied_operations: Names of stages that changed text, in execution order.
        statistics: Measurements computed from raw input and final text.
        stage_outcomes: Per-stage trace, populated only when tracing is enabled.
    """

    final_text: str
    applied_operations: tuple[str, ...]
    statistics: ProcessingStatistics
    stage_outcomes: tuple[StageOutcome, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ProcessingReport:
    """Caller-facing result that can also carry failures around the pipeline.

    Attributes:
        success: Whether processing completed.
        processed_text: Final text, or empty string on failure.
        statistics: Measurements; on failure only original length and elapsed time are set.
        applied_operations: Names of operations that changed text.
        errors: Human-readable failure messages.
    """

    success: bool
    processed_text: str
    statistics: ProcessingStatistics
    applied_operations: tuple[str, ...] = field(default_factory=tuple)
    errors: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """Serialize the report in the original result shape."""

        payload: dict[str, object] = {
            "success": self.success,
            "processedContent": self.processed_text,
            "statistics": self.statistics.to_dict(),
            "appliedOperations": list(self.applied_operations),
        }
        if self.errors:
            payload["errors"] = list(self.errors)
        return payload


@dataclass(frozen=True, slots=True)
class ContentStats:
    """Counts describing one text buffer."""

    character_count: int
    word_count: int
    line_count: int


@dataclass(frozen=True, slots=True)
class ValidationState:
    """Outcome of input policy checks.

    Attributes:
        is_valid: `True` when there are no errors; warnings do not invalidate.
        errors: Blocking problems.
        warnings: Advisory problems.
    """

    is_valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

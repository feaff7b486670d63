"""Normalization pipeline orchestration.

Responsibilities:
- Run the fixed, ordered sequence of normalization stages over raw text.
- Record which stages changed the text and compute run statistics.
- Wrap runs for callers that need a failure-tolerant report.

Key public API:
- `NormalizationPipeline`: reusable, stateless pipeline object.
- `normalize`: run the default pipeline once.
- `process_content`: run a pipeline and convert unexpected failures into a report.
"""

from __future__ import annotations

from collections.abc import Sequence
import time

from .models.datatypes import (
    PipelineResult,
    ProcessingReport,
    ProcessingStatistics,
    StageOutcome,
)
from .telemetry.logger import RunLogger
from .text.cleaners import DEFAULT_STAGES, CleanerRule
from .text.stats import compute_statistics, utf16_length

_PIPELINE_STAGE = "normalize"


class NormalizationPipeline:
    """Apply normalization stages in order and report what changed.

    The pipeline holds configuration only; every `run` call works on its own
    local state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        stages: Sequence[CleanerRule] | None = None,
        *,
        record_trace: bool = False,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize with custom stages or the default stage sequence."""

        self.stages: tuple[CleanerRule, ...] = (
            tuple(stages) if stages is not None else DEFAULT_STAGES
        )
        self.record_trace = record_trace
        self._run_logger = run_logger

    def stage_names(self) -> tuple[str, ...]:
        """Return operation names in execution order."""

        return tuple(stage.name for stage in self.stages)

    def run(self, raw_text: str) -> PipelineResult:
        """Normalize `raw_text` and return the final text with diagnostics."""

        started = time.perf_counter()
        if self._run_logger is not None:
            self._run_logger.log_stage_start(_PIPELINE_STAGE, stages=len(self.stages))

        current = raw_text
        applied: list[str] = []
        outcomes: list[StageOutcome] = []
        for stage in self.stages:
            transformed = stage.apply(current)
            changed = transformed != current
            if changed:
                applied.append(stage.name)
            if self.record_trace:
                outcomes.append(
                    StageOutcome(
                        key=stage.key,
                        name=stage.name,
                        changed=changed,
                        text=transformed,
                    )
                )
            if self._run_logger is not None:
                self._run_logger.log_stage_result(stage.key, changed)
            current = transformed

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        statistics = compute_statistics(raw_text, current, elapsed_ms)
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(
                _PIPELINE_STAGE,
                applied=len(applied),
                duration_ms=statistics.processing_time_ms,
            )
        return PipelineResult(
            final_text=current,
            applied_operations=tuple(applied),
            statistics=statistics,
            stage_outcomes=tuple(outcomes),
        )


_DEFAULT_PIPELINE = NormalizationPipeline()


def normalize(raw_text: str) -> PipelineResult:
    """Run the default normalization pipeline on `raw_text`."""

    return _DEFAULT_PIPELINE.run(raw_text)


def process_content(
    raw_text: str,
    pipeline: NormalizationPipeline | None = None,
    run_logger: RunLogger | None = None,
) -> ProcessingReport:
    """Run a pipeline and return a report that never raises for pipeline failures.

    On failure the report has `success=False`, empty processed text, the error
    message, and only the statistics that are still well defined: original
    length and elapsed time.
    """

    active_pipeline = pipeline if pipeline is not None else _DEFAULT_PIPELINE
    started = time.perf_counter()
    try:
        result = active_pipeline.run(raw_text)
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure(_PIPELINE_STAGE, type(exc).__name__)
        return ProcessingReport(
            success=False,
            processed_text="",
            statistics=ProcessingStatistics(
                original_length=utf16_length(raw_text),
                processed_length=0,
                words_removed=0,
                lines_removed=0,
                processing_time_ms=int((time.perf_counter() - started) * 1000),
            ),
            errors=(str(exc) or type(exc).__name__,),
        )
    return ProcessingReport(
        success=True,
        processed_text=result.final_text,
        statistics=result.statistics,
        applied_operations=result.applied_operations,
    )

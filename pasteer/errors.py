"""Domain exceptions for code surrounding the normalization pipeline."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a step around the pipeline (config, input, export) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

"""Shared typed data models for Pasteer.

This package contains dataclasses used across pipeline, CLI and export
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    ContentStats,
    PipelineResult,
    ProcessingReport,
    ProcessingStatistics,
    StageOutcome,
    ValidationState,
)

__all__ = [
    "ContentStats",
    "PipelineResult",
    "ProcessingReport",
    "ProcessingStatistics",
    "StageOutcome",
    "ValidationState",
]

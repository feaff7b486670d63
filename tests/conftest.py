"""Shared pytest fixtures for the Pasteer test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from pasteer.pipeline import NormalizationPipeline


@pytest.fixture
def pipeline() -> NormalizationPipeline:
    """Provide a default-stage pipeline that records per-stage trace outcomes."""

    return NormalizationPipeline(record_trace=True)


@pytest.fixture
def sample_input_path(tmp_path: Path) -> Path:
    """Write a small noisy paste to disk for CLI tests that need file input."""

    path = tmp_path / "paste.txt"
    path.write_text("<b>Hi</b> there , see https://example.com\n", encoding="utf-8")
    return path

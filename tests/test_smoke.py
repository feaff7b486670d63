"""Basic smoke tests for project wiring.

These tests verify only import-level and basic object creation behavior.
"""

from pasteer import NormalizationPipeline, normalize, process_content
from pasteer.config import PasteerConfig


def test_pipeline_can_be_instantiated() -> None:
    """Pipeline class should be constructible with the default stages."""

    pipeline = NormalizationPipeline()
    assert pipeline is not None
    assert len(pipeline.stages) == 11


def test_package_exports_are_callable() -> None:
    """Top-level helpers should be importable and runnable."""

    assert normalize("ok").final_text == "ok"
    assert process_content("ok").success is True


def test_config_dataclass_defaults() -> None:
    """Config should keep expected defaults."""

    config = PasteerConfig()
    assert config.output_dir is None
    assert config.export_format == "text"
    assert config.max_input_chars == 6000
    assert config.max_words == 1000
    assert config.trace is False

"""Configuration model and loaders for Pasteer.

Responsibilities:
- Define command configuration as a typed dataclass.
- Merge `PASTEER_*` environment values and YAML config files into one config.

Key types:
- `PasteerConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `PasteerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .io.exporters import EXPORT_FORMATS
from .parsing import normalize_optional_string, parse_positive_int, parse_required_boolean
from .validation import DEFAULT_MAX_LENGTH, DEFAULT_MAX_WORDS


@dataclass(slots=True)
class PasteerConfig:
    """Settings for one command invocation.

    Attributes:
        output_dir: Directory for export files; exports are skipped when `None`.
        export_format: One of `json`, `markdown`, `text`.
        max_input_chars: Input cap in UTF-16 code units enforced before processing.
        max_words: Word count above which a warning is shown.
        trace: Whether per-stage trace rows are printed.
    """

    output_dir: Path | None = None
    export_format: str = "text"
    max_input_chars: int = DEFAULT_MAX_LENGTH
    max_words: int = DEFAULT_MAX_WORDS
    trace: bool = False

    def validate(self) -> None:
        """Validate configuration values before command execution."""

        if self.export_format not in EXPORT_FORMATS:
            supported = ", ".join(EXPORT_FORMATS)
            raise ValueError(
                f"Unsupported `export_format` value `{self.export_format}`; supported: {supported}."
            )
        if self.max_input_chars <= 0:
            raise ValueError("`max_input_chars` must be a positive integer.")
        if self.max_words <= 0:
            raise ValueError("`max_words` must be a positive integer.")


class ConfigLoader:
    """Factory methods for creating `PasteerConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset(
        {
            "output_dir",
            "export_format",
            "max_input_chars",
            "max_words",
            "trace",
        }
    )

    @staticmethod
    def load(
        yaml_path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> PasteerConfig:
        """Create a validated config from `PASTEER_*` variables and an optional YAML file.

        YAML values take precedence over environment values, which take
        precedence over dataclass defaults.
        """

        payload = ConfigLoader._read_env_payload(env)
        if yaml_path is not None:
            yaml_payload = ConfigLoader._read_yaml_payload(yaml_path)
            payload.update(
                {
                    key: value
                    for key, value in yaml_payload.items()
                    if normalize_optional_string(value) is not None
                }
            )
        return ConfigLoader._build_config_from_mapping(payload)

    @staticmethod
    def _read_yaml_payload(path: Path) -> dict[str, Any]:
        """Parse a YAML config file into a mapping of supported keys."""

        path_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(path_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"YAML `{path}` includes unsupported key(s): {key_list}.")
        return dict(payload)

    @staticmethod
    def _read_env_payload(env: Mapping[str, str] | None) -> dict[str, Any]:
        """Collect non-blank `PASTEER_<KEY>` values for supported keys."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key in ConfigLoader._SUPPORTED_KEYS:
            value = normalize_optional_string(env_map.get(f"PASTEER_{key.upper()}"))
            if value is not None:
                payload[key] = value
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any]) -> PasteerConfig:
        """Build and validate a config from a key/value mapping of supported keys."""

        config = PasteerConfig()
        output_dir = normalize_optional_string(payload.get("output_dir"))
        if output_dir is not None:
            config.output_dir = Path(output_dir)
        export_format = normalize_optional_string(payload.get("export_format"))
        if export_format is not None:
            config.export_format = export_format.lower()
        if payload.get("max_input_chars") is not None:
            config.max_input_chars = parse_positive_int(
                payload["max_input_chars"], "max_input_chars"
            )
        if payload.get("max_words") is not None:
            config.max_words = parse_positive_int(payload["max_words"], "max_words")
        if payload.get("trace") is not None:
            config.trace = parse_required_boolean(payload["trace"], "trace")

        config.validate()
        return config

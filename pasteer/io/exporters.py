"""Export renderers for processed text.

Responsibilities:
- Render processed text as JSON, Markdown, or plain-text documents.
- Name and persist export files through `ArtifactStore`.

The exported content is treated as an opaque payload; counts are computed
with the same rules as pipeline statistics.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from ..text.stats import content_stats
from .storage import ArtifactStore

EXPORT_FORMATS = ("json", "markdown", "text")
_EXTENSIONS = {"json": "json", "markdown": "md", "text": "txt"}
_EXPORT_TITLE = "PASTEER Content"


def _require_format(export_format: str) -> str:
    """Validate an export format identifier."""

    if export_format not in _EXTENSIONS:
        supported = ", ".join(EXPORT_FORMATS)
        raise ValueError(f"Unsupported export format `{export_format}`; supported: {supported}.")
    return export_format


def _iso_timestamp(generated_at: datetime) -> str:
    """Return a UTC ISO-8601 timestamp with millisecond precision and `Z` suffix."""

    utc_value = generated_at.astimezone(timezone.utc)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _display_timestamp(generated_at: datetime) -> str:
    return generated_at.strftime("%Y-%m-%d %H:%M:%S")


def export_filename(export_format: str, generated_at: datetime) -> str:
    """Return `pasteer-content-<epoch-ms>.<ext>` for the given format."""

    extension = _EXTENSIONS[_require_format(export_format)]
    epoch_ms = int(generated_at.timestamp() * 1000)
    return f"pasteer-content-{epoch_ms}.{extension}"


def render_json_export(content: str, generated_at: datetime) -> dict[str, object]:
    """Build the JSON export payload."""

    stats = content_stats(content)
    return {
        "content": content,
        "characterCount": stats.character_count,
        "wordCount": stats.word_count,
        "lineCount": stats.line_count,
        "timestamp": _iso_timestamp(generated_at),
    }


def render_markdown_export(content: str, generated_at: datetime) -> str:
    """Build the Markdown export document."""

    stats = content_stats(content)
    return "\n".join(
        [
            f"# {_EXPORT_TITLE}",
            "",
            "## Content",
            content,
            "",
            "---",
            f"*Generated on {_display_timestamp(generated_at)}*",
            f"*Character count: {stats.character_count}*",
            f"*Word count: {stats.word_count}*",
            f"*Line count: {stats.line_count}*",
        ]
    )


def render_text_export(content: str, generated_at: datetime) -> str:
    """Build the plain-text export document."""

    stats = content_stats(content)
    return "\n".join(
        [
            _EXPORT_TITLE,
            f"Generated on: {_display_timestamp(generated_at)}",
            f"Character count: {stats.character_count}",
            f"Word count: {stats.word_count}",
            f"Line count: {stats.line_count}",
            "",
            content,
        ]
    )


class ContentExporter:
    """Write processed text exports into an artifact store."""

    def __init__(self, store: ArtifactStore) -> None:
        """Initialize exporter with a destination store."""

        self.store = store

    def export(
        self,
        content: str,
        export_format: str,
        generated_at: datetime | None = None,
    ) -> Path:
        """Render `content` in `export_format` and return the written file path."""

        _require_format(export_format)
        timestamp = generated_at if generated_at is not None else datetime.now(timezone.utc)
        relative_path = Path(export_filename(export_format, timestamp))
        if export_format == "json":
            return self.store.save_json(relative_path, render_json_export(content, timestamp))
        if export_format == "markdown":
            return self.store.save_text(relative_path, render_markdown_export(content, timestamp))
        return self.store.save_text(relative_path, render_text_export(content, timestamp))

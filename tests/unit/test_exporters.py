"""Unit tests for export rendering and file naming."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import json
from pathlib import Path

import pytest

from pasteer.io.exporters import (
    ContentExporter,
    export_filename,
    render_json_export,
    render_markdown_export,
    render_text_export,
)
from pasteer.io.storage import ArtifactStore

_GENERATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("export_format", "expected"),
    [
        ("json", "pasteer-content-1704164645000.json"),
        ("markdown", "pasteer-content-1704164645000.md"),
        ("text", "pasteer-content-1704164645000.txt"),
    ],
)
def test_export_filename_uses_epoch_milliseconds(export_format: str, expected: str) -> None:
    """File names should embed the generation time in epoch milliseconds."""

    assert export_filename(export_format, _GENERATED_AT) == expected


def test_render_json_export_includes_counts_and_utc_timestamp() -> None:
    """JSON exports should carry content, counts and an ISO UTC timestamp."""

    local_time = _GENERATED_AT.astimezone(timezone(timedelta(hours=2)))

    payload = render_json_export("Hello world\nBye", local_time)

    assert payload == {
        "content": "Hello world\nBye",
        "characterCount": 15,
        "wordCount": 3,
        "lineCount": 2,
        "timestamp": "2024-01-02T03:04:05.000Z",
    }


def test_render_markdown_export_layout() -> None:
    """Markdown exports should place content under a heading and stats in a footer."""

    document = render_markdown_export("Hello world\nBye", _GENERATED_AT)

    assert document.splitlines() == [
        "# PASTEER Content",
        "",
        "## Content",
        "Hello world",
        "Bye",
        "",
        "---",
        "*Generated on 2024-01-02 03:04:05*",
        "*Character count: 15*",
        "*Word count: 3*",
        "*Line count: 2*",
    ]


def test_render_text_export_layout() -> None:
    """Plain-text exports should put a stats header above the content."""

    document = render_text_export("Hello", _GENERATED_AT)

    assert document.splitlines() == [
        "PASTEER Content",
        "Generated on: 2024-01-02 03:04:05",
        "Character count: 5",
        "Word count: 1",
        "Line count: 1",
        "",
        "Hello",
    ]


def test_content_exporter_writes_each_format(tmp_path: Path) -> None:
    """Exporter should write files through the artifact store."""

    exporter = ContentExporter(ArtifactStore(tmp_path))

    json_path = exporter.export("Héllo", "json", _GENERATED_AT)
    markdown_path = exporter.export("Héllo", "markdown", _GENERATED_AT)
    text_path = exporter.export("Héllo", "text", _GENERATED_AT)

    assert json.loads(json_path.read_text(encoding="utf-8"))["content"] == "Héllo"
    assert markdown_path.read_text(encoding="utf-8").startswith("# PASTEER Content\n")
    assert text_path.read_text(encoding="utf-8").endswith("\nHéllo")
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "pasteer-content-1704164645000.json",
        "pasteer-content-1704164645000.md",
        "pasteer-content-1704164645000.txt",
    ]


def test_content_exporter_rejects_unknown_format(tmp_path: Path) -> None:
    """Unsupported formats should fail before anything is written."""

    exporter = ContentExporter(ArtifactStore(tmp_path))

    with pytest.raises(ValueError, match=r"Unsupported export format `pdf`"):
        exporter.export("x", "pdf", _GENERATED_AT)
    assert list(tmp_path.iterdir()) == []

from datetime import datetime, timezone
from pathlib import Path

from pasteer.io.exporters import ContentExporter
from pasteer.io.storage import ArtifactStore


def test_artifact_store_writes_exports_into_missing_directories(tmp_path: Path) -> None:
    root = tmp_path / "exports" / "nested"
    exporter = ContentExporter(ArtifactStore(root))
    generated_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    json_path = exporter.export("Héllo", "json", generated_at)
    text_path = exporter.export("Héllo", "text", generated_at)

    assert json_path == root / "pasteer-content-1704164645000.json"
    assert json_path.read_text(encoding="utf-8") == (
        "{\n"
        '  "content": "Héllo",\n'
        '  "characterCount": 5,\n'
        '  "wordCount": 1,\n'
        '  "lineCount": 1,\n'
        '  "timestamp": "2024-01-02T03:04:05.000Z"\n'
        "}"
    )
    assert text_path.read_bytes().decode("utf-8").endswith("\nHéllo")

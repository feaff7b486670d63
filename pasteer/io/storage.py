"""Artifact storage abstraction.

Responsibilities:
- Provide deterministic filesystem storage for exported text and JSON files.
"""

from __future__ import annotations

import json
from pathlib import Path


class ArtifactStore:
    """Filesystem-backed artifact store rooted at one output directory."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root output directory."""

        self.root = root

    def save_text(self, relative_path: Path, content: str) -> Path:
        """Save text content and return final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def save_json(self, relative_path: Path, payload: dict[str, object]) -> Path:
        """Save a JSON payload with non-ASCII text kept readable."""

        return self.save_text(relative_path, json.dumps(payload, ensure_ascii=False, indent=2))

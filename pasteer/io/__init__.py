"""Filesystem output helpers for processed text exports."""

from .exporters import EXPORT_FORMATS, ContentExporter, export_filename
from .storage import ArtifactStore

__all__ = ["ArtifactStore", "ContentExporter", "EXPORT_FORMATS", "export_filename"]

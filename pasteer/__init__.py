"""Top-level package for Pasteer.

This package cleans pasted text through a fixed normalization pipeline and
reports which transformations changed it. The main entry points are
`NormalizationPipeline` and `normalize`.
"""

from .pipeline import NormalizationPipeline, normalize, process_content

__all__ = ["NormalizationPipeline", "normalize", "process_content", "__version__"]

__version__ = "0.1.0"

"""Telemetry helpers.

This package emits run events for normalization runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]

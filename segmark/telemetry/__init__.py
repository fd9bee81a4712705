"""Telemetry helpers.

This package emits deterministic phase logs for parse runs.
"""

from .logger import ParseLogger

__all__ = ["ParseLogger"]

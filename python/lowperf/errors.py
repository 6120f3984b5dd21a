"""Exception types raised by lowperf."""

from __future__ import annotations


class LowPerfError(Exception):
    """Base class for lowperf errors."""


class ProfileError(LowPerfError, ValueError):
    """Raised when a run profile holds an unusable value."""

from __future__ import annotations


class EditMatchError(Exception):
    """Base error for edit distance failures."""


class InvalidThresholdError(EditMatchError, ValueError):
    """Raised when a minimum similarity falls outside ``[0, 1]``."""


class InvalidBoundError(EditMatchError, ValueError):
    """Raised when a maximum distance cannot be interpreted as a bound."""


class UnknownMetricError(EditMatchError, KeyError):
    """Raised when a metric name is not registered."""

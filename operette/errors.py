from __future__ import annotations

"""Exception types raised by operette.

Failures *inside* a chain never surface as exceptions: they settle the
dependent operation instead. These types are for the edges – unwrapping an
outcome, bad configuration and the demo producers.
"""
from typing import Any

__all__ = [
    "OperetteError",
    "OperationFailed",
    "OperationPending",
    "ChainingCycleError",
    "CityRequiredError",
    "ConfigError",
]


class OperetteError(Exception):
    """Base class for every operette exception."""


class OperationFailed(OperetteError):
    """Raised by ``unwrap()`` when the failure value is not an exception."""

    def __init__(self, error: Any):
        super().__init__(f"operation failed: {error!r}")
        self.error = error


class OperationPending(OperetteError):
    """Raised by ``unwrap()`` on an operation that has not settled yet."""


class ChainingCycleError(OperetteError, TypeError):
    """An operation was resolved with itself."""


class CityRequiredError(OperetteError, ValueError):
    """Weather / forecast lookups need a non-empty city."""


class ConfigError(OperetteError):
    """Configuration file missing or invalid."""

"""Acquisition failures.

All three are handled identically by the controller: caught, surfaced as the
store's error message and logged as an ``error`` diagnostics entry.
"""

from __future__ import annotations


class FeedError(Exception):
    """Base class for a failed acquisition."""


class NetworkFailure(FeedError):
    """The request could not be completed."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason or "Could not load jobs from API. Please try again.")


class StatusFailure(FeedError):
    """The jobs endpoint answered with a non-success status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Request failed with status {status_code}")


class ShapeFailure(FeedError):
    """The payload was neither a list nor an object with a ``jobs`` list."""

    def __init__(self, message: str = "Invalid jobs response format. Expected an array.") -> None:
        super().__init__(message)

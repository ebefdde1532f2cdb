"""Base classes for job sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import SourceResponse


class JobSource(ABC):
    """Abstract base class for a job source."""

    name: str

    @property
    @abstractmethod
    def location(self) -> str:
        """Where jobs are read from; shown in diagnostics."""
        raise NotImplementedError

    @abstractmethod
    async def fetch(self) -> SourceResponse:
        """Fetch the raw jobs payload.

        Raises:
            NetworkFailure: if the request could not be completed.
        """
        raise NotImplementedError

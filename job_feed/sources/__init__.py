"""Job sources: the remote jobs endpoint and the bundled seed dataset."""

from .base import JobSource
from .http import HttpJobSource
from .seed import SeedJobSource

__all__ = ["JobSource", "HttpJobSource", "SeedJobSource"]

"""Bounded, append-only log of acquisition steps.

The log backs the "debug checklist" surface: each entry is one step of an
acquisition cycle tagged ``info``, ``success`` or ``error``. Only the most recent
``capacity`` entries are retained; the oldest are evicted first.

Entries are also mirrored to the ``job_feed.diagnostics`` logger.
"""

from __future__ import annotations

import itertools
import logging
from collections import deque
from datetime import datetime, timezone
from typing import Callable, Deque, List, Optional

from .models import DiagnosticEntry, Severity


log = logging.getLogger("job_feed.diagnostics")

DEFAULT_CAPACITY = 40

_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "error": logging.WARNING,
}


class DiagnosticsLog:
    """Ring buffer of :class:`DiagnosticEntry`, oldest first."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._entries: Deque[DiagnosticEntry] = deque(maxlen=capacity)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._seq = itertools.count(1)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    @property
    def entries(self) -> List[DiagnosticEntry]:
        """Snapshot of retained entries, most recent last."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, message: str, severity: Severity = "info") -> DiagnosticEntry:
        ts = self._clock()
        entry = DiagnosticEntry(
            id=f"{int(ts.timestamp() * 1000)}-{next(self._seq)}",
            timestamp=ts,
            message=message,
            severity=severity,
        )
        self._entries.append(entry)
        log.log(_LEVELS[severity], "[%s] %s", severity, message)
        return entry

    def info(self, message: str) -> DiagnosticEntry:
        return self.add(message, "info")

    def success(self, message: str) -> DiagnosticEntry:
        return self.add(message, "success")

    def error(self, message: str) -> DiagnosticEntry:
        return self.add(message, "error")

    def status(self, message: str, ok: bool) -> DiagnosticEntry:
        """Log a step outcome as ``success`` or ``error``."""
        return self.add(message, "success" if ok else "error")

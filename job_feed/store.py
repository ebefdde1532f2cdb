"""Feed state: the last snapshot, loading/error flags, bookmarks and selection.

The store is the single owner of bookmark and expand-selection identity. The
snapshot is replaced wholesale by the controller; bookmarks and selection are
only changed by user action and survive snapshot replacement.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .models import JobRecord, ListContext


log = logging.getLogger("job_feed.store")

CONTEXTS: Tuple[ListContext, ...] = ("all", "bookmarked")


class FeedStore:
    """In-memory feed state and its derived views."""

    def __init__(self, is_loading: bool = True) -> None:
        self._snapshot: Tuple[JobRecord, ...] = ()
        self._bookmarks: Dict[str, None] = {}
        self._selected: Dict[str, Optional[str]] = {ctx: None for ctx in CONTEXTS}
        self.is_loading = is_loading
        self.error_message = ""

    # -- snapshot ---------------------------------------------------------

    @property
    def snapshot(self) -> Tuple[JobRecord, ...]:
        return self._snapshot

    @property
    def sorted_jobs(self) -> List[JobRecord]:
        """Snapshot ordered by ``posted_days_ago`` ascending; ties keep payload order."""
        return sorted(self._snapshot, key=lambda j: j.posted_days_ago)

    @property
    def bookmarked_jobs(self) -> List[JobRecord]:
        return [j for j in self.sorted_jobs if j.id in self._bookmarks]

    def find(self, job_id: str) -> Optional[JobRecord]:
        for job in self._snapshot:
            if job.id == job_id:
                return job
        return None

    @property
    def view_state(self) -> Optional[str]:
        """What the "all jobs" list shows in place of cards, or ``None`` when it has jobs."""
        if self._snapshot:
            return None
        if self.is_loading:
            return "loading"
        if self.error_message:
            return "error"
        return "empty"

    # -- controller-facing ------------------------------------------------

    def begin_loading(self) -> None:
        self.is_loading = True
        self.error_message = ""

    def replace_snapshot(self, jobs: Sequence[JobRecord]) -> None:
        self._snapshot = tuple(jobs)
        self.error_message = ""

    def fail(self, message: str) -> None:
        self._snapshot = ()
        self.error_message = message

    def finish_loading(self) -> None:
        self.is_loading = False

    # -- bookmarks --------------------------------------------------------

    @property
    def bookmark_set(self) -> FrozenSet[str]:
        return frozenset(self._bookmarks)

    @property
    def bookmark_count(self) -> int:
        return len(self._bookmarks)

    def is_bookmarked(self, job_id: str) -> bool:
        return job_id in self._bookmarks

    def toggle_bookmark(self, job_id: str) -> bool:
        """Add or remove ``job_id``; returns whether it is bookmarked afterwards."""
        if job_id in self._bookmarks:
            del self._bookmarks[job_id]
            return False
        self._bookmarks[job_id] = None
        return True

    # -- selection --------------------------------------------------------

    def _check_context(self, context: str) -> None:
        if context not in self._selected:
            raise ValueError(f"Unknown list context: '{context}'")

    def selected(self, context: ListContext) -> Optional[str]:
        self._check_context(context)
        return self._selected[context]

    def set_selected(self, context: ListContext, job_id: str) -> Optional[str]:
        """Expand ``job_id`` in ``context``, or collapse it if it is already expanded."""
        self._check_context(context)
        current = self._selected[context]
        self._selected[context] = None if current == job_id else job_id
        log.debug("selection[%s]: %s -> %s", context, current, self._selected[context])
        return self._selected[context]

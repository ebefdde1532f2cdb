"""A feed session: source, controller, scheduler and store wired together.

Typical use::

    async with FeedSession(FeedSettings.from_env()) as session:
        ...
        session.store.sorted_jobs

Entering the session starts polling (one cycle immediately, then every
interval); leaving it stops the timer, lets an in-flight cycle commit, and
closes the HTTP client if the session created it.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import FeedSettings
from .controller import AcquisitionController
from .diagnostics import DiagnosticsLog
from .models import CycleResult
from .scheduler import PollingScheduler
from .sources import HttpJobSource, JobSource, SeedJobSource
from .store import FeedStore


log = logging.getLogger("job_feed.session")


class FeedSession:
    """Owns the lifecycle of one job feed."""

    def __init__(
        self,
        settings: Optional[FeedSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
        source: Optional[JobSource] = None,
    ) -> None:
        self.settings = settings or FeedSettings()
        self._owns_client = False

        if source is None and self.settings.api_base_url:
            if client is None:
                client = httpx.AsyncClient(timeout=self.settings.request_timeout_s, follow_redirects=True)
                self._owns_client = True
            source = HttpJobSource(self.settings.api_base_url, client)
        elif source is None:
            source = SeedJobSource()

        self._client = client
        self.source = source
        self.store = FeedStore()
        self.diagnostics = DiagnosticsLog(capacity=self.settings.diagnostics_capacity)
        self.controller = AcquisitionController(
            source=source,
            store=self.store,
            diagnostics=self.diagnostics,
            client=client,
            probes=self.settings.probes() if isinstance(source, HttpJobSource) else (),
        )
        self.scheduler = PollingScheduler(self.controller.run_cycle, self.settings.poll_interval_s)

    @property
    def is_active(self) -> bool:
        return self.scheduler.is_active

    def start(self) -> None:
        """Begin polling. A second call while active does nothing."""
        if self.scheduler.is_active:
            return
        self.diagnostics.info(
            f"Debug runner started. Auto-retry every {self.settings.poll_interval_s:g}s. "
            f"API base: {self.settings.api_base_url or self.source.location}"
        )
        self.scheduler.start()

    async def stop(self) -> None:
        """Stop polling and wait for an in-flight cycle to commit."""
        self.scheduler.stop()
        await self.scheduler.wait_idle()

    async def aclose(self) -> None:
        await self.stop()
        if self._owns_client and self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> "FeedSession":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def retry(self) -> CycleResult:
        """Run a cycle now; skipped if one is already in progress."""
        return await self.controller.run_cycle()

    def apply(self, job_id: str) -> Optional[str]:
        """Acknowledge an application to a job in the current snapshot."""
        job = self.store.find(job_id)
        if job is None:
            log.info("apply: no job with id %s in the current snapshot", job_id)
            return None
        return f"You are applying for {job.title}."

"""Acquisition controller: one fetch cycle from probes to committed state.

A cycle runs these steps strictly in sequence, each recorded in the diagnostics
log:

1. advisory reachability probes (backend health, internet connectivity),
2. the jobs request,
3. payload validation and normalization,
4. commit to the store (new snapshot, or cleared snapshot plus error message).

Probe failures never abort the cycle. At most one cycle runs at a time: a call
made while one is outstanding returns ``skipped`` without touching anything.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional, Sequence

import httpx

from .diagnostics import DiagnosticsLog
from .errors import FeedError, NetworkFailure, ShapeFailure, StatusFailure
from .models import CycleResult, Probe
from .normalize import normalize_jobs
from .sources.base import JobSource
from .sources.http import probe_status
from .store import FeedStore


log = logging.getLogger("job_feed.controller")

SHAPE_MISMATCH = "Payload shape mismatch (expected array or { jobs: [] })"


def extract_records(payload: Any) -> List[Any]:
    """Accept exactly two shapes: a list, or a mapping whose ``jobs`` is a list."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("jobs"), list):
        return payload["jobs"]
    raise ShapeFailure()


class AcquisitionController:
    """Run acquisition cycles against a :class:`JobSource`."""

    def __init__(
        self,
        source: JobSource,
        store: FeedStore,
        diagnostics: DiagnosticsLog,
        client: Optional[httpx.AsyncClient] = None,
        probes: Sequence[Probe] = (),
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if probes and client is None:
            raise ValueError("probes need an HTTP client")
        self._source = source
        self._store = store
        self._diagnostics = diagnostics
        self._client = client
        self._probes = list(probes)
        self._clock = clock
        self._in_progress = False

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    async def run_cycle(self) -> CycleResult:
        if self._in_progress:
            log.debug("cycle already in progress; skipping")
            return CycleResult(status="skipped")

        # Set before the first await so a concurrent caller sees it.
        self._in_progress = True
        try:
            return await self._cycle()
        finally:
            self._store.finish_loading()
            self._in_progress = False

    async def _cycle(self) -> CycleResult:
        diag = self._diagnostics
        self._store.begin_loading()
        diag.info(f"Trying API: {self._source.location}")

        for probe in self._probes:
            await self._run_probe(probe)

        try:
            records = await self._fetch_records()
        except FeedError as exc:
            message = str(exc)
            self._store.fail(message)
            diag.error(f"Fetch failed: {message}")
            log.warning("acquisition failed (%s): %s", exc.__class__.__name__, message)
            return CycleResult(status="failed", error=message)

        now = self._clock() if self._clock else None
        jobs = normalize_jobs(records, now)
        self._store.replace_snapshot(jobs)
        diag.success(f"Loaded {len(jobs)} jobs")
        log.info("loaded %d jobs from %s", len(jobs), self._source.location)
        return CycleResult(status="loaded", job_count=len(jobs))

    async def _run_probe(self, probe: Probe) -> None:
        diag = self._diagnostics
        diag.info(f"Checking {probe.label}: {probe.url}")
        try:
            status = await probe_status(self._client, probe.url)
        except NetworkFailure as exc:
            diag.error(f"{probe.label.capitalize()} check failed: {exc}")
            return
        diag.status(f"{probe.status_prefix} {status}", 200 <= status < 300)

    async def _fetch_records(self) -> List[Any]:
        diag = self._diagnostics
        diag.info(f"Fetching jobs from {self._source.location}")
        resp = await self._source.fetch()

        if resp.status_code is not None:
            diag.status(f"Jobs endpoint status {resp.status_code}", resp.ok)
        if not resp.ok:
            raise StatusFailure(resp.status_code or 0)
        if resp.decode_error is not None:
            diag.error(SHAPE_MISMATCH)
            raise ShapeFailure(f"Response body is not valid JSON: {resp.decode_error}")

        try:
            return extract_records(resp.payload)
        except ShapeFailure:
            diag.error(SHAPE_MISMATCH)
            raise

"""Remote jobs endpoint.

``GET <base>/jobs`` answers either a JSON array of raw job objects or an object
``{"jobs": [...]}``. This connector only transports; validating the shape is
the controller's job.
"""

from __future__ import annotations

import logging

import httpx

from ..errors import NetworkFailure
from ..models import SourceResponse
from .base import JobSource


log = logging.getLogger("job_feed.sources.http")


def _reason(exc: httpx.HTTPError) -> str:
    return str(exc) or exc.__class__.__name__


async def probe_status(client: httpx.AsyncClient, url: str) -> int:
    """GET ``url`` and return the status code; the body is ignored."""
    try:
        resp = await client.get(url)
    except httpx.HTTPError as exc:
        log.debug("probe %s failed: %r", url, exc)
        raise NetworkFailure(_reason(exc)) from exc
    return resp.status_code


class HttpJobSource(JobSource):
    """Fetch the jobs payload from ``<base_url>/jobs``."""

    name = "http"

    def __init__(self, base_url: str, client: httpx.AsyncClient) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client

    @property
    def health_url(self) -> str:
        return f"{self.base_url}/"

    @property
    def location(self) -> str:
        return f"{self.base_url}/jobs"

    async def fetch(self) -> SourceResponse:
        try:
            resp = await self._client.get(self.location)
        except httpx.HTTPError as exc:
            log.debug("GET %s failed: %r", self.location, exc)
            raise NetworkFailure(_reason(exc)) from exc

        if not resp.is_success:
            return SourceResponse(status_code=resp.status_code, ok=False)

        try:
            payload = resp.json()
        except ValueError as exc:
            return SourceResponse(status_code=resp.status_code, decode_error=str(exc))

        return SourceResponse(status_code=resp.status_code, payload=payload)

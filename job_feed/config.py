"""Settings for a feed session.

Values come from the process environment; a ``.env`` file in the working
directory is loaded first (existing variables win).

    JOBS_API_BASE_URL            base of the jobs API; unset -> seed dataset
    JOBS_POLL_INTERVAL_MS        polling interval (default 2000)
    JOBS_REQUEST_TIMEOUT_SECS    per-request timeout (default 10)
    JOBS_HEALTH_PROBE_ENABLED    probe GET <base>/ before each fetch (default true)
    JOBS_CONNECTIVITY_PROBE_URL  internet probe URL; empty disables
    JOBS_DIAGNOSTICS_CAPACITY    diagnostics entries kept (default 40)
"""

from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .models import Probe


DEFAULT_CONNECTIVITY_PROBE_URL = "https://clients3.google.com/generate_204"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: str, cast=float):
    raw = (os.getenv(name) or "").strip() or default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


class FeedSettings(BaseModel):
    """Resolved configuration of one feed session."""

    api_base_url: Optional[str] = None
    poll_interval_ms: int = Field(default=2000, gt=0)
    request_timeout_s: float = Field(default=10.0, gt=0)
    health_probe: bool = True
    connectivity_probe_url: Optional[str] = DEFAULT_CONNECTIVITY_PROBE_URL
    diagnostics_capacity: int = Field(default=40, ge=1)

    @field_validator("api_base_url", "connectivity_probe_url")
    @classmethod
    def _blank_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("api_base_url")
    @classmethod
    def _strip_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else v

    @property
    def poll_interval_s(self) -> float:
        return self.poll_interval_ms / 1000.0

    def probes(self) -> List[Probe]:
        """Advisory probes for an HTTP source, in the order they run."""
        if not self.api_base_url:
            return []
        out: List[Probe] = []
        if self.health_probe:
            out.append(Probe(
                label="backend health",
                url=f"{self.api_base_url}/",
                status_prefix="Backend health returned status",
            ))
        if self.connectivity_probe_url:
            out.append(Probe(
                label="internet path",
                url=self.connectivity_probe_url,
                status_prefix="Google connectivity status",
            ))
        return out

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "FeedSettings":
        if dotenv:
            load_dotenv()
        return cls(
            api_base_url=os.getenv("JOBS_API_BASE_URL"),
            poll_interval_ms=_env_number("JOBS_POLL_INTERVAL_MS", "2000", int),
            request_timeout_s=_env_number("JOBS_REQUEST_TIMEOUT_SECS", "10"),
            health_probe=_env_bool("JOBS_HEALTH_PROBE_ENABLED", True),
            connectivity_probe_url=os.getenv("JOBS_CONNECTIVITY_PROBE_URL", DEFAULT_CONNECTIVITY_PROBE_URL),
            diagnostics_capacity=_env_number("JOBS_DIAGNOSTICS_CAPACITY", "40", int),
        )

"""Data models for the job feed.

The presentation layer consumes a *canonical* record regardless of how partial
the upstream payload was. Attribute names are snake_case; serialized names are
camelCase so a dumped record matches the wire shape of the jobs endpoint.

This file uses Pydantic v2.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Severity = Literal["info", "success", "error"]

ListContext = Literal["all", "bookmarked"]

CycleStatus = Literal["loaded", "failed", "skipped"]


class JobRecord(BaseModel):
    """A normalized job record.

    Every field is always present after normalization; the sequence fields are
    never empty.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    title: str
    company: str
    salary: str
    deadline: str
    posted_days_ago: int = Field(..., ge=0)
    location: str
    employment_type: str
    level: str
    description: str
    responsibilities: List[str] = Field(..., min_length=1)
    requirements: List[str] = Field(..., min_length=1)


class DiagnosticEntry(BaseModel):
    """One timestamped line of the diagnostics checklist. Never mutated."""

    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: datetime
    message: str
    severity: Severity = "info"

    @property
    def marker(self) -> str:
        if self.severity == "error":
            return "❌"
        if self.severity == "success":
            return "✅"
        return "•"

    @property
    def stamp(self) -> str:
        """Local wall-clock time of the entry, e.g. ``14:03:27``."""
        return self.timestamp.astimezone().strftime("%H:%M:%S")


class CycleResult(BaseModel):
    """Outcome of one acquisition cycle."""

    status: CycleStatus
    job_count: int = 0
    error: Optional[str] = None


class SourceResponse(BaseModel):
    """What a job source handed back before validation.

    ``status_code`` is ``None`` for sources that are not backed by HTTP.
    ``payload`` is only populated for successful responses.
    """

    status_code: Optional[int] = None
    ok: bool = True
    payload: Any = None
    decode_error: Optional[str] = Field(
        default=None,
        description="Set when the body of a successful response was not valid JSON.",
    )


class Probe(BaseModel):
    """An advisory reachability check run before the jobs request."""

    label: str = Field(..., description="What is being checked, e.g. 'backend health'.")
    url: str
    status_prefix: str = Field(..., description="Leads the status line, e.g. 'Backend health returned status'.")

"""Bundled seed dataset, used when no remote jobs endpoint is configured."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from ..models import SourceResponse
from .base import JobSource


SEED_JOBS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Senior Frontend Engineer",
        "company": "Apex Digital Labs",
        "salary": "$110,000 - $135,000 / year",
        "deadline": "May 30, 2026",
        "postedDaysAgo": 2,
        "location": "Remote (US)",
        "employmentType": "Full-time",
        "level": "Senior",
        "description": (
            "Build modern, accessible user interfaces with React Native and web technologies. "
            "Collaborate with product and design to ship high-impact features every sprint."
        ),
        "responsibilities": [
            "Lead implementation of scalable mobile and web UI architecture.",
            "Optimize rendering performance and improve app startup time.",
            "Mentor mid-level engineers and enforce code quality standards.",
        ],
        "requirements": [
            "5+ years of frontend engineering experience.",
            "Strong React or React Native development skills.",
            "Experience with performance profiling and state management.",
        ],
    },
    {
        "id": "2",
        "title": "Product Designer",
        "company": "Northstar Works",
        "salary": "$85,000 - $105,000 / year",
        "deadline": "May 22, 2026",
        "postedDaysAgo": 1,
        "location": "Lagos, Nigeria",
        "employmentType": "Hybrid",
        "level": "Mid-level",
        "description": (
            "Design intuitive user journeys across job discovery and application experiences. "
            "Turn customer interviews into clear, testable design improvements."
        ),
        "responsibilities": [
            "Create wireframes and high-fidelity prototypes for mobile flows.",
            "Work with engineers to maintain design system consistency.",
            "Run usability tests and iterate using user feedback.",
        ],
        "requirements": [
            "Portfolio showing end-to-end product design work.",
            "Proficiency in Figma and interaction design.",
            "Ability to communicate design rationale clearly.",
        ],
    },
    {
        "id": "3",
        "title": "Data Analyst",
        "company": "TalentGrid",
        "salary": "$70,000 - $92,000 / year",
        "deadline": "Jun 5, 2026",
        "postedDaysAgo": 4,
        "location": "Nairobi, Kenya",
        "employmentType": "Full-time",
        "level": "Associate",
        "description": (
            "Help improve job matching by analyzing hiring funnel metrics. "
            "Build dashboards and deliver insights that guide product and operations decisions."
        ),
        "responsibilities": [
            "Build weekly analytics reports for recruitment KPIs.",
            "Clean and model datasets for product experiments.",
            "Collaborate with stakeholders to define measurable goals.",
        ],
        "requirements": [
            "2+ years of analytics experience.",
            "Strong SQL and spreadsheet skills.",
            "Experience with BI tools such as Tableau or Power BI.",
        ],
    },
    {
        "id": "4",
        "title": "Mobile QA Engineer",
        "company": "PixelForge Systems",
        "salary": "$62,000 - $80,000 / year",
        "deadline": "May 27, 2026",
        "postedDaysAgo": 3,
        "location": "Remote (EU)",
        "employmentType": "Contract",
        "level": "Mid-level",
        "description": (
            "Ensure high-quality releases for Android and iOS job-app experiences. "
            "Define robust test plans and automate critical workflows."
        ),
        "responsibilities": [
            "Design and execute regression tests for new features.",
            "Automate smoke tests for release candidates.",
            "Track, triage, and verify bug fixes quickly.",
        ],
        "requirements": [
            "Hands-on mobile testing experience.",
            "Knowledge of test automation frameworks.",
            "Excellent communication and bug-reporting quality.",
        ],
    },
]


class SeedJobSource(JobSource):
    """Serve a fixed list of raw jobs (defaults to :data:`SEED_JOBS`)."""

    name = "seed"

    def __init__(self, jobs: Optional[List[Dict[str, Any]]] = None) -> None:
        self._jobs = SEED_JOBS if jobs is None else jobs

    @property
    def location(self) -> str:
        return "bundled seed dataset"

    async def fetch(self) -> SourceResponse:
        return SourceResponse(payload=copy.deepcopy(self._jobs))

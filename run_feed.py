"""CLI entry point.

This script runs a feed session for a while, then prints the diagnostics
checklist and the jobs it ended up with (most recent postings first).

Examples:
    python run_feed.py
    python run_feed.py --base-url http://192.168.1.50:5000 --duration 10
    python run_feed.py --base-url http://localhost:5000 --no-connectivity-probe --out jobs.json

Without --base-url (or JOBS_API_BASE_URL) the bundled seed dataset is used.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path

from job_feed.config import FeedSettings
from job_feed.session import FeedSession


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Poll a jobs endpoint and show the normalized feed.")
    p.add_argument("--base-url", type=str, default=None, help="Jobs API base URL (overrides JOBS_API_BASE_URL).")
    p.add_argument("--duration", type=float, default=5.0, help="Seconds to keep polling.")
    p.add_argument("--out", type=str, default=None, help="Optional JSON file for the sorted jobs.")
    p.add_argument("--no-health-probe", action="store_true", help="Skip the GET <base>/ probe.")
    p.add_argument("--no-connectivity-probe", action="store_true", help="Skip the internet probe.")
    p.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    return p.parse_args()


def build_settings(args: argparse.Namespace) -> FeedSettings:
    settings = FeedSettings.from_env()
    updates = {}
    if args.base_url:
        updates["api_base_url"] = args.base_url.rstrip("/")
    if args.no_health_probe:
        updates["health_probe"] = False
    if args.no_connectivity_probe:
        updates["connectivity_probe_url"] = None
    return settings.model_copy(update=updates)


async def run(args: argparse.Namespace) -> FeedSession:
    async with FeedSession(build_settings(args)) as session:
        await asyncio.sleep(max(args.duration, 0))
    return session


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    session = asyncio.run(run(args))
    store = session.store

    print("Live Debug Checklist")
    for entry in session.diagnostics.entries:
        print(f"{entry.marker} [{entry.stamp}] {entry.message}")
    print()

    if store.view_state == "error":
        print(f"Could not load jobs: {store.error_message}")
    elif store.view_state is not None:
        print("No jobs available right now.")
    for job in store.sorted_jobs:
        days = job.posted_days_ago
        print(f"- {job.title} @ {job.company} | {job.salary} | {days} day{'' if days == 1 else 's'} ago")

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        # by_alias: camelCase keys, matching the jobs endpoint
        data = [j.model_dump(by_alias=True) for j in store.sorted_jobs]
        out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Wrote {len(data)} jobs to: {out_path}")


if __name__ == "__main__":
    main()

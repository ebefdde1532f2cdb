import asyncio

import httpx

from job_feed.config import FeedSettings
from job_feed.session import FeedSession
from job_feed.sources import HttpJobSource, SeedJobSource


API = "http://api.test"


def test_seed_session_without_base_url():
    async def go():
        async with FeedSession(FeedSettings(poll_interval_ms=60_000)) as session:
            assert session.is_active
            await session.scheduler.wait_idle()
        return session

    session = asyncio.run(go())
    assert isinstance(session.source, SeedJobSource)
    assert not session.is_active
    assert [j.id for j in session.store.sorted_jobs] == ["2", "1", "4", "3"]
    assert session.store.is_loading is False
    assert session.diagnostics.entries[0].message.startswith("Debug runner started. Auto-retry every 60s.")


def test_apply_acknowledges_known_jobs_only():
    async def go():
        session = FeedSession()
        await session.retry()
        return session

    session = asyncio.run(go())
    assert session.apply("2") == "You are applying for Product Designer."
    assert session.apply("missing") is None


def test_http_session_runs_probes_and_keeps_injected_client(mock_client):
    client = mock_client({
        f"{API}/": httpx.Response(200),
        f"{API}/jobs": httpx.Response(200, json={"jobs": [{"id": "9", "title": "QA"}]}),
    })
    settings = FeedSettings(api_base_url=f"{API}/", connectivity_probe_url=None, poll_interval_ms=60_000)

    async def go():
        async with FeedSession(settings, client=client) as session:
            await session.scheduler.wait_idle()
        assert not client.is_closed
        await client.aclose()
        return session

    session = asyncio.run(go())
    assert isinstance(session.source, HttpJobSource)
    assert client.seen == [f"{API}/", f"{API}/jobs"]
    assert [j.title for j in session.store.sorted_jobs] == ["QA"]


def test_retry_after_failure(mock_client):
    answers = iter([httpx.Response(500), httpx.Response(200, json=[{"id": "1"}])])
    client = mock_client({f"{API}/jobs": lambda request: next(answers)})
    settings = FeedSettings(api_base_url=API, health_probe=False, connectivity_probe_url=None)

    async def go():
        session = FeedSession(settings, client=client)
        first = await session.retry()
        assert session.store.view_state == "error"
        second = await session.retry()
        await client.aclose()
        return session, first, second

    session, first, second = asyncio.run(go())
    assert (first.status, second.status) == ("failed", "loaded")
    assert session.store.error_message == ""
    assert len(session.store.snapshot) == 1


def test_owned_client_is_closed_on_exit():
    settings = FeedSettings(api_base_url=API, poll_interval_ms=60_000)

    async def go():
        session = FeedSession(settings)
        await session.aclose()
        return session

    session = asyncio.run(go())
    assert session._client.is_closed

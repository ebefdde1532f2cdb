import pytest

from job_feed.config import DEFAULT_CONNECTIVITY_PROBE_URL, FeedSettings


ENV_VARS = (
    "JOBS_API_BASE_URL",
    "JOBS_POLL_INTERVAL_MS",
    "JOBS_REQUEST_TIMEOUT_SECS",
    "JOBS_HEALTH_PROBE_ENABLED",
    "JOBS_CONNECTIVITY_PROBE_URL",
    "JOBS_DIAGNOSTICS_CAPACITY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = FeedSettings.from_env(dotenv=False)
    assert s.api_base_url is None
    assert s.poll_interval_ms == 2000
    assert s.poll_interval_s == 2.0
    assert s.request_timeout_s == 10.0
    assert s.health_probe is True
    assert s.connectivity_probe_url == DEFAULT_CONNECTIVITY_PROBE_URL
    assert s.diagnostics_capacity == 40
    assert s.probes() == []


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("JOBS_API_BASE_URL", " http://192.168.1.50:5000/ ")
    monkeypatch.setenv("JOBS_POLL_INTERVAL_MS", "500")
    monkeypatch.setenv("JOBS_REQUEST_TIMEOUT_SECS", "2.5")
    monkeypatch.setenv("JOBS_HEALTH_PROBE_ENABLED", "false")
    monkeypatch.setenv("JOBS_CONNECTIVITY_PROBE_URL", "")

    s = FeedSettings.from_env(dotenv=False)
    assert s.api_base_url == "http://192.168.1.50:5000"
    assert s.poll_interval_s == 0.5
    assert s.request_timeout_s == 2.5
    assert s.health_probe is False
    assert s.connectivity_probe_url is None
    assert s.probes() == []


def test_probes_in_order():
    s = FeedSettings(api_base_url="http://api.test")
    assert [(p.label, p.url, p.status_prefix) for p in s.probes()] == [
        ("backend health", "http://api.test/", "Backend health returned status"),
        ("internet path", DEFAULT_CONNECTIVITY_PROBE_URL, "Google connectivity status"),
    ]


def test_bad_numbers_raise(monkeypatch):
    monkeypatch.setenv("JOBS_POLL_INTERVAL_MS", "soon")
    with pytest.raises(ValueError, match="JOBS_POLL_INTERVAL_MS"):
        FeedSettings.from_env(dotenv=False)


def test_non_positive_interval_is_rejected(monkeypatch):
    monkeypatch.setenv("JOBS_POLL_INTERVAL_MS", "0")
    with pytest.raises(ValueError):
        FeedSettings.from_env(dotenv=False)

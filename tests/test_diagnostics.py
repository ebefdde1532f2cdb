import logging
from datetime import datetime, timezone

import pytest

from job_feed.diagnostics import DiagnosticsLog


def test_keeps_only_most_recent_40():
    diag = DiagnosticsLog()
    for i in range(45):
        diag.info(f"event {i}")

    messages = [e.message for e in diag.entries]
    assert len(messages) == 40
    assert messages[0] == "event 5"
    assert messages[-1] == "event 44"


def test_severity_helpers():
    diag = DiagnosticsLog()
    diag.info("a")
    diag.success("b")
    diag.error("c")
    diag.status("d", ok=True)
    diag.status("e", ok=False)
    assert [e.severity for e in diag.entries] == ["info", "success", "error", "success", "error"]
    assert [e.marker for e in diag.entries][:3] == ["•", "✅", "❌"]


def test_entries_have_unique_ids_and_clock_timestamps():
    fixed = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    diag = DiagnosticsLog(clock=lambda: fixed)
    a = diag.info("first")
    b = diag.info("second")
    assert a.id != b.id
    assert a.timestamp == fixed


def test_entries_is_a_copy():
    diag = DiagnosticsLog(capacity=2)
    diag.info("x")
    entries = diag.entries
    entries.clear()
    assert len(diag) == 1


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        DiagnosticsLog(capacity=0)


def test_mirrors_to_logging(caplog):
    diag = DiagnosticsLog()
    with caplog.at_level(logging.INFO, logger="job_feed.diagnostics"):
        diag.error("Fetch failed: boom")
    assert any(r.levelno == logging.WARNING and "Fetch failed: boom" in r.getMessage() for r in caplog.records)

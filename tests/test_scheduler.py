import asyncio

import pytest

from job_feed.scheduler import PollingScheduler


def test_first_tick_is_immediate_then_repeats():
    calls = []

    async def tick():
        calls.append(1)

    async def go():
        scheduler = PollingScheduler(tick, interval_s=0.01)
        scheduler.start()
        await asyncio.sleep(0)
        assert len(calls) == 1
        await asyncio.sleep(0.055)
        scheduler.stop()
        await scheduler.wait_idle()

    asyncio.run(go())
    assert len(calls) >= 3


def test_start_twice_keeps_a_single_timer():
    calls = []

    async def tick():
        calls.append(1)

    async def go():
        scheduler = PollingScheduler(tick, interval_s=10)
        scheduler.start()
        scheduler.start()
        await asyncio.sleep(0)
        assert scheduler.is_active
        scheduler.stop()
        await scheduler.wait_idle()

    asyncio.run(go())
    assert calls == [1]


def test_stop_lets_in_flight_tick_finish():
    finished = []

    async def go():
        gate = asyncio.Event()

        async def tick():
            await gate.wait()
            finished.append(True)

        scheduler = PollingScheduler(tick, interval_s=10)
        scheduler.start()
        await asyncio.sleep(0)
        scheduler.stop()
        assert not scheduler.is_active

        gate.set()
        await scheduler.wait_idle()

    asyncio.run(go())
    assert finished == [True]


def test_restart_after_stop():
    calls = []

    async def tick():
        calls.append(1)

    async def go():
        scheduler = PollingScheduler(tick, interval_s=10)
        scheduler.start()
        scheduler.stop()
        scheduler.start()
        assert scheduler.is_active
        scheduler.stop()
        await scheduler.wait_idle()

    asyncio.run(go())
    assert len(calls) == 2


def test_failing_tick_does_not_stop_polling():
    calls = []

    async def tick():
        calls.append(1)
        raise RuntimeError("boom")

    async def go():
        scheduler = PollingScheduler(tick, interval_s=0.01)
        scheduler.start()
        await asyncio.sleep(0.035)
        assert scheduler.is_active
        scheduler.stop()
        await scheduler.wait_idle()

    asyncio.run(go())
    assert len(calls) >= 2


def test_start_needs_a_running_loop():
    async def tick():
        pass

    with pytest.raises(RuntimeError):
        PollingScheduler(tick).start()


def test_interval_must_be_positive():
    async def tick():
        pass

    with pytest.raises(ValueError):
        PollingScheduler(tick, interval_s=0)

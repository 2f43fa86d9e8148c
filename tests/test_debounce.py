"""Tests for the asyncio debouncer."""

import asyncio

import pytest

from core.services.debounce import Debouncer


def test_only_the_latest_callback_runs():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.01)
        debouncer.schedule(lambda: calls.append("first"))
        debouncer.schedule(lambda: calls.append("second"))
        debouncer.schedule(lambda: calls.append("third"))
        await asyncio.sleep(0.1)
        return debouncer

    debouncer = asyncio.run(scenario())

    assert calls == ["third"]
    assert debouncer.generation == 3
    assert not debouncer.pending


def test_callbacks_separated_by_quiet_periods_all_run():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.01)
        debouncer.schedule(lambda: calls.append(1))
        await asyncio.sleep(0.1)
        debouncer.schedule(lambda: calls.append(2))
        await asyncio.sleep(0.1)

    asyncio.run(scenario())

    assert calls == [1, 2]


def test_cancel_drops_pending_callback():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.01)
        debouncer.schedule(lambda: calls.append("x"))
        debouncer.cancel()
        assert not debouncer.pending
        await asyncio.sleep(0.1)

    asyncio.run(scenario())

    assert calls == []


def test_flush_runs_pending_callback_now():
    calls = []

    async def scenario():
        debouncer = Debouncer(10)
        debouncer.schedule(lambda: calls.append("now"))
        assert debouncer.flush() is True
        assert debouncer.flush() is False
        assert not debouncer.pending

    asyncio.run(scenario())

    assert calls == ["now"]


def test_stale_generation_is_discarded():
    calls = []

    async def scenario():
        debouncer = Debouncer(10)
        first = debouncer.schedule(lambda: calls.append("old"))
        debouncer.schedule(lambda: calls.append("new"))
        # A superseded timer firing late must not run anything.
        assert debouncer._fire(first) is False
        debouncer.cancel()

    asyncio.run(scenario())

    assert calls == []


def test_schedule_needs_a_running_loop():
    debouncer = Debouncer(0.01)

    with pytest.raises(RuntimeError):
        debouncer.schedule(lambda: None)


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        Debouncer(-1)

"""Tests for the TickScheduler."""

from __future__ import annotations

import asyncio

import pytest

from pomotodo.utils.ticker import TickScheduler

INTERVAL = 0.01


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.mark.asyncio
async def test_start_ticks_repeatedly():
    counter = Counter()
    ticker = TickScheduler(counter, interval=INTERVAL)

    ticker.start()
    await asyncio.sleep(INTERVAL * 10)
    await ticker.close()

    assert counter.calls >= 3


@pytest.mark.asyncio
async def test_no_tick_before_first_interval():
    counter = Counter()
    ticker = TickScheduler(counter, interval=10)

    ticker.start()
    await asyncio.sleep(0)
    await ticker.close()

    assert counter.calls == 0


@pytest.mark.asyncio
async def test_start_twice_keeps_one_schedule():
    ticker = TickScheduler(Counter(), interval=INTERVAL)

    ticker.start()
    first = ticker._task
    ticker.start()

    assert ticker._task is first
    await ticker.close()


@pytest.mark.asyncio
async def test_cancel_stops_ticking():
    counter = Counter()
    ticker = TickScheduler(counter, interval=INTERVAL)

    ticker.start()
    await asyncio.sleep(INTERVAL * 5)
    ticker.cancel()
    await asyncio.sleep(0)
    calls = counter.calls
    await asyncio.sleep(INTERVAL * 5)

    assert ticker.active is False
    assert counter.calls == calls


@pytest.mark.asyncio
async def test_sync_follows_running_flag():
    ticker = TickScheduler(Counter(), interval=INTERVAL)

    ticker.sync(True)
    assert ticker.active is True

    ticker.sync(False)
    assert ticker.active is False

    ticker.sync(False)
    assert ticker.active is False


@pytest.mark.asyncio
async def test_close_is_safe_without_schedule():
    ticker = TickScheduler(Counter(), interval=INTERVAL)

    await ticker.close()

    assert ticker.active is False


def test_start_requires_running_loop():
    ticker = TickScheduler(Counter())

    with pytest.raises(RuntimeError):
        ticker.start()


@pytest.mark.asyncio
async def test_failing_tick_is_logged_and_ticking_continues(mocker):
    log = mocker.patch("pomotodo.utils.ticker.logger")
    calls = []

    def flaky():
        calls.append(None)
        if len(calls) == 1:
            raise LookupError("widget gone")

    ticker = TickScheduler(flaky, interval=INTERVAL)

    ticker.start()
    await asyncio.sleep(INTERVAL * 10)

    assert ticker.active is True
    await ticker.close()
    assert len(calls) >= 3
    log.exception.assert_called_once_with("tick callback failed")

"""
Tests for the cancellable timer schedulers.

Run with: python -m pytest tests/test_timers.py -v
"""

import asyncio

from logic.search_input import SearchInput
from logic.timers import AsyncioScheduler, ManualScheduler


def test_manual_scheduler_fires_in_order():
    scheduler = ManualScheduler()
    fired = []
    scheduler.call_later(0.3, lambda: fired.append("b"))
    scheduler.call_later(0.1, lambda: fired.append("a"))
    cancelled = scheduler.call_later(0.2, lambda: fired.append("x"))
    cancelled.cancel()

    assert scheduler.pending == 2
    scheduler.advance(1)
    assert fired == ["a", "b"]
    assert scheduler.now == 1
    assert scheduler.pending == 0


def test_manual_scheduler_timer_armed_by_callback():
    scheduler = ManualScheduler()
    fired = []

    def first():
        fired.append(scheduler.now)
        scheduler.call_later(0.5, lambda: fired.append(scheduler.now))

    scheduler.call_later(0.5, first)
    scheduler.advance(2)
    assert fired == [0.5, 1.0]


def test_asyncio_scheduler_debounces_on_event_loop():
    calls = []

    async def scenario():
        search = SearchInput(calls.append, AsyncioScheduler(), debounce=0.02, compose_debounce=0.01)
        search.on_input("b")
        search.on_input("bu")
        search.on_input("bur")
        await asyncio.sleep(0.1)

        search.on_input("burger")
        search.dispose()
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert calls == ["bur"]

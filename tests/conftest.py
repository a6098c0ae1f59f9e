from __future__ import annotations

from collections import deque
from typing import Any, Callable

import pytest

from pycountdown.config import Config
from pycountdown.countdown import CountdownDriver
from pycountdown.pycountdown_state import (
    MAX_IN_MEM_EVENTS,
    EventStore,
    TimeState,
    VisibilityState,
)


class FakeScheduler:
    """hold scheduled callbacks until a test fires them"""

    def __init__(self):
        self.pending: list[tuple[int, Callable[[], Any]]] = []

    def schedule_once(self, delay_ms: int, callback: Callable[[], Any]) -> int:
        self.pending.append((delay_ms, callback))
        return len(self.pending)

    def fire(self) -> int:
        """run the oldest pending callback and return its delay"""
        delay_ms, callback = self.pending.pop(0)
        callback()
        return delay_ms


@pytest.fixture(autouse=True)
def event_store(monkeypatch):
    """keep events in memory only, fresh for every test"""
    monkeypatch.setattr(EventStore, "store", None)
    monkeypatch.setattr(
        EventStore, "in_mem_events", deque(maxlen=MAX_IN_MEM_EVENTS)
    )
    return EventStore


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def time_state() -> TimeState:
    return TimeState()


@pytest.fixture()
def visibility() -> VisibilityState:
    return VisibilityState()


@pytest.fixture()
def driver(time_state, visibility, scheduler) -> CountdownDriver:
    return CountdownDriver(time_state, visibility, scheduler)


@pytest.fixture()
def config() -> Config:
    res = Config.default()
    res.event_log = None
    res.bell_on_complete = False
    return res

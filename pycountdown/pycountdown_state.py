from __future__ import annotations

import json
from collections import deque
from contextlib import suppress
from pathlib import Path
from typing import Any, Callable

import pendulum

MAX_VALUE = 60
MAX_IN_MEM_EVENTS = 1000

Listener = Callable[..., Any]


class EventStore:
    """store relevant events in memory and, if configured, out to file

    the file is append-only, it is never read back to restore a timer
    """

    store: str | None = None
    in_mem_events: deque[dict] = deque(maxlen=MAX_IN_MEM_EVENTS)

    @classmethod
    def register(cls, d: dict):
        """log event dict to memory and to the events file"""
        d["at"] = d.get("at", pendulum.now())
        cls.in_mem_events.append(d)
        if not cls.store:
            return

        msg = json.dumps(d | dict(at=str(d["at"])))
        # never let a bad log path break a running countdown
        with suppress(OSError):
            Path(cls.store).parent.mkdir(parents=True, exist_ok=True)
            with open(cls.store, "a") as f:
                f.write(msg + "\n")


class _Observable:
    """keep a list of listeners and call them on every change"""

    def __init__(self):
        self._listeners: list[Listener] = []

    def subscribe(self, fn: Listener) -> Callable[[], None]:
        """add `fn` as a listener and return a function that removes it"""
        self._listeners.append(fn)

        def unsubscribe():
            with suppress(ValueError):
                self._listeners.remove(fn)

        return unsubscribe

    def _notify(self, *args):
        for fn in list(self._listeners):
            fn(*args)


def _clamp(value: int) -> int:
    return min(MAX_VALUE, max(0, value))


def _step(value: int, increase: bool) -> int:
    """move one toward the requested bound, saturating at it"""
    if increase:
        return min(MAX_VALUE, value + 1)
    return max(0, value - 1)


class TimeState(_Observable):
    """minutes and seconds of a countdown

    each is adjusted and clamped independently to [0, 60].
    ticking treats them as one total number of seconds.
    """

    def __init__(self, minutes: int = 0, seconds: int = 0):
        super().__init__()
        self._minutes = _clamp(minutes)
        self._seconds = _clamp(seconds)

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def total_seconds(self) -> int:
        return self._minutes * 60 + self._seconds

    def dump_state(self) -> dict:
        return {k: getattr(self, k) for k in ("minutes", "seconds")}

    def adjust_minutes(self, increase: bool):
        self._set(_step(self._minutes, increase), self._seconds)

    def adjust_seconds(self, increase: bool):
        self._set(self._minutes, _step(self._seconds, increase))

    def tick(self) -> bool:
        """count down one second and return whether the countdown is done

        at zero this is a no-op that still reports done
        """
        total = self.total_seconds
        if total <= 0:
            return True

        current = total - 1
        self._set(*divmod(current, 60))
        return current <= 0

    def _set(self, minutes: int, seconds: int):
        if (minutes, seconds) == (self._minutes, self._seconds):
            return

        self._minutes, self._seconds = minutes, seconds
        self._notify(self)


class VisibilityState(_Observable):
    """whether the adjustment and start controls are shown and interactive"""

    def __init__(self, controls_visible: bool = True):
        super().__init__()
        self._controls_visible = controls_visible

    @property
    def controls_visible(self) -> bool:
        return self._controls_visible

    def toggle_or_set(self, value: bool | None = None):
        """flip the flag, or assign `value` if given"""
        new = not self._controls_visible if value is None else value
        if new == self._controls_visible:
            return

        self._controls_visible = new
        self._notify(self)

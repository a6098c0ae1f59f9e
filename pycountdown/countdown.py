from __future__ import annotations

from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Protocol

from textual import log

from pycountdown.pycountdown_state import (
    EventStore,
    TimeState,
    VisibilityState,
    _Observable,
)

if TYPE_CHECKING:
    from textual.message_pump import MessagePump
    from textual.timer import Timer


class Scheduler(Protocol):
    """run a callback once after a delay"""

    def schedule_once(self, delay_ms: int, callback: Callable[[], Any]) -> Any:
        ...


class TextualScheduler:
    """schedule callbacks with `set_timer` on a textual app or widget"""

    def __init__(self, pump: MessagePump):
        self.pump = pump

    def schedule_once(self, delay_ms: int, callback: Callable[[], Any]) -> Timer:
        if delay_ms <= 0:
            raise ValueError(f"delay must be positive, got {delay_ms}ms")
        return self.pump.set_timer(delay_ms / 1000, callback)


class CountdownStatus(Enum):
    idle = "idle"
    running = "running"


class CountdownDriver(_Observable):
    """drive a TimeState one tick per `tick_ms` and keep VisibilityState in step

    idle -> running on `start`, running -> idle when a tick reports done.
    there is no pause or cancel: a started countdown runs until it hits zero.

    listeners are called with `(event_name, driver)` where event_name is one of
    "started", "tick", "completed"
    """

    def __init__(
        self,
        time_state: TimeState,
        visibility: VisibilityState,
        scheduler: Scheduler,
        *,
        tick_ms: int = 1000,
    ):
        super().__init__()
        self.time = time_state
        self.visibility = visibility
        self.scheduler = scheduler
        self.tick_ms = tick_ms
        self._status = CountdownStatus.idle
        # bumped on every start so late callbacks from an older run are dropped
        self._generation = 0

    @property
    def status(self) -> CountdownStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status is CountdownStatus.running

    @property
    def can_adjust(self) -> bool:
        """whether the "-"/"+" controls are interactive"""
        return self.visibility.controls_visible and not self.is_running

    @property
    def can_start(self) -> bool:
        has_time = (self.time.minutes + self.time.seconds) > 0
        return has_time and self.can_adjust

    # ==========================================================================
    # entry points
    # ==========================================================================

    def adjust_minutes(self, increase: bool) -> bool:
        return self._adjust("minutes", increase)

    def adjust_seconds(self, increase: bool) -> bool:
        return self._adjust("seconds", increase)

    def toggle_controls(self, value: bool | None = None):
        """show/hide the controls. flips if `value` is None"""
        self.visibility.toggle_or_set(value)
        self._register("toggled", controls_visible=self.visibility.controls_visible)

    def start(self) -> bool:
        """hide the controls and schedule the first tick

        return False without changing anything if a countdown can't start
        """
        if not self.can_start:
            log.debug(f"refusing to start: {self.time.dump_state()}, {self._status}")
            return False

        self.visibility.toggle_or_set(False)
        self._status = CountdownStatus.running
        self._generation += 1
        self._emit("started")
        self._schedule_tick()
        return True

    # ==========================================================================
    # helpers
    # ==========================================================================

    def _adjust(self, unit: str, increase: bool) -> bool:
        if not self.can_adjust:
            return False

        getattr(self.time, f"adjust_{unit}")(increase)
        self._register("adjusted", unit=unit, increase=increase)
        return True

    def _schedule_tick(self):
        self.scheduler.schedule_once(
            self.tick_ms, partial(self._on_tick, self._generation)
        )

    def _on_tick(self, generation: int):
        if generation != self._generation or not self.is_running:
            log.warning(f"dropping stale tick from run {generation}")
            return

        done = self.time.tick()
        if done:
            self._status = CountdownStatus.idle
        # hidden while counting, shown again on completion
        self.visibility.toggle_or_set(done)
        self._emit("tick")

        if done:
            self._emit("completed")
            return

        self._schedule_tick()

    def _emit(self, name: str):
        self._register(name)
        self._notify(name, self)

    def _register(self, name: str, **extra):
        EventStore.register(
            dict(name=name, generation=self._generation)
            | self.time.dump_state()
            | extra
        )

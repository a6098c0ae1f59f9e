from __future__ import annotations

from contextlib import suppress
from functools import partial
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Button, Footer, Header, Static

from pycountdown.config import Config
from pycountdown.countdown import CountdownDriver, Scheduler, TextualScheduler
from pycountdown.pycountdown_state import EventStore, TimeState, VisibilityState
from pycountdown.utils import format_time
from pycountdown.widgets.debug_log import DebugLog
from pycountdown.widgets.start_button import StartButton
from pycountdown.widgets.time_view import TimeView


HiddenBinding = partial(Binding, show=False)


class PyCountdown(App):
    """main pycountdown application"""

    CSS_PATH = "css/pycountdown.css"
    TITLE = "pycountdown"

    BINDINGS = [
        Binding("k", "adjust('minutes', True)", "minutes +/-", key_display="k/j"),
        HiddenBinding("j", "adjust('minutes', False)", "minutes -"),
        Binding("l", "adjust('seconds', True)", "seconds +/-", key_display="l/h"),
        HiddenBinding("h", "adjust('seconds', False)", "seconds -"),
        Binding("space", "start", "start", key_display="space"),
        Binding("v", "toggle_controls", "show/hide controls", key_display="v"),
        Binding("q", "quit", "quit", key_display="q"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        scheduler: Scheduler | None = None,
    ):
        super().__init__()
        self.config = config or Config.load()
        EventStore.store = self.config.event_log_path

        self.time_state = TimeState(
            self.config.initial_minutes, self.config.initial_seconds
        )
        self.visibility = VisibilityState()
        self.driver = CountdownDriver(
            self.time_state,
            self.visibility,
            scheduler or TextualScheduler(self),
            tick_ms=self.config.tick_ms,
        )
        self._unsubscribers = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(
            TimeView("minutes"),
            Static(":", id="separator"),
            TimeView("seconds"),
            id="time",
        )
        yield Horizontal(StartButton(), id="options")
        yield DebugLog(id="debug")
        yield Footer()

    def on_mount(self):
        self._unsubscribers = [
            self.time_state.subscribe(self._on_state_changed),
            self.visibility.subscribe(self._on_state_changed),
            self.driver.subscribe(self._on_countdown_event),
        ]
        self._debug(f"config: {self.config.dump_state()}")
        self._refresh_views()

    def on_unmount(self):
        for unsubscribe in self._unsubscribers:
            unsubscribe()

    # ==========================================================================
    # actions
    # ==========================================================================

    def action_adjust(self, unit: str, increase: bool):
        """move minutes or seconds up/down by one"""
        if unit == "minutes":
            self.driver.adjust_minutes(increase)
        elif unit == "seconds":
            self.driver.adjust_seconds(increase)

    def action_start(self):
        """start the countdown if there's time on it and the controls are shown"""
        if not self.driver.start():
            self._debug("start refused")

    def action_toggle_controls(self):
        """show or hide the adjustment and start controls"""
        self.driver.toggle_controls()

    # ==========================================================================
    # event handlers
    # ==========================================================================

    def on_time_view_adjust(self, event: TimeView.Adjust):
        """a "-"/"+" button was pressed"""
        event.stop()
        self.action_adjust(event.unit, event.increase)

    def on_button_pressed(self, event: Button.Pressed):
        if event.button.id == "start":
            self.action_start()

    def _on_state_changed(self, _):
        self._refresh_views()

    def _on_countdown_event(self, name: str, driver: CountdownDriver):
        self._debug(f"{name}: {format_time(driver.time.total_seconds)}")
        # running -> idle changes what can be adjusted without touching either state
        self._refresh_views()
        if name == "completed" and self.config.bell_on_complete:
            self.bell()

    # ==========================================================================
    # helpers
    # ==========================================================================

    def _refresh_views(self):
        """push current state into the widgets"""
        try:
            minutes = self.query_one("#minutes", TimeView)
            seconds = self.query_one("#seconds", TimeView)
            start = self.query_one(StartButton)
        except NoMatches:
            return

        can_adjust = self.driver.can_adjust
        for view, value in (
            (minutes, self.time_state.minutes),
            (seconds, self.time_state.seconds),
        ):
            view.value = value
            view.enabled = can_adjust

        start.disabled = not self.driver.can_start
        self.sub_title = format_time(self.time_state.total_seconds)

    def _debug(self, msg: Any):
        """log to textual devtools and the DebugLog widget

        the widget needs to be enabled in `pycountdown.css` - comment out `display: none`
        """
        self.log(msg)
        with suppress(Exception):
            self.query_one(DebugLog).write_debug(msg)


def main():
    PyCountdown().run()


if __name__ == "__main__":
    main()

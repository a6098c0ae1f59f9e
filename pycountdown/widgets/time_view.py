from __future__ import annotations
from contextlib import suppress

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Digits, Static


class TimeModifyButton(Button, can_focus=False):
    """"-" or "+" button under/over a TimeView's value"""


class TimeView(Static):
    """one unit of the countdown: "-" button, value, "+" button

    the buttons are invisible and inert unless `enabled`
    """

    value = reactive(0)
    enabled = reactive(True)

    class Adjust(Message):
        """ask for this view's unit to go up or down by one"""

        def __init__(self, unit: str, increase: bool) -> None:
            super().__init__()
            self.unit = unit
            self.increase = increase

    def __init__(self, unit: str, *, id: str | None = None):
        super().__init__(id=id or unit)
        self.unit = unit

    def compose(self) -> ComposeResult:
        yield TimeModifyButton("-", id="decrease", variant="primary")
        yield Digits(str(self.value), id="value")
        yield TimeModifyButton("+", id="increase", variant="primary")

    def watch_value(self, value: int):
        with suppress(NoMatches):
            self.query_one(Digits).update(str(value))

    def watch_enabled(self, enabled: bool):
        for button in self.query(TimeModifyButton):
            button.set_class(not enabled, "invisible")
            button.disabled = not enabled

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if not self.enabled:
            return

        self.post_message(self.Adjust(self.unit, event.button.id == "increase"))

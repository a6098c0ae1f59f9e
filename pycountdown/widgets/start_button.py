from __future__ import annotations

from textual.widgets import Button


class StartButton(Button, can_focus=False):
    """start the countdown. dimmed (disabled) whenever a countdown can't start"""

    def __init__(self, *, id: str = "start"):
        super().__init__("▶ start", id=id, variant="success")

from pycountdown.countdown import (
    CountdownDriver,
    CountdownStatus,
    Scheduler,
    TextualScheduler,
)
from pycountdown.pycountdown_state import EventStore, TimeState, VisibilityState

__all__ = [
    "CountdownDriver",
    "CountdownStatus",
    "EventStore",
    "Scheduler",
    "TextualScheduler",
    "TimeState",
    "VisibilityState",
]

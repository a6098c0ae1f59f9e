from __future__ import annotations
from contextlib import suppress

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from textual import log

BASE_PATH = Path("~/.pycountdown").expanduser()
CONFIG_ENV_VAR = "PYCOUNTDOWN_CONFIG"


@dataclass
class Config:
    """user settings for the app. anything missing or invalid uses the default"""

    tick_ms: int = 1000
    initial_minutes: int = 0
    initial_seconds: int = 0
    bell_on_complete: bool = True
    event_log: str | None = "~/.pycountdown/events"

    @classmethod
    def default(cls) -> Config:
        return cls(**json.loads(default_config))

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Config:
        """overlay valid values from `d` onto the defaults"""
        res = cls.default()
        if not isinstance(d, dict):
            return res

        for f in fields(cls):
            if f.name not in d:
                continue
            if _is_valid(f.name, v := d[f.name]):
                setattr(res, f.name, v)
            else:
                log.warning(f"ignoring invalid config value {f.name}={v!r}")
        return res

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """read config from `path`, $PYCOUNTDOWN_CONFIG or ~/.pycountdown/config.json"""
        path = path or os.environ.get(CONFIG_ENV_VAR) or BASE_PATH / "config.json"
        with suppress(Exception):
            with open(Path(path).expanduser()) as f:
                return cls.from_dict(json.load(f))

        log.info(f"no usable config at {path}, using defaults")
        return cls.default()

    def dump_state(self) -> dict:
        return asdict(self)

    @property
    def event_log_path(self) -> str | None:
        if not self.event_log:
            return None
        return str(Path(self.event_log).expanduser())


def _is_valid(name: str, value: Any) -> bool:
    if name == "event_log":
        return value is None or isinstance(value, str)
    if name == "bell_on_complete":
        return isinstance(value, bool)

    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return value > 0 if name == "tick_ms" else True


default_config = """
  {
    "tick_ms": 1000,
    "initial_minutes": 0,
    "initial_seconds": 0,
    "bell_on_complete": true,
    "event_log": "~/.pycountdown/events"
  }
"""

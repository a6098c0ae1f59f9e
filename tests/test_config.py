from __future__ import annotations

import json
from pathlib import Path

import pytest

from pycountdown.config import CONFIG_ENV_VAR, Config
from pycountdown.utils import format_time


def test_defaults():
    config = Config.default()
    assert config.tick_ms == 1000
    assert (config.initial_minutes, config.initial_seconds) == (0, 0)
    assert config.bell_on_complete is True
    assert config.event_log_path == str(Path("~/.pycountdown/events").expanduser())


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(dict(tick_ms=500, initial_seconds=30, unknown=1)))
    config = Config.load(path)
    assert config.tick_ms == 500
    assert config.initial_seconds == 30
    assert config.bell_on_complete is True


def test_load_from_env_var(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(dict(event_log=None)))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert Config.load().event_log_path is None


@pytest.mark.parametrize("contents", ["{not json", "[1, 2]", ""])
def test_bad_file_falls_back_to_defaults(tmp_path, contents):
    path = tmp_path / "config.json"
    path.write_text(contents)
    assert Config.load(path) == Config.default()


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert Config.load(tmp_path / "nope.json") == Config.default()


@pytest.mark.parametrize(
    "key, value",
    [
        ("tick_ms", 0),
        ("tick_ms", "1000"),
        ("initial_minutes", True),
        ("initial_seconds", 1.5),
        ("bell_on_complete", "yes"),
        ("event_log", 3),
    ],
)
def test_invalid_values_ignored(key, value):
    config = Config.from_dict({key: value})
    assert getattr(config, key) == getattr(Config.default(), key)


@pytest.mark.parametrize(
    "num_secs, expected",
    [(0, "00:00"), (59, "00:59"), (61, "01:01"), (3660, "1:01:00")],
)
def test_format_time(num_secs, expected):
    assert format_time(num_secs) == expected

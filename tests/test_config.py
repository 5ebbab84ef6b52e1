# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasktrack.config import Settings
from tasktrack.logging_setup import setup_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKTRACK_APP_NAME",
        "TASKTRACK_LOG_LEVEL",
        "TASKTRACK_DATA_DIR",
        "TASKTRACK_LOAD_DELAY",
        "TASKTRACK_STATUS_DELAY",
        "TASKTRACK_SIMULATE_TRANSPORT_FAILURE",
        "TASKTRACK_SEED_DEMO",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "tasktrack"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/tasktrack")
    assert s.load_delay_seconds == 1.5
    assert s.status_delay_seconds == 2.5
    assert s.simulate_transport_failure is False
    assert s.seed_demo is True


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKTRACK_LOAD_DELAY", "0.25")
    monkeypatch.setenv("TASKTRACK_STATUS_DELAY", "not-a-number")
    monkeypatch.setenv("TASKTRACK_SIMULATE_TRANSPORT_FAILURE", "yes")
    monkeypatch.setenv("TASKTRACK_SEED_DEMO", "off")

    s = Settings.from_env()

    assert s.data_dir == tmp_path
    assert s.load_delay_seconds == 0.25
    assert s.status_delay_seconds == 2.5
    assert s.simulate_transport_failure is True
    assert s.seed_demo is False


def test_negative_delay_is_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKTRACK_LOAD_DELAY", "-3")
    assert Settings.from_env().load_delay_seconds == 0.0


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("tasktrack.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert log_file.exists()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            if h not in saved:
                h.close()
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)

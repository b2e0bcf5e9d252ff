"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json

from core.logging_config import configure_logging, get_logger


def test_logger_writes_json_events_to_stderr(capsys) -> None:
    """Events at or above the configured level should render as JSON on stderr."""
    configure_logging("info")
    get_logger("tests.logging").info("pixel_test_event", pixels=3)
    captured = capsys.readouterr()
    configure_logging()

    payload = json.loads(captured.err.strip().splitlines()[-1])
    assert payload["event"] == "pixel_test_event" and payload["pixels"] == 3
    assert captured.out == ""


def test_logger_filters_below_configured_level(capsys) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("error")
    get_logger("tests.logging").warning("pixel_quiet_event")
    captured = capsys.readouterr()
    configure_logging()

    assert "pixel_quiet_event" not in captured.err

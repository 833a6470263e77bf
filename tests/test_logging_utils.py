from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from datezones.logging_utils import StructuredTextFormatter, log_event, setup_logging


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="root",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=None,
        exc_info=None,
    )


def test_formatter_orders_known_event_keys() -> None:
    payload = {
        "event": "zones_resolved",
        "zones": ["Etc/UTC"],
        "tokens": ["utc"],
        "extra": "x",
    }

    text = StructuredTextFormatter().format(_record(json.dumps(payload)))

    lines = text.splitlines()
    assert lines[0] == "=== zones_resolved ==="
    keys = [line.split(":", 1)[0] for line in lines[1:]]
    assert keys == ["ts", "level", "tokens", "zones", "extra", "logger"]


def test_formatter_separates_entries_with_blank_line() -> None:
    formatter = StructuredTextFormatter()

    first = formatter.format(_record("plain message"))
    second = formatter.format(_record("another"))

    assert first.startswith("=== root ===")
    assert "message: plain message" in first
    assert second.startswith("\n=== root ===")


def test_log_event_emits_json_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    emitted: list[tuple[int, str]] = []
    monkeypatch.setattr(
        logging, "log", lambda level, message: emitted.append((level, message))
    )

    log_event("aliases_loaded", config_file=Path("/tmp/aliases"), alias_count=3)

    level, message = emitted[0]
    payload = json.loads(message)
    assert level == logging.INFO
    assert payload["event"] == "aliases_loaded"
    assert payload["config_file"] == "/tmp/aliases"
    assert payload["alias_count"] == 3


def test_setup_logging_writes_structured_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "run.log"
    try:
        setup_logging(log_file)
        log_event("app_start", date_expr="now", zone_tokens=["utc"])
    finally:
        logging.basicConfig(handlers=[logging.NullHandler()], force=True)

    text = log_file.read_text(encoding="utf-8")
    assert text.startswith("=== app_start ===")
    assert "date_expr: now" in text


def test_setup_logging_without_targets_disables_logging(tmp_path: Path) -> None:
    try:
        setup_logging(None)
        assert logging.root.manager.disable == logging.CRITICAL
    finally:
        logging.disable(logging.NOTSET)

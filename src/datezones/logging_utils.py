"""Logging utilities for date-zones."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional


class StructuredTextFormatter(logging.Formatter):
    """Format all log records as human-readable structured blocks."""

    EVENT_KEY_ORDER: dict[str, list[str]] = {
        "app_start": [
            "ts",
            "level",
            "date_expr",
            "output_format",
            "anchor_token",
            "zone_tokens",
            "silent",
            "log_file",
        ],
        "aliases_loaded": [
            "ts",
            "level",
            "config_file",
            "config_found",
            "alias_count",
            "local_zone",
        ],
        "config_unreadable": [
            "ts",
            "level",
            "config_file",
            "error_type",
            "error",
        ],
        "local_zone_fallback": [
            "ts",
            "level",
            "fallback_zone",
            "error_type",
            "error",
        ],
        "zones_resolved": [
            "ts",
            "level",
            "tokens",
            "zones",
        ],
        "instant_anchored": [
            "ts",
            "level",
            "date_expr",
            "anchor_zone",
            "epoch_seconds",
        ],
        "app_error": [
            "ts",
            "level",
            "error_type",
            "error",
        ],
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        # Blank line between entries, none after the last one.
        self._first_entry = True

    def _format_value(self, value: Any) -> str:
        return str(value).replace("\n", "\\n")

    def _ordered_keys(self, event_name: str, data: dict[str, Any]) -> list[str]:
        preferred = self.EVENT_KEY_ORDER.get(event_name, ["ts", "level", "logger"])
        preferred_present = [k for k in preferred if k in data and data[k] is not None]
        remaining = sorted(
            k for k in data.keys() if k not in preferred and data[k] is not None
        )
        return preferred_present + remaining

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now().astimezone().isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }

        message = record.getMessage()
        parsed = None
        if message.startswith("{") and message.endswith("}"):
            try:
                parsed = json.loads(message)
            except ValueError:
                parsed = None

        if isinstance(parsed, dict):
            base.update(parsed)
        else:
            base["event"] = record.name
            base["message"] = message

        event_name = str(base.pop("event", record.name))
        lines = [f"=== {event_name} ==="]
        for key in self._ordered_keys(event_name, base):
            lines.append(f"{key}: {self._format_value(base[key])}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        body = "\n".join(lines)
        if self._first_entry:
            self._first_entry = False
            return body
        return "\n" + body


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event."""
    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def setup_logging(log_file: Optional[Path] = None, debug: bool = False) -> None:
    """Set up logging configuration.

    A log file takes precedence over ``debug``; with neither, logging is
    switched off so nothing interferes with the printed dates.
    """
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(str(log_file), encoding="utf-8")
    elif debug:
        handler = logging.StreamHandler(sys.stderr)
    else:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    handler.setFormatter(StructuredTextFormatter())
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)

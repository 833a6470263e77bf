"""Dataclasses shared across date-zones layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .constants import DEFAULT_DATE_EXPR, DEFAULT_OUTPUT_FORMAT


@dataclass(frozen=True)
class CliOptions:
    date_expr: str = DEFAULT_DATE_EXPR
    output_format: str = DEFAULT_OUTPUT_FORMAT
    anchor_token: str | None = None
    zone_tokens: list[str] = field(default_factory=list)
    silent: bool = False
    show_help: bool = False
    log_file: Path | None = None


@dataclass(frozen=True)
class AnchorSpec:
    date_expr: str
    anchor_zone: str


@dataclass(frozen=True)
class FormattedEntry:
    zone: str
    text: str

"""Render one instant as wall-clock text in several zones."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from . import zone_catalog
from .models import FormattedEntry


def format_in_zone(instant: datetime, zone: str, output_format: str) -> str:
    if instant.tzinfo is None:
        raise ValueError("Instant must be timezone-aware.")
    return instant.astimezone(zone_catalog.load_zone(zone)).strftime(output_format)


def format_all(
    instant: datetime, zones: Sequence[str], output_format: str
) -> list[FormattedEntry]:
    return [
        FormattedEntry(zone=zone, text=format_in_zone(instant, zone, output_format))
        for zone in zones
    ]

"""Queries against the host timezone database.

Zone files are looked up the way GNU date does: under ``$TZDIR`` when it is
set, otherwise under the ``zoneinfo`` search path and the ``tzdata`` package.
The anchor hands the same file to ``date`` and the formatter loads it, so a
zone that validates is the zone every step uses.
"""

from __future__ import annotations

import importlib.util
import logging
import os
import sys
from functools import lru_cache
from pathlib import Path, PurePosixPath
from zoneinfo import TZPATH, ZoneInfo, available_timezones

from tzlocal import get_localzone_name

from .constants import FALLBACK_LOCAL_ZONE
from .logging_utils import log_event
from .presenters import render_warning


def zone_roots() -> tuple[Path, ...]:
    tzdir = os.environ.get("TZDIR")
    if tzdir:
        return (Path(tzdir),)

    roots = [Path(entry) for entry in TZPATH]
    tzdata_spec = importlib.util.find_spec("tzdata")
    if tzdata_spec is not None and tzdata_spec.submodule_search_locations:
        roots.extend(
            Path(location) / "zoneinfo" for location in tzdata_spec.submodule_search_locations
        )
    return tuple(roots)


def zone_file(name: str) -> Path | None:
    """Return the absolute zone file for ``name``, or None if there is none."""
    key = PurePosixPath(name)
    if not name or str(key) != name or key.is_absolute() or ".." in key.parts:
        return None
    for root in zone_roots():
        candidate = root.joinpath(*key.parts)
        if candidate.is_file():
            return candidate.resolve()
    return None


@lru_cache(maxsize=None)
def _load_zone_file(path: Path, name: str) -> ZoneInfo:
    with path.open("rb") as handle:
        return ZoneInfo.from_file(handle, key=name)


def load_zone(name: str) -> ZoneInfo:
    """Load ``name`` from the file ``zone_file`` finds.

    Raises:
        ValueError: no zone file exists or it is not valid zone data.
    """
    path = zone_file(name)
    if path is None:
        raise ValueError(f"No zone file for {name!r}")
    return _load_zone_file(path, name)


def zone_exists(name: str) -> bool:
    """Return True when ``name`` has a readable zone file."""
    try:
        load_zone(name)
    except (ValueError, OSError):
        return False
    return True


@lru_cache(maxsize=4)
def _zones_with_files(roots: tuple[Path, ...]) -> tuple[str, ...]:
    return tuple(sorted(name for name in available_timezones() if zone_file(name)))


def available_zones() -> tuple[str, ...]:
    """Return every zone name that has a zone file, sorted."""
    return _zones_with_files(zone_roots())


def local_zone_name() -> str:
    """Return the host's configured zone name.

    Falls back to UTC, with a warning on stderr, when the host zone cannot
    be detected.
    """
    try:
        name = get_localzone_name()
    except Exception as exc:  # tzlocal raises several unrelated types
        return _fall_back(str(exc), type(exc).__name__)

    if not name or not zone_exists(name):
        return _fall_back(f"unknown host zone {name!r}", "ZoneInfoNotFoundError")
    return name


def _fall_back(detail: str, error_type: str) -> str:
    log_event(
        "local_zone_fallback",
        level=logging.WARNING,
        fallback_zone=FALLBACK_LOCAL_ZONE,
        error_type=error_type,
        error=detail,
    )
    print(
        render_warning(
            f"Could not detect system timezone ({detail}), using {FALLBACK_LOCAL_ZONE}"
        ),
        file=sys.stderr,
    )
    return FALLBACK_LOCAL_ZONE

"""Evaluate a date expression in an anchor zone and return one absolute instant."""

from __future__ import annotations

import logging
import os
import subprocess
from datetime import datetime, timezone

from . import zone_catalog
from .constants import DATE_COMMAND, EPOCH_SECONDS_FORMAT
from .errors import DateParseError
from .logging_utils import log_event
from .models import AnchorSpec


def _run_date(date_expr: str, anchor_zone: str) -> subprocess.CompletedProcess:
    path = zone_catalog.zone_file(anchor_zone)
    if path is None:
        # date(1) silently treats an unknown TZ as UTC.
        raise DateParseError(date_expr, anchor_zone, "no zone file for this timezone")
    env = {**os.environ, "TZ": f":{path}"}
    return subprocess.run(
        [DATE_COMMAND, "-d", date_expr, EPOCH_SECONDS_FORMAT],
        check=False,
        capture_output=True,
        text=True,
        env=env,
    )


def anchor(spec: AnchorSpec) -> datetime:
    """Return the instant ``spec.date_expr`` denotes in ``spec.anchor_zone``.

    The host ``date`` program does the parsing, so relative expressions such
    as "next wed 2pm" are taken relative to now in the anchor zone. The value
    comes back as epoch seconds and is returned as an aware UTC datetime.

    Raises:
        DateParseError: the anchor zone has no zone file, ``date`` is missing
            or rejects the expression, or it prints something that is not an
            epoch value.
    """
    try:
        result = _run_date(spec.date_expr, spec.anchor_zone)
    except OSError as exc:
        raise DateParseError(
            spec.date_expr, spec.anchor_zone, f"cannot run {DATE_COMMAND}: {exc}"
        ) from exc

    if result.returncode != 0:
        detail = result.stderr.strip().splitlines()
        raise DateParseError(
            spec.date_expr, spec.anchor_zone, detail[-1] if detail else ""
        )

    output = result.stdout.strip()
    try:
        epoch_seconds = int(output)
    except ValueError as exc:
        raise DateParseError(
            spec.date_expr, spec.anchor_zone, f"unexpected output {output!r}"
        ) from exc

    log_event(
        "instant_anchored",
        level=logging.DEBUG,
        date_expr=spec.date_expr,
        anchor_zone=spec.anchor_zone,
        epoch_seconds=epoch_seconds,
    )
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)

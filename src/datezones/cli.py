"""CLI entry and startup wiring."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from . import picker, zone_catalog
from .aliases import load_alias_table, resolve_config_file
from .anchor import anchor
from .constants import (
    DEFAULT_DATE_EXPR,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMAT_24HR,
    OUTPUT_FORMAT_PREFIX,
)
from .errors import ArgParseError, DateZonesError
from .formatter import format_all
from .logging_utils import log_event, setup_logging
from .models import AnchorSpec, CliOptions
from .presenters import render_conversion_lines, render_error, render_help
from .resolver import resolve_anchor_zone, resolve_zones


def parse_args(argv: list[str]) -> CliOptions:
    """Parse command-line arguments.

    Options may appear anywhere; every other argument is a zone token.
    ``--help`` stops parsing immediately, ``--`` turns the rest into zone
    tokens.

    Examples:
        ["-d", "2 hours", "local", "utc"] -> date_expr="2 hours", zones [local, utc]
        ["+%H:%M", "--24hr"] -> output_format="%Y-%m-%d %H:%M %Z"
        ["--bogus"] -> ArgParseError("unrecognized parameter: --bogus")
    """
    date_expr = DEFAULT_DATE_EXPR
    output_format = DEFAULT_OUTPUT_FORMAT
    anchor_token: str | None = None
    log_file: Path | None = None
    silent = False
    zone_tokens: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]

        if arg in ("-d", "--date"):
            date_expr = _option_value(argv, i)
            i += 1
        elif arg == "--tz":
            anchor_token = _option_value(argv, i)
            i += 1
        elif arg == "--log":
            log_file = Path(_option_value(argv, i)).expanduser()
            i += 1
        elif arg.startswith(OUTPUT_FORMAT_PREFIX):
            output_format = arg[len(OUTPUT_FORMAT_PREFIX):]
        elif arg == "--24hr":
            output_format = OUTPUT_FORMAT_24HR
        elif arg in ("-s", "--silent"):
            silent = True
        elif arg in ("-h", "--help"):
            return CliOptions(show_help=True)
        elif arg == "--":
            zone_tokens.extend(argv[i + 1:])
            break
        elif arg.startswith("-"):
            raise ArgParseError(f"unrecognized parameter: {arg}")
        else:
            zone_tokens.append(arg)
        i += 1

    return CliOptions(
        date_expr=date_expr,
        output_format=output_format,
        anchor_token=anchor_token,
        zone_tokens=zone_tokens,
        silent=silent,
        log_file=log_file,
    )


def _option_value(argv: list[str], index: int) -> str:
    if index + 1 >= len(argv):
        raise ArgParseError(f"missing value for {argv[index]}")
    return argv[index + 1]


def run_conversion(options: CliOptions, environ: Mapping[str, str]) -> list[str]:
    """Resolve, anchor and format everything before returning printable lines."""
    alias_table = load_alias_table(
        resolve_config_file(environ),
        zone_catalog.local_zone_name(),
    )

    zones = resolve_zones(
        options.zone_tokens,
        alias_table,
        pick_zone=picker.pick_zone,
        zone_exists=zone_catalog.zone_exists,
        available_zones=zone_catalog.available_zones,
    )

    anchor_zone = None
    if options.anchor_token is not None:
        anchor_zone = resolve_anchor_zone(
            options.anchor_token,
            alias_table,
            pick_zone=picker.pick_zone,
            zone_exists=zone_catalog.zone_exists,
            available_zones=zone_catalog.available_zones,
        )

    instant = anchor(
        AnchorSpec(
            date_expr=options.date_expr,
            anchor_zone=anchor_zone if anchor_zone is not None else zones[0],
        )
    )
    entries = format_all(instant, zones, options.output_format)

    return render_conversion_lines(
        date_expr=options.date_expr,
        entries=entries,
        anchor_zone=anchor_zone,
        silent=options.silent,
    )


def main(argv: list[str] | None = None) -> int:
    raw_args = sys.argv[1:] if argv is None else argv

    try:
        options = parse_args(raw_args)
    except ArgParseError as exc:
        print(render_error(str(exc)), file=sys.stderr)
        return 1

    if options.show_help:
        print(render_help())
        return 0

    # A bare invocation shows usage on stderr, then still prints local time.
    if not raw_args:
        print(render_help(), file=sys.stderr)

    setup_logging(options.log_file, debug=bool(os.environ.get("DEBUG")))
    log_event(
        "app_start",
        date_expr=options.date_expr,
        output_format=options.output_format,
        anchor_token=options.anchor_token,
        zone_tokens=options.zone_tokens,
        silent=options.silent,
        log_file=options.log_file,
    )

    try:
        lines = run_conversion(options, os.environ)
    except DateZonesError as exc:
        log_event(
            "app_error",
            level=logging.ERROR,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        print(render_error(str(exc)), file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0

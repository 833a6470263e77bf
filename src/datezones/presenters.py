"""User-facing text rendering."""

from __future__ import annotations

from .constants import (
    APP_NAME,
    COLOR_RESET,
    CONVERTED_TO_TEXT,
    ERROR_PREFIX,
    LABEL_COLOR,
    WARNING_PREFIX,
)
from .models import FormattedEntry

_HELP_TEXT = f"""\
{APP_NAME} [OPTION] [TIMEZONE...]

Outputs the date for the first TIMEZONE and converts that date to all subsequent TIMEZONEs

If no TIMEZONEs are provided the system timezone is used

TIMEZONE:
  _                       Use the fuzzy picker to choose a timezone
  utc                     Alias for Etc/UTC
  local                   Use system timezone
  ALIAS                   An alias from the aliases file
  LOCALE                  A standard locale, ex: America/Los_Angeles

OPTION:
  --date|-d DATE          Date to use for the first timezone
                          Default: 'now'
  --tz TIMEZONE           Interpret DATE in TIMEZONE and convert it to every
                          listed TIMEZONE
  +FORMAT                 Date output format
                          Default: '+%Y-%m-%d %I:%M %p %Z'
                          Uses Python strftime; GNU-only directives such
                          as %N, %:z and %q are printed literally
  --24hr                  Use 24hr clock for default date format
  --silent|-s             Only output dates
  --log FILE              Write a diagnostic log to FILE
  --help|-h               Display help

ALIASES:
  Read from $CONFIG_DIR, $XDG_CONFIG_HOME or ~/.config, under
  date-zones.bash/aliases. One alias per line:
    work America/New_York Europe/London

EXAMPLES:
  # Output what UTC time will be next wed @ 2pm and convert it to local time and a picked timezone
  {APP_NAME} +%Y-%m-%dT%H:%M:%S -d 'wed 2pm' utc local _

  # Output what local time will be in 2hrs and convert it to Los_Angeles and London time
  {APP_NAME} -d '2 hours' local America/Los_Angeles Europe/London"""


def render_help() -> str:
    return _HELP_TEXT


def render_error(message: str) -> str:
    return f"{ERROR_PREFIX} {APP_NAME}, {message}"


def render_warning(message: str) -> str:
    return f"{WARNING_PREFIX} {message}"


def _label(text: str) -> str:
    return f"{LABEL_COLOR}{text}{COLOR_RESET}"


def render_conversion_lines(
    *,
    date_expr: str,
    entries: list[FormattedEntry],
    anchor_zone: str | None,
    silent: bool,
) -> list[str]:
    """Build the printed lines for one conversion.

    Without ``anchor_zone`` the first entry is the source of the date and the
    rest are conversions. With it, the anchor gets its own header line and
    every entry is a conversion.
    """
    if silent:
        return [entry.text for entry in entries]

    expr_label = _label(f"'{date_expr}'")
    lines: list[str] = []
    if anchor_zone is not None:
        lines.append(f"{expr_label} in {anchor_zone}")
        lines.append(CONVERTED_TO_TEXT)
        lines.extend(_render_entry(entry) for entry in entries)
        return lines

    for index, entry in enumerate(entries):
        if index == 0:
            lines.append(f"{expr_label} {_render_entry(entry)}")
            continue
        if index == 1:
            lines.append(CONVERTED_TO_TEXT)
        lines.append(_render_entry(entry))
    return lines


def _render_entry(entry: FormattedEntry) -> str:
    return f"{_label(entry.zone + ':')} {entry.text}"

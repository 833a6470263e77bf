from __future__ import annotations

from datezones.constants import COLOR_RESET, LABEL_COLOR
from datezones.models import FormattedEntry
from datezones.presenters import (
    render_conversion_lines,
    render_error,
    render_help,
    render_warning,
)

ENTRIES = [
    FormattedEntry(zone="Etc/UTC", text="2024-01-01 00:00 UTC"),
    FormattedEntry(zone="Asia/Tokyo", text="2024-01-01 09:00 JST"),
    FormattedEntry(zone="Europe/Paris", text="2024-01-01 01:00 CET"),
]


def _green(text: str) -> str:
    return f"{LABEL_COLOR}{text}{COLOR_RESET}"


def test_render_error_names_the_program() -> None:
    assert render_error("No such TZ: Foo/Bar") == "ERROR: date-zones, No such TZ: Foo/Bar"


def test_render_warning_prefix() -> None:
    assert render_warning("careful") == "WARNING: careful"


def test_help_lists_sentinels_and_options() -> None:
    help_text = render_help()

    for fragment in ("_ ", "utc", "local", "--date|-d", "+FORMAT", "--silent|-s", "--tz", "%N"):
        assert fragment in help_text


def test_silent_lines_are_dates_only() -> None:
    lines = render_conversion_lines(
        date_expr="now", entries=ENTRIES, anchor_zone=None, silent=True
    )

    assert lines == [entry.text for entry in ENTRIES]


def test_first_entry_shares_line_with_date_expression() -> None:
    lines = render_conversion_lines(
        date_expr="wed 2pm", entries=ENTRIES, anchor_zone=None, silent=False
    )

    assert lines == [
        f"{_green(repr('wed 2pm'))} {_green('Etc/UTC:')} 2024-01-01 00:00 UTC",
        "Converted to...",
        f"{_green('Asia/Tokyo:')} 2024-01-01 09:00 JST",
        f"{_green('Europe/Paris:')} 2024-01-01 01:00 CET",
    ]


def test_single_entry_has_no_conversion_header() -> None:
    lines = render_conversion_lines(
        date_expr="now", entries=ENTRIES[:1], anchor_zone=None, silent=False
    )

    assert len(lines) == 1


def test_anchor_zone_gets_its_own_header() -> None:
    lines = render_conversion_lines(
        date_expr="9am", entries=ENTRIES[:2], anchor_zone="America/Denver", silent=False
    )

    assert lines == [
        f"{_green(repr('9am'))} in America/Denver",
        "Converted to...",
        f"{_green('Etc/UTC:')} 2024-01-01 00:00 UTC",
        f"{_green('Asia/Tokyo:')} 2024-01-01 09:00 JST",
    ]

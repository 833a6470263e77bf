"""Pytest configuration and fixtures for date-zones tests."""

from __future__ import annotations

import subprocess
from collections.abc import Callable

import pytest

import datezones.anchor as anchor_module
from datezones.aliases import ZoneAliasTable


@pytest.fixture
def alias_table() -> ZoneAliasTable:
    """Alias table with a fixed local zone and a couple of user aliases."""
    return ZoneAliasTable(
        "America/Chicago",
        {
            "work": ("America/New_York", "Europe/London"),
            "home": ("Asia/Tokyo",),
            "office": ("local", "utc"),
        },
    )


@pytest.fixture
def fake_date(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[tuple[str, str]]]:
    """Replace the host date call with a canned epoch value.

    Returns a setter; each call records (date_expr, anchor_zone) pairs.
    """
    calls: list[tuple[str, str]] = []

    def _install(stdout: str = "1704067200\n", returncode: int = 0, stderr: str = ""):
        def _run_date(date_expr: str, anchor_zone: str) -> subprocess.CompletedProcess:
            calls.append((date_expr, anchor_zone))
            return subprocess.CompletedProcess(
                args=["date"], returncode=returncode, stdout=stdout, stderr=stderr
            )

        monkeypatch.setattr(anchor_module, "_run_date", _run_date)
        return calls

    return _install

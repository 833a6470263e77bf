"""Zone alias table: built-in sentinels overlaid with the user's alias file."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from .constants import (
    ALIASES_FILE_NAME,
    BUILTIN_ALIASES,
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_HOME,
    LOCAL_TOKEN,
)
from .logging_utils import log_event


class ZoneAliasTable:
    """Read-only mapping from alias key to an ordered list of zone tokens."""

    def __init__(
        self,
        local_zone: str,
        user_aliases: Mapping[str, tuple[str, ...]] | None = None,
    ) -> None:
        self._builtins: dict[str, tuple[str, ...]] = {
            LOCAL_TOKEN: (local_zone,),
            **BUILTIN_ALIASES,
        }
        self._aliases = dict(self._builtins)
        if user_aliases:
            self._aliases.update(user_aliases)
        self.local_zone = local_zone

    def __len__(self) -> int:
        return len(self._aliases)

    def resolve_alias(self, token: str) -> list[str] | None:
        expansion = self._aliases.get(token)
        if expansion is None:
            return None
        return list(expansion)

    def sentinel_zone(self, token: str) -> str | None:
        """Return the built-in zone for ``local``/``utc``/``UTC``, ignoring overrides."""
        expansion = self._builtins.get(token)
        if expansion is None:
            return None
        return expansion[0]


def resolve_config_file(environ: Mapping[str, str]) -> Path:
    """Return the alias file path for the given environment."""
    config_home = (
        environ.get("CONFIG_DIR")
        or environ.get("XDG_CONFIG_HOME")
        or DEFAULT_CONFIG_HOME
    )
    return Path(config_home).expanduser() / CONFIG_DIR_NAME / ALIASES_FILE_NAME


def parse_alias_lines(lines: Iterable[str]) -> dict[str, tuple[str, ...]]:
    """Parse ``key zone [zone...]`` lines; later lines overwrite earlier ones."""
    aliases: dict[str, tuple[str, ...]] = {}
    for raw_line in lines:
        fields = raw_line.split()
        if len(fields) < 2:
            continue
        key, *zone_tokens = fields
        aliases[key] = tuple(zone_tokens)
    return aliases


def load_alias_table(config_file: Path, local_zone: str) -> ZoneAliasTable:
    """Build the alias table from built-ins and ``config_file``.

    A missing file means no user aliases. An unreadable file is logged and
    treated the same way.
    """
    user_aliases: dict[str, tuple[str, ...]] = {}
    config_found = config_file.is_file()
    if config_found:
        try:
            text = config_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log_event(
                "config_unreadable",
                level=logging.WARNING,
                config_file=config_file,
                error_type=type(exc).__name__,
                error=str(exc),
            )
        else:
            user_aliases = parse_alias_lines(text.splitlines())

    table = ZoneAliasTable(local_zone, user_aliases)
    log_event(
        "aliases_loaded",
        config_file=config_file,
        config_found=config_found,
        alias_count=len(table),
        local_zone=local_zone,
    )
    return table

"""Turn user zone tokens into an ordered list of canonical IANA zone names.

Resolution runs in fixed passes over the whole list:

1. alias expansion (one level; expansions are spliced in place),
2. sentinels (``_`` runs the picker, built-in ``local``/``utc`` left over from
   alias values map to their zones),
3. validation against the timezone database, stopping at the first bad token,
4. defaulting an empty result to the local zone.

Nothing is printed here, so a failure in any pass leaves no partial output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Optional

from .aliases import ZoneAliasTable
from .constants import PICK_TOKEN, PICKER_PROMPT_TEMPLATE
from .errors import NoSelectionError, UnresolvedZoneError
from .logging_utils import log_event

PickZone = Callable[[str, Sequence[str]], Optional[str]]
ZoneExists = Callable[[str], bool]
AvailableZones = Callable[[], Sequence[str]]


def expand_aliases(tokens: Sequence[str], alias_table: ZoneAliasTable) -> list[str]:
    expanded: list[str] = []
    for token in tokens:
        expansion = alias_table.resolve_alias(token)
        if expansion is None:
            expanded.append(token)
        else:
            expanded.extend(expansion)
    return expanded


def resolve_sentinels(
    tokens: Sequence[str],
    alias_table: ZoneAliasTable,
    pick_zone: PickZone,
    available_zones: AvailableZones,
) -> list[str]:
    resolved: list[str] = []
    for position, token in enumerate(tokens, start=1):
        if token == PICK_TOKEN:
            label = PICKER_PROMPT_TEMPLATE.format(position=position)
            picked = pick_zone(label, available_zones())
            if not picked:
                raise NoSelectionError("no timezone selected")
            resolved.append(picked)
            continue

        builtin_zone = alias_table.sentinel_zone(token)
        resolved.append(builtin_zone if builtin_zone is not None else token)
    return resolved


def validate_zones(zones: Sequence[str], zone_exists: ZoneExists) -> None:
    for zone in zones:
        if not zone_exists(zone):
            raise UnresolvedZoneError(zone)


def resolve_zones(
    tokens: Sequence[str],
    alias_table: ZoneAliasTable,
    *,
    pick_zone: PickZone,
    zone_exists: ZoneExists,
    available_zones: AvailableZones,
) -> list[str]:
    """Resolve ``tokens`` into canonical zone names, in input order.

    Raises:
        NoSelectionError: the picker returned nothing for a ``_`` token.
        UnresolvedZoneError: a token is not a known zone after expansion.
    """
    zones = expand_aliases(tokens, alias_table)
    zones = resolve_sentinels(zones, alias_table, pick_zone, available_zones)
    validate_zones(zones, zone_exists)

    if not zones:
        zones = [alias_table.local_zone]
        validate_zones(zones, zone_exists)

    log_event("zones_resolved", level=logging.DEBUG, tokens=list(tokens), zones=zones)
    return zones


def resolve_anchor_zone(
    token: str,
    alias_table: ZoneAliasTable,
    *,
    pick_zone: PickZone,
    zone_exists: ZoneExists,
    available_zones: AvailableZones,
) -> str:
    """Resolve the ``--tz`` token, which must name exactly one zone."""
    zones = resolve_zones(
        [token],
        alias_table,
        pick_zone=pick_zone,
        zone_exists=zone_exists,
        available_zones=available_zones,
    )
    if len(zones) != 1:
        raise UnresolvedZoneError(token)
    return zones[0]

"""Interactive timezone picker built on prompt_toolkit completion."""

from __future__ import annotations

from collections.abc import Sequence

from prompt_toolkit import prompt as pt_prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.validation import Validator


def build_zone_completer(zones: Sequence[str]) -> WordCompleter:
    """Case-insensitive, contiguous-substring matching over ``zones``."""
    return WordCompleter(
        list(zones),
        ignore_case=True,
        match_middle=True,
        sentence=True,
    )


def build_zone_validator(zones: Sequence[str]) -> Validator:
    known = frozenset(zones)
    return Validator.from_callable(
        lambda text: not text.strip() or text.strip() in known,
        error_message="Pick a timezone from the list, or leave empty to cancel.",
        move_cursor_to_end=True,
    )


def pick_zone(label: str, zones: Sequence[str]) -> str | None:
    """Prompt for one zone name; None when the user cancels or enters nothing."""
    try:
        answer = pt_prompt(
            label,
            completer=build_zone_completer(zones),
            complete_while_typing=True,
            validator=build_zone_validator(zones),
            validate_while_typing=False,
        )
    except (EOFError, KeyboardInterrupt):
        return None

    answer = answer.strip()
    return answer or None

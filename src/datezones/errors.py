"""Typed exceptions for date-zones."""


class DateZonesError(Exception):
    """Base exception for date-zones failures."""


class ArgParseError(DateZonesError):
    """Raised when command-line arguments cannot be parsed."""


class NoSelectionError(DateZonesError):
    """Raised when the interactive zone picker returns nothing."""


class UnresolvedZoneError(DateZonesError):
    """Raised when a token does not name a known timezone."""

    def __init__(self, token: str) -> None:
        super().__init__(f"No such TZ: {token}")
        self.token = token


class DateParseError(DateZonesError):
    """Raised when the host date parser rejects a date expression."""

    def __init__(self, date_expr: str, anchor_zone: str, detail: str = "") -> None:
        message = f"invalid date '{date_expr}' in {anchor_zone}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.date_expr = date_expr
        self.anchor_zone = anchor_zone

"""
Claim evaluation.

Every function takes the reference time `now` (Unix seconds) from the
caller; nothing here reads the clock.
"""

from datetime import datetime, tzinfo
from typing import Any, Mapping, Optional

from .models import ClaimSummary, as_payload

MINUTE = 60
HOUR = 3600
DAY = 86400


def _humanize_seconds(seconds: int) -> str:
    if seconds < MINUTE:
        return f"{seconds} seconds"
    elif seconds < HOUR:
        return f"{seconds // MINUTE} minutes"
    elif seconds < DAY:
        return f"{seconds // HOUR} hours"
    return f"{seconds // DAY} days"


def is_expired(payload: Mapping[str, Any], now: int) -> bool:
    exp = as_payload(payload).exp
    if not exp:
        return False
    return exp < now


def is_not_yet_valid(payload: Mapping[str, Any], now: int) -> bool:
    nbf = as_payload(payload).nbf
    if not nbf:
        return False
    return nbf > now


def time_remaining(payload: Mapping[str, Any], now: int) -> str:
    """Human-readable time left until `exp`."""
    exp = as_payload(payload).exp
    if not exp:
        return "No expiration"

    remaining = exp - now
    if remaining <= 0:
        return "Expired"
    return _humanize_seconds(remaining)


def token_age(payload: Mapping[str, Any], now: int) -> str:
    """Human-readable time elapsed since `iat`."""
    iat = as_payload(payload).iat
    if not iat:
        return "Unknown"

    age = now - iat
    if age <= 0:
        return "Just issued"
    return _humanize_seconds(age)


def format_timestamp(timestamp: Optional[int], tz: Optional[tzinfo] = None) -> str:
    """Render a Unix timestamp in the current locale's date/time format.

    Falls back to local time when `tz` is omitted. Instants the platform
    cannot represent (beyond year 9999, for example) render as
    "Invalid date".
    """
    if not timestamp:
        return "N/A"

    try:
        moment = datetime.fromtimestamp(timestamp, tz)
    except (OverflowError, OSError, ValueError):
        return "Invalid date"
    return moment.strftime("%c")


def summarize_claims(payload: Mapping[str, Any], now: int, tz: Optional[tzinfo] = None) -> ClaimSummary:
    claims = as_payload(payload)
    return ClaimSummary(
        expired=is_expired(claims, now),
        not_yet_valid=is_not_yet_valid(claims, now),
        time_remaining=time_remaining(claims, now),
        token_age=token_age(claims, now),
        issued_at=format_timestamp(claims.iat, tz),
        not_before=format_timestamp(claims.nbf, tz),
        expires_at=format_timestamp(claims.exp, tz),
    )

"""Shared text utilities for track titles, durations and timestamps."""

import re
from datetime import datetime
from typing import Optional

# "1. ", "01.", "12)" -- digits, then '.' or ')', then optional spaces
_RE_TRACK_NUMBER = re.compile(r'^[0-9]+[.)]\s*')


def strip_track_number(name):
    """Remove a leading ordinal marker from a pasted track line.

    Handles patterns like:
    - "1. Track Name"
    - "01.Track Name"
    - "12) Track Name"

    Only the first marker is removed, so "1. 2. Song" becomes "2. Song".
    """
    return _RE_TRACK_NUMBER.sub('', name, count=1)


def format_duration(total_seconds: Optional[int]) -> Optional[str]:
    """Format a duration in seconds as M:SS, or H:MM:SS from one hour up.

    Returns None when ``total_seconds`` is None.

    Raises:
        ValueError: If ``total_seconds`` is negative.
    """
    if total_seconds is None:
        return None
    if total_seconds < 0:
        raise ValueError(f"Duration cannot be negative: {total_seconds}")

    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def _plural(count, unit):
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def parse_timestamp(value: str) -> datetime:
    """Parse an API timestamp ("2024-05-01T12:30:00", optionally with Z)."""
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return datetime.fromisoformat(text)


def humanize_since(when, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``when`` was, for review and reply listings.

    Buckets: "N minutes ago", "N hours ago" (same day), "yesterday",
    "N days ago" (under a week), then the ISO date. The distance is
    absolute, so future timestamps read the same as past ones.

    Args:
        when: datetime or ISO timestamp string.
        now: Reference time. Defaults to the current time in ``when``'s zone.

    Raises:
        ValueError: If ``when`` is a string that is not an ISO timestamp.
    """
    if isinstance(when, str):
        when = parse_timestamp(when)
    if now is None:
        now = datetime.now(when.tzinfo)

    delta = abs(now - when)
    if delta.days == 0:
        hours = delta.seconds // 3600
        if hours == 0:
            return f"{_plural(delta.seconds // 60, 'minute')} ago"
        return f"{_plural(hours, 'hour')} ago"
    if delta.days == 1:
        return "yesterday"
    if delta.days < 7:
        return f"{delta.days} days ago"
    return when.date().isoformat()

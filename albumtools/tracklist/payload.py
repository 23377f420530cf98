"""Conversion between editor track rows and the album-save track list.

Editor rows hold ``title``/``minutes``/``seconds``. The album API stores
``trackNumber``/``title``/``duration`` with duration in seconds.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional


def _field(row, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def duration_seconds(minutes: Optional[int], seconds: Optional[int]) -> Optional[int]:
    """Combine editor minutes and seconds into a duration in seconds.

    Returns None only when both parts are absent, so "0:45" stays 45.

    Raises:
        ValueError: If either part is negative.
    """
    if minutes is None and seconds is None:
        return None
    minutes = int(minutes or 0)
    seconds = int(seconds or 0)
    if minutes < 0 or seconds < 0:
        raise ValueError(f"Negative duration part: {minutes}:{seconds}")
    return minutes * 60 + seconds


def tracks_to_payload(rows: Iterable[Any]) -> Optional[List[Dict[str, Any]]]:
    """Build the album-save ``tracks`` list from editor rows.

    Rows without a title are dropped before numbering, so track numbers are
    always 1..n with no gaps.

    Args:
        rows: ParsedTrack objects or mappings with title/minutes/seconds.

    Returns:
        List of {trackNumber, title, duration} dicts, or None when no row
        has a title.
    """
    payload = []
    for row in rows:
        title = _field(row, 'title')
        if not isinstance(title, str) or not title.strip():
            continue
        payload.append({
            'trackNumber': len(payload) + 1,
            'title': title.strip(),
            'duration': duration_seconds(_field(row, 'minutes'), _field(row, 'seconds')),
        })
    return payload or None


def rows_from_album(album: Mapping) -> List[Dict[str, Any]]:
    """Hydrate editor rows from an album resource's ``tracks``, in API order."""
    tracks = album.get('tracks') or []
    if not tracks:
        return [{'title': ''}]

    rows = []
    for track in tracks:
        duration = track.get('duration')
        if duration is None:
            minutes = seconds = None
        else:
            minutes, seconds = divmod(int(duration), 60)
        rows.append({
            'title': track.get('title') or '',
            'minutes': minutes,
            'seconds': seconds,
        })
    return rows

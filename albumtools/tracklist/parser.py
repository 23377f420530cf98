"""
Free-text track list parser for the album editor's batch import.

Turns pasted text, one track per line, into ordered track rows:

    1. Intro 1:23          -> ParsedTrack('Intro', 1, 23)
    02) Second Song 4:56   -> ParsedTrack('Second Song', 4, 56)
    Epic Song 1:02:03      -> ParsedTrack('Epic Song', 62, 3)
    Plain Title            -> ParsedTrack('Plain Title', None, None)

A leading ordinal ("1.", "12)") is stripped and a trailing M:SS or H:MM:SS
duration is split off. Lines left without a title are dropped.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from albumtools.shared.text_utils import strip_track_number

logger = logging.getLogger(__name__)

# Trailing duration: line start or whitespace before it, end of line after it.
# Leading component is unpadded, seconds and H:MM:SS minutes are two digits.
# ASCII digits only, so full-width digits stay part of the title.
_RE_DURATION = re.compile(r'(?<!\S)([0-9]+):([0-9]{2})(?::([0-9]{2}))?$')


class BatchWarning(Enum):
    """Non-fatal outcomes of a batch import that leave nothing to import."""

    EMPTY_INPUT = "No track list provided"
    NO_VALID_TRACKS = "No valid tracks found"

    @property
    def message(self) -> str:
        return self.value

    @property
    def hint(self) -> str:
        if self is BatchWarning.EMPTY_INPUT:
            return 'Paste one track per line, e.g. "1. Track Name 3:45"'
        return "Each line needs a title; ordinals and durations alone are skipped"


@dataclass(frozen=True)
class ParsedTrack:
    title: str
    minutes: Optional[int] = None
    seconds: Optional[int] = None

    @property
    def has_duration(self) -> bool:
        return self.minutes is not None

    def to_dict(self):
        return {'title': self.title, 'minutes': self.minutes, 'seconds': self.seconds}


@dataclass(frozen=True)
class ParseResult:
    """Tracks in input order, plus the warning raised while parsing (if any)."""

    tracks: Tuple[ParsedTrack, ...] = ()
    warning: Optional[BatchWarning] = None

    def __iter__(self) -> Iterator[ParsedTrack]:
        return iter(self.tracks)

    def __len__(self) -> int:
        return len(self.tracks)

    def __getitem__(self, index):
        return self.tracks[index]

    def __bool__(self) -> bool:
        return bool(self.tracks)


def split_duration(line: str) -> Tuple[str, Optional[int], Optional[int]]:
    """Split a trailing duration off a track line.

    Returns:
        (remaining text, minutes, seconds). Hours are folded into minutes.
        Both numbers are None when the line does not end in a duration.
        Seconds are taken as written, so "3:75" gives 75.
    """
    match = _RE_DURATION.search(line)
    if match is None:
        return line, None, None

    first, second, third = match.groups()
    if third is not None:
        minutes = int(first) * 60 + int(second)
        seconds = int(third)
    else:
        minutes = int(first)
        seconds = int(second)
    return line[:match.start()].rstrip(), minutes, seconds


def parse_track_line(line: str) -> Optional[ParsedTrack]:
    """Parse a single line, or return None if it has no title."""
    trimmed = line.strip()
    if not trimmed:
        return None

    working = strip_track_number(trimmed)
    title, minutes, seconds = split_duration(working)
    title = title.strip()
    if not title:
        return None
    return ParsedTrack(title=title, minutes=minutes, seconds=seconds)


def parse_track_list(raw_text: Optional[str]) -> ParseResult:
    """Parse pasted track list text into a ParseResult.

    Every line is parsed on its own. Blank lines and lines that reduce to an
    empty title (ordinal only, duration only) are skipped without error.

    Args:
        raw_text: Multi-line text as pasted by the user. None counts as empty.

    Returns:
        ParseResult with warning EMPTY_INPUT when the text is blank, and
        NO_VALID_TRACKS when no line produced a track.
    """
    if raw_text is None or not raw_text.strip():
        return ParseResult(warning=BatchWarning.EMPTY_INPUT)

    tracks = []
    for lineno, line in enumerate(raw_text.split('\n'), 1):
        track = parse_track_line(line)
        if track is None:
            if line.strip():
                logger.debug("Line %d has no track title, skipped: %r", lineno, line.strip())
            continue
        tracks.append(track)

    if not tracks:
        return ParseResult(warning=BatchWarning.NO_VALID_TRACKS)
    return ParseResult(tracks=tuple(tracks))


def import_track_list(raw_text: Optional[str]) -> ParseResult:
    """Run the batch import on pasted text and log the outcome."""
    result = parse_track_list(raw_text)
    if result.warning is not None:
        logger.warning(result.warning.message, extra={'hint': result.warning.hint})
    else:
        logger.info("Imported %d track(s)", len(result))
    return result

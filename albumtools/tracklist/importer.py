#!/usr/bin/env python3
"""
Batch track import from the command line.

Reads a pasted track list (one track per line), parses it, and prints the
tracks as JSON or YAML. With --payload, prints the album-save track list
(trackNumber/title/duration) instead of editor rows.

Usage:
    python -m albumtools.tracklist tracks.txt
    pbpaste | python -m albumtools.tracklist --payload --format yaml

Exit codes:
    0 - At least one track imported
    1 - Input could not be read
    2 - Nothing to import (empty input or no valid tracks)
"""

import argparse
import json
import logging
import sys

import yaml

from albumtools.shared.colors import Colors, colorize
from albumtools.shared.config import OUTPUT_FORMATS, get_output_format, load_config
from albumtools.shared.logging_config import setup_logging
from albumtools.shared.text_utils import format_duration
from albumtools.tracklist.parser import import_track_list
from albumtools.tracklist.payload import duration_seconds, tracks_to_payload

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_NOTHING_IMPORTED = 2


def read_input(source):
    """Return the text of ``source``, or stdin for None / '-'."""
    if source in (None, '-'):
        return sys.stdin.read()
    with open(source, encoding='utf-8') as f:
        return f.read()


def render(data, fmt):
    if fmt == 'yaml':
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip('\n')
    return json.dumps(data, indent=2, ensure_ascii=False)


def print_summary(tracks, stream=None):
    """Write a numbered track summary with formatted durations."""
    stream = stream if stream is not None else sys.stderr
    for number, track in enumerate(tracks, 1):
        line = f"  {number:2d}. {track.title}"
        if track.has_duration:
            length = format_duration(duration_seconds(track.minutes, track.seconds))
            line += f" {colorize(length, 'CYAN')}"
        print(line, file=stream)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Parse a pasted track list into structured album tracks',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='Lines look like "1. Track Name 3:45", "Track Name 1:02:03" or just "Track Name".',
    )
    parser.add_argument('source', nargs='?', default=None,
                        help='File with one track per line (default: stdin)')
    parser.add_argument('--format', '-f', choices=OUTPUT_FORMATS, default=None,
                        help='Output format (default: batch_import.output_format from config, else json)')
    parser.add_argument('--payload', action='store_true',
                        help='Print the album-save track list instead of editor rows')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colored output')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show debug output')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only show warnings and errors')

    args = parser.parse_args(argv)

    if args.no_color:
        Colors.disable()
    else:
        Colors.auto()

    config = load_config(fallback={})
    setup_logging('albumtools', verbose=args.verbose, quiet=args.quiet, config=config)
    fmt = args.format or get_output_format(config)

    try:
        text = read_input(args.source)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.source, e)
        return EXIT_READ_ERROR

    result = import_track_list(text)
    if result.warning is not None:
        return EXIT_NOTHING_IMPORTED

    if not args.quiet:
        print_summary(result)

    if args.payload:
        data = tracks_to_payload(result)
    else:
        data = [track.to_dict() for track in result]
    print(render(data, fmt))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

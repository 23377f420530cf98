#!/usr/bin/env python3
"""Allow running as: python3 -m albumtools.tracklist [FILE]"""

import sys

from albumtools.tracklist.importer import main

sys.exit(main() or 0)

"""ANSI color helpers for batch-import terminal output."""

import sys

_DEFAULTS = {
    'RED': '\033[0;31m',
    'GREEN': '\033[0;32m',
    'YELLOW': '\033[1;33m',
    'CYAN': '\033[0;36m',
    'BOLD': '\033[1m',
    'NC': '\033[0m',  # reset
}


class Colors:
    """ANSI escape codes, blanked out when the target stream is not a TTY."""
    RED = _DEFAULTS['RED']
    GREEN = _DEFAULTS['GREEN']
    YELLOW = _DEFAULTS['YELLOW']
    CYAN = _DEFAULTS['CYAN']
    BOLD = _DEFAULTS['BOLD']
    NC = _DEFAULTS['NC']

    @classmethod
    def disable(cls):
        for name in _DEFAULTS:
            setattr(cls, name, '')

    @classmethod
    def enable(cls):
        for name, code in _DEFAULTS.items():
            setattr(cls, name, code)

    @classmethod
    def auto(cls, stream=None):
        """Disable colors if ``stream`` (stderr by default) is not a TTY."""
        stream = stream if stream is not None else sys.stderr
        isatty = getattr(stream, 'isatty', None)
        if isatty is None or not isatty():
            cls.disable()


def colorize(text, color_name):
    """Wrap ``text`` in the named color, e.g. ``colorize('3:45', 'CYAN')``."""
    color = getattr(Colors, color_name.upper(), '')
    if not color:
        return text
    return f"{color}{text}{Colors.NC}"

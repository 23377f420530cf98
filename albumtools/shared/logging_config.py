"""Logging setup for album-tools entry points.

Terminal output is one colored line per record, e.g.::

    [WARN] No valid tracks found
           Each line needs a title; ordinals and durations alone are skipped

The indented second line comes from a ``hint`` passed in ``extra``. The
optional debug log file gets plain records with timestamps and logger names.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from albumtools.shared.colors import Colors
from albumtools.shared.config import get_log_settings

# Set once a file handler is on the root logger
_file_logging_configured = False


class ColorFormatter(logging.Formatter):
    """Level-tagged terminal formatter with optional hint and traceback lines."""

    LEVEL_COLORS = {
        logging.DEBUG: ('CYAN', '[DEBUG]'),
        logging.INFO: ('GREEN', '[INFO]'),
        logging.WARNING: ('YELLOW', '[WARN]'),
        logging.ERROR: ('RED', '[ERROR]'),
        logging.CRITICAL: ('RED', '[CRITICAL]'),
    }

    def format(self, record):
        color_name, prefix = self.LEVEL_COLORS.get(record.levelno, ('NC', '[LOG]'))
        color = getattr(Colors, color_name, '')
        lines = [f"{color}{prefix}{Colors.NC} {record.getMessage()}"]

        hint = getattr(record, 'hint', None)
        if hint:
            lines.append(' ' * (len(prefix) + 1) + str(hint))
        if record.exc_info:
            lines.append(self.formatException(record.exc_info))
        return '\n'.join(lines)


def setup_logging(name, verbose=False, quiet=False, config=None, stream=None):
    """Configure the named logger for a command-line run.

    Args:
        name: Logger name. Entry points pass the package name ("albumtools")
              so every module logger underneath shares the handler.
        verbose: If True, show DEBUG messages
        quiet: If True, show only WARNING and above
        config: Optional config dict, forwarded to configure_file_logging()
        stream: Terminal stream, stderr by default

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(ColorFormatter())
        logger.addHandler(handler)

    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    if config is not None:
        configure_file_logging(config)

    return logger


def configure_file_logging(config):
    """Attach a RotatingFileHandler to the root logger if config enables it.

    Settings come from get_log_settings(), which has already replaced
    invalid values with defaults.

    Returns:
        The file handler if logging was enabled, None otherwise.
    """
    global _file_logging_configured

    settings = get_log_settings(config)
    if settings is None or _file_logging_configured:
        return None

    Path(settings.file).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.file,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )
    handler.setLevel(settings.level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > settings.level:
        root.setLevel(settings.level)

    _file_logging_configured = True
    logging.getLogger("albumtools").debug(
        "File logging enabled: %s (level=%s)", settings.file, settings.level_name
    )
    return handler

import logging
import sys
from typing import Optional, TextIO

from va_compensation_calculator.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL

_is_configured = False


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger once with a single console handler.

    Records go to stderr so they never interleave with the menu text on
    stdout. Calling it again is a no-op.
    """
    global _is_configured

    if _is_configured:
        return

    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(log_level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(console)

    _is_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, configuring logging on first use."""
    if not _is_configured:
        setup_logging()
    return logging.getLogger(name)

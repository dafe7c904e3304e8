"""Logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _TaskboardHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces only our own handler."""


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Attach a single stderr handler to the root logger.

    Safe to call more than once; handlers installed by others are kept.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        if isinstance(h, _TaskboardHandler):
            root.removeHandler(h)

    handler = _TaskboardHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    logging.captureWarnings(True)

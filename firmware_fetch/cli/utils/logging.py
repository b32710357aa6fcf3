import logging
import sys

logger = logging.getLogger("firmware_fetch")

INFO_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def configure_logging(debug: bool):
    """
    Send package logs to stderr; stdout is reserved for command results.

    Debug mode lowers the level and prefixes each record with its level and
    logger name.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    handler = next((h for h in logger.handlers if isinstance(h, StderrHandler)), None)
    if handler is None:
        handler = StderrHandler()
        logger.addHandler(handler)

    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else INFO_FORMAT))

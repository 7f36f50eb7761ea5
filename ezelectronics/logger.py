import copy
import logging
import os

from rich.logging import RichHandler

LOG_FORMAT = "[%(name)s]  %(message)s"


class AlignedNameFormatter(logging.Formatter):
    """Pads logger names to a common width so messages line up in the console.

    The width only grows, and it belongs to the formatter instance. The record
    handed in is left untouched because other handlers may format it too.
    """

    def __init__(self, fmt=LOG_FORMAT, datefmt=None, name_width=14):
        super().__init__(fmt, datefmt)
        self.name_width = name_width

    def format(self, record):
        self.name_width = max(self.name_width, len(record.name))
        padded = copy.copy(record)
        padded.name = record.name.ljust(self.name_width)
        return super().format(padded)


def get_logger(name=None) -> logging.Logger:
    """Logger for an ezelectronics module, printed through rich. Set DEBUG for verbose output."""
    logger = logging.getLogger(name or "ezelectronics")
    level = logging.DEBUG if os.getenv("DEBUG") else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(show_path=False, rich_tracebacks=True, log_time_format="[%X]")
        handler.setFormatter(AlignedNameFormatter())
        handler.setLevel(level)
        logger.addHandler(handler)
        logger.propagate = False

    return logger

"""Logging for the fund_monthly CLI.

Progress of a run (file read, records skipped, months written, the closing
processing summary) goes to stdout and, when ``FUND_LOG_PATH`` is set, to a
log file as well.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# driver chatter during the optional MongoDB load
QUIET_LOGGERS = ("pymongo",)


def configure_logging(log_path: Path | None = None, level: int = logging.INFO) -> None:
    """Route fund_monthly logs to stdout and, optionally, to `log_path`.

    Calling it again replaces the handlers installed by a previous call.
    `QUIET_LOGGERS` are held at WARNING whatever `level` is.

    Args:
        log_path: Optional file to append logs to; parent dirs are created.
        level: Root logging level (defaults to INFO).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

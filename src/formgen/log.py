"""Logging setup for the command line tool.

Library modules only call ``logging.getLogger(__name__)``; the package adds a
``NullHandler`` to the ``formgen`` logger. Handlers are attached here, on
explicit request, so importing the library never writes anywhere.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOGGER_NAME = "formgen"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_file_path(log_file: os.PathLike[str] | str | None = None) -> Path | None:
    """Explicit file, else ``$FORMGEN_LOG_DIR/formgen.log``, else no file."""

    if log_file is not None:
        return Path(log_file)
    raw = os.environ.get("FORMGEN_LOG_DIR", "").strip()
    if raw:
        return Path(raw).expanduser() / "formgen.log"
    return None


def configure_logging(
    level: str | int = logging.INFO,
    *,
    log_file: os.PathLike[str] | str | None = None,
    console: bool = True,
) -> logging.Logger:
    """(Re)configure the ``formgen`` logger and return it.

    Handlers installed by an earlier call are closed and replaced, so calling
    this twice never duplicates output. Child loggers of library modules keep
    propagating to it.
    """

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    path = log_file_path(log_file)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "log_file_path"]

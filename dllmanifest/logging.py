"""Logging utilities for dllmanifest runs.

Skip decisions are traced at DEBUG. The console shows them only with
``--verbose``, while a log file, when requested, always records them so a
run can be audited after the fact.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "dllmanifest"
_CONSOLE_FORMAT = "[dllmanifest] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a component logger under the dllmanifest hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console and optional file handlers to the dllmanifest logger."""
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        trace = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        trace.setLevel(logging.DEBUG)
        trace.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(trace)

    return logger


__all__ = ["configure_logging", "get_logger"]

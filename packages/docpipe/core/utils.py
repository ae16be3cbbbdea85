"""Utilities shared by docpipe tools."""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path

from .config import DEFAULT_LOG_LEVEL, PipelineSettings
from .exceptions import OperationCancelledError

ROOT_LOGGER = "docpipe"

_PDF_SUFFIX = re.compile(r"\.pdf$", re.IGNORECASE)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    # Child loggers inherit their level from the package logger.
    root = logging.getLogger(ROOT_LOGGER)
    if root.level == logging.NOTSET:
        root.setLevel(DEFAULT_LOG_LEVEL)
    return logger


def configure_logging(settings: PipelineSettings) -> None:
    """Apply ``settings.log_level`` to every ``docpipe.*`` logger."""

    logging.getLogger(ROOT_LOGGER).setLevel(settings.log_level)


def strip_pdf_suffix(filename: str) -> str:
    """Return ``filename`` without a trailing ``.pdf`` (any case)."""

    return _PDF_SUFFIX.sub("", Path(filename).name)


def check_cancelled(cancel: threading.Event | None, operation: str) -> None:
    if cancel is not None and cancel.is_set():
        raise OperationCancelledError(f"{operation} was cancelled before completion.")

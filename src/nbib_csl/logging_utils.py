"""Logging setup for the ``nbib_csl`` logger namespace.

Records go to stderr; stdout carries the CSL-JSON output of the CLI.
"""
import logging
import os
import sys

from .config import DEFAULT_LOG_LEVEL, LOG_LEVELS

_LOGGER_NAME = "nbib_csl"


def _resolve_level(level: str | None) -> str:
    normalized = (level or "").strip().upper()
    return normalized if normalized in LOG_LEVELS else DEFAULT_LOG_LEVEL


def _build_handler():
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children, configuring it on first use."""
    package_logger = logging.getLogger(_LOGGER_NAME)
    if not package_logger.handlers:
        package_logger.addHandler(_build_handler())
        package_logger.setLevel(_resolve_level(os.getenv("NBIB_CSL_LOG_LEVEL")))
        package_logger.propagate = False
    if not name:
        return package_logger
    return package_logger.getChild(name)


def set_log_level(level: str | None):
    get_logger().setLevel(_resolve_level(level))


def log_exception(context: str, exc: Exception, logger: logging.Logger | None = None):
    """Log a conversion failure with its error code, with traceback when one is active."""
    active_logger = logger or get_logger()
    code = getattr(exc, "code", None)
    if sys.exc_info()[0] is not None:
        active_logger.exception("%s | %s: %s | code=%s", context, type(exc).__name__, exc, code)
    else:
        active_logger.error("%s | %s: %s | code=%s", context, type(exc).__name__, exc, code)

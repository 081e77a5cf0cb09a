"""Logging configuration for upstream-guard.

Every module logs through ``logging.getLogger(__name__)``, so classifier records
(``upstreamguard.interceptor.error_interceptor``) and client records propagate to
the package logger configured here.
"""

import logging
import sys

from upstreamguard.config import AppConfig

PACKAGE_LOGGER = "upstreamguard"
LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

_handler: logging.Handler | None = None


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def setup_logging(level: int | str = logging.INFO) -> logging.Handler:
    """Attach a stderr handler to the package logger and apply ``level``.

    The handler is added once; later calls only change the level, so the CLI
    callback and ``create_app`` can both configure logging in one process.
    """
    global _handler
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(_resolve_level(level))

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        package.addHandler(_handler)
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return _handler


def setup_logging_from_config(config: AppConfig) -> logging.Handler:
    """UPSTREAM_GUARD_LOG_LEVEL 값으로 로깅 설정."""
    return setup_logging(config.log_level_value)


def reset_logging() -> None:
    """Detach the package handler. For testing only."""
    global _handler
    package = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package.removeHandler(_handler)
        _handler = None
    package.setLevel(logging.NOTSET)

"""Logging setup for the package, driven by the KHANIJ_LOG variable."""

from __future__ import annotations

import logging
import os
import sys

ENV_VAR = "KHANIJ_LOG"
DEFAULT_FILTER = "warn"
LOGGER_NAME = "khanij"
TRACE = 5

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}


def _parse_filter(spec: str) -> int | None:
    """Return the level a filter spec gives this package, or None if invalid."""
    level: int | None = None
    directives = [d.strip() for d in spec.split(",") if d.strip()]
    if not directives:
        return None
    for directive in directives:
        target, sep, name = directive.rpartition("=")
        if not sep:
            target, name = "", directive
        parsed = _LEVELS.get(name.strip().lower())
        if parsed is None:
            return None
        target = target.strip()
        if not target:
            if level is None:
                level = parsed
        elif target == LOGGER_NAME or target.startswith(LOGGER_NAME + "::"):
            level = parsed
    return level if level is not None else _LEVELS[DEFAULT_FILTER]


class _Handler(logging.StreamHandler):
    """Marker class so repeated setup replaces rather than stacks handlers."""


def init() -> logging.Logger:
    """Configure the package logger from KHANIJ_LOG, defaulting to ``warn``."""
    logging.addLevelName(TRACE, "TRACE")
    spec = os.environ.get(ENV_VAR)
    level = _parse_filter(spec) if spec is not None else None
    if level is None:
        level = _LEVELS[DEFAULT_FILTER]

    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if isinstance(h, _Handler)]:
        logger.removeHandler(handler)
    handler = _Handler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)5s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
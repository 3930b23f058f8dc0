"""Console logging for build runs."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import typer

SUCCESS = 25
LOG_PREFIX = "[.dev build]"

logging.addLevelName(SUCCESS, "SUCCESS")

_LEVEL_COLORS = {
    logging.DEBUG: typer.colors.BRIGHT_BLACK,
    logging.INFO: typer.colors.BLUE,
    SUCCESS: typer.colors.GREEN,
    logging.WARNING: typer.colors.YELLOW,
    logging.ERROR: typer.colors.RED,
    logging.CRITICAL: typer.colors.RED,
}


class PrefixFormatter(logging.Formatter):
    """Prefix each record with a bold tag coloured by its level."""

    def __init__(self, *, color: bool = True) -> None:
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.color:
            return f"{LOG_PREFIX} {message}"
        fg = _LEVEL_COLORS.get(record.levelno, typer.colors.BLUE)
        return f"{typer.style(LOG_PREFIX, fg=fg, bold=True)} {message}"


class BuildConsoleHandler(logging.StreamHandler):
    """Stream handler installed by ``configure_logging``."""

    def __init__(
        self,
        stream: TextIO,
        *,
        max_level: int | None = None,
        min_level: int = logging.NOTSET,
    ) -> None:
        super().__init__(stream)
        self.max_level = max_level
        self.setLevel(min_level)

    def filter(self, record: logging.LogRecord) -> bool:
        if self.max_level is not None and record.levelno > self.max_level:
            return False
        return bool(super().filter(record))


def log_success(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log ``msg`` at the ``SUCCESS`` level."""
    logger.log(SUCCESS, msg, *args)


def configure_logging(
    verbose: bool = False,
    *,
    stream: TextIO | None = None,
    err_stream: TextIO | None = None,
    color: bool | None = None,
) -> logging.Logger:
    """Install the build console handlers on the package logger.

    Parameters
    ----------
    verbose : bool, default=False
        Emit ``DEBUG`` records when enabled, ``INFO`` and above otherwise.
    stream : TextIO | None, default=None
        Stream for records below ``ERROR``. Defaults to ``sys.stdout``.
    err_stream : TextIO | None, default=None
        Stream for ``ERROR`` and above. Defaults to ``sys.stderr``.
    color : bool | None, default=None
        Force colour on or off. Auto-detected from the stream when omitted.

    Returns
    -------
    logging.Logger
        The configured ``site_builder`` logger.
    """
    stream = stream or sys.stdout
    err_stream = err_stream or sys.stderr
    if color is None:
        color = bool(getattr(stream, "isatty", lambda: False)())

    logger = logging.getLogger("site_builder")
    for handler in list(logger.handlers):
        if isinstance(handler, BuildConsoleHandler):
            logger.removeHandler(handler)

    formatter = PrefixFormatter(color=color)
    out_handler = BuildConsoleHandler(stream, max_level=logging.ERROR - 1)
    err_handler = BuildConsoleHandler(err_stream, min_level=logging.ERROR)
    for handler in (out_handler, err_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger

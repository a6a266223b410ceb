"""Logging configuration and utilities."""
from __future__ import annotations

import logging
import os

from catalog_meta.infra.config.settings import settings


class _LoggingState:
    """
    Module-level logging state container.
    """

    configured: bool = False

    def reset(self) -> None:
        """Reset state for testing."""
        self.configured = False


_state = _LoggingState()


class RawValueTruncationFilter(logging.Filter):
    """
    Shortens log messages that carry long raw field values.

    Free-text metadata (descriptions, transcripts) ends up in warnings about
    dropped values; the message is cut to ``max_length`` characters. If
    formatting the record fails the record is passed through unchanged.
    """

    def __init__(self, max_length: int | None = None) -> None:
        super().__init__()
        self.max_length = max_length or settings.log_value_max_length

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except (TypeError, ValueError):
            return True
        if len(msg) > self.max_length:
            record.msg = f"{msg[:self.max_length]}... [{len(msg) - self.max_length} chars truncated]"
            record.args = ()
        return True

    def __repr__(self) -> str:
        return f"RawValueTruncationFilter(max_length={self.max_length})"


class ColorFormatter(logging.Formatter):
    """
    Adds terminal colours to level names.
    Works like a plain Formatter but swaps record.levelname while formatting.
    """

    RESET = "\033[0m"
    COLORS = {
        "DEBUG": "\033[36m",  # cyan
        "INFO": "\033[32m",  # green
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",  # red
        "CRITICAL": "\033[35m",  # magenta
    }

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        color = self.COLORS.get(original_levelname, "")
        if color:
            record.levelname = f"{color}{original_levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def setup_logging(default_level: int = logging.INFO) -> None:
    """
    Configure the root logger once for the whole package.
    Every other logger shares its handler and format.
    """
    root_logger = logging.getLogger()
    # pytest may have cleared the handlers; configure again in that case
    if _state.configured and root_logger.handlers:
        return

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, default_level)
    if settings.is_prod:
        level = max(level, logging.INFO)

    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.addFilter(RawValueTruncationFilter())
    formatter = ColorFormatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    _state.configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    setup_logging()
    return logging.getLogger(name)

"""
Logging setup for FreshCut.

Importing this module configures the root logger once. The level comes from
LOG_LEVEL; on Vercel lines are kept short because the platform stamps them.

Usage:
    from freshcut.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

FORMATS = {
    "local": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "vercel": "%(levelname)s - %(name)s - %(message)s",
}

# Supabase and Upstash clients log every HTTP request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "hpack")

# Control characters that could forge extra log lines (CWE-117)
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def configure_logging() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    style = "vercel" if os.environ.get("VERCEL") == "1" else "local"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMATS[style]))

    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _clip(value: str | None, limit: int, suffix: str = "") -> str:
    if not value:
        return "N/A"
    text = str(value).translate(_LOG_ESCAPES)
    return text if len(text) <= limit else text[:limit] + suffix


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Device and product ids arrive from clients: escaped, first 8 chars only."""
    return _clip(id_value, 8)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Escape and truncate free text (search terms, addresses) for logging.

    Returns "N/A" for empty values; truncated text ends with "...".
    """
    return _clip(value, max_length, "...")


__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]

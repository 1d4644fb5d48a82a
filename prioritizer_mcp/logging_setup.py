"""Logging configuration for the server process."""

from __future__ import annotations

import logging
import sys


class _ThirdPartyNoiseFilter(logging.Filter):
    """
    Keep prioritizer_mcp logs; let third-party loggers
    (pymongo, google-auth, mcp, uvicorn) through only at WARNING+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("prioritizer_mcp"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.

    stdout is left alone because the stdio transport speaks MCP over it.
    Call this ONCE, before the server starts.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)

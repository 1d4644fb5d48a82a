"""Enums for Prioritizer MCP."""

from enum import Enum
from typing import Any


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    JSON = "json"  # Machine-readable records (default, matches the HTTP API)
    MARKDOWN = "markdown"  # Human-readable
    CONCISE = "concise"  # One line per task


class TaskStatus(str, Enum):
    """Canonical set of task statuses.

    This enum is the only place statuses are defined. Validation and
    filtering derive from it, so a new status only needs a new member here.
    """

    NOT_STARTED = "NOT_STARTED"
    COMPLETED = "COMPLETED"


INITIAL_STATUS = TaskStatus.NOT_STARTED

VALID_STATUSES = frozenset(status.value for status in TaskStatus)


def is_valid_status(candidate: Any) -> bool:
    """Return True if ``candidate`` is exactly one of the canonical status values."""
    return isinstance(candidate, str) and candidate in VALID_STATUSES

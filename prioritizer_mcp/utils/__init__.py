"""Utility functions for Prioritizer MCP."""

from prioritizer_mcp.utils.formatters import (
    _format_error,
    _format_task,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from prioritizer_mcp.utils.parsers import (
    _parse_status_update,
    _parse_task,
    _parse_task_submission,
    _parse_tasks,
)

__all__ = [
    "_parse_task",
    "_parse_tasks",
    "_parse_task_submission",
    "_parse_status_update",
    "_format_task",
    "_format_tasks",
    "_format_task_concise",
    "_format_tasks_concise",
    "_format_task_markdown",
    "_format_tasks_markdown",
    "_format_error",
]

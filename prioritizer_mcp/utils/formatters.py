"""Formatting utilities for task output."""

import json
import logging
from datetime import datetime, timezone

from prioritizer_mcp.enums import ResponseFormat, TaskStatus
from prioritizer_mcp.errors import PrioritizerError, StoreError
from prioritizer_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)


def _format_timestamp(ms: int) -> str:
    """Render milliseconds since epoch as 'YYYY-MM-DD HH:MM UTC'."""
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task in concise format.

    Output: "#65a1b2c3: Write report (score:27.52, NOT_STARTED)"
    """
    return f"#{task.id[:8]}: {task.title[:50]} (score:{task.score:.2f}, {task.status.value})"


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | COMPLETED
    #65a1b2c3: Task one (score:27.52, COMPLETED)
    #65a1b2c4: Task two (score:20.10, COMPLETED)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    lines.extend(_format_task_concise(task) for task in tasks)
    return "\n".join(lines)


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    icon = "[x]" if task.status == TaskStatus.COMPLETED else "[ ]"

    lines = [f"### {icon} {task.title}"]
    lines.append(
        " | ".join(
            [
                f"**Score**: {task.score:.2f}",
                f"**Difficulty**: {task.difficulty}",
                f"**Impact**: {task.impact}",
                f"**Time**: {task.time}",
                f"**Urgency**: {task.urgency}",
            ]
        )
    )
    lines.append(
        f"**Status**: {task.status.value} (since {_format_timestamp(task.status_changed)}) | **ID**: {task.id}"
    )
    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_task(task: TaskModel, response_format: ResponseFormat) -> str:
    """Render one task in the requested format."""
    if response_format == ResponseFormat.JSON:
        return json.dumps(task.to_record(), indent=2)
    if response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task)
    return _format_task_markdown(task)


def _format_tasks(tasks: list[TaskModel], response_format: ResponseFormat, title: str = "Tasks") -> str:
    """Render a task list in the requested format."""
    if response_format == ResponseFormat.JSON:
        return json.dumps({"count": len(tasks), "tasks": [t.to_record() for t in tasks]}, indent=2)
    if response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, title)
    return _format_tasks_markdown(tasks, title)


def _format_error(error: PrioritizerError, response_format: ResponseFormat) -> str:
    """
    Render an error outcome and log it.

    Store failures are operational and logged as errors; the other kinds are
    routine client mistakes and only logged at debug level.
    """
    if isinstance(error, StoreError):
        logger.error("Store failure: %s", error.message)
    else:
        logger.debug("Request rejected (%s): %s", error.kind, error.message)

    if response_format == ResponseFormat.JSON:
        return json.dumps(
            {"error": {"kind": error.kind, "message": error.message, "status": error.status_code}},
            indent=2,
        )
    return f"Error ({error.kind}): {error.message}"

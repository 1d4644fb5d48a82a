"""Task endpoint MCP tools for Prioritizer."""

from mcp.types import ToolAnnotations

from prioritizer_mcp.auth import validate_token
from prioritizer_mcp.config import get_settings
from prioritizer_mcp.enums import TaskStatus, is_valid_status
from prioritizer_mcp.errors import PrioritizerError, ValidationError
from prioritizer_mcp.lifecycle import create_task, list_tasks, update_task_status
from prioritizer_mcp.models.inputs import (
    GetCompletedTasksInput,
    GetTasksInput,
    PostTaskInput,
    UpdateTaskStatusInput,
)
from prioritizer_mcp.server import mcp
from prioritizer_mcp.store import get_task_store
from prioritizer_mcp.utils.formatters import _format_error, _format_task, _format_tasks
from prioritizer_mcp.utils.parsers import _parse_status_update, _parse_task_submission


@mcp.tool(
    name="prioritizer_post_task",
    annotations=ToolAnnotations(
        title="Submit Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def prioritizer_post_task(params: PostTaskInput) -> str:
    """
    Create a new task for the caller and compute its priority score.

    USE THIS WHEN:
    - Adding a task to be prioritized

    DO NOT USE WHEN:
    - Marking a task done or reopening it → use prioritizer_update_task_status instead

    The score is always computed by the server:
    sqrt((21 - difficulty)^2 + impact^2 * 1.2 + (21 - time)^2 + urgency^2 * 1.2)
    so easy, quick, high-impact, urgent tasks rank highest. New tasks start as
    NOT_STARTED.

    Args:
        params: PostTaskInput containing authorization, body and response_format

    Returns:
        The stored task (with id and score), or an error outcome

    Examples:
        - body={"title": "Write report", "difficulty": 5, "impact": 8, "time": 3, "urgency": 13}
    """
    try:
        owner_id = validate_token(params.authorization, get_settings())
        submission = _parse_task_submission(params.body)
        task = create_task(get_task_store(), owner_id, submission)
    except PrioritizerError as e:
        return _format_error(e, params.response_format)

    return _format_task(task, params.response_format)


@mcp.tool(
    name="prioritizer_get_tasks",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def prioritizer_get_tasks(params: GetTasksInput) -> str:
    """
    List the caller's tasks.

    USE THIS WHEN:
    - Deciding what to work on next (highest score first)
    - Listing tasks with a given status

    DO NOT USE WHEN:
    - You only want finished work → use prioritizer_get_completed_tasks instead

    Without a status, tasks are ordered by score, highest first. With a
    status, the most recently changed task comes first.

    Args:
        params: GetTasksInput containing authorization, optional status and response_format

    Returns:
        The caller's tasks, or an error outcome
    """
    try:
        owner_id = validate_token(params.authorization, get_settings())
        status = None
        if params.status is not None:
            if not is_valid_status(params.status):
                allowed = ", ".join(s.value for s in TaskStatus)
                raise ValidationError(f"Invalid status '{params.status}'. Must be one of: {allowed}")
            status = TaskStatus(params.status)
        tasks = list_tasks(get_task_store(), owner_id, status)
    except PrioritizerError as e:
        return _format_error(e, params.response_format)

    title = "Tasks" if status is None else f"Tasks ({status.value})"
    return _format_tasks(tasks, params.response_format, title)


@mcp.tool(
    name="prioritizer_get_completed_tasks",
    annotations=ToolAnnotations(
        title="List Completed Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def prioritizer_get_completed_tasks(params: GetCompletedTasksInput) -> str:
    """
    List the caller's completed tasks, most recently completed first.

    An empty list is a normal result, not an error.

    Args:
        params: GetCompletedTasksInput containing authorization and response_format

    Returns:
        The caller's completed tasks, or an error outcome
    """
    try:
        owner_id = validate_token(params.authorization, get_settings())
        tasks = list_tasks(get_task_store(), owner_id, TaskStatus.COMPLETED)
    except PrioritizerError as e:
        return _format_error(e, params.response_format)

    return _format_tasks(tasks, params.response_format, "Completed Tasks")


@mcp.tool(
    name="prioritizer_update_task_status",
    annotations=ToolAnnotations(
        title="Update Task Status",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def prioritizer_update_task_status(params: UpdateTaskStatusInput) -> str:
    """
    Change the status of one of the caller's tasks.

    USE THIS WHEN:
    - Marking a task COMPLETED
    - Reopening a completed task (back to NOT_STARTED)

    Only the status and its change timestamp are modified; the score and all
    other fields stay as they were. A task that belongs to someone else is
    reported exactly like a task that does not exist.

    Args:
        params: UpdateTaskStatusInput containing authorization, body and response_format

    Returns:
        The updated task, or an error outcome

    Examples:
        - body={"taskId": "65a1b2c3d4e5f60718293a4b", "status": "COMPLETED"}
    """
    try:
        owner_id = validate_token(params.authorization, get_settings())
        update = _parse_status_update(params.body)
        task = update_task_status(get_task_store(), owner_id, update)
    except PrioritizerError as e:
        return _format_error(e, params.response_format)

    return _format_task(task, params.response_format)

"""
MCP Server for task prioritization.

This server provides tools to submit tasks, get them scored by priority,
list them, and mark them completed, with every task scoped to the
authenticated caller (Google ID tokens, or demo tokens in demo mode).
"""

# Re-export enums
from prioritizer_mcp.enums import INITIAL_STATUS, VALID_STATUSES, ResponseFormat, TaskStatus, is_valid_status

# Re-export errors
from prioritizer_mcp.errors import AuthError, NotFoundError, PrioritizerError, StoreError, ValidationError

# Re-export models
from prioritizer_mcp.models import (
    GetCompletedTasksInput,
    GetTasksInput,
    PostTaskInput,
    StatusUpdate,
    TaskModel,
    TaskSubmission,
    UpdateTaskStatusInput,
)

# Re-export domain operations
from prioritizer_mcp.scoring import compute_score, score_submission
from prioritizer_mcp.lifecycle import create_task, list_tasks, update_task_status

# Re-export MCP server instance
from prioritizer_mcp.server import mcp, run

# Re-export tools
from prioritizer_mcp.tools import (
    prioritizer_get_completed_tasks,
    prioritizer_get_tasks,
    prioritizer_post_task,
    prioritizer_update_task_status,
)

# Re-export utilities (including private functions used by tests)
from prioritizer_mcp.utils import (
    _format_error,
    _format_task,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_status_update,
    _parse_task,
    _parse_task_submission,
    _parse_tasks,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "INITIAL_STATUS",
    "VALID_STATUSES",
    "is_valid_status",
    # Errors
    "PrioritizerError",
    "ValidationError",
    "AuthError",
    "NotFoundError",
    "StoreError",
    # Models
    "TaskModel",
    "TaskSubmission",
    "StatusUpdate",
    "PostTaskInput",
    "GetTasksInput",
    "GetCompletedTasksInput",
    "UpdateTaskStatusInput",
    # Domain operations
    "compute_score",
    "score_submission",
    "create_task",
    "list_tasks",
    "update_task_status",
    # Utility functions
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
    # Tools
    "prioritizer_post_task",
    "prioritizer_get_tasks",
    "prioritizer_get_completed_tasks",
    "prioritizer_update_task_status",
    # MCP server instance
    "mcp",
    "run",
]

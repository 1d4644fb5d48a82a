"""Pydantic models for Prioritizer MCP."""

from prioritizer_mcp.models.inputs import (
    GetCompletedTasksInput,
    GetTasksInput,
    PostTaskInput,
    StatusUpdate,
    TaskSubmission,
    UpdateTaskStatusInput,
)
from prioritizer_mcp.models.task import TaskModel

__all__ = [
    # Task models
    "TaskModel",
    # Request body models
    "TaskSubmission",
    "StatusUpdate",
    # Tool input models
    "PostTaskInput",
    "GetTasksInput",
    "GetCompletedTasksInput",
    "UpdateTaskStatusInput",
]

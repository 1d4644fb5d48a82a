"""MCP tool definitions for Prioritizer."""

# Import all tools to register them with the MCP server
from prioritizer_mcp.tools.endpoints import (
    prioritizer_get_completed_tasks,
    prioritizer_get_tasks,
    prioritizer_post_task,
    prioritizer_update_task_status,
)

__all__ = [
    "prioritizer_post_task",
    "prioritizer_get_tasks",
    "prioritizer_get_completed_tasks",
    "prioritizer_update_task_status",
]

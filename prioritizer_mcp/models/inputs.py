"""Input models for Prioritizer MCP tools."""

import math
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from prioritizer_mcp.enums import ResponseFormat, TaskStatus, is_valid_status

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# ============================================================================
# Request Body Models
# ============================================================================


class TaskSubmission(BaseModel):
    """Body of a task submission. Unknown fields are ignored."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(..., description="Task title (required)", min_length=1)
    difficulty: int | float = Field(..., description="How hard the task is (roughly 1-20)")
    impact: int | float = Field(..., description="How much the task matters (roughly 1-20)")
    time: int | float = Field(..., description="Effort required (roughly 1-20)")
    urgency: int | float = Field(..., description="How soon it needs doing (roughly 1-20)")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> Any:
        if not isinstance(v, str):
            raise ValueError("Title must be a string")
        return v

    @field_validator("difficulty", "impact", "time", "urgency", mode="before")
    @classmethod
    def validate_number(cls, v: Any) -> Any:
        # bool is an int subclass but not a number here
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("Must be a number")
        # Stored as a BSON int64; also keeps math.isfinite from overflowing
        if isinstance(v, int) and not _INT64_MIN <= v <= _INT64_MAX:
            raise ValueError("Number out of range")
        if not math.isfinite(v):
            raise ValueError("Must be a finite number")
        return v


class StatusUpdate(BaseModel):
    """Body of a status change request."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    task_id: str | None = Field(default=None, alias="taskId", description="ID of the task to update")
    status: str | None = Field(default=None, description="New status")

    @model_validator(mode="after")
    def validate_update(self) -> "StatusUpdate":
        if self.task_id is None or self.status is None:
            raise ValueError("taskId and status are required")
        if not ObjectId.is_valid(self.task_id):
            raise ValueError("Invalid task ID format")
        if not is_valid_status(self.status):
            allowed = ", ".join(s.value for s in TaskStatus)
            raise ValueError(f"Invalid status '{self.status}'. Must be one of: {allowed}")
        return self

    @property
    def target_status(self) -> TaskStatus:
        return TaskStatus(self.status)


# ============================================================================
# Tool Input Models
# ============================================================================

_AUTH_DESCRIPTION = "Authorization header value: 'Bearer <Google ID token>' (or 'Bearer dummy-token-<user>' in demo mode)"
_FORMAT_DESCRIPTION = "Output format: 'json' for records, 'markdown' for human-readable, 'concise' for one line per task"


class PostTaskInput(BaseModel):
    """Input model for submitting a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    authorization: str | None = Field(default=None, description=_AUTH_DESCRIPTION)
    body: str | dict[str, Any] | None = Field(
        default=None,
        description="Task as a JSON object or JSON text: title, difficulty, impact, time, urgency",
    )
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_FORMAT_DESCRIPTION)


class GetTasksInput(BaseModel):
    """Input model for listing the caller's tasks.

    Not whitespace-stripped: the status filter must match a canonical value exactly.
    """

    authorization: str | None = Field(default=None, description=_AUTH_DESCRIPTION)
    status: str | None = Field(
        default=None,
        description="Only return tasks with this status (NOT_STARTED or COMPLETED); all tasks if omitted",
    )
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_FORMAT_DESCRIPTION)


class GetCompletedTasksInput(BaseModel):
    """Input model for listing the caller's completed tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    authorization: str | None = Field(default=None, description=_AUTH_DESCRIPTION)
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_FORMAT_DESCRIPTION)


class UpdateTaskStatusInput(BaseModel):
    """Input model for changing a task's status."""

    model_config = ConfigDict(str_strip_whitespace=True)

    authorization: str | None = Field(default=None, description=_AUTH_DESCRIPTION)
    body: str | dict[str, Any] | None = Field(
        default=None,
        description="Update as a JSON object or JSON text: taskId, status",
    )
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_FORMAT_DESCRIPTION)

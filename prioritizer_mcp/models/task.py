"""Core task models for Prioritizer MCP."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from prioritizer_mcp.enums import TaskStatus


class TaskModel(BaseModel):
    """A persisted task record.

    Field aliases give the wire/storage names (``statusChanged``, ``ownerId``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: str
    difficulty: int | float
    impact: int | float
    time: int | float
    urgency: int | float
    score: float
    status: TaskStatus
    status_changed: int = Field(alias="statusChanged", description="Milliseconds since epoch")
    owner_id: str = Field(alias="ownerId")

    def to_record(self) -> dict[str, Any]:
        """Serialize to the JSON record shape."""
        return self.model_dump(by_alias=True, mode="json")

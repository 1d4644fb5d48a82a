"""Decoding helpers: raw request bodies and store records into models."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from prioritizer_mcp.errors import StoreError, ValidationError
from prioritizer_mcp.models.inputs import StatusUpdate, TaskSubmission
from prioritizer_mcp.models.task import TaskModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def _describe_validation_error(error: PydanticValidationError) -> str:
    """
    Turn a pydantic ValidationError into one readable line.

    Output: "difficulty: Must be a number; title: Field required"
    """
    parts = []
    for err in error.errors():
        if err["type"] == "value_error" and "error" in err.get("ctx", {}):
            msg = str(err["ctx"]["error"])
        else:
            msg = err["msg"]
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def _decode_body(body: str | dict[str, Any] | None, model: type[ModelT]) -> ModelT:
    """
    Decode a request body (JSON text or an already-parsed object) into ``model``.

    Raises:
        ValidationError: If the body is missing, is not valid JSON, is not an
            object, or fails the model's checks
    """
    if body is None or (isinstance(body, str) and not body.strip()):
        raise ValidationError("Request body is required")

    try:
        if isinstance(body, str):
            return model.model_validate_json(body)
        return model.model_validate(body)
    except PydanticValidationError as e:
        raise ValidationError(_describe_validation_error(e)) from e


def _parse_task_submission(body: str | dict[str, Any] | None) -> TaskSubmission:
    """Decode a task submission body."""
    return _decode_body(body, TaskSubmission)


def _parse_status_update(body: str | dict[str, Any] | None) -> StatusUpdate:
    """Decode a status update body."""
    return _decode_body(body, StatusUpdate)


def _parse_task(record: dict[str, Any]) -> TaskModel:
    """
    Parse a stored task record into a TaskModel.

    Args:
        record: Record dict in the wire shape (camelCase keys, ``id``)

    Returns:
        TaskModel instance with validated data

    Raises:
        StoreError: If the stored record does not have the task shape
    """
    try:
        return TaskModel.model_validate(record)
    except PydanticValidationError as e:
        detail = _describe_validation_error(e)
        raise StoreError(f"Malformed task record {record.get('id')}: {detail}") from e


def _parse_tasks(records: list[dict[str, Any]]) -> list[TaskModel]:
    """Parse a list of stored task records into TaskModel instances."""
    return [_parse_task(r) for r in records]

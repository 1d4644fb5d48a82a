"""Task record lifecycle: create, list and change status.

All operations are scoped to the calling owner. The store is passed in so
callers decide which backend (and which connection) is used.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from prioritizer_mcp.enums import INITIAL_STATUS, TaskStatus
from prioritizer_mcp.errors import NotFoundError
from prioritizer_mcp.models.inputs import StatusUpdate, TaskSubmission
from prioritizer_mcp.models.task import TaskModel
from prioritizer_mcp.scoring import score_submission
from prioritizer_mcp.store import DESCENDING, TaskStore
from prioritizer_mcp.utils.parsers import _parse_task, _parse_tasks

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def now_ms() -> int:
    """Current time in milliseconds since epoch."""
    return int(time.time() * 1000)


def create_task(
    store: TaskStore,
    owner_id: str,
    submission: TaskSubmission,
    now: Clock | None = None,
) -> TaskModel:
    """
    Score and persist a new task owned by ``owner_id``.

    The score is always computed here; status starts at NOT_STARTED.

    Returns:
        The persisted task including its assigned ID
    """
    record = {
        "title": submission.title,
        "difficulty": submission.difficulty,
        "impact": submission.impact,
        "time": submission.time,
        "urgency": submission.urgency,
        "score": score_submission(submission),
        "status": INITIAL_STATUS.value,
        "statusChanged": (now or now_ms)(),
        "ownerId": owner_id,
    }
    task_id = store.insert_task(record)
    logger.info("Created task %s score=%.2f", task_id, record["score"])
    return _parse_task({**record, "id": task_id})


def list_tasks(store: TaskStore, owner_id: str, status: TaskStatus | None = None) -> list[TaskModel]:
    """
    Return every task owned by ``owner_id``.

    With a status filter, the most recent status change comes first.
    Without one, the highest score comes first.
    """
    filter: dict[str, str] = {"ownerId": owner_id}
    if status is not None:
        filter["status"] = status.value
        sort = [("statusChanged", DESCENDING)]
    else:
        sort = [("score", DESCENDING)]

    return _parse_tasks(list(store.find_tasks(filter, sort)))


def update_task_status(
    store: TaskStore,
    owner_id: str,
    update: StatusUpdate,
    now: Clock | None = None,
) -> TaskModel:
    """
    Set a task's status, only if the caller owns it.

    Only ``status`` and ``statusChanged`` are written, in a single
    conditional update against the store.

    Raises:
        NotFoundError: If the task does not exist or belongs to another owner
    """
    changes = {
        "status": update.target_status.value,
        "statusChanged": (now or now_ms)(),
    }
    record = store.update_task_if_owned(update.task_id, owner_id, changes)
    if record is None:
        raise NotFoundError("Task not found")

    logger.info("Task %s -> %s", update.task_id, changes["status"])
    return _parse_task(record)

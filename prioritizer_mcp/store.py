"""Document store access for task records."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from prioritizer_mcp.config import Settings, get_settings
from prioritizer_mcp.errors import StoreError

logger = logging.getLogger(__name__)

SortSpec = list[tuple[str, int]]

DESCENDING = -1


class TaskStore(Protocol):
    """Persistence port used by the task lifecycle.

    Records are plain dicts in the wire shape, with the store-assigned
    identifier under ``id``.
    """

    def insert_task(self, record: Mapping[str, Any]) -> str: ...

    def find_tasks(self, filter: Mapping[str, Any], sort: SortSpec | None = None) -> Iterator[dict[str, Any]]: ...

    def update_task_if_owned(
        self,
        task_id: str,
        owner_id: str,
        changes: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        """Apply ``changes`` only if the task exists AND belongs to ``owner_id``, in one atomic step.

        Returns the updated record, or None when nothing matched.
        """
        ...


def _to_record(document: Mapping[str, Any]) -> dict[str, Any]:
    record = {k: v for k, v in document.items() if k != "_id"}
    record["id"] = str(document["_id"])
    return record


class MongoTaskStore:
    """TaskStore backed by a MongoDB collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def insert_task(self, record: Mapping[str, Any]) -> str:
        # insert_one adds _id to the dict it is given
        document = {k: v for k, v in record.items() if k != "id"}
        try:
            result = self._collection.insert_one(document)
        except PyMongoError as e:
            raise StoreError(f"Failed to insert task: {e}") from e
        return str(result.inserted_id)

    def find_tasks(self, filter: Mapping[str, Any], sort: SortSpec | None = None) -> Iterator[dict[str, Any]]:
        try:
            cursor = self._collection.find(dict(filter))
            if sort:
                cursor = cursor.sort(sort)
            documents = list(cursor)
        except PyMongoError as e:
            raise StoreError(f"Failed to query tasks: {e}") from e
        return (_to_record(d) for d in documents)

    def update_task_if_owned(
        self,
        task_id: str,
        owner_id: str,
        changes: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        try:
            object_id = ObjectId(task_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = self._collection.find_one_and_update(
                {"_id": object_id, "ownerId": owner_id},
                {"$set": dict(changes)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(f"Failed to update task: {e}") from e

        if document is None:
            return None
        return _to_record(document)


_client: MongoClient | None = None


def get_mongo_client(settings: Settings | None = None) -> MongoClient:
    """Return the process-wide MongoClient, creating it on first use."""
    global _client
    if _client is None:
        settings = settings or get_settings()
        if not settings.mongodb_connection_string:
            raise StoreError("MONGODB_CONNECTION_STRING not configured")
        try:
            _client = MongoClient(
                settings.mongodb_connection_string,
                serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
            )
        except PyMongoError as e:
            raise StoreError(f"Failed to connect to MongoDB: {e}") from e
        logger.info("MongoDB client created db=%s", settings.database_name)
    return _client


def get_task_store(settings: Settings | None = None) -> MongoTaskStore:
    """Return a TaskStore bound to the configured database and collection."""
    settings = settings or get_settings()
    client = get_mongo_client(settings)
    return MongoTaskStore(client[settings.database_name][settings.collection_name])

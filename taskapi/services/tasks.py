# taskapi/services/tasks.py
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from taskapi.errors import NotFound, StorageFailure
from taskapi.models import Task
from taskapi.utils.ids import normalize_id

log = logging.getLogger("taskapi.tasks")

STRICT = "strict"
UPSERT = "upsert"

COLUMNS = ("title", "description", "status")
# server-owned keys; a client value for these is dropped
PROTECTED = ("_id", "createdAt")


@dataclass
class UpdateResult:
    matched_count: int
    modified_count: int
    upserted_id: Optional[str] = None

    def to_doc(self) -> Dict[str, Any]:
        return {
            "acknowledged": True,
            "matchedCount": self.matched_count,
            "modifiedCount": self.modified_count,
            "upsertedId": self.upserted_id,
        }


def _split_fields(fields: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split a client body into (column values, extra values). A non-string
    title/description/status goes to extra so it keeps its JSON type.
    """
    columns: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    for key, value in (fields or {}).items():
        if key in PROTECTED:
            continue
        if key in COLUMNS and (value is None or isinstance(value, str)):
            columns[key] = value
        else:
            extra[key] = value
    return columns, extra


class TaskStore:
    def __init__(self, session: Session, reset_created_at: bool = False):
        self.session = session
        self.reset_created_at = reset_created_at

    def _storage_error(self, what: str) -> StorageFailure:
        self.session.rollback()
        log.exception("Error %s", what)
        return StorageFailure()

    def create(self, fields: Dict[str, Any]) -> str:
        columns, extra = _split_fields(fields)
        task = Task(**columns, extra=extra)
        try:
            self.session.add(task)
            self.session.commit()
        except SQLAlchemyError:
            raise self._storage_error("adding task")
        log.info("task created id=%s", task.id)
        return task.id

    def list(self) -> List[Task]:
        try:
            return list(self.session.exec(select(Task)).all())
        except SQLAlchemyError:
            raise self._storage_error("fetching tasks")

    def get_by_id(self, task_id: str) -> Task:
        task_id = normalize_id(task_id)
        try:
            task = self.session.get(Task, task_id)
        except SQLAlchemyError:
            raise self._storage_error("fetching task")
        if not task:
            raise NotFound("Task not found")
        return task

    def replace(self, task_id: str, fields: Dict[str, Any], policy: str = UPSERT) -> UpdateResult:
        """
        Overwrite the supplied fields of a task.

        strict: NotFound when no task has `task_id`.
        upsert: insert a new task under `task_id` instead.
        """
        task_id = normalize_id(task_id)
        columns, extra = _split_fields(fields)
        try:
            task = self.session.get(Task, task_id)
            if task is None:
                if policy == STRICT:
                    raise NotFound("Task not found")
                self.session.add(Task(id=task_id, **columns, extra=extra))
                self.session.commit()
                log.info("task upserted id=%s", task_id)
                return UpdateResult(matched_count=0, modified_count=0, upserted_id=task_id)

            before = task.to_doc()
            merged = dict(task.extra or {})
            for key, value in columns.items():
                setattr(task, key, value)
                merged.pop(key, None)
            for key, value in extra.items():
                if key in COLUMNS:
                    setattr(task, key, None)
                merged[key] = value
            # reassign so the JSON column is flagged dirty
            task.extra = merged
            if self.reset_created_at:
                task.created_at = datetime.now(timezone.utc)
            modified = task.to_doc() != before
            self.session.add(task)
            self.session.commit()
        except SQLAlchemyError:
            raise self._storage_error("updating task")
        log.info("task updated id=%s modified=%s", task_id, modified)
        return UpdateResult(matched_count=1, modified_count=int(modified))

    def delete(self, task_id: str) -> int:
        task_id = normalize_id(task_id)
        try:
            task = self.session.get(Task, task_id)
            if task is None:
                raise NotFound("Task not found")
            self.session.delete(task)
            self.session.commit()
        except SQLAlchemyError:
            raise self._storage_error("deleting task")
        log.info("task deleted id=%s", task_id)
        return 1

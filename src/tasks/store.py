import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from threading import Lock
from typing import Any, TypeVar
from uuid import uuid4

from src.common.current_datetime import get_current_datetime
from src.common.exceptions import TaskValidationException
from src.tasks.schemas import Task, TaskPriority, TaskStats, TaskStatus, TaskTag

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "tag", "status", "priority")

E = TypeVar("E", bound=Enum)


def _parse_choice(enum_cls: type[E], field: str, value: Any) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise TaskValidationException(f"{field} must be one of: {choices}") from None


def _value_or(fields: Mapping[str, Any], key: str, default: Any) -> Any:
    value = fields.get(key)
    return default if value is None else value


def _filter_tasks(
    tasks: list[Task],
    *,
    status: str | None,
    tag: str | None,
    priority: str | None,
) -> list[Task]:
    if status:
        tasks = [task for task in tasks if task.status == status]
    if tag:
        tasks = [task for task in tasks if task.tag == tag]
    if priority:
        tasks = [task for task in tasks if task.priority == priority]

    return [task.model_copy() for task in tasks]


def _count_statuses(tasks: list[Task]) -> TaskStats:
    statuses = [task.status for task in tasks]
    return TaskStats(
        total=len(statuses),
        todo=statuses.count(TaskStatus.TODO),
        in_progress=statuses.count(TaskStatus.IN_PROGRESS),
        done=statuses.count(TaskStatus.DONE),
    )


class TaskStore:
    """In-memory task collection.

    Tasks are kept in insertion order. Every operation runs under a single
    lock, and tasks handed out are copies so callers cannot mutate stored
    state.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_tasks(
        self,
        *,
        status: str | None = None,
        tag: str | None = None,
        priority: str | None = None,
    ) -> list[Task]:
        with self._lock:
            tasks = list(self._tasks.values())

        return _filter_tasks(tasks, status=status, tag=tag, priority=priority)

    def list_with_stats(
        self,
        *,
        status: str | None = None,
        tag: str | None = None,
        priority: str | None = None,
    ) -> tuple[list[Task], TaskStats]:
        """Filtered tasks and board stats taken from the same snapshot."""
        with self._lock:
            tasks = list(self._tasks.values())

        filtered = _filter_tasks(tasks, status=status, tag=tag, priority=priority)
        return filtered, _count_statuses(tasks)

    def get_task(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._tasks.get(task_id)
        return task.model_copy() if task else None

    def create_task(self, fields: Mapping[str, Any]) -> Task:
        title = fields.get("title")
        if not isinstance(title, str) or not title.strip():
            raise TaskValidationException("title is required")

        status = _parse_choice(
            TaskStatus, "status", _value_or(fields, "status", TaskStatus.TODO)
        )
        priority = _parse_choice(
            TaskPriority, "priority", _value_or(fields, "priority", TaskPriority.MEDIUM)
        )
        tag = _parse_choice(TaskTag, "tag", _value_or(fields, "tag", TaskTag.OTHER))

        task = Task(
            id=str(uuid4()),
            title=title.strip(),
            tag=tag.value,
            status=status,
            priority=priority,
            created_at=get_current_datetime(),
        )

        with self._lock:
            self._tasks[task.id] = task

        return task.model_copy()

    def update_task(self, task_id: str, fields: Mapping[str, Any]) -> Task | None:
        updates = {
            key: fields[key] for key in UPDATABLE_FIELDS if fields.get(key) is not None
        }

        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                return None

            # Only status and priority are checked against their choices;
            # title and tag are merged as supplied, unlike create_task which
            # checks all four. Title and tag must still be strings to fit the
            # Task record, so a non-string is rejected here, an extra failure
            # case beyond the status/priority checks.
            if "status" in updates:
                updates["status"] = _parse_choice(
                    TaskStatus, "status", updates["status"]
                )
            if "priority" in updates:
                updates["priority"] = _parse_choice(
                    TaskPriority, "priority", updates["priority"]
                )
            for key in ("title", "tag"):
                if key in updates and not isinstance(updates[key], str):
                    raise TaskValidationException(f"{key} must be a string")

            updates["updated_at"] = get_current_datetime()
            task = current.model_copy(update=updates)
            self._tasks[task_id] = task

        return task.model_copy()

    def remove_task(self, task_id: str) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def stats(self) -> TaskStats:
        with self._lock:
            tasks = list(self._tasks.values())

        return _count_statuses(tasks)

    def seed(self, tasks: Iterable[Mapping[str, Any]]) -> int:
        count = 0
        for fields in tasks:
            self.create_task(fields)
            count += 1
        logger.debug("Seeded %d tasks", count)
        return count

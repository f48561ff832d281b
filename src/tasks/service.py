import logging
from collections.abc import Mapping
from typing import Any

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task, TaskList, TaskStats
from src.tasks.store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, *, task_store: TaskStore) -> None:
        self.task_store = task_store

    def list_tasks(
        self,
        *,
        status: str | None = None,
        tag: str | None = None,
        priority: str | None = None,
    ) -> TaskList:
        tasks, stats = self.task_store.list_with_stats(
            status=status, tag=tag, priority=priority
        )
        return TaskList(
            count=len(tasks),
            stats=stats,
            tasks=tasks,
        )

    def get_task_stats(self) -> TaskStats:
        return self.task_store.stats()

    def get_task(self, task_id: str) -> Task:
        task = self.task_store.get_task(task_id)
        if not task:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        return task

    def create_task(self, fields: Mapping[str, Any]) -> Task:
        task = self.task_store.create_task(fields)
        logger.info("Created task '%s'", task.id)
        return task

    def update_task(self, task_id: str, fields: Mapping[str, Any]) -> Task:
        task = self.task_store.update_task(task_id, fields)
        if not task:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        logger.info("Updated task '%s'", task_id)
        return task

    def delete_task(self, task_id: str) -> None:
        if not self.task_store.remove_task(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        logger.info("Deleted task '%s'", task_id)

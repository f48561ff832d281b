from fastapi import Depends, Request

from src.tasks.service import TaskService
from src.tasks.store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_task_service(
    task_store: TaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(task_store=task_store)

from typing import Any
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from src.common.exceptions import (
    ResourceType,
    resource_not_found_response,
    task_validation_error_response,
)
from src.tasks.dependencies import get_task_service
from src.tasks.schemas import Task, TaskList, TaskStats
from src.tasks.service import TaskService


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)


@router.get("", response_model_exclude_none=True)
def list_tasks(
    status: str | None = None,
    tag: str | None = None,
    priority: str | None = None,
    task_service: TaskService = Depends(get_task_service),
) -> TaskList:
    return task_service.list_tasks(status=status, tag=tag, priority=priority)


@router.get("/stats")
def get_task_stats(
    task_service: TaskService = Depends(get_task_service),
) -> TaskStats:
    return task_service.get_task_stats()


@router.get(
    "/{task_id}",
    response_model_exclude_none=True,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def get_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_task(task_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
    responses={**task_validation_error_response},
)
def create_task(
    fields: dict[str, Any] | None = Body(default=None),
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(fields or {})


# Partial update: only the supplied fields change
@router.put(
    "/{task_id}",
    response_model_exclude_none=True,
    responses={
        **task_validation_error_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def update_task(
    task_id: str,
    fields: dict[str, Any] | None = Body(default=None),
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update_task(task_id, fields or {})


@router.delete(
    "/{task_id}",
    responses={
        200: {
            "description": "Task deleted",
            "content": {
                "application/json": {
                    "example": {"message": "Task deleted successfully"}
                }
            },
        },
        **resource_not_found_response(ResourceType.TASK),
    },
)
def delete_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> JSONResponse:
    task_service.delete_task(task_id)

    return JSONResponse(
        content={"message": "Task deleted successfully"},
        status_code=status.HTTP_200_OK,
    )

from fastapi import Depends, Request

from taskdash.tasks.service import TaskService
from taskdash.tasks.store.backend import StorageMode
from taskdash.tasks.store.base import TaskStore


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_storage_mode(request: Request) -> StorageMode:
    return request.app.state.storage_mode


def get_task_service(
    task_store: TaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(task_store=task_store)

from typing import Any
from uuid import uuid4

from taskdash.common.current_datetime import get_current_datetime
from taskdash.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    ValidationException,
)
from taskdash.decorators import store_operation
from taskdash.tasks.schemas import (
    CreateTaskRequest,
    Task,
    TaskDraft,
    TaskPatch,
    TaskStatus,
    UpdateTaskRequest,
)
from taskdash.tasks.store.base import TaskStore


class TaskService:
    def __init__(self, task_store: TaskStore):
        self.task_store = task_store

    @store_operation("Failed to fetch tasks")
    def list_tasks(self) -> list[Task]:
        return self.task_store.list_tasks()

    @store_operation("Failed to fetch task")
    def get_task(self, task_id: str) -> Task:
        return self.task_store.get_task(task_id)

    @store_operation("Failed to create task")
    def create_task(self, task_input: CreateTaskRequest) -> Task:
        title = (task_input.title or "").strip()
        if not title:
            raise ValidationException("Title is required")

        draft = TaskDraft(
            title=title,
            description=(task_input.description or "").strip(),
            status=task_input.status or TaskStatus.PENDING,
            due_date=task_input.due_date,
        )

        return self.task_store.create_task(
            id=str(uuid4()),
            draft=draft,
            timestamp=get_current_datetime(),
        )

    @store_operation("Failed to update task")
    def update_task(self, task_id: str, task_input: UpdateTaskRequest) -> Task:
        patch = self.build_patch(task_input)
        return self.task_store.update_task(task_id, patch)

    @store_operation("Failed to delete task")
    def delete_task(self, task_id: str) -> None:
        if not self.task_store.delete_task(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

    @staticmethod
    def build_patch(task_input: UpdateTaskRequest) -> TaskPatch:
        """Forward only the fields present in the request body."""
        present = task_input.model_fields_set
        changes: dict[str, Any] = {}

        if "title" in present:
            title = (task_input.title or "").strip()
            if not title:
                raise ValidationException("Title cannot be empty")
            changes["title"] = title

        if "description" in present:
            changes["description"] = (task_input.description or "").strip()

        if "status" in present:
            if task_input.status is None:
                raise ValidationException("Status must be 'pending' or 'completed'")
            changes["status"] = task_input.status

        if "due_date" in present:
            changes["due_date"] = task_input.due_date

        return TaskPatch(**changes)

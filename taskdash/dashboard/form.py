from typing import Any
from pydantic import BaseModel

from taskdash.tasks.schemas import Task, TaskStatus


class TaskForm(BaseModel):
    """Create/edit modal. ``editing_task_id`` is set only while editing."""

    is_open: bool = False
    editing_task_id: str | None = None
    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    due_date: str = ""  # YYYY-MM-DD, as typed into a date input

    @property
    def is_editing(self) -> bool:
        return self.editing_task_id is not None

    def open_create(self) -> None:
        self.reset()
        self.is_open = True

    def open_edit(self, task: Task) -> None:
        self.editing_task_id = task.id
        self.title = task.title
        self.description = task.description or ""
        self.status = task.status
        self.due_date = task.due_date.date().isoformat() if task.due_date else ""
        self.is_open = True

    def close(self) -> None:
        self.reset()
        self.is_open = False

    def reset(self) -> None:
        self.editing_task_id = None
        self.title = ""
        self.description = ""
        self.status = TaskStatus.PENDING
        self.due_date = ""

    def is_valid(self) -> bool:
        return bool(self.title.strip())

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "dueDate": self.due_date or None,
        }

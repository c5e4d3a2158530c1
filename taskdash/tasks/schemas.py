from datetime import datetime
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from taskdash.common.current_datetime import ensure_utc


class TaskStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"

    def toggled(self) -> "TaskStatus":
        if self == TaskStatus.COMPLETED:
            return TaskStatus.PENDING
        return TaskStatus.COMPLETED


def parse_due_date(value: Any) -> datetime | None:
    """Accept ISO-8601 dates ("2025-01-05") and datetimes; blank means no due date."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"'{value}' is not a valid ISO-8601 date") from e
    raise ValueError("Due date must be an ISO-8601 string")


class Task(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime
    due_date: datetime | None = None

    @field_validator("created_at", "due_date")
    def normalize_timezone(cls, value: datetime | None):
        if value is None:
            return value
        return ensure_utc(value)


class TaskDraft(BaseModel):
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    due_date: datetime | None = None

    @field_validator("title")
    def validate_title(cls, value: str):
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value

    @field_validator("description")
    def strip_description(cls, value: str):
        return value.strip()

    @field_validator("due_date")
    def normalize_due_date(cls, value: datetime | None):
        return ensure_utc(value) if value else None

    def to_task(self, id: str, created_at: datetime) -> Task:
        return Task(
            id=id,
            title=self.title,
            description=self.description,
            status=self.status,
            created_at=created_at,
            due_date=self.due_date,
        )


class TaskPatch(BaseModel):
    """Partial update for a task.

    Only fields passed to the constructor are applied; ``due_date=None``
    clears the due date while an omitted ``due_date`` leaves it untouched.
    Values are expected to be validated already, see
    ``TaskService.build_patch``.
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None

    @field_validator("due_date")
    def normalize_due_date(cls, value: datetime | None):
        return ensure_utc(value) if value else None

    def has(self, field: str) -> bool:
        return field in self.model_fields_set

    def apply(self, task: Task) -> Task:
        updated = task.model_copy()
        if self.has("title"):
            updated.title = self.title  # type: ignore
        if self.has("description"):
            updated.description = self.description  # type: ignore
        if self.has("status"):
            updated.status = self.status  # type: ignore
        if self.has("due_date"):
            updated.due_date = self.due_date
        return updated


class CreateTaskRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None

    @field_validator("due_date", mode="before")
    def validate_due_date(cls, value: Any):
        return parse_due_date(value)


class UpdateTaskRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None

    @field_validator("due_date", mode="before")
    def validate_due_date(cls, value: Any):
        return parse_due_date(value)


class DeleteTaskResponse(BaseModel):
    message: str

from abc import ABC, abstractmethod
from datetime import datetime

from taskdash.tasks.schemas import Task, TaskDraft, TaskPatch


class TaskStore(ABC):
    @abstractmethod
    def ping(self) -> None:
        pass

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Task:
        pass

    @abstractmethod
    def create_task(self, id: str, draft: TaskDraft, timestamp: datetime) -> Task:
        pass

    @abstractmethod
    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> bool:
        pass

    @abstractmethod
    def count_tasks(self) -> int:
        pass

    def close(self) -> None:
        return None

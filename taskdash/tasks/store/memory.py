from datetime import datetime

from taskdash.common.exceptions import ResourceNotFoundException, ResourceType
from taskdash.tasks.schemas import Task, TaskDraft, TaskPatch
from taskdash.tasks.store.base import TaskStore


class InMemoryTaskStore(TaskStore):
    """Process-local task list used when no durable store is reachable.

    Writes are not synchronized: concurrent requests may race.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self.tasks: list[Task] = list(tasks or [])

    def _find_index(self, task_id: str) -> int | None:
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        return None

    def ping(self) -> None:
        return None

    def list_tasks(self) -> list[Task]:
        return [task.model_copy() for task in self.tasks]

    def get_task(self, task_id: str) -> Task:
        index = self._find_index(task_id)
        if index is None:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        return self.tasks[index].model_copy()

    def create_task(self, id: str, draft: TaskDraft, timestamp: datetime) -> Task:
        task = draft.to_task(id=id, created_at=timestamp)
        self.tasks.append(task)
        return task.model_copy()

    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        index = self._find_index(task_id)
        if index is None:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        self.tasks[index] = patch.apply(self.tasks[index])
        return self.tasks[index].model_copy()

    def delete_task(self, task_id: str) -> bool:
        index = self._find_index(task_id)
        if index is None:
            return False
        del self.tasks[index]
        return True

    def count_tasks(self) -> int:
        return len(self.tasks)

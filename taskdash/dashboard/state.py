import logging
from typing import Any

from taskdash.dashboard.client import TaskApiClient, TaskApiException
from taskdash.dashboard.form import TaskForm
from taskdash.tasks.schemas import Task

logger = logging.getLogger(__name__)


class DashboardState:
    """Client-side task list kept in step with the API.

    A failed call is logged and leaves ``tasks`` exactly as it was.
    """

    def __init__(self, client: TaskApiClient):
        self.client = client
        self.tasks: list[Task] = []
        self.loading = False
        self.form = TaskForm()

    async def load(self) -> None:
        self.loading = True
        try:
            self.tasks = await self.client.list_tasks()
        except TaskApiException as e:
            logger.error(f"Error fetching tasks: {e}")
        finally:
            self.loading = False

    async def add_task(self, payload: dict[str, Any]) -> Task | None:
        try:
            task = await self.client.create_task(payload)
        except TaskApiException as e:
            logger.error(f"Error adding task: {e}")
            return None
        self.tasks = [*self.tasks, task]
        return task

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        try:
            task = await self.client.update_task(task_id, changes)
        except TaskApiException as e:
            logger.error(f"Error updating task {task_id}: {e}")
            return None
        self._replace(task)
        return task

    async def toggle_status(self, task: Task) -> Task | None:
        return await self.update_task(task.id, {"status": task.status.toggled().value})

    async def delete_task(self, task_id: str) -> bool:
        try:
            await self.client.delete_task(task_id)
        except TaskApiException as e:
            logger.error(f"Error deleting task {task_id}: {e}")
            return False
        self.tasks = [task for task in self.tasks if task.id != task_id]
        return True

    async def submit_form(self) -> bool:
        if not self.form.is_valid():
            return False

        if self.form.editing_task_id is not None:
            result = await self.update_task(
                self.form.editing_task_id, self.form.to_payload()
            )
        else:
            result = await self.add_task(self.form.to_payload())

        if result is None:
            return False

        self.form.close()
        return True

    def _replace(self, updated: Task) -> None:
        self.tasks = [updated if task.id == updated.id else task for task in self.tasks]

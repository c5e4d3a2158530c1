from datetime import datetime
from typing import TypedDict
from redis.exceptions import WatchError

from taskdash.common.exceptions import ResourceNotFoundException, ResourceType
from taskdash.common.redis import RedisClient
from taskdash.tasks.schemas import Task, TaskDraft, TaskPatch
from taskdash.tasks.store.base import TaskStore


class TaskMapping(TypedDict):
    id: str
    title: str
    description: str
    status: str
    created_at: str
    due_date: str


class UpdateMapping(TypedDict, total=False):
    title: str
    description: str
    status: str
    due_date: str


def serialize_due_date(due_date: datetime | None) -> str:
    return due_date.isoformat() if due_date else ""


class RedisTaskStore(TaskStore):
    def __init__(self, *, redis_client: RedisClient, key_prefix: str):
        self.client = redis_client
        self.key_prefix = key_prefix

    def _get_task_key(self, task_id: str) -> str:
        return f"{self.key_prefix}:{task_id}"

    def _to_task(self, data: dict[str, str]) -> Task:
        return Task(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
            status=data["status"],
            created_at=datetime.fromisoformat(data["created_at"]),
            due_date=(
                datetime.fromisoformat(data["due_date"])
                if data.get("due_date")
                else None
            ),
        )

    def ping(self) -> None:
        self.client.ping()

    def list_tasks(self) -> list[Task]:
        task_keys = self.client.keys(f"{self.key_prefix}:*")
        tasks: list[Task] = []
        for key in task_keys:
            data = self.client.hgetall(key)
            if data:
                tasks.append(self._to_task(data))
        return sorted(tasks, key=lambda task: task.created_at)

    def get_task(self, task_id: str) -> Task:
        data = self.client.hgetall(self._get_task_key(task_id))
        if not data:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        return self._to_task(data)

    def create_task(self, id: str, draft: TaskDraft, timestamp: datetime) -> Task:
        task = draft.to_task(id=id, created_at=timestamp)
        mapping: TaskMapping = {
            "id": task.id,
            "title": task.title,
            "description": task.description,
            "status": task.status.value,
            "created_at": task.created_at.isoformat(),
            "due_date": serialize_due_date(task.due_date),
        }
        self.client.hset(self._get_task_key(id), mapping=mapping)  # type: ignore
        return self.get_task(id)

    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        task_key = self._get_task_key(task_id)

        update_mapping: UpdateMapping = {}

        if patch.has("title"):
            update_mapping["title"] = patch.title  # type: ignore

        if patch.has("description"):
            update_mapping["description"] = patch.description  # type: ignore

        if patch.has("status"):
            update_mapping["status"] = patch.status.value  # type: ignore

        if patch.has("due_date"):
            update_mapping["due_date"] = serialize_due_date(patch.due_date)

        # A delete between EXISTS and EXEC aborts the transaction; retry sees it gone.
        with self.client.pipeline() as pipe:
            while True:
                try:
                    pipe.watch(task_key)
                    if not pipe.exists(task_key):
                        raise ResourceNotFoundException(ResourceType.TASK, task_id)
                    pipe.multi()
                    if update_mapping:
                        pipe.hset(task_key, mapping=update_mapping)  # type: ignore
                    pipe.execute()
                    break
                except WatchError:
                    continue

        return self.get_task(task_id)

    def delete_task(self, task_id: str) -> bool:
        return self.client.delete(self._get_task_key(task_id)) > 0

    def count_tasks(self) -> int:
        return len(self.client.keys(f"{self.key_prefix}:*"))

    def close(self) -> None:
        self.client.close()

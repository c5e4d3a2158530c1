import asyncio
import logging
from types import TracebackType
from typing import Any, Type, TypeVar
from aiohttp import ClientError, ClientSession, ClientTimeout
from pydantic import BaseModel, ValidationError

from taskdash.healthcheck.schemas import HealthStatus
from taskdash.tasks.schemas import Task


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class TaskApiException(Exception):
    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class TaskApiClient:
    """Thin async wrapper over the TaskDash REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        user_agent: str = "TaskDash",
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.session: ClientSession = ClientSession(
            timeout=ClientTimeout(total=timeout),
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
        )

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        if self.session:
            await self.session.close()

    async def request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with self.session.request(method, url, json=json) as response:
                data = await response.json()
                if response.status >= 400:
                    message = data.get("error") if isinstance(data, dict) else None
                    raise TaskApiException(
                        message or f"{method} {url} failed with {response.status}",
                        status=response.status,
                    )
                return data
        except TaskApiException as e:
            raise e
        except ClientError as e:
            raise TaskApiException(f"Failed to reach {url}: {e}") from e
        except asyncio.TimeoutError as e:
            raise TaskApiException(f"Timed out waiting for {url}") from e

    def parse(self, model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise TaskApiException(
                f"Unexpected {model.__name__} payload: {e.error_count()} errors"
            ) from e

    async def list_tasks(self) -> list[Task]:
        data = await self.request("GET", "/tasks")
        if not isinstance(data, list):
            raise TaskApiException("Unexpected task list payload")
        return [self.parse(Task, item) for item in data]

    async def get_task(self, task_id: str) -> Task:
        data = await self.request("GET", f"/tasks/{task_id}")
        return self.parse(Task, data)

    async def create_task(self, payload: dict[str, Any]) -> Task:
        data = await self.request("POST", "/tasks", json=payload)
        return self.parse(Task, data)

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task:
        data = await self.request("PUT", f"/tasks/{task_id}", json=changes)
        return self.parse(Task, data)

    async def delete_task(self, task_id: str) -> None:
        await self.request("DELETE", f"/tasks/{task_id}")

    async def health(self) -> HealthStatus:
        data = await self.request("GET", "/health")
        return self.parse(HealthStatus, data)

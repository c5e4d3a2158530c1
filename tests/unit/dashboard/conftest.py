from datetime import datetime, timezone
from typing import AsyncGenerator
import pytest

from taskdash.dashboard.client import TaskApiClient
from taskdash.tasks.schemas import Task, TaskStatus

NOW = datetime(2025, 1, 3, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def api_client() -> AsyncGenerator[TaskApiClient, None]:
    async with TaskApiClient(base_url="http://localhost:5000/") as client:
        yield client


@pytest.fixture
def sample_tasks() -> list[Task]:
    return [
        Task(
            id="1",
            title="Complete project documentation",
            description="Write comprehensive documentation for the new feature",
            status=TaskStatus.PENDING,
            created_at=datetime(2024, 12, 28, tzinfo=timezone.utc),
            due_date=datetime(2025, 1, 5, tzinfo=timezone.utc),
        ),
        Task(
            id="2",
            title="Review pull requests",
            description="Review and merge pending PRs from team members",
            status=TaskStatus.COMPLETED,
            created_at=datetime(2024, 12, 25, tzinfo=timezone.utc),
            due_date=datetime(2024, 12, 30, tzinfo=timezone.utc),
        ),
        Task(
            id="3",
            title="Update dependencies",
            description="Update all packages to their latest versions",
            status=TaskStatus.PENDING,
            created_at=datetime(2024, 12, 20, tzinfo=timezone.utc),
            due_date=datetime(2024, 12, 28, tzinfo=timezone.utc),
        ),
        Task(
            id="4",
            title="Fix authentication bug",
            description="Resolve the token refresh issue in production",
            status=TaskStatus.PENDING,
            created_at=datetime(2024, 12, 27, tzinfo=timezone.utc),
            due_date=None,
        ),
    ]

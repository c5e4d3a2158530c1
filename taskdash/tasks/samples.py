from datetime import datetime, timedelta
import logging
from uuid import uuid4

from taskdash.tasks.schemas import TaskDraft, TaskStatus
from taskdash.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


# (title, description, status, created days ago, due in days)
SAMPLE_TASKS: list[tuple[str, str, TaskStatus, int, int]] = [
    (
        "Complete project documentation",
        "Write comprehensive documentation for the new feature",
        TaskStatus.PENDING,
        1,
        7,
    ),
    (
        "Review pull requests",
        "Review and merge pending PRs from team members",
        TaskStatus.COMPLETED,
        4,
        1,
    ),
    (
        "Update dependencies",
        "Update all packages to their latest versions",
        TaskStatus.PENDING,
        9,
        -1,
    ),
    (
        "Fix authentication bug",
        "Resolve the token refresh issue in production",
        TaskStatus.PENDING,
        2,
        4,
    ),
]


def seed_sample_tasks(task_store: TaskStore, timestamp: datetime) -> int:
    if task_store.count_tasks() > 0:
        return 0

    for title, description, status, created_days_ago, due_in_days in SAMPLE_TASKS:
        task_store.create_task(
            id=str(uuid4()),
            draft=TaskDraft(
                title=title,
                description=description,
                status=status,
                due_date=timestamp + timedelta(days=due_in_days),
            ),
            timestamp=timestamp - timedelta(days=created_days_ago),
        )

    logger.info(f"Inserted {len(SAMPLE_TASKS)} sample tasks")
    return len(SAMPLE_TASKS)

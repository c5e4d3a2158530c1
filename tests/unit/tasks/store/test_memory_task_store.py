from datetime import datetime, timezone
import pytest

from taskdash.common.exceptions import ResourceNotFoundException
from taskdash.tasks.schemas import TaskDraft, TaskPatch, TaskStatus
from taskdash.tasks.store.memory import InMemoryTaskStore

TEST_TIMESTAMP = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def task_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


def test_create_task_assigns_id_and_timestamp(task_store: InMemoryTaskStore) -> None:
    task = task_store.create_task(
        id="task-1", draft=TaskDraft(title="Buy milk"), timestamp=TEST_TIMESTAMP
    )

    assert task.id == "task-1"
    assert task.title == "Buy milk"
    assert task.description == ""
    assert task.status == TaskStatus.PENDING
    assert task.created_at == TEST_TIMESTAMP
    assert task.due_date is None
    assert task_store.count_tasks() == 1


def test_list_tasks_keeps_insertion_order(task_store: InMemoryTaskStore) -> None:
    for index in range(3):
        task_store.create_task(
            id=f"task-{index}",
            draft=TaskDraft(title=f"Task {index}"),
            timestamp=TEST_TIMESTAMP,
        )

    assert [task.id for task in task_store.list_tasks()] == [
        "task-0",
        "task-1",
        "task-2",
    ]


def test_get_task_not_found(task_store: InMemoryTaskStore) -> None:
    with pytest.raises(ResourceNotFoundException, match="Task 'missing' not found"):
        task_store.get_task("missing")


def test_update_task_merges_fields(task_store: InMemoryTaskStore) -> None:
    task_store.create_task(
        id="task-1",
        draft=TaskDraft(title="Buy milk", description="Two litres"),
        timestamp=TEST_TIMESTAMP,
    )

    updated = task_store.update_task("task-1", TaskPatch(status=TaskStatus.COMPLETED))

    assert updated.status == TaskStatus.COMPLETED
    assert updated.title == "Buy milk"
    assert updated.description == "Two litres"
    assert task_store.get_task("task-1") == updated


def test_update_task_not_found(task_store: InMemoryTaskStore) -> None:
    with pytest.raises(ResourceNotFoundException):
        task_store.update_task("missing", TaskPatch(title="x"))


def test_returned_tasks_are_copies(task_store: InMemoryTaskStore) -> None:
    task = task_store.create_task(
        id="task-1", draft=TaskDraft(title="Buy milk"), timestamp=TEST_TIMESTAMP
    )
    task.title = "Changed outside the store"

    assert task_store.get_task("task-1").title == "Buy milk"


def test_delete_task(task_store: InMemoryTaskStore) -> None:
    task_store.create_task(
        id="task-1", draft=TaskDraft(title="Buy milk"), timestamp=TEST_TIMESTAMP
    )

    assert task_store.delete_task("task-1") is True
    assert task_store.count_tasks() == 0


def test_delete_missing_task_leaves_store_unchanged(
    task_store: InMemoryTaskStore,
) -> None:
    task_store.create_task(
        id="task-1", draft=TaskDraft(title="Buy milk"), timestamp=TEST_TIMESTAMP
    )

    assert task_store.delete_task("missing") is False
    assert [task.id for task in task_store.list_tasks()] == ["task-1"]


def test_separate_instances_do_not_share_tasks() -> None:
    first = InMemoryTaskStore()
    second = InMemoryTaskStore()
    first.create_task(id="task-1", draft=TaskDraft(title="A"), timestamp=TEST_TIMESTAMP)

    assert second.list_tasks() == []

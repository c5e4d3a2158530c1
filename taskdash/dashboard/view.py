from datetime import datetime
from enum import Enum
from typing import Callable
from pydantic import BaseModel

from taskdash.common.current_datetime import get_current_datetime
from taskdash.dashboard.state import DashboardState
from taskdash.tasks.schemas import Task, TaskStatus


class StatusFilter(str, Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


class SortKey(str, Enum):
    CREATED = "created"
    DUE = "due"
    TITLE = "title"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class Section(str, Enum):
    DASHBOARD = "dashboard"
    TASKS = "tasks"
    ANALYTICS = "analytics"
    SETTINGS = "settings"


class TaskStats(BaseModel):
    total: int
    pending: int
    completed: int
    overdue: int


class TaskCard(BaseModel):
    task: Task
    is_overdue: bool
    due_label: str | None


def is_overdue(task: Task, now: datetime) -> bool:
    if task.due_date is None or task.status == TaskStatus.COMPLETED:
        return False
    return task.due_date < now


def compute_stats(tasks: list[Task], now: datetime) -> TaskStats:
    return TaskStats(
        total=len(tasks),
        pending=sum(1 for task in tasks if task.status == TaskStatus.PENDING),
        completed=sum(1 for task in tasks if task.status == TaskStatus.COMPLETED),
        overdue=sum(1 for task in tasks if is_overdue(task, now)),
    )


def filter_tasks(
    tasks: list[Task], status_filter: StatusFilter, search_query: str
) -> list[Task]:
    filtered = tasks

    if status_filter != StatusFilter.ALL:
        filtered = [task for task in filtered if task.status.value == status_filter.value]

    query = search_query.lower()
    if query:
        filtered = [
            task
            for task in filtered
            if query in task.title.lower() or query in task.description.lower()
        ]

    return filtered


def sort_tasks(tasks: list[Task], sort_key: SortKey | None) -> list[Task]:
    if sort_key == SortKey.CREATED:
        return sorted(tasks, key=lambda task: task.created_at)
    if sort_key == SortKey.TITLE:
        return sorted(tasks, key=lambda task: task.title.lower())
    if sort_key == SortKey.DUE:
        # Tasks without a due date go last
        return sorted(
            tasks,
            key=lambda task: (task.due_date is None, task.due_date or task.created_at),
        )
    return list(tasks)


class DashboardView:
    """Presentation state for the dashboard.

    Everything derived from the task list is recomputed on each access, so it
    always reflects the current tasks, filter and search query.
    """

    def __init__(
        self,
        state: DashboardState,
        now: Callable[[], datetime] = get_current_datetime,
    ):
        self.state = state
        self.now = now
        self.search_query = ""
        self.status_filter = StatusFilter.ALL
        self.sort_key: SortKey | None = None
        self.view_mode = ViewMode.GRID
        self.theme = Theme.DARK
        self.sidebar_open = True
        self.active_section = Section.DASHBOARD

    @property
    def stats(self) -> TaskStats:
        return compute_stats(self.state.tasks, self.now())

    @property
    def filtered_tasks(self) -> list[Task]:
        filtered = filter_tasks(self.state.tasks, self.status_filter, self.search_query)
        return sort_tasks(filtered, self.sort_key)

    def cards(self) -> list[TaskCard]:
        now = self.now()
        return [
            TaskCard(
                task=task,
                is_overdue=is_overdue(task, now),
                due_label=task.due_date.strftime("%b %d, %Y") if task.due_date else None,
            )
            for task in self.filtered_tasks
        ]

    def set_search(self, query: str) -> None:
        self.search_query = query

    def set_status_filter(self, status_filter: StatusFilter | str) -> None:
        self.status_filter = StatusFilter(status_filter)

    def set_sort_key(self, sort_key: SortKey | str | None) -> None:
        self.sort_key = SortKey(sort_key) if sort_key else None

    def set_section(self, section: Section | str) -> None:
        self.active_section = Section(section)

    def toggle_view_mode(self) -> ViewMode:
        self.view_mode = ViewMode.LIST if self.view_mode == ViewMode.GRID else ViewMode.GRID
        return self.view_mode

    def toggle_theme(self) -> Theme:
        self.theme = Theme.LIGHT if self.theme == Theme.DARK else Theme.DARK
        return self.theme

    def toggle_sidebar(self) -> bool:
        self.sidebar_open = not self.sidebar_open
        return self.sidebar_open

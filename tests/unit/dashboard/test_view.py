from datetime import datetime, timedelta, timezone
import pytest
from pytest_mock import MockerFixture

from taskdash.dashboard.client import TaskApiClient
from taskdash.dashboard.state import DashboardState
from taskdash.dashboard.view import (
    DashboardView,
    Section,
    SortKey,
    StatusFilter,
    TaskStats,
    Theme,
    ViewMode,
    is_overdue,
)
from taskdash.tasks.schemas import Task, TaskStatus

NOW = datetime(2025, 1, 3, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def view(mocker: MockerFixture, sample_tasks: list[Task]) -> DashboardView:
    state = DashboardState(client=mocker.AsyncMock(spec=TaskApiClient))
    state.tasks = list(sample_tasks)
    return DashboardView(state, now=lambda: NOW)


def test_is_overdue(sample_tasks: list[Task]) -> None:
    pending_future, completed_past, pending_past, no_due_date = sample_tasks

    assert is_overdue(pending_future, NOW) is False
    assert is_overdue(completed_past, NOW) is False
    assert is_overdue(pending_past, NOW) is True
    assert is_overdue(no_due_date, NOW) is False


def test_due_exactly_now_is_not_overdue(sample_tasks: list[Task]) -> None:
    task = sample_tasks[0].model_copy(update={"due_date": NOW})

    assert is_overdue(task, NOW) is False
    assert is_overdue(task, NOW + timedelta(seconds=1)) is True


def test_completing_task_clears_overdue(view: DashboardView) -> None:
    assert view.stats.overdue == 1

    view.state.tasks[2] = view.state.tasks[2].model_copy(
        update={"status": TaskStatus.COMPLETED}
    )

    assert view.stats == TaskStats(total=4, pending=2, completed=2, overdue=0)


def test_stats(view: DashboardView) -> None:
    assert view.stats == TaskStats(total=4, pending=3, completed=1, overdue=1)


def test_status_filter(view: DashboardView) -> None:
    view.set_status_filter("completed")
    assert [task.id for task in view.filtered_tasks] == ["2"]

    view.set_status_filter(StatusFilter.PENDING)
    assert [task.id for task in view.filtered_tasks] == ["1", "3", "4"]

    view.set_status_filter(StatusFilter.ALL)
    assert len(view.filtered_tasks) == 4


def test_search_is_case_insensitive_on_title_and_description(
    view: DashboardView,
) -> None:
    view.set_search("REVIEW")
    assert [task.id for task in view.filtered_tasks] == ["2"]

    view.set_search("token refresh")
    assert [task.id for task in view.filtered_tasks] == ["4"]


def test_search_matches_query_verbatim(view: DashboardView) -> None:
    view.set_search("review ")
    assert [task.id for task in view.filtered_tasks] == ["2"]

    view.set_search(" review")
    assert view.filtered_tasks == []

    view.set_search("")
    assert len(view.filtered_tasks) == 4


def test_search_intersects_with_status_filter(view: DashboardView) -> None:
    view.set_search("update")
    view.set_status_filter(StatusFilter.COMPLETED)

    assert view.filtered_tasks == []


def test_filtered_tasks_follow_state_changes(
    view: DashboardView, sample_tasks: list[Task]
) -> None:
    view.set_search("documentation")
    assert len(view.filtered_tasks) == 1

    view.state.tasks = [task for task in view.state.tasks if task.id != "1"]

    assert view.filtered_tasks == []


def test_sort_by_due_date_puts_undated_last(view: DashboardView) -> None:
    view.set_sort_key(SortKey.DUE)

    assert [task.id for task in view.filtered_tasks] == ["3", "2", "1", "4"]


def test_sort_by_title_and_created(view: DashboardView) -> None:
    view.set_sort_key("title")
    assert [task.id for task in view.filtered_tasks] == ["1", "4", "2", "3"]

    view.set_sort_key("created")
    assert [task.id for task in view.filtered_tasks] == ["3", "2", "4", "1"]

    view.set_sort_key(None)
    assert [task.id for task in view.filtered_tasks] == ["1", "2", "3", "4"]


def test_cards(view: DashboardView) -> None:
    cards = view.cards()

    assert [card.is_overdue for card in cards] == [False, False, True, False]
    assert cards[0].due_label == "Jan 05, 2025"
    assert cards[3].due_label is None


def test_toggles(view: DashboardView) -> None:
    assert view.view_mode == ViewMode.GRID
    assert view.toggle_view_mode() == ViewMode.LIST
    assert view.toggle_view_mode() == ViewMode.GRID

    assert view.theme == Theme.DARK
    assert view.toggle_theme() == Theme.LIGHT

    assert view.toggle_sidebar() is False

    view.set_section("analytics")
    assert view.active_section == Section.ANALYTICS

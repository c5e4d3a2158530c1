from datetime import datetime
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from taskdash.common.exceptions import ResourceNotFoundException, ResourceType
from taskdash.tasks.schemas import Task, TaskDraft, TaskPatch
from taskdash.tasks.store.base import TaskStore
from taskdash.tasks.store.postgres.model import Base, TaskModel


class PostgresTaskStore(TaskStore):
    def __init__(self, database_url: str):
        self.engine = create_engine(database_url)
        self.Session = sessionmaker(bind=self.engine)
        Base.metadata.create_all(self.engine)

    def _to_task(self, model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            status=model.status,
            created_at=model.created_at,
            due_date=model.due_date,
        )

    def ping(self) -> None:
        with self.engine.connect() as connection:
            result = connection.execute(text("SELECT 1")).scalar()
            if result != 1:
                raise RuntimeError("Postgres ping returned an unexpected result")

    def list_tasks(self) -> list[Task]:
        with self.Session() as session:
            all_tasks = session.query(TaskModel).order_by(TaskModel.created_at).all()
            return [self._to_task(task) for task in all_tasks]

    def get_task(self, task_id: str) -> Task:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            return self._to_task(task)

    def create_task(self, id: str, draft: TaskDraft, timestamp: datetime) -> Task:
        with self.Session() as session:
            new_task = TaskModel(
                id=id,
                title=draft.title,
                description=draft.description,
                status=draft.status.value,
                created_at=timestamp,
                due_date=draft.due_date,
            )
            session.add(new_task)
            session.commit()

        return self.get_task(id)

    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            if patch.has("title"):
                task.title = patch.title  # type: ignore
            if patch.has("description"):
                task.description = patch.description  # type: ignore
            if patch.has("status"):
                task.status = patch.status.value  # type: ignore
            if patch.has("due_date"):
                task.due_date = patch.due_date

            session.commit()

        return self.get_task(task_id)

    def delete_task(self, task_id: str) -> bool:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                return False

            session.delete(task)
            session.commit()
            return True

    def count_tasks(self) -> int:
        with self.Session() as session:
            return session.query(TaskModel).count()

    def close(self) -> None:
        self.engine.dispose()

from datetime import datetime
from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

from taskdash.config import get_settings


settings = get_settings()

Base = declarative_base()


class TaskModel(Base):
    __tablename__ = settings.TASK_STORE_NAMESPACE

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __init__(
        self,
        id: str,
        title: str,
        status: str,
        created_at: datetime,
        description: str = "",
        due_date: datetime | None = None,
    ):
        self.id = id
        self.title = title
        self.description = description
        self.status = status
        self.created_at = created_at
        self.due_date = due_date

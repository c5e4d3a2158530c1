import logging
from enum import Enum

from taskdash.config import Settings
from taskdash.common.redis import create_redis_client
from taskdash.tasks.store.base import TaskStore
from taskdash.tasks.store.memory import InMemoryTaskStore
from taskdash.tasks.store.postgres.store import PostgresTaskStore
from taskdash.tasks.store.redis.store import RedisTaskStore

logger = logging.getLogger(__name__)


class StorageMode(str, Enum):
    REDIS = "redis"
    POSTGRES = "postgres"
    IN_MEMORY = "in-memory"


def create_durable_task_store(settings: Settings) -> TaskStore:
    if settings.TASK_STORE_BACKEND == "postgres":
        return PostgresTaskStore(database_url=settings.POSTGRES_URL)
    elif settings.TASK_STORE_BACKEND == "redis":
        return RedisTaskStore(
            redis_client=create_redis_client(
                settings.REDIS_URL, connect_timeout=settings.REDIS_CONNECT_TIMEOUT
            ),
            key_prefix=settings.TASK_STORE_NAMESPACE,
        )
    else:
        raise ValueError(
            f"Unsupported durable task store backend: {settings.TASK_STORE_BACKEND}"
        )


def get_task_store_backend(settings: Settings) -> tuple[TaskStore, StorageMode]:
    """Pick the task store once, at startup.

    An unreachable durable backend downgrades to the in-memory store; the
    choice is never revisited for the lifetime of the process.
    """
    if settings.TASK_STORE_BACKEND == "memory":
        return InMemoryTaskStore(), StorageMode.IN_MEMORY

    try:
        task_store = create_durable_task_store(settings)
        task_store.ping()
    except Exception as e:
        logger.warning(
            f"{settings.TASK_STORE_BACKEND} is not available ({e}), using in-memory storage"
        )
        return InMemoryTaskStore(), StorageMode.IN_MEMORY

    logger.info(f"Connected to {settings.TASK_STORE_BACKEND} task store")
    return task_store, StorageMode(settings.TASK_STORE_BACKEND)

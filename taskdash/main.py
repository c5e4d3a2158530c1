import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from taskdash.common.current_datetime import get_current_datetime
from taskdash.common.exceptions import (
    ResourceNotFoundException,
    TaskStoreException,
    ValidationException,
    internal_error_response,
    request_validation_exception_handler,
    resource_not_found_handler,
    task_store_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from taskdash.config import get_settings
from taskdash.healthcheck.router import router as health_router
from taskdash.tasks.router import router as tasks_router
from taskdash.tasks.samples import seed_sample_tasks
from taskdash.tasks.store.backend import get_task_store_backend

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    task_store, storage_mode = get_task_store_backend(settings)
    if settings.SEED_SAMPLE_TASKS:
        seed_sample_tasks(task_store, get_current_datetime())
    app.state.task_store = task_store
    app.state.storage_mode = storage_mode
    logger.info(f"Storage mode: {storage_mode.value}")
    yield
    task_store.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **internal_error_response,
    },
    version=settings.TASKDASH_VERSION,
)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(request_validation_exception_handler)
app.exception_handler(ValidationException)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(TaskStoreException)(task_store_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)

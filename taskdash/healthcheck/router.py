from fastapi import APIRouter, Depends, status

from taskdash.common.current_datetime import get_current_datetime
from taskdash.healthcheck.schemas import HealthStatus
from taskdash.tasks.dependencies import get_storage_mode
from taskdash.tasks.store.backend import StorageMode

router = APIRouter()


@router.get(
    "/health",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "status": "healthy",
                        "storage": "in-memory",
                        "timestamp": "2025-01-01T12:00:00Z",
                    }
                }
            },
        },
    },
)
def healthcheck(
    storage_mode: StorageMode = Depends(get_storage_mode),
) -> HealthStatus:
    return HealthStatus(
        status="healthy",
        storage=storage_mode,
        timestamp=get_current_datetime(),
    )

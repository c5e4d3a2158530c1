from datetime import datetime
from pydantic import BaseModel

from taskdash.tasks.store.backend import StorageMode


class HealthStatus(BaseModel):
    status: str
    storage: StorageMode
    timestamp: datetime

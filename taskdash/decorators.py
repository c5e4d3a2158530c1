from functools import wraps
import logging
from typing import Any, Callable, TypeVar

from taskdash.common.exceptions import (
    ResourceNotFoundException,
    TaskStoreException,
    ValidationException,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

KNOWN_EXCEPTIONS = (ResourceNotFoundException, ValidationException, TaskStoreException)


def store_operation(error_message: str):
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except KNOWN_EXCEPTIONS:
                raise
            except Exception as e:
                logger.exception(f"{func.__name__} failed")
                raise TaskStoreException(error_message) from e

        return wrapper

    return decorator

from typing import TYPE_CHECKING
from redis import Redis

RedisClient = Redis
if TYPE_CHECKING:
    RedisClient = Redis[str]  # type: ignore


def create_redis_client(
    redis_url: str, connect_timeout: float | None = None
) -> RedisClient:
    """Client for the task store with string responses.

    Nothing is sent until the first command, so an unreachable server only
    surfaces on ``ping()``; ``connect_timeout`` bounds how long that takes.
    """
    return Redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=connect_timeout,
    )

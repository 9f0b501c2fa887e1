import functools
import redis
from typing import Any, TypeVar
from collections.abc import Callable

from linkshrink.dao.exceptions import DataStoreError


def _redis_location(dao: Any) -> str:
    info = dao.redis.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


F = TypeVar('F', bound=Callable[..., Any])


def handle_redis_errors(method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle Redis failures

    Connection failures and timeouts become "can't connect" DataStoreErrors.
    Errors replied by the server (e.g. OOM when maxmemory is reached) become
    "rejected" DataStoreErrors.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on Redis failures.

    Example:
        >>> @handle_redis_errors
        ... def load(self):
        ...     return self.redis.get('linkShrink_urls')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {_redis_location(self)}.") from e
        except redis.exceptions.ResponseError as e:
            raise DataStoreError(f'Redis at {_redis_location(self)} rejected the command ({e}).') from e

    return wrapper

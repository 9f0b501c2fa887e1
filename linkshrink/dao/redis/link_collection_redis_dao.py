"""Data Access Object (DAO) implementation for the link collection in Redis

The whole collection lives under a single string key holding the serialized
JSON blob (`<prefix>:linkShrink_urls`).

Classes:
    LinkCollectionRedisDAO:
        DAO for storing and retrieving the link collection in a Redis datastore.

Example:
    >>> dao = LinkCollectionRedisDAO(redis_host='localhost', prefix='linkshrink:dev')
    >>> dao.load()
    []
    >>> dao.save([link])
    <LinkCollectionRedisDAO>
    >>> dao.load()[0].shortcode
    'abc123'
"""

import redis
from beartype import beartype

from linkshrink.models import ShortLinkModel
from linkshrink.dao.base import LinkCollectionBaseDAO
from linkshrink.dao.helpers import dump_collection, load_collection
from linkshrink.dao.redis.helpers import handle_redis_errors
from linkshrink.dao.redis.redis_key_schema import RedisKeySchema


class LinkCollectionRedisDAO(LinkCollectionBaseDAO):
    """Redis-based Data Access Object (DAO) for the link collection

    Attributes:
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for the namespaced collection key.

    Methods:
        load(**kwargs) -> list[ShortLinkModel]:
            GET the collection blob and decode it. A missing key means an empty collection.
            Raises CorruptedCollectionError when the blob can't be decoded.
            Raises DataStoreError on connectivity issues with Redis.

        save(links: list[ShortLinkModel], **kwargs) -> LinkCollectionRedisDAO:
            SET the collection blob.
            Raises DataStoreError on connectivity issues or write rejection (e.g. OOM).

    NOTE: SET replaces the whole blob. Concurrent load/save cycles from different
          clients are not coordinated, the last writer wins.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """Connect to Redis, or use `redis_client` when given, and PING it

        Raises:
            DataStoreError: If Redis is unreachable.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=True,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)
        self._healthcheck()

    @handle_redis_errors
    def _healthcheck(self) -> None:
        self.redis.ping()

    @handle_redis_errors
    def load(self, **kwargs) -> list[ShortLinkModel]:
        blob = self.redis.get(self.keys.collection_key())
        return load_collection(blob)

    @handle_redis_errors
    @beartype
    def save(self, links: list[ShortLinkModel], **kwargs) -> 'LinkCollectionRedisDAO':
        self.redis.set(self.keys.collection_key(), dump_collection(links))
        return self

from linkshrink.dao.redis.redis_key_schema import RedisKeySchema
from linkshrink.dao.redis.link_collection_redis_dao import LinkCollectionRedisDAO


__all__ = [
    'RedisKeySchema',
    'LinkCollectionRedisDAO',
]

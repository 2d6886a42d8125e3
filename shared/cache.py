# Dot Shared Cache
# Redis-backed cache of generated summaries

import redis

from .config import REDIS_URL


class RedisCache:
    """Summary cache keyed by the feedback cache key.

    Expiry is left to Redis.
    """

    def __init__(self, client=None, url=None):
        self.client = client or redis.Redis.from_url(url or REDIS_URL, decode_responses=True)

    def get(self, key):
        return self.client.get(key)

    def put(self, key, value, ttl):
        self.client.setex(key, ttl, value)

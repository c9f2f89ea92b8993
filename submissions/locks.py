"""
Per-submission lock

Keeps two status checks of the same submission from running at once.
With django-redis as the default cache the lock is a plain Redis key set
with NX/EX and released by a compare-and-delete Lua script. Any other
cache backend (the in-memory one in tests) goes through ``cache.add``.
"""

import logging
import uuid

from django.core.cache import cache, caches
from django_redis import get_redis_connection
from django_redis.cache import RedisCache

logger = logging.getLogger(__name__)

# only delete the key while it still holds our identifier
RELEASE_SCRIPT = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("del", KEYS[1])
else
    return 0
end
"""


def redis_connection():
    """Raw Redis client behind the default cache, or None for other backends."""
    if isinstance(caches["default"], RedisCache):
        return get_redis_connection("default")
    return None


class SubmissionLock:
    def __init__(self, submission_id, expire: int = 60):
        """
        Args:
            submission_id: Submission UUID
            expire: seconds before a lost lock frees itself
        """
        self.key = f"lock:submission:{submission_id}"
        self.expire = expire
        self.identifier = None

    def acquire(self) -> bool:
        identifier = str(uuid.uuid4())
        redis = redis_connection()
        if redis is not None:
            acquired = redis.set(self.key, identifier, nx=True, ex=self.expire)
        else:
            acquired = cache.add(self.key, identifier, timeout=self.expire)

        if acquired:
            self.identifier = identifier
            logger.debug(f"Lock acquired: {self.key}")
            return True
        logger.debug(f"Lock busy: {self.key}")
        return False

    def release(self) -> bool:
        """Drops the lock only while this instance still owns it."""
        if self.identifier is None:
            return False

        identifier, self.identifier = self.identifier, None
        redis = redis_connection()
        if redis is not None:
            released = bool(redis.eval(RELEASE_SCRIPT, 1, self.key, identifier))
        elif cache.get(self.key) == identifier:
            # local-memory cache lives in this process only
            cache.delete(self.key)
            released = True
        else:
            released = False

        if released:
            logger.debug(f"Lock released: {self.key}")
        else:
            logger.warning(f"Lock release failed: {self.key} (not owner)")
        return released

"""Redis implementation of the hash store.

Each operation opens its own connection, sends exactly one command and
closes the connection again, on success and on error alike.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Iterator

import redis

from .exceptions import NotFoundError, ProtocolError, translate_redis_error
from .store_interface import HashStoreInterface

logger = logging.getLogger(__name__)


class RedisHashStore(HashStoreInterface):
    """Hash store backed by a Redis hash (HGETALL/HGET/HSET/HDEL/DEL)."""

    @contextmanager
    def _connection(self, command: str) -> Iterator[redis.Redis]:
        logger.debug("%s %s on %s", command, self.key, self.url)
        try:
            client = redis.Redis.from_url(self.url, decode_responses=True)
            with client:
                yield client
        except (redis.exceptions.RedisError, ValueError) as e:
            logger.debug("%s %s failed: %r", command, self.key, e)
            raise translate_redis_error(e, self.url) from e

    def read_all(self) -> Dict[str, str]:
        with self._connection('HGETALL') as client:
            reply = client.hgetall(self.key)
        if not isinstance(reply, dict):
            raise ProtocolError(self.url, f"HGETALL returned {type(reply).__name__}")
        return dict(reply)

    def read_one(self, field: str) -> str:
        with self._connection('HGET') as client:
            reply = client.hget(self.key, field)
        # nil means the field is absent, which is not the same as ""
        if reply is None:
            raise NotFoundError(self.key, field)
        return reply

    def write_one(self, field: str, value: str) -> bool:
        with self._connection('HSET') as client:
            added = client.hset(self.key, field, value)
        return self._as_count('HSET', added) == 1

    def delete_field(self, field: str, *fields: str) -> int:
        with self._connection('HDEL') as client:
            removed = client.hdel(self.key, field, *fields)
        return self._as_count('HDEL', removed)

    def delete_key(self) -> int:
        with self._connection('DEL') as client:
            removed = client.delete(self.key)
        return self._as_count('DEL', removed)

    def _as_count(self, command: str, reply) -> int:
        if not isinstance(reply, int) or isinstance(reply, bool):
            raise ProtocolError(self.url, f"{command} returned {reply!r}")
        return reply

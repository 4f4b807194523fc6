"""
Custom exception hierarchy for envredis.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Commands raise these errors; only the dispatcher turns them into a
message on stderr and a process exit code.

Usage:
    from envredis.exceptions import NotFoundError

    try:
        value = store.read_one("DATABASE_URL")
    except NotFoundError as e:
        print(f"Error: {e}")
        return e.exit_code
"""

from typing import Optional

import redis.exceptions


EXIT_USAGE = 1
EXIT_STORE = 2
EXIT_SPAWN = 111


class EnvRedisError(Exception):
    """
    Base class for all envredis errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_USAGE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class UsageError(EnvRedisError):
    """
    Raised when CLI arguments are missing or malformed.

    Example:
        raise UsageError("you must provide a variable name")
    """

    def __init__(self, message: str):
        super().__init__(message, exit_code=EXIT_USAGE)


class NotFoundError(EnvRedisError):
    """
    Raised when a requested field does not exist in the hash.

    Example:
        raise NotFoundError("myapp", "DATABASE_URL")
    """

    def __init__(self, key: str, field: str, message: Optional[str] = None):
        if message is None:
            message = f"{field}: not found in key {key}"
        super().__init__(message, exit_code=EXIT_USAGE)
        self.key = key
        self.field = field


# =============================================================================
# Store Errors
# =============================================================================

class StoreError(EnvRedisError):
    """
    Base class for failures talking to the key-value store.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, exit_code=EXIT_STORE)
        self.url = url


class StoreConnectionError(StoreError):
    """
    Raised when the store cannot be reached.

    Example:
        raise StoreConnectionError("redis://localhost:6379", "connection refused")
    """

    def __init__(self, url: str, details: Optional[str] = None):
        if details:
            message = f"cannot connect to {url}: {details}"
        else:
            message = f"cannot connect to {url}"
        super().__init__(message, url=url)


class ProtocolError(StoreError):
    """
    Raised when the store replies with an error or an unexpected reply.

    Example:
        raise ProtocolError("redis://localhost:6379", "WRONGTYPE ...")
    """

    def __init__(self, url: str, details: str):
        super().__init__(f"unexpected reply from {url}: {details}", url=url)
        self.details = details


# =============================================================================
# Process Errors
# =============================================================================

class SpawnError(EnvRedisError):
    """
    Raised when the child process for `run` cannot be started.

    Example:
        raise SpawnError("nosuchbinary", "No such file or directory")
    """

    def __init__(self, command: str, details: Optional[str] = None):
        if details:
            message = f"{command}: {details}"
        else:
            message = f"{command}: cannot start process"
        super().__init__(message, exit_code=EXIT_SPAWN)
        self.command = command


# =============================================================================
# Utility Functions
# =============================================================================

def translate_redis_error(error: Exception, url: str) -> StoreError:
    """
    Translate a redis-py exception to a specific StoreError.

    Args:
        error: The exception raised by the redis client
        url: Store URL the request was sent to

    Returns:
        StoreConnectionError or ProtocolError

    Example:
        try:
            client.hgetall(key)
        except redis.exceptions.RedisError as e:
            raise translate_redis_error(e, url) from e
    """
    if isinstance(error, (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)):
        return StoreConnectionError(url, str(error) or None)

    if isinstance(error, OSError):
        return StoreConnectionError(url, error.strerror or str(error) or None)

    # from_url rejects an unparseable address with a plain ValueError
    if isinstance(error, ValueError) and not isinstance(error, UnicodeDecodeError):
        return StoreConnectionError(url, str(error) or None)

    # ResponseError (e.g. WRONGTYPE), InvalidResponse, DataError, ...
    return ProtocolError(url, str(error) or type(error).__name__)

"""
Config - settings for a single envredis invocation.

The configuration is resolved once at startup (flag, then environment
variable, then default) and passed explicitly to the dispatcher.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlparse

from .exceptions import UsageError


DEFAULT_URL = 'redis://localhost:6379'

URL_ENV_VAR = 'ENVREDIS_REDIS_URL'
KEY_ENV_VAR = 'ENVREDIS_REDIS_KEY'
POSIX_ENV_VAR = 'ENVREDIS_POSIX'
LOG_LEVEL_ENV_VAR = 'ENVREDIS_LOG_LEVEL'

SUPPORTED_SCHEMES = ('redis', 'rediss', 'unix')

_TRUE_VALUES = {'1', 't', 'T', 'TRUE', 'true', 'True'}
_FALSE_VALUES = {'0', 'f', 'F', 'FALSE', 'false', 'False'}


def parse_bool(value: str, source: str = 'value') -> bool:
    """
    Parse a boolean the way the original command line accepted them.

    Args:
        value: Text to parse
        source: Where the value came from, used in the error message

    Returns:
        Parsed boolean

    Raises:
        UsageError: If value is not a recognised boolean
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise UsageError(f"invalid boolean value {value!r} for {source}")


@dataclass(frozen=True)
class Config:
    """
    Immutable invocation settings.

    Attributes:
        url: Store connection URL
        key: Name of the hash holding the application's environment
        posix: Whether variable names are made POSIX compatible

    Example:
        >>> cfg = Config.from_sources(environ={}, cwd='/srv/myapp')
        >>> cfg.key
        'myapp'
        >>> cfg.url
        'redis://localhost:6379'
    """

    url: str = DEFAULT_URL
    key: str = ''
    posix: bool = False

    def __post_init__(self):
        parsed = urlparse(self.url)
        scheme = parsed.scheme
        if scheme not in SUPPORTED_SCHEMES:
            raise UsageError(
                f"invalid store URL {self.url!r}: scheme must be one of "
                f"{', '.join(SUPPORTED_SCHEMES)}"
            )
        try:
            parsed.port
        except ValueError as e:
            raise UsageError(f"invalid store URL {self.url!r}: {e}") from e
        if not self.key:
            raise UsageError("you must provide a key name")

    @classmethod
    def from_sources(
        cls,
        url: Optional[str] = None,
        key: Optional[str] = None,
        posix: Optional[bool] = None,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> 'Config':
        """
        Build a Config from explicit values, environment and defaults.

        Args:
            url: Value of --url, if given
            key: Value of --key, if given
            posix: True if --posix was given
            environ: Environment to read overrides from (default: os.environ)
            cwd: Directory whose base name is the default key (default: os.getcwd())

        Returns:
            Resolved Config
        """
        if environ is None:
            environ = os.environ

        if url is None:
            url = environ.get(URL_ENV_VAR) or DEFAULT_URL

        if key is None:
            key = environ.get(KEY_ENV_VAR) or None
        if key is None:
            key = os.path.basename(os.path.normpath(cwd or os.getcwd()))

        if not posix:
            raw = environ.get(POSIX_ENV_VAR)
            posix = parse_bool(raw, POSIX_ENV_VAR) if raw else False

        return cls(url=url, key=key, posix=posix)

"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples command
handlers from the CLI, making them testable without a store or a terminal.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TextIO

from .config import Config
from .store_interface import HashStoreInterface


def default_store_factory(config: Config) -> HashStoreInterface:
    from .redis_store import RedisHashStore
    return RedisHashStore(config.url, config.key)


@dataclass
class CommandContext:
    """
    Everything a command handler may touch.

    Attributes:
        command: Verb being executed
        args: Positional arguments following the verb
        config: Resolved invocation settings
        store_factory: Builds the hash store for config
        environ: Snapshot of the current process environment
        stdout: Stream for normal output
        stderr: Stream for diagnostics

    Example:
        >>> ctx = CommandContext('get', ['FOO'], Config(key='myapp'))
        >>> ctx.config.key
        'myapp'
    """

    command: str
    args: List[str]
    config: Config
    store_factory: Callable[[Config], HashStoreInterface] = default_store_factory
    environ: Dict[str, str] = field(default_factory=lambda: dict(os.environ))
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    _store: Optional[HashStoreInterface] = field(default=None, repr=False)

    @property
    def store(self) -> HashStoreInterface:
        """Hash store bound to config.key, created on first use."""
        if self._store is None:
            self._store = self.store_factory(self.config)
        return self._store

    def write(self, text: str):
        """Write text to stdout in one call."""
        self.stdout.write(text)
        self.stdout.flush()

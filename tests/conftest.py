"""
Pytest configuration and shared fixtures for envredis tests.

This module provides reusable test fixtures for:
- An in-memory hash store implementation
- Configs, command contexts and dispatchers wired to it
- Captured output streams
"""

import io
from typing import Dict, List, Optional

import pytest

from envredis.config import Config
from envredis.exceptions import NotFoundError
from envredis.store_interface import HashStoreInterface


# ============================================================================
# Mock Store Implementation
# ============================================================================

class MockHashStore(HashStoreInterface):
    """
    Mock hash store for testing without a Redis server.

    All stores created with the same `hashes` dict see the same data, so a
    `set` in one invocation is visible to a `get` in the next.
    """

    def __init__(self, url: str = 'redis://mock:6379', key: str = 'testapp',
                 hashes: Optional[Dict[str, Dict[str, str]]] = None):
        super().__init__(url, key)
        self.hashes: Dict[str, Dict[str, str]] = {} if hashes is None else hashes
        self.calls: List[str] = []

    def read_all(self) -> Dict[str, str]:
        self.calls.append('read_all')
        return dict(self.hashes.get(self.key, {}))

    def read_one(self, field: str) -> str:
        self.calls.append('read_one')
        fields = self.hashes.get(self.key, {})
        if field not in fields:
            raise NotFoundError(self.key, field)
        return fields[field]

    def write_one(self, field: str, value: str) -> bool:
        self.calls.append('write_one')
        fields = self.hashes.setdefault(self.key, {})
        is_new = field not in fields
        fields[field] = value
        return is_new

    def delete_field(self, field: str, *fields: str) -> int:
        self.calls.append('delete_field')
        stored = self.hashes.get(self.key, {})
        removed = 0
        for name in dict.fromkeys((field,) + fields):
            if name in stored:
                del stored[name]
                removed += 1
        if self.key in self.hashes and not stored:
            del self.hashes[self.key]
        return removed

    def delete_key(self) -> int:
        self.calls.append('delete_key')
        if self.key in self.hashes:
            del self.hashes[self.key]
            return 1
        return 0


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def hashes():
    """
    Provides the backing data shared by every MockHashStore of a test.

    Example:
        def test_list(hashes, run_cli):
            hashes['testapp'] = {'FOO': 'bar'}
    """
    return {}


@pytest.fixture
def mock_store(hashes):
    """
    Provides an empty in-memory store bound to key 'testapp'.

    Example:
        def test_write(mock_store):
            assert mock_store.write_one('FOO', 'bar') is True
    """
    return MockHashStore(hashes=hashes)


@pytest.fixture
def store_factory(hashes):
    """Provides a store factory producing MockHashStores over `hashes`."""
    def factory(config: Config) -> MockHashStore:
        return MockHashStore(config.url, config.key, hashes=hashes)
    return factory


@pytest.fixture
def config():
    """Provides a Config for key 'testapp' with POSIX mode off."""
    return Config(url='redis://mock:6379', key='testapp', posix=False)


@pytest.fixture
def posix_config():
    """Provides a Config for key 'testapp' with POSIX mode on."""
    return Config(url='redis://mock:6379', key='testapp', posix=True)


@pytest.fixture
def capture_output():
    """
    Provides StringIO objects for capturing command output.

    Returns:
        tuple: (stdout, stderr) StringIO objects
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def make_context(config, mock_store, capture_output):
    """
    Provides a factory for CommandContexts wired to mock_store.

    Example:
        def test_get(make_context):
            ctx = make_context('get', ['FOO'])
            cmd_get(ctx)
    """
    from envredis.context import CommandContext

    stdout, stderr = capture_output

    def factory(command: str, args: List[str], cfg: Optional[Config] = None,
                environ: Optional[Dict[str, str]] = None) -> CommandContext:
        return CommandContext(
            command=command,
            args=args,
            config=cfg or config,
            store_factory=lambda _: mock_store,
            environ=environ if environ is not None else {'PATH': '/bin', 'HOME': '/home/test'},
            stdout=stdout,
            stderr=stderr,
        )

    return factory


@pytest.fixture
def make_dispatcher(store_factory, capture_output, config):
    """
    Provides a factory for Dispatchers sharing one in-memory store.

    Example:
        def test_roundtrip(make_dispatcher):
            dispatcher = make_dispatcher()
            assert dispatcher.dispatch('set', ['FOO', 'bar']) == 0
    """
    from envredis.dispatcher import Dispatcher

    stdout, stderr = capture_output

    def factory(cfg: Optional[Config] = None,
                environ: Optional[Dict[str, str]] = None) -> Dispatcher:
        return Dispatcher(
            cfg or config,
            store_factory=store_factory,
            environ=environ if environ is not None else {'PATH': '/bin'},
            stdout=stdout,
            stderr=stderr,
        )

    return factory

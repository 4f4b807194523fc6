"""Environment resolution and display formatting.

This module turns the contents of a remote hash into:
- the environment handed to a child process (resolve)
- the text printed by `list` and `get` (format_listing, format_value)
"""

import logging
import os
from typing import Dict, Iterable, List, Mapping, Optional

from .sanitize import is_posix_name, sanitize
from .store_interface import HashStoreInterface

logger = logging.getLogger(__name__)


def resolve_name(name: str, posix: bool) -> str:
    """Return the variable name as it will be exported."""
    if posix and not is_posix_name(name):
        return sanitize(name)
    return name


def resolve(
    store: HashStoreInterface,
    posix: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """
    Build the child environment for `run`.

    The current environment comes first, followed by every remote entry
    in the order the store returned them. On a duplicate name the later
    entry wins, so remote values shadow inherited ones.

    Args:
        store: Hash store to read from
        posix: Sanitize remote names
        environ: Current environment (default: os.environ)

    Returns:
        List of NAME=VALUE strings
    """
    remote = store.read_all()
    if environ is None:
        environ = os.environ

    child_env = [f"{name}={value}" for name, value in environ.items()]
    for name, value in remote.items():
        child_env.append(f"{resolve_name(name, posix)}={value}")

    logger.debug("resolved %d inherited and %d remote variables",
                 len(environ), len(remote))
    return child_env


def environ_from_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    """
    Fold NAME=VALUE strings into a mapping, later entries winning.

    Example:
        >>> environ_from_pairs(['A=1', 'B=2', 'A=3'])
        {'A': '3', 'B': '2'}
    """
    env: Dict[str, str] = {}
    for pair in pairs:
        name, _, value = pair.partition('=')
        env[name] = value
    return env


def format_value(value: str) -> str:
    """
    Render a value for display, single-quoting it if it has whitespace.

    Examples:
        >>> format_value('ab')
        'ab'
        >>> format_value('a b')
        "'a b'"
    """
    if any(ch.isspace() for ch in value):
        return f"'{value}'"
    return value


def format_listing(entries: Mapping[str, str], posix: bool = False) -> str:
    """Render a whole hash as NAME=VALUE lines."""
    lines = [f"{resolve_name(name, posix)}={format_value(value)}\n"
             for name, value in entries.items()]
    return ''.join(lines)

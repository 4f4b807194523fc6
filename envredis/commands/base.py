"""
Base utilities for command implementations.

This module provides common argument helpers so that every verb reports
usage errors the same way.
"""

from typing import List, Tuple

from ..exceptions import UsageError


def require_args(args: List[str], min_args: int, message: str) -> None:
    """
    Validate the number of positional arguments.

    Args:
        args: Positional arguments
        min_args: Minimum required arguments
        message: Error message if too few were given

    Raises:
        UsageError: If fewer than min_args were given
    """
    if len(args) < min_args:
        raise UsageError(message)


def parse_assignment(args: List[str]) -> Tuple[str, str]:
    """
    Parse the arguments of `set` into a name and a value.

    Accepted forms:
        set NAME=VALUE   one argument, split on '='; exactly two parts
        set NAME VALUE   two or more arguments; extras are ignored

    A single argument containing more than one '=' is rejected rather
    than guessing which '=' separates name from value.

    Returns:
        Tuple of (name, value)

    Raises:
        UsageError: If the arguments are malformed

    Examples:
        >>> parse_assignment(['FOO=bar'])
        ('FOO', 'bar')
        >>> parse_assignment(['FOO', 'a=b'])
        ('FOO', 'a=b')
    """
    message = "you must provide a variable name and value"

    if len(args) == 1:
        parts = args[0].split('=')
        if len(parts) != 2:
            raise UsageError(message)
        name, value = parts
    elif len(args) >= 2:
        name, value = args[0], args[1]
    else:
        raise UsageError(message)

    if not name:
        raise UsageError("variable name must not be empty")
    return name, value


__all__ = ['require_args', 'parse_assignment']

"""
Command registry for envredis verbs.

Each verb lives in its own module and registers itself with
@register_command. load_all_commands() imports every module so the
registry is populated before dispatch.
"""

import importlib
from typing import Callable, Dict

COMMANDS: Dict[str, Callable] = {}

_COMMAND_MODULES = (
    'run',
    'list_cmd',
    'get',
    'set_cmd',
    'delete',
    'clear',
)


def register_command(name: str):
    """
    Decorator registering a handler under a verb name.

    Example:
        @register_command('list')
        def cmd_list(ctx: CommandContext) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        COMMANDS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every command module and return the populated registry."""
    for module in _COMMAND_MODULES:
        importlib.import_module(f"{__name__}.{module}")
    return COMMANDS


def get_command(name: str):
    """
    Get a command handler.

    Args:
        name: Verb to look up

    Returns:
        The handler, or None if the verb is unknown
    """
    return load_all_commands().get(name)


__all__ = ['COMMANDS', 'register_command', 'load_all_commands', 'get_command']

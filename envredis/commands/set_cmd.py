"""
SET command - store one variable.
"""

from ..context import CommandContext
from ..sanitize import sanitize
from . import register_command
from .base import parse_assignment


@register_command('set')
def cmd_set(ctx: CommandContext) -> int:
    """
    Set an environment variable

    Usage:
      set NAME=VALUE
      set NAME VALUE

    With --posix the name is sanitized before it is stored.
    """
    name, value = parse_assignment(ctx.args)
    if ctx.config.posix:
        name = sanitize(name)

    if ctx.store.write_one(name, value):
        ctx.write(f"set new variable {name}={value}\n")
    else:
        ctx.write(f"set existing variable {name}={value}\n")
    return 0

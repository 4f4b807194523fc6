"""
GET command - print one stored variable.
"""

from ..context import CommandContext
from ..resolver import format_value
from . import register_command
from .base import require_args


@register_command('get')
def cmd_get(ctx: CommandContext) -> int:
    """
    Get an environment variable

    Usage: get NAME
    """
    require_args(ctx.args, 1, "you must provide a variable name")

    value = ctx.store.read_one(ctx.args[0])
    ctx.write(f"{format_value(value)}\n")
    return 0

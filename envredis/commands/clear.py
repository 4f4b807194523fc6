"""
CLEAR command - remove the whole hash.
"""

from ..context import CommandContext
from . import register_command


@register_command('clear')
def cmd_clear(ctx: CommandContext) -> int:
    """
    Clear all environment variables

    Usage: clear
    """
    removed = ctx.store.delete_key()
    ctx.write(f"deleted {removed} key(s)\n")
    return 0

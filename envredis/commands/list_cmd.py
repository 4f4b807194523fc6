"""
LIST command - print all stored variables.
"""

from ..context import CommandContext
from ..resolver import format_listing
from . import register_command


@register_command('list')
def cmd_list(ctx: CommandContext) -> int:
    """
    List environment variables

    Usage: list

    Values containing whitespace are shown in single quotes.
    """
    entries = ctx.store.read_all()
    ctx.write(format_listing(entries, posix=ctx.config.posix))
    return 0

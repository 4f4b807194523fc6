"""
DELETE command - remove stored variables.
"""

from ..context import CommandContext
from . import register_command
from .base import require_args


@register_command('delete')
def cmd_delete(ctx: CommandContext) -> int:
    """
    Delete environment variables

    Usage: delete NAME [NAME ...]

    Deleting a variable that does not exist is not an error.
    """
    require_args(ctx.args, 1, "you must provide a variable name")

    removed = ctx.store.delete_field(*ctx.args)
    ctx.write(f"deleted {removed} variable(s) from key {ctx.config.key}\n")
    return 0

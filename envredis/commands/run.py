"""
RUN command - start a process with the stored environment.
"""

from ..context import CommandContext
from ..process import run_child
from ..resolver import environ_from_pairs, resolve
from . import register_command
from .base import require_args


@register_command('run')
def cmd_run(ctx: CommandContext) -> int:
    """
    Run a command with environment variables from the store

    Usage: run COMMAND [ARGS...]

    The child inherits the current environment plus every stored
    variable (stored values win), inherits stdio, and its exit code
    becomes ours.
    """
    require_args(ctx.args, 1, "you must provide a command name")

    child_env = resolve(ctx.store, posix=ctx.config.posix, environ=ctx.environ)
    return run_child(list(ctx.args), environ_from_pairs(child_env))

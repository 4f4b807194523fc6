"""Verb dispatch and the single error-to-exit-code translation point."""

import logging
import os
import sys
from typing import Callable, Dict, List, Mapping, Optional, TextIO

from .commands import get_command
from .config import Config
from .context import CommandContext, default_store_factory
from .exceptions import EnvRedisError, UsageError
from .store_interface import HashStoreInterface

logger = logging.getLogger(__name__)

PROG = 'envredis'
DEFAULT_VERB = 'run'


class Dispatcher:
    """
    Runs one verb against the configured store.

    Command handlers raise EnvRedisError subclasses; dispatch() is the
    only place that turns them into a stderr line and an exit code.

    Attributes:
        config: Resolved invocation settings
        store_factory: Builds the hash store for config
        environ: Environment snapshot passed to `run`
        stdout: Stream for normal output
        stderr: Stream for error messages
    """

    def __init__(
        self,
        config: Config,
        store_factory: Optional[Callable[[Config], HashStoreInterface]] = None,
        environ: Optional[Mapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.config = config
        self.store_factory = store_factory or default_store_factory
        self.environ: Dict[str, str] = dict(os.environ if environ is None else environ)
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def build_context(self, verb: Optional[str], args: List[str]) -> CommandContext:
        """
        Resolve the verb and build the context for its handler.

        An unknown verb is taken as the command of an implicit `run`.
        """
        if verb is None:
            raise UsageError("you must provide a command name")

        if get_command(verb) is None:
            logger.debug("%r is not a verb, running it as a command", verb)
            args = [verb] + list(args)
            verb = DEFAULT_VERB

        return CommandContext(
            command=verb,
            args=list(args),
            config=self.config,
            store_factory=self.store_factory,
            environ=self.environ,
            stdout=self.stdout,
            stderr=self.stderr,
        )

    def dispatch(self, verb: Optional[str], args: List[str]) -> int:
        """
        Execute a verb and return the process exit code.

        Args:
            verb: Verb name (run, list, get, set, delete, clear)
            args: Positional arguments for the verb

        Returns:
            Exit code (0 for success)
        """
        try:
            ctx = self.build_context(verb, args)
            handler = get_command(ctx.command)
            logger.debug("dispatching %s %r on key %s", ctx.command, ctx.args, self.config.key)
            return handler(ctx)
        except EnvRedisError as e:
            return self.report(e)

    def report(self, error: EnvRedisError) -> int:
        """Write error to stderr as a single line and return its exit code."""
        return report_error(error, self.stderr)


def report_error(error: EnvRedisError, stream: TextIO) -> int:
    """Write error to stream as a single line and return its exit code."""
    logger.debug("%s (exit %d)", type(error).__name__, error.exit_code)
    stream.write(f"{PROG}: {error}\n")
    stream.flush()
    return error.exit_code

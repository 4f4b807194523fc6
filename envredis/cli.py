"""Command line entry point for envredis."""

import argparse
import logging
import os
import sys
from typing import List, Mapping, Optional

from . import __version__
from .config import Config, DEFAULT_URL, LOG_LEVEL_ENV_VAR
from .dispatcher import PROG, Dispatcher, report_error
from .exceptions import EnvRedisError, UsageError

VERBS_HELP = """\
commands:
  run COMMAND [ARGS...]   run a command (the default when COMMAND is not a verb)
  list                    list environment variables
  get NAME                get an environment variable
  set NAME VALUE          set an environment variable (or: set NAME=VALUE)
  delete NAME [NAME...]   delete environment variables
  clear                   clear all environment variables
"""


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=PROG,
        description="Load process environments from Redis.",
        epilog=VERBS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-u', '--url',
        help=f"Redis connection URL (default: {DEFAULT_URL}, env: ENVREDIS_REDIS_URL)",
    )
    parser.add_argument(
        '-k', '--key',
        help="name of Redis hash storing configuration "
             "(default: current directory name, env: ENVREDIS_REDIS_KEY)",
    )
    parser.add_argument(
        '--posix', action='store_true', default=None,
        help="make all variable names follow the POSIX standard (env: ENVREDIS_POSIX)",
    )
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help="log more detail to stderr (repeat for debug output)",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('verb', nargs='?', help="command to execute")
    parser.add_argument('args', nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def configure_logging(verbosity: int, environ: Mapping[str, str]):
    """
    Send log records to stderr.

    ENVREDIS_LOG_LEVEL names a level explicitly; otherwise -v gives INFO
    and -vv gives DEBUG.
    """
    level_name = environ.get(LOG_LEVEL_ENV_VAR)
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise UsageError(f"invalid log level {level_name!r} for {LOG_LEVEL_ENV_VAR}")
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Parse arguments, run one verb and return the exit code.

    Exit codes:
        0    success
        1    usage error or variable not found
        2    store unreachable or unexpected reply
        111  child process could not be started
        run: otherwise the child's exit code
    """
    if environ is None:
        environ = os.environ

    try:
        options = build_parser().parse_args(argv)
        configure_logging(options.verbose, environ)
        config = Config.from_sources(
            url=options.url,
            key=options.key,
            posix=options.posix,
            environ=environ,
        )
    except EnvRedisError as e:
        return report_error(e, sys.stderr)

    dispatcher = Dispatcher(config, environ=environ)
    return dispatcher.dispatch(options.verb, options.args)


if __name__ == '__main__':
    sys.exit(main())

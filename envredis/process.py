"""Child process execution for the `run` command"""

import logging
import subprocess
from typing import Dict, List

from .exceptions import SpawnError

logger = logging.getLogger(__name__)


def exit_code_from_returncode(returncode: int) -> int:
    """
    Map a Popen returncode to a shell-style exit code.

    A child killed by signal N has returncode -N and maps to 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_child(argv: List[str], env: Dict[str, str]) -> int:
    """
    Start a child process with env, wait for it and return its exit code.

    The child inherits stdin, stdout and stderr.

    Args:
        argv: Command name followed by its arguments
        env: Complete environment for the child

    Returns:
        The child's exit code

    Raises:
        SpawnError: If the command cannot be started
    """
    try:
        child = subprocess.Popen(argv, env=env)
    except (OSError, ValueError) as e:
        details = getattr(e, 'strerror', None) or str(e)
        raise SpawnError(argv[0], details) from e

    logger.debug("started %s (pid %d)", argv[0], child.pid)
    try:
        returncode = child.wait()
    except KeyboardInterrupt:
        # The child got the same SIGINT; let it finish shutting down.
        returncode = child.wait()

    logger.info("%s exited with status %d", argv[0], returncode)
    return exit_code_from_returncode(returncode)

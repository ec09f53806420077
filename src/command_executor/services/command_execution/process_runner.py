"""
Spawns a shell invocation attached to the host's standard streams.
"""

import logging
import subprocess
from typing import Union

from command_executor.exceptions import ExecutionError
from .shell_resolver import ShellInvocation


def run_invocation(
    invocation: ShellInvocation,
    logger: Union[logging.Logger, logging.LoggerAdapter],
    label: str = "Command",
) -> None:
    """
    Run a shell invocation and wait for it to exit.

    The child inherits stdin, stdout and stderr, so nothing is captured.

    Args:
        invocation: Program and arguments to spawn
        logger: Logger for progress and failures
        label: Prefix used in log and error messages

    Raises:
        ExecutionError: If the process cannot be started or exits non-zero
    """
    argv = invocation.argv
    logger.debug(f"Spawning: {argv}")

    try:
        result = subprocess.run(argv)
    except OSError as e:
        message = f"{label} execution failed: {e}"
        logger.error(message)
        raise ExecutionError(message, command=argv) from e

    if result.returncode != 0:
        message = f"{label} execution failed: exit status {result.returncode}"
        logger.error(message)
        raise ExecutionError(message, command=argv, return_code=result.returncode)

    logger.info(f"{label} executed successfully")

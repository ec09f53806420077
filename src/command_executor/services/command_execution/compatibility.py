"""
Executor/shell compatibility rules.
"""

from command_executor.exceptions import CompatibilityError
from .shell_types import ExecutorType, ShellType


def validate_executor_shell_compatibility(
    executor_type: ExecutorType, shell_type: ShellType
) -> None:
    """
    Reject executor and shell combinations that cannot work.

    CMD cannot consume encoded payloads, so the base64 executor is refused
    for it. AUTO passes here; on Windows the entry point switches base64/auto
    to PowerShell before an executor is built.

    Raises:
        CompatibilityError: For the base64 executor with the cmd shell
    """
    if executor_type == ExecutorType.BASE64 and shell_type == ShellType.CMD:
        raise CompatibilityError(
            "base64 executor is not compatible with cmd shell. "
            "Use powershell or sh instead"
        )


def is_compatible(executor_type: ExecutorType, shell_type: ShellType) -> bool:
    try:
        validate_executor_shell_compatibility(executor_type, shell_type)
    except CompatibilityError:
        return False
    return True
